"""Resolver package for the GraphQL schema.

Query and mutation fields import their resolver functions lazily from the
sibling modules in this package.
"""
