"""
GraphQL API for the bookstore service
"""
