"""
HTTP application for the bookstore service
"""
