"""
Post Service
Minimal GraphQL API for reading, listing, creating and updating posts
"""

__version__ = '1.0.0'
