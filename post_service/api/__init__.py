"""
API Package
HTTP views exposed by the service
"""

from .graphql_view import PostGraphQLView, create_graphql_view

__all__ = [
    'PostGraphQLView',
    'create_graphql_view'
]
