"""
Repositories Package
Data access layer over the in-memory Post store
"""

from .post_repository import PostRepository, FIXTURE_POSTS

__all__ = [
    'PostRepository',
    'FIXTURE_POSTS'
]
