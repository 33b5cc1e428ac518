"""
GraphQL Resolvers
Implementation of the Post queries and mutations
"""

from typing import Any, List, Optional

from ..config.logger import get_logger
from ..repositories import PostRepository
from .types import Post, PostCreateInput, PostUpdateInput

logger = get_logger(__name__)


class ResolversContext:
    """Context containing all resolver dependencies"""

    def __init__(self, post_repo: PostRepository):
        self.post_repo = post_repo


# ============================================
# QUERY RESOLVERS
# ============================================

def get_post_resolver(ctx: ResolversContext, id: Any = None) -> Optional[Post]:
    """Resolver for post query"""
    post_data = ctx.post_repo.get_post(id)

    if not post_data:
        return None

    return Post.from_record(post_data)


def last_post_resolver(ctx: ResolversContext) -> Optional[Post]:
    """Resolver for lastPost query (re-sorts the store newest first)"""
    post_data = ctx.post_repo.get_last_post()

    if not post_data:
        return None

    return Post.from_record(post_data)


def post_list_resolver(ctx: ResolversContext) -> List[Post]:
    """Resolver for postList query"""
    return [Post.from_record(p) for p in ctx.post_repo.list_posts()]


# ============================================
# MUTATION RESOLVERS
# ============================================

def create_post_resolver(ctx: ResolversContext, post: PostCreateInput) -> Post:
    """Resolver for createPost mutation"""
    post_data = ctx.post_repo.create_post(post.title, post.description)
    return Post.from_record(post_data)


def update_post_resolver(ctx: ResolversContext, post: PostUpdateInput) -> Optional[Post]:
    """Resolver for updatePost mutation"""
    post_data = ctx.post_repo.update_post(
        post.id,
        title=post.title,
        description=post.description
    )

    if not post_data:
        logger.debug(f"updatePost: no post with id {post.id}")
        return None

    return Post.from_record(post_data)


# Mapping of schema field names to resolver functions
QUERY_RESOLVERS = {
    'post': get_post_resolver,
    'lastPost': last_post_resolver,
    'postList': post_list_resolver,
}

MUTATION_RESOLVERS = {
    'createPost': create_post_resolver,
    'updatePost': update_post_resolver,
}
