"""
GraphQL Schema Definition
Root query and mutation types routed to the resolver tables
"""

import strawberry
from typing import List, Optional
from strawberry.types import Info

from .types import Post, PostCreateInput, PostUpdateInput
from .resolvers import QUERY_RESOLVERS, MUTATION_RESOLVERS


# ============================================
# QUERIES
# ============================================

@strawberry.type(name="query")
class Query:
    """Root query"""

    @strawberry.field(description="Get single post")
    def post(self, info: Info, id: Optional[str] = None) -> Optional[Post]:
        return QUERY_RESOLVERS['post'](info.context, id)

    @strawberry.field(description="Last post added")
    def last_post(self, info: Info) -> Optional[Post]:
        return QUERY_RESOLVERS['lastPost'](info.context)

    @strawberry.field(description="List of posts")
    def post_list(self, info: Info) -> Optional[List[Optional[Post]]]:
        return QUERY_RESOLVERS['postList'](info.context)


# ============================================
# MUTATIONS
# ============================================

@strawberry.type(name="mutation")
class Mutation:
    """Root mutation"""

    @strawberry.mutation(description="Create new post")
    def create_post(self, info: Info, post: PostCreateInput) -> Optional[Post]:
        return MUTATION_RESOLVERS['createPost'](info.context, post)

    @strawberry.mutation(description="Update existing post")
    def update_post(self, info: Info, post: PostUpdateInput) -> Optional[Post]:
        return MUTATION_RESOLVERS['updatePost'](info.context, post)


# ============================================
# SCHEMA
# ============================================

schema = strawberry.Schema(query=Query, mutation=Mutation)
