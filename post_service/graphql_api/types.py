"""
GraphQL Types
Object and input types exposed by the Post API
"""

import strawberry
from typing import Any, Dict, Optional
from datetime import datetime


# ============================================
# OBJECT TYPES
# ============================================

@strawberry.type
class Post:
    """Post record; every field is nullable"""
    id: Optional[str]
    title: Optional[str]
    description: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Post':
        return cls(
            id=record['id'],
            title=record['title'],
            description=record['description'],
            created_at=record['created_at'],
            updated_at=record['updated_at']
        )


# ============================================
# INPUT TYPES
# ============================================

@strawberry.input
class PostCreateInput:
    """Fields required to create a post"""
    title: str
    description: str


@strawberry.input
class PostUpdateInput:
    """Partial update; omitted fields keep their current value"""
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
