"""
Post Repository
In-memory record store holding every Post for the lifetime of the process
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..config.logger import LoggerMixin


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


FIXTURE_POSTS = [
    {
        'title': 'Post 1 title',
        'description': (
            'Lorem, ipsum dolor sit amet consectetur adipisicing elit. Quaerat ea odit eaque '
            'amet dicta consequuntur eum dolore commodi error exercitationem, dolorum corporis '
            'accusamus esse assumenda obcaecati qui nam illo dolores.'
        )
    },
    {
        'title': 'Post 2 title',
        'description': (
            'Dolore nesciunt aspernatur debitis porro ullam impedit, doloremque deleniti delectus '
            'perferendis tempora earum velit dignissimos quam minus voluptate beatae nulla. Natus, '
            'molestiae officia fugiat dolor asperiores ex vel. Incidunt, perspiciatis!'
        )
    },
    {
        'title': 'Post 3 title',
        'description': (
            'Minima facere optio cupiditate quisquam, asperiores, voluptatem alias, ducimus quos '
            'eum magnam possimus suscipit accusamus. Vero, est nemo! Obcaecati cumque ipsa deleniti '
            'laboriosam quaerat doloremque dolores. Maxime deserunt dolores quidem!'
        )
    },
]


class PostRepository(LoggerMixin):
    """
    Ordered in-memory store of Post records

    Records are plain dicts with keys id, title, description, created_at and
    updated_at. Insertion order is kept except after get_last_post(), which
    re-sorts the shared list by created_at descending.

    All access goes through one re-entrant lock; callers receive copies.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize repository

        Args:
            clock: Callable returning the current (timezone-aware) time
        """
        self.clock = clock or utc_now
        self._posts: List[Dict[str, Any]] = []
        self._lock = threading.RLock()
        self.log_debug("Initialized PostRepository")

    # ============================================
    # READS
    # ============================================

    def get_post(self, post_id: Any) -> Optional[Dict[str, Any]]:
        """
        Get post by ID

        Args:
            post_id: Post identifier; anything but a string finds nothing

        Returns:
            Post data or None
        """
        if not isinstance(post_id, str):
            return None

        with self._lock:
            record = self._find(post_id)
            return dict(record) if record is not None else None

    def get_last_post(self) -> Optional[Dict[str, Any]]:
        """
        Get the most recently created post

        Sorts the store in place by created_at descending, so later
        list_posts() calls observe the new order. Ties keep their prior
        relative order.

        Returns:
            Post data or None when the store is empty
        """
        with self._lock:
            if not self._posts:
                self.log_warning("Last post requested from an empty store")
                return None

            self._posts.sort(key=lambda p: p['created_at'], reverse=True)
            return dict(self._posts[0])

    def list_posts(self) -> List[Dict[str, Any]]:
        """Get all posts in current store order"""
        with self._lock:
            return [dict(p) for p in self._posts]

    def count(self) -> int:
        with self._lock:
            return len(self._posts)

    # ============================================
    # WRITES
    # ============================================

    def create_post(self, title: str, description: str) -> Dict[str, Any]:
        """
        Create and append a new post

        Args:
            title: Post title
            description: Post description

        Returns:
            Created post data
        """
        now = self.clock()
        record = {
            'id': str(uuid.uuid4()),
            'title': title,
            'description': description,
            'created_at': now,
            'updated_at': now
        }

        with self._lock:
            self._posts.append(record)

        self.log_info("Post created", post_id=record['id'])
        return dict(record)

    def update_post(
        self,
        post_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Partially update a post

        Only fields given as strings are overwritten; updated_at is refreshed
        whenever the post exists.

        Args:
            post_id: Post identifier
            title: New title (optional)
            description: New description (optional)

        Returns:
            Updated post data or None if no post has that ID
        """
        with self._lock:
            record = self._find(post_id)

            if record is None:
                self.log_warning("Post not found for update", post_id=post_id)
                return None

            if isinstance(title, str):
                record['title'] = title
            if isinstance(description, str):
                record['description'] = description

            record['updated_at'] = max(self.clock(), record['created_at'])
            updated = dict(record)

        self.log_info("Post updated", post_id=post_id)
        return updated

    def load_fixtures(self) -> int:
        """
        Seed the store with the start-up fixture posts

        Returns:
            Number of posts added
        """
        now = self.clock()

        with self._lock:
            for fixture in FIXTURE_POSTS:
                self._posts.append({
                    'id': str(uuid.uuid4()),
                    'title': fixture['title'],
                    'description': fixture['description'],
                    'created_at': now,
                    'updated_at': now
                })

        self.log_info("Loaded fixture posts", count=len(FIXTURE_POSTS))
        return len(FIXTURE_POSTS)

    def _find(self, post_id: str) -> Optional[Dict[str, Any]]:
        # first match wins
        for record in self._posts:
            if record['id'] == post_id:
                return record
        return None
