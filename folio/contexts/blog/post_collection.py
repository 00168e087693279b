"""
Post collection for the Blog context.

Holds every parsed post keyed by id and answers listing queries (newest first,
by category, by tag). Views are derived from the underlying mapping on every
call; nothing is cached, so they can never go stale.
"""

from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from folio.contexts.blog.exceptions import CollectionSealedError, DuplicateIdError
from folio.contexts.blog.post_data_structure import Post


def _post_date(post: Post):
    return post.date


class PostCollection:
    """
    Mapping of post id to Post with ordered query views.

    Populated once during content loading, then sealed. There is no delete or
    update operation.

    Example:
        collection = PostCollection()
        collection.add(post)
        collection.seal()
        latest = collection.by_date_descending()[0]
    """

    def __init__(self):
        self._posts: Dict[str, Post] = {}
        self._sealed = False

    @classmethod
    def from_posts(cls, posts: Iterable[Post]) -> "PostCollection":
        """
        Build and seal a collection from posts.

        Raises:
            DuplicateIdError: If two posts share an id
        """
        collection = cls()
        for post in posts:
            collection.add(post)
        collection.seal()
        return collection

    # =========================================================================
    # LOADING
    # =========================================================================

    def add(self, post: Post) -> None:
        """
        Add a post to the collection.

        Args:
            post: Parsed post

        Raises:
            DuplicateIdError: If a post with the same id is already present
                (the collection is left unchanged)
            CollectionSealedError: If the collection has been sealed
        """
        if self._sealed:
            raise CollectionSealedError(post.id)
        if post.id in self._posts:
            raise DuplicateIdError(post.id)
        self._posts[post.id] = post

    def seal(self) -> None:
        """Mark loading as finished. Further add() calls fail."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    # =========================================================================
    # QUERIES
    # =========================================================================

    def by_date_descending(self) -> List[Post]:
        """
        All posts, newest first.

        Equal dates are ordered by id ascending so the result is a total order
        independent of insertion order.
        """
        by_id = sorted(self._posts.values(), key=lambda post: post.id)
        # Stable sort keeps the id order within equal dates
        return sorted(by_id, key=_post_date, reverse=True)

    def by_category(self, name: str) -> List[Post]:
        """Posts in a category, newest first."""
        return [post for post in self.by_date_descending() if name in post.categories]

    def by_tag(self, name: str) -> List[Post]:
        """Posts carrying a tag, newest first."""
        return [post for post in self.by_date_descending() if name in post.tags]

    def get(self, post_id: str) -> Optional[Post]:
        return self._posts.get(post_id)

    def categories(self) -> Dict[str, int]:
        """Category names mapped to post counts, sorted by name."""
        counts = Counter(name for post in self._posts.values() for name in post.categories)
        return dict(sorted(counts.items()))

    def tags(self) -> Dict[str, int]:
        """Tag names mapped to post counts, sorted by name."""
        counts = Counter(name for post in self._posts.values() for name in post.tags)
        return dict(sorted(counts.items()))

    def neighbors(self, post_id: str) -> Tuple[Optional[Post], Optional[Post]]:
        """
        Posts adjacent to one entry in the newest-first listing.

        Args:
            post_id: Id of the post being displayed

        Returns:
            (newer, older) - either may be None at the ends of the listing

        Raises:
            KeyError: If post_id is not in the collection
        """
        ordered = self.by_date_descending()
        ids = [post.id for post in ordered]
        if post_id not in self._posts:
            raise KeyError(post_id)

        index = ids.index(post_id)
        newer = ordered[index - 1] if index > 0 else None
        older = ordered[index + 1] if index + 1 < len(ordered) else None
        return newer, older

    def __getitem__(self, post_id: str) -> Post:
        return self._posts[post_id]

    def __contains__(self, post_id: object) -> bool:
        return post_id in self._posts

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.by_date_descending())

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"PostCollection({len(self._posts)} posts, {state})"
