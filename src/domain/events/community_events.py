"""Community context domain events."""

from src.domain.events.base_event import DomainEvent

COMMENT_ADDED = "comment_added"


def comment_added(post_id: str, author: str, comment_text: str) -> DomainEvent:
    """Comment added to a post.

    Raises:
        ValueError: If any argument is empty.
    """
    if not post_id or not author or not comment_text:
        raise ValueError("post_id, author and comment_text must be non-empty")
    return DomainEvent.new(
        COMMENT_ADDED,
        post_id,
        "post",
        {"post_id": post_id, "author": author, "comment_text": comment_text},
    )
