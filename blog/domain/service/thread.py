"""Comment thread structure.

Depth is computed by walking parent pointers through an id -> comment
index built once per article, so no live graph of comment objects is
ever held. Walks are bounded and refuse to loop on corrupt data.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from blog.domain.error import CyclicThreadError, MaxDepthExceededError
from blog.domain.model import AuthorSnapshot, Comment
from blog.domain.value import CommentId, UserId

# Replies may nest at depth 0, 1 and 2; a reply that would land at depth 3 is rejected.
MAX_COMMENT_DEPTH = 3

# Hard stop for parent-chain walks, far above any depth a valid thread can reach.
DEPTH_SAFETY_LIMIT = 64


@dataclass
class CommentNode:
    """Comment in an assembled thread, with its replies."""

    comment: Comment
    author: Optional[AuthorSnapshot]
    depth: int
    replies: list["CommentNode"] = field(default_factory=list)


def index_comments(comments: Iterable[Comment]) -> dict[CommentId, Comment]:
    """Build the id -> comment lookup used by depth walks."""
    return {comment.id: comment for comment in comments}


def depth_for_parent(
    parent_id: Optional[CommentId], index: Mapping[CommentId, Comment]
) -> int:
    """Depth of a comment whose parent is ``parent_id``.

    Each hop to an ancestor found in ``index`` adds one. A parent missing
    from the index ends the walk there, as if it were top-level.

    Args:
        parent_id: Parent of the comment being measured (None for top-level)
        index: All comments of the article, keyed by ID

    Returns:
        Depth, 0 for top-level

    Raises:
        CyclicThreadError: If the chain revisits a comment or runs past
            DEPTH_SAFETY_LIMIT
    """
    depth = 0
    seen: set[CommentId] = set()
    current = parent_id

    while current is not None:
        parent = index.get(current)
        if parent is None:
            break
        if current in seen or depth >= DEPTH_SAFETY_LIMIT:
            raise CyclicThreadError(str(current))
        seen.add(current)
        depth += 1
        current = parent.parent_id

    return depth


def calculate_depth(comment: Comment, article_comments: Iterable[Comment]) -> int:
    """Nesting depth of ``comment`` within its article's comments."""
    return depth_for_parent(comment.parent_id, index_comments(article_comments))


def ensure_reply_depth(
    parent_id: CommentId, index: Mapping[CommentId, Comment]
) -> int:
    """Check that a reply under ``parent_id`` stays within the depth ceiling.

    Returns:
        Depth the new reply will have

    Raises:
        MaxDepthExceededError: If the reply would reach MAX_COMMENT_DEPTH
    """
    depth = depth_for_parent(parent_id, index)
    if depth >= MAX_COMMENT_DEPTH:
        raise MaxDepthExceededError(MAX_COMMENT_DEPTH)
    return depth


def build_thread(
    comments: Iterable[Comment],
    authors: Mapping[UserId, AuthorSnapshot],
) -> list[CommentNode]:
    """Assemble an article's comments into reply trees.

    Top-level comments come newest first; replies at every level come
    oldest first so conversations read top to bottom. A comment whose
    parent is not among ``comments`` is shown at the top level.

    Args:
        comments: All comments of one article
        authors: Snapshots for registered authors

    Returns:
        Root nodes with replies populated
    """
    index = index_comments(comments)

    children: dict[CommentId, list[Comment]] = defaultdict(list)
    roots: list[Comment] = []
    for comment in index.values():
        if comment.parent_id is not None and comment.parent_id in index:
            children[comment.parent_id].append(comment)
        else:
            roots.append(comment)

    def sort_key(comment: Comment) -> tuple:
        return (comment.created_at, str(comment.id))

    def build_subtree(comment: Comment, depth: int) -> CommentNode:
        replies = sorted(children.get(comment.id, []), key=sort_key)
        return CommentNode(
            comment=comment,
            author=authors.get(comment.user_id) if comment.user_id else None,
            depth=depth,
            replies=[build_subtree(reply, depth + 1) for reply in replies],
        )

    roots.sort(key=sort_key, reverse=True)
    return [build_subtree(root, 0) for root in roots]


def count_nodes(nodes: Iterable[CommentNode]) -> int:
    """Total number of comments in a list of trees."""
    return sum(1 + count_nodes(node.replies) for node in nodes)
