"""Comment thread construction and popularity ranking.

Comments are stored flat, each pointing at its parent. A thread is rebuilt
on every read:

1. One node per comment, keyed by id (first occurrence of an id wins)
2. Each reply is attached to its parent's node; replies whose parent is not
   in the set are dropped together with their subtree
3. A comment that names itself as parent is treated as top-level
4. Siblings at every level, and the top level, are ranked by popularity:
   power-up count descending, then newest first

Nothing here touches storage; popularity counts are joined in by the caller.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeVar

from devfeed.domain.model.comment import Comment
from devfeed.domain.value import CommentId

T = TypeVar("T")

RankKey = tuple[int, datetime]


@dataclass
class CommentNode:
    """A comment and its ranked replies.

    Built fresh for every read and owned by the caller.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id


def popularity_key(comment: Comment) -> RankKey:
    """Ranking key for comments, used with reverse=True."""
    return (comment.power_up_count, comment.created_at)


def rank_by_popularity(items: Iterable[T], key: Callable[[T], RankKey]) -> list[T]:
    """Order items by (count, created_at), both descending.

    The sort is stable, so items with identical keys keep their input order.
    """
    return sorted(items, key=key, reverse=True)


def _node_key(node: CommentNode) -> RankKey:
    return popularity_key(node.comment)


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build ranked reply trees from a flat list of one item's comments.

    Never raises on inconsistent data: orphans are dropped, self-parented
    comments become roots, and cycles that do not reach a root are simply
    unreachable from the returned forest.

    Args:
        comments: Non-deleted comments of a single post or poll, with
            power_up_count already filled in. Order does not matter.

    Returns:
        Root nodes in popularity order, each with its ranked subtree
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        if comment.id not in nodes:
            nodes[comment.id] = CommentNode(comment=comment)

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent_id = node.comment.parent_id
        if parent_id is None or parent_id == node.comment.id:
            roots.append(node)
            continue

        parent = nodes.get(parent_id)
        if parent is not None:
            parent.children.append(node)

    roots = rank_by_popularity(roots, key=_node_key)

    # Explicit stack so very deep threads don't hit the recursion limit
    pending = list(roots)
    while pending:
        node = pending.pop()
        node.children.sort(key=_node_key, reverse=True)
        pending.extend(node.children)

    return roots


def iter_nodes(roots: Sequence[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Walk a forest depth-first in display order.

    Yields:
        (node, depth) pairs, roots at depth 0
    """
    pending: list[tuple[CommentNode, int]] = [(root, 0) for root in reversed(roots)]
    while pending:
        node, depth = pending.pop()
        yield node, depth
        pending.extend((child, depth + 1) for child in reversed(node.children))


def count_nodes(roots: Sequence[CommentNode]) -> int:
    """Total number of nodes across all levels."""
    return sum(1 for _ in iter_nodes(roots))
