"""Unit tests for comment thread construction."""

from uuid import uuid4

from devfeed.domain.service.thread import (
    build_comment_tree,
    count_nodes,
    iter_nodes,
    rank_by_popularity,
)
from devfeed.domain.value import CommentId
from tests.conftest import at, make_comment


def _shape(roots):
    """(id, depth) pairs in display order, for structural comparison."""
    return [(node.id, depth) for node, depth in iter_nodes(roots)]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_returns_empty_forest(self):
        assert build_comment_tree([]) == []

    def test_roots_ranked_by_power_ups_then_newest(self):
        """More powered-up roots come first; ties go to the newer comment."""
        # Arrange
        post_id = uuid4()
        old_popular = make_comment(post_id, created_at=at(0), power_up_count=5)
        new_plain = make_comment(post_id, created_at=at(10), power_up_count=0)
        old_plain = make_comment(post_id, created_at=at(1), power_up_count=0)

        # Act
        roots = build_comment_tree([old_plain, new_plain, old_popular])

        # Assert
        assert [r.id for r in roots] == [old_popular.id, new_plain.id, old_plain.id]

    def test_replies_attached_and_ranked_at_every_level(self):
        # Arrange
        post_id = uuid4()
        root = make_comment(post_id, created_at=at(0))
        reply_a = make_comment(post_id, parent_id=root.id, created_at=at(1))
        reply_b = make_comment(
            post_id, parent_id=root.id, created_at=at(2), power_up_count=3
        )
        reply_c = make_comment(post_id, parent_id=root.id, created_at=at(3))
        nested_old = make_comment(post_id, parent_id=reply_a.id, created_at=at(4))
        nested_new = make_comment(post_id, parent_id=reply_a.id, created_at=at(5))

        # Act
        roots = build_comment_tree(
            [nested_old, reply_a, root, nested_new, reply_c, reply_b]
        )

        # Assert
        assert len(roots) == 1
        assert [c.id for c in roots[0].children] == [reply_b.id, reply_c.id, reply_a.id]
        reply_a_node = roots[0].children[2]
        assert [c.id for c in reply_a_node.children] == [nested_new.id, nested_old.id]

    def test_reply_never_appears_as_root(self):
        post_id = uuid4()
        root = make_comment(post_id, created_at=at(0))
        reply = make_comment(post_id, parent_id=root.id, created_at=at(1))

        roots = build_comment_tree([reply, root])

        assert [r.id for r in roots] == [root.id]
        assert _shape(roots) == [(root.id, 0), (reply.id, 1)]

    def test_orphan_dropped_with_its_subtree(self):
        """A reply whose parent is missing (e.g. deleted) disappears with its replies."""
        # Arrange
        post_id = uuid4()
        root = make_comment(post_id, created_at=at(0))
        orphan = make_comment(post_id, parent_id=CommentId(uuid4()), created_at=at(1))
        orphan_reply = make_comment(post_id, parent_id=orphan.id, created_at=at(2))

        # Act
        roots = build_comment_tree([root, orphan, orphan_reply])

        # Assert
        assert _shape(roots) == [(root.id, 0)]
        assert count_nodes(roots) == 1

    def test_self_parented_comment_is_root(self):
        post_id = uuid4()
        comment_id = CommentId(uuid4())
        selfish = make_comment(post_id, parent_id=comment_id, id=comment_id)

        roots = build_comment_tree([selfish])

        assert [r.id for r in roots] == [comment_id]
        assert roots[0].children == []

    def test_duplicate_ids_keep_first_occurrence(self):
        post_id = uuid4()
        comment_id = CommentId(uuid4())
        first = make_comment(post_id, id=comment_id, text="first")
        second = make_comment(post_id, id=comment_id, text="second")

        roots = build_comment_tree([first, second])

        assert len(roots) == 1
        assert roots[0].comment.text == "first"

    def test_cycle_without_root_is_unreachable(self):
        """Two comments pointing at each other never reach the top level."""
        post_id = uuid4()
        id_a, id_b = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(post_id, id=id_a, parent_id=id_b)
        b = make_comment(post_id, id=id_b, parent_id=id_a)
        root = make_comment(post_id, created_at=at(1))

        roots = build_comment_tree([a, b, root])

        assert _shape(roots) == [(root.id, 0)]

    def test_node_count_equals_resolvable_comments(self):
        # Arrange
        post_id = uuid4()
        root = make_comment(post_id, created_at=at(0))
        replies = [
            make_comment(post_id, parent_id=root.id, created_at=at(i)) for i in range(1, 6)
        ]
        orphans = [
            make_comment(post_id, parent_id=CommentId(uuid4()), created_at=at(i))
            for i in range(2)
        ]

        # Act
        roots = build_comment_tree([root, *replies, *orphans])

        # Assert
        assert count_nodes(roots) == 1 + len(replies)

    def test_building_twice_gives_the_same_structure(self):
        post_id = uuid4()
        root_a = make_comment(post_id, created_at=at(0), power_up_count=1)
        root_b = make_comment(post_id, created_at=at(0), power_up_count=1)
        replies = [
            make_comment(post_id, parent_id=root_a.id, created_at=at(i % 3))
            for i in range(6)
        ]
        comments = [root_a, root_b, *replies]

        assert _shape(build_comment_tree(comments)) == _shape(
            build_comment_tree(comments)
        )

    def test_very_deep_thread_does_not_recurse(self):
        # Arrange
        post_id = uuid4()
        chain = [make_comment(post_id, created_at=at(0))]
        for i in range(1, 5000):
            chain.append(make_comment(post_id, parent_id=chain[-1].id, created_at=at(i)))

        # Act
        roots = build_comment_tree(list(reversed(chain)))

        # Assert
        assert count_nodes(roots) == 5000
        last_node, last_depth = list(iter_nodes(roots))[-1]
        assert last_node.id == chain[-1].id
        assert last_depth == 4999


class TestIterNodes:
    """Tests for iter_nodes."""

    def test_preorder_with_depths(self):
        post_id = uuid4()
        first = make_comment(post_id, created_at=at(2))
        second = make_comment(post_id, created_at=at(1))
        first_reply = make_comment(post_id, parent_id=first.id, created_at=at(3))

        roots = build_comment_tree([second, first_reply, first])

        assert _shape(roots) == [
            (first.id, 0),
            (first_reply.id, 1),
            (second.id, 0),
        ]


class TestRankByPopularity:
    """Tests for rank_by_popularity."""

    def test_equal_keys_keep_input_order(self):
        items = ["a", "b", "c"]

        ranked = rank_by_popularity(items, key=lambda _: (1, at(0)))

        assert ranked == ["a", "b", "c"]

    def test_count_beats_recency(self):
        items = [("new", 0, at(10)), ("old", 2, at(0))]

        ranked = rank_by_popularity(items, key=lambda item: (item[1], item[2]))

        assert [name for name, _, _ in ranked] == ["old", "new"]
