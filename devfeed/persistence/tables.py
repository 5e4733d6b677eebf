"""SQLAlchemy table definitions for the feed.

The schema is owned by the hosted platform; these definitions mirror the
existing tables so queries can be built with SQLAlchemy Core. They are never
used to create or migrate tables.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POST TABLE (tips)
# ============================================================================
post_table = Table(
    "post",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", Text, nullable=False),
    Column("summary", Text, nullable=True),
    Column("problem_solved", Text, nullable=True),
    Column("upside", Text, nullable=True),
    Column("downside", Text, nullable=True),
    Column("risk_level", String(10), nullable=True),  # 'Low', 'Medium', 'High'
    Column("performance_impact", Text, nullable=True),
    Column("doc_url", Text, nullable=True),
    Column("primary_topic", Text, nullable=True),
    Column("syntax", Text, nullable=True),
    Column("code_snippets", JSONB, nullable=False, server_default="[]"),
    Column("dependencies", ARRAY(Text), nullable=False, server_default="{}"),
    Column("compatibility_min_version", Text, nullable=True),
    Column("compatibility_deprecated_in", Text, nullable=True),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("difficulty", Text, nullable=True),
    Column("last_verified", Date, nullable=False, server_default="CURRENT_DATE"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_post_created_at", post_table.c.created_at.desc())
Index("idx_post_primary_topic", post_table.c.primary_topic)

# ============================================================================
# POLLS TABLE
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("question", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("category", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_polls_created_at", polls_table.c.created_at.desc())

# ============================================================================
# POLL_OPTIONS TABLE
# ============================================================================
poll_options_table = Table(
    "poll_options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("option_text", Text, nullable=False),
    Column("option_order", Integer, nullable=False, server_default="0"),
)

Index("idx_poll_options_poll_id", poll_options_table.c.poll_id)

# ============================================================================
# COMMENTS TABLE (on a post or a poll)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("post.id", ondelete="CASCADE"), nullable=True),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=True),
    Column("user_id", UUID, nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_poll_id", comments_table.c.poll_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# POST_LIKES TABLE (power-ups on posts)
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("post.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
)

# ============================================================================
# COMMENT_POWER_UPS TABLE
# ============================================================================
comment_power_ups_table = Table(
    "comment_power_ups",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_power_ups_comment_user"),
)

# ============================================================================
# POST_STACK TABLE (save-for-later)
# ============================================================================
post_stack_table = Table(
    "post_stack",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("post.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_stack_post_user"),
)

Index("idx_post_stack_user_id", post_stack_table.c.user_id)

# ============================================================================
# POLL_VOTES TABLE
# ============================================================================
poll_votes_table = Table(
    "poll_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column(
        "poll_option_id",
        UUID,
        ForeignKey("poll_options.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("poll_id", "user_id", name="uq_poll_votes_poll_user"),
)

Index("idx_poll_votes_poll_id", poll_votes_table.c.poll_id)

# ============================================================================
# PROFILES TABLE (only the preference columns are used here)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Same as the auth user ID
    Column("filter_preferences", JSONB, nullable=False, server_default="[]"),
    Column("poll_frequency", Text, nullable=True),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
