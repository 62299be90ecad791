"""SQLAlchemy table definitions for the Q&A forum.

These table definitions are used by the repositories (SQLAlchemy Core).
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reputation >= 0", name="reputation_non_negative"),
)

Index("idx_users_reputation", users_table.c.reputation.desc())

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(150), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("tags", ARRAY(String(25)), nullable=False, server_default="{}"),
    Column("vote_score", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    # No FK: answers already reference questions
    Column("accepted_answer_id", UUID(as_uuid=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_activity_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_last_activity_at", questions_table.c.last_activity_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column("vote_score", Integer, nullable=False, server_default="0"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "voter_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "target_kind",
        Enum("question", "answer", name="target_kind", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column(
        "direction",
        Enum("upvote", "downvote", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # At most one vote per voter per target
    UniqueConstraint(
        "voter_id", "target_kind", "target_id", name="uq_vote_voter_target"
    ),
)

Index("idx_votes_target", votes_table.c.target_kind, votes_table.c.target_id)
Index("idx_votes_voter_created_at", votes_table.c.voter_id, votes_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "target_kind",
        Enum("question", "answer", name="target_kind", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", String(600), nullable=False),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_target",
    comments_table.c.target_kind,
    comments_table.c.target_id,
    comments_table.c.created_at,
)
Index(
    "idx_comments_author_created_at",
    comments_table.c.author_id,
    comments_table.c.created_at,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "recipient_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "type",
        Enum(
            "new_answer",
            "answer_accepted",
            "comment_on_question",
            "comment_on_answer",
            name="notification_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("message", String(500), nullable=False),
    # No FKs, so a notification survives the content it points at
    Column("question_id", UUID(as_uuid=True), nullable=True),
    Column("answer_id", UUID(as_uuid=True), nullable=True),
    Column("comment_id", UUID(as_uuid=True), nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    notifications_table.c.is_read,
)
