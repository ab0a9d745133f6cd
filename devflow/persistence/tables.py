"""SQLAlchemy table definitions for DevFlow.

These table definitions are used with SQLAlchemy Core and hand-written
mappers. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
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
    Column("clerk_id", String(255), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False),
    Column("picture", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("location", String(100), nullable=True),
    Column("portfolio_website", Text, nullable=True),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    CheckConstraint("reputation >= 0", name="reputation_non_negative"),
)

Index("idx_users_username_lower", func.lower(users_table.c.username))

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(15), nullable=False),
    Column("description", String(500), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

# Tag names are unique ignoring case
Index("idx_tags_name_lower", func.lower(tags_table.c.name), unique=True)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(130), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column(
        "upvoters",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "downvoters",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    CheckConstraint("views >= 0", name="views_non_negative"),
    CheckConstraint("answer_count >= 0", name="answer_count_non_negative"),
    CheckConstraint("NOT (upvoters && downvoters)", name="question_voters_disjoint"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_views", questions_table.c.views.desc())

# ============================================================================
# QUESTION_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        UUID(as_uuid=True),
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_question_tags_tag_id", question_tags_table.c.tag_id)

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
    Column("content", Text, nullable=False),
    Column(
        "upvoters",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "downvoters",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    CheckConstraint("NOT (upvoters && downvoters)", name="answer_voters_disjoint"),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)

# ============================================================================
# SAVED_QUESTIONS TABLE (a user's collection)
# ============================================================================
saved_questions_table = Table(
    "saved_questions",
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint("user_id", "question_id", name="uq_saved_question"),
)

Index("idx_saved_questions_question_id", saved_questions_table.c.question_id)
