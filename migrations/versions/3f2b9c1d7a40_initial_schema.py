"""initial_schema

Create the schema for DevFlow:
- Users (accounts created by the identity provider webhook)
- Tags (case-insensitive unique names)
- Questions (voter sets stored as UUID arrays)
- Question tags (many-to-many)
- Answers (voter sets stored as UUID arrays)
- Saved questions (each user's collection)

Revision ID: 3f2b9c1d7a40
Revises:
Create Date: 2026-10-18 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2b9c1d7a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _voter_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.ARRAY(sa.UUID()),
        nullable=False,
        server_default=sa.text("'{}'::uuid[]"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("clerk_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("picture", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("portfolio_website", sa.Text(), nullable=True),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("clerk_id", name="uq_users_clerk_id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint("reputation >= 0", name="reputation_non_negative"),
    )
    op.execute("CREATE INDEX idx_users_username_lower ON users (lower(username))")

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(15), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("CREATE UNIQUE INDEX idx_tags_name_lower ON tags (lower(name))")

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(130), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        _voter_column("upvoters"),
        _voter_column("downvoters"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="views_non_negative"),
        sa.CheckConstraint("answer_count >= 0", name="answer_count_non_negative"),
        # A user is never both an upvoter and a downvoter
        sa.CheckConstraint(
            "NOT (upvoters && downvoters)", name="question_voters_disjoint"
        ),
    )
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    op.create_index("idx_questions_views", "questions", [sa.text("views DESC")])

    # ========================================================================
    # QUESTION_TAGS table (junction)
    # ========================================================================
    op.create_table(
        "question_tags",
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("question_id", "tag_id"),
    )
    op.create_index("idx_question_tags_tag_id", "question_tags", ["tag_id"])

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _voter_column("upvoters"),
        _voter_column("downvoters"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("NOT (upvoters && downvoters)", name="answer_voters_disjoint"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_author_id", "answers", ["author_id"])

    # ========================================================================
    # SAVED_QUESTIONS table (collections)
    # ========================================================================
    op.create_table(
        "saved_questions",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "question_id"),
    )
    op.create_index(
        "idx_saved_questions_question_id", "saved_questions", ["question_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("saved_questions")
    op.drop_table("answers")
    op.drop_table("question_tags")
    op.drop_table("questions")
    op.drop_table("tags")
    op.drop_table("users")
