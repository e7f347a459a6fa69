"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
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
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one per authenticated principal)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False, unique=True),  # Identity provider subject
    Column("username", String(50), nullable=False, unique=True),
    Column("full_name", String(100), nullable=False, server_default=""),
    Column("email", String(255), nullable=False, unique=True),
    Column(
        "gender",
        postgresql.ENUM(
            "male",
            "female",
            "other",
            "prefer_not_to_say",
            name="gender_type",
            create_type=False,
        ),
        nullable=True,
    ),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(255), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "tags",
        postgresql.ARRAY(String(30)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "user_id",
        UUID,
        ForeignKey("profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column("has_accepted_answer", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvote_count >= 0 AND downvote_count >= 0 AND answer_count >= 0",
        name="question_counts_non_negative",
    ),
)

Index("idx_questions_user_id", questions_table.c.user_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column(
        "user_id",
        UUID,
        ForeignKey("profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvote_count >= 0 AND downvote_count >= 0",
        name="answer_counts_non_negative",
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_user_id", answers_table.c.user_id)
Index("idx_answers_created_at", answers_table.c.created_at.desc())
# At most one accepted answer per question
Index(
    "uq_answers_accepted_per_question",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id",
        UUID,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "vote_type",
        postgresql.ENUM("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "question_id", name="unique_question_vote"),
    UniqueConstraint("user_id", "answer_id", name="unique_answer_vote"),
    CheckConstraint(
        "(question_id IS NOT NULL AND answer_id IS NULL) OR "
        "(question_id IS NULL AND answer_id IS NOT NULL)",
        name="vote_target_check",
    ),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_question_id", votes_table.c.question_id)
Index("idx_votes_answer_id", votes_table.c.answer_id)
