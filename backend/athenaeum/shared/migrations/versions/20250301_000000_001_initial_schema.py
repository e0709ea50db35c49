# pylint: skip-file
# ruff: noqa
"""Initial schema - create all content tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- biography_entries:    philosopher profiles (slugged)
- biography_annexes:    analysis per biography (FK biography_id, ON DELETE RESTRICT)
- articles:             long-form writing (slugged)
- research_notes:       research summaries (slugged)
- glossary_terms:       glossary (slugged)
- dialogue_transcripts: collected dialogues (slugged)
- catalog_items:        shop catalog (slugged)

Every slugged table gets a unique index ix_<table>_slug; it is what makes a
slug unique within its content type.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


SLUGGED_TABLES = (
    "biography_entries",
    "articles",
    "research_notes",
    "glossary_terms",
    "dialogue_transcripts",
    "catalog_items",
)


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _owner() -> sa.Column:
    return sa.Column("admin_id", sa.Integer(), nullable=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _slugged() -> list[sa.Column]:
    return [
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("image_url", sa.Text(), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "biography_entries",
        _id(),
        _owner(),
        sa.Column("philosofer", sa.String(255), nullable=False),
        sa.Column("geoorigin", sa.String(255), nullable=False),
        sa.Column("detail_location", sa.Text(), nullable=False),
        sa.Column("years", sa.String(100), nullable=False),
        *_slugged(),
        *_timestamps(),
    )

    op.create_table(
        "biography_annexes",
        _id(),
        _owner(),
        sa.Column(
            "biography_id",
            sa.Integer(),
            sa.ForeignKey("biography_entries.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("metafisika", sa.Text(), nullable=False),
        sa.Column("epsimologi", sa.Text(), nullable=False),
        sa.Column("aksiologi", sa.Text(), nullable=False),
        sa.Column("conclusion", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_biography_annexes_biography_id", "biography_annexes", ["biography_id"])
    op.create_index("ix_biography_annexes_admin_id", "biography_annexes", ["admin_id"])

    op.create_table(
        "articles",
        _id(),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("keywords", sa.Text(), nullable=True),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("featured_image_alt", sa.String(255), nullable=True),
        sa.Column("canonical_url", sa.Text(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        *_slugged(),
        *_timestamps(),
    )
    op.create_index("ix_articles_title", "articles", ["title"])

    op.create_table(
        "research_notes",
        _id(),
        _owner(),
        sa.Column("research_title", sa.String(255), nullable=False),
        sa.Column("research_sum", sa.Text(), nullable=False),
        sa.Column("researcher", sa.String(255), nullable=False),
        sa.Column("research_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("keywords", sa.Text(), nullable=True),
        *_slugged(),
        *_timestamps(),
    )
    op.create_index("ix_research_notes_research_title", "research_notes", ["research_title"])

    op.create_table(
        "glossary_terms",
        _id(),
        _owner(),
        sa.Column("term", sa.String(255), nullable=False),
        sa.Column("definition", sa.Text(), nullable=False),
        sa.Column("etymology", sa.Text(), nullable=True),
        sa.Column("examples", sa.Text(), nullable=True),
        sa.Column("related_terms", sa.Text(), nullable=True),
        sa.Column("keywords", sa.Text(), nullable=True),
        *_slugged(),
        *_timestamps(),
    )
    op.create_index("ix_glossary_terms_term", "glossary_terms", ["term"])

    op.create_table(
        "dialogue_transcripts",
        _id(),
        _owner(),
        sa.Column("judul", sa.String(255), nullable=False),
        sa.Column("dialog", sa.Text(), nullable=False),
        *_slugged(),
        *_timestamps(),
    )
    op.create_index("ix_dialogue_transcripts_judul", "dialogue_transcripts", ["judul"])

    op.create_table(
        "catalog_items",
        _id(),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("desc", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("price", sa.String(100), nullable=False),
        sa.Column("stock", sa.String(100), nullable=False),
        sa.Column("link", sa.Text(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_slugged(),
        *_timestamps(),
    )
    op.create_index("ix_catalog_items_title", "catalog_items", ["title"])

    for table in SLUGGED_TABLES:
        op.create_index(f"ix_{table}_slug", table, ["slug"], unique=True)
        op.create_index(f"ix_{table}_admin_id", table, ["admin_id"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Annexes first; they reference biography_entries
    op.drop_table("biography_annexes")
    for table in reversed(SLUGGED_TABLES):
        op.drop_table(table)
