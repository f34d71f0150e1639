"""initial_schema

Create the schema for the Tally voting and allocation core:
- Requests, contracts, letters of credit, vessels (entity store)
- Vessel / letter of credit relations carrying their own quantity
- Documents (uploaded file references)
- Votes (append-only ledger, one cast decision per voter per subject)

Revision ID: 3c1f0a9d7e42
Revises:
Create Date: 2026-10-17 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d7e42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        postgresql.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ENTITY STORE
    # ========================================================================
    op.create_table(
        "requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Numeric(15, 3), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "contracts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("request_id", sa.Integer(), nullable=True),
        sa.Column("supplier_name", sa.String(255), nullable=True),
        sa.Column("cargo_type", sa.String(100), nullable=True),
        sa.Column("quantity", sa.Numeric(15, 3), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="draft"),
        _created_at(),
        sa.ForeignKeyConstraint(["request_id"], ["requests.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_contracts_request_id", "contracts", ["request_id"])

    op.create_table(
        "letters_of_credit",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("lc_number", sa.String(100), nullable=True),
        sa.Column("currency", sa.String(3), nullable=True),
        sa.Column("quantity", sa.Numeric(15, 3), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="active"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "vessels",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("contract_id", sa.Integer(), nullable=True),
        sa.Column("vessel_name", sa.String(255), nullable=True),
        sa.Column("quantity", sa.Numeric(15, 3), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="nominated"),
        _created_at(),
        sa.ForeignKeyConstraint(["contract_id"], ["contracts.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_vessels_contract_id", "vessels", ["contract_id"])

    op.create_table(
        "vessel_letters_of_credit",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vessel_id", sa.Integer(), nullable=False),
        sa.Column("lc_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Numeric(15, 3), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["vessel_id"], ["vessels.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["lc_id"], ["letters_of_credit.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_vessel_lcs_lc_id", "vessel_letters_of_credit", ["lc_id"])
    op.create_index(
        "idx_vessel_lcs_vessel_id", "vessel_letters_of_credit", ["vessel_id"]
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("file_path", sa.Text(), nullable=False),
        sa.Column("uploaded_by", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_documents_entity", "documents", ["entity_type", "entity_id"])

    # ========================================================================
    # VOTE LEDGER
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("subject_type", sa.String(20), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("voter_id", sa.String(255), nullable=False),
        sa.Column("decision", sa.String(20), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("file_name", sa.String(255), nullable=True),
        sa.Column("file_path", sa.Text(), nullable=True),
        _created_at(),
        sa.CheckConstraint(
            "decision <> 'reject' OR length(trim(coalesce(comment, ''))) > 0",
            name="reject_requires_comment",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_votes_subject", "votes", ["subject_type", "subject_id", "created_at"]
    )

    # One cast decision per voter per subject; pending placeholders are exempt
    op.execute("""
        CREATE UNIQUE INDEX uq_votes_subject_voter
        ON votes (subject_type, subject_id, voter_id)
        WHERE decision <> 'pending'
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS uq_votes_subject_voter")
    op.drop_index("idx_votes_subject", table_name="votes")
    op.drop_table("votes")

    op.drop_index("idx_documents_entity", table_name="documents")
    op.drop_table("documents")

    op.drop_index("idx_vessel_lcs_vessel_id", table_name="vessel_letters_of_credit")
    op.drop_index("idx_vessel_lcs_lc_id", table_name="vessel_letters_of_credit")
    op.drop_table("vessel_letters_of_credit")

    op.drop_index("idx_vessels_contract_id", table_name="vessels")
    op.drop_table("vessels")
    op.drop_table("letters_of_credit")

    op.drop_index("idx_contracts_request_id", table_name="contracts")
    op.drop_table("contracts")
    op.drop_table("requests")
