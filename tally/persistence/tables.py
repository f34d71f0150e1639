"""SQLAlchemy table definitions for Tally.

Core tables mapped manually to the pydantic domain models (see mappers.py).
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Quantities are metric tons with three decimals
QUANTITY = Numeric(15, 3)

# ============================================================================
# REQUESTS TABLE
# ============================================================================
requests_table = Table(
    "requests",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("quantity", QUANTITY, nullable=True),
    Column("status", String(50), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CONTRACTS TABLE
# ============================================================================
contracts_table = Table(
    "contracts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "request_id",
        Integer,
        ForeignKey("requests.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("supplier_name", String(255), nullable=True),
    Column("cargo_type", String(100), nullable=True),
    Column("quantity", QUANTITY, nullable=True),
    Column("status", String(50), nullable=False, server_default="draft"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_contracts_request_id", contracts_table.c.request_id)

# ============================================================================
# LETTERS OF CREDIT TABLE
# ============================================================================
letters_of_credit_table = Table(
    "letters_of_credit",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("lc_number", String(100), nullable=True),
    Column("currency", String(3), nullable=True),
    Column("quantity", QUANTITY, nullable=True),
    Column("status", String(50), nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# VESSELS TABLE
# ============================================================================
vessels_table = Table(
    "vessels",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "contract_id",
        Integer,
        ForeignKey("contracts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("vessel_name", String(255), nullable=True),
    Column("quantity", QUANTITY, nullable=True),
    Column("status", String(50), nullable=False, server_default="nominated"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_vessels_contract_id", vessels_table.c.contract_id)

# ============================================================================
# VESSEL_LETTERS_OF_CREDIT TABLE (junction table with its own quantity)
# ============================================================================
vessel_letters_of_credit_table = Table(
    "vessel_letters_of_credit",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "vessel_id",
        Integer,
        ForeignKey("vessels.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "lc_id",
        Integer,
        ForeignKey("letters_of_credit.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("quantity", QUANTITY, nullable=True),
    Column("notes", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_vessel_lcs_lc_id", vessel_letters_of_credit_table.c.lc_id)
Index("idx_vessel_lcs_vessel_id", vessel_letters_of_credit_table.c.vessel_id)

# ============================================================================
# DOCUMENTS TABLE (uploaded file references; storage lives elsewhere)
# ============================================================================
documents_table = Table(
    "documents",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("entity_type", String(50), nullable=False),
    Column("entity_id", Integer, nullable=False),
    Column("file_name", String(255), nullable=False),
    Column("file_path", Text, nullable=False),
    Column("uploaded_by", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_documents_entity", documents_table.c.entity_type, documents_table.c.entity_id)

# ============================================================================
# VOTES TABLE (append-only ledger)
# ============================================================================
# Enum columns are plain strings: the mappers parse them into the closed
# domain enums and reject anything unknown.
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("subject_type", String(20), nullable=False),
    Column("subject_id", Integer, nullable=False),
    Column("voter_id", String(255), nullable=False),
    Column("decision", String(20), nullable=False),
    Column("comment", Text, nullable=True),
    Column("file_name", String(255), nullable=True),
    Column("file_path", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "decision <> 'reject' OR length(trim(coalesce(comment, ''))) > 0",
        name="reject_requires_comment",
    ),
)

Index(
    "idx_votes_subject",
    votes_table.c.subject_type,
    votes_table.c.subject_id,
    votes_table.c.created_at,
)

# One cast decision per voter per subject. Pending placeholders are exempt.
VOTES_UNIQUE_VOTER_INDEX = "uq_votes_subject_voter"
Index(
    VOTES_UNIQUE_VOTER_INDEX,
    votes_table.c.subject_type,
    votes_table.c.subject_id,
    votes_table.c.voter_id,
    unique=True,
    postgresql_where=votes_table.c.decision != "pending",
)
