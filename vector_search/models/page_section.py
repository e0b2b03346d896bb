"""
Model: PageSection
Table: <DB_SCHEMA>.page_section

A section of a documentation page, stored with a vector embedding for
similarity search. Rows are written by the ingestion job; this service
only reads them.
"""

# Python Packages
from sqlalchemy import Index
from sqlalchemy.dialects.postgresql import TEXT
from pgvector.sqlalchemy import Vector

# Database
from ..config.database import db

# Constants
from ..base import constants


class PageSection(db.Model):
    """A retrievable section of a documentation page."""

    __tablename__ = "page_section"
    __table_args__ = {"schema": constants.DB_SCHEMA}

    id = db.Column(db.BigInteger, primary_key=True, autoincrement=True)

    page_id = db.Column(
        db.BigInteger,
        nullable=True,
        index=True,
        doc="Owning page, maintained by the ingestion job."
    )

    heading = db.Column(db.Text, nullable=True)

    content = db.Column(TEXT, nullable=False)

    token_count = db.Column(db.Integer, nullable=True)

    embedding = db.Column(Vector(constants.EMBEDDING_DIMENSION), nullable=True)

    def __repr__(self):
        return f"<PageSection {self.id} page={self.page_id}>"


# IVFFlat index for fast approximate cosine-similarity search
Index(
    "idx_page_section_embedding",
    PageSection.embedding,
    postgresql_using="ivfflat",
    postgresql_ops={"embedding": "vector_cosine_ops"}
)
