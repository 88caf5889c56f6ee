"""
SQLAlchemy ORM Models for the Pool Store

Each app keeps three JSON documents: the active pool, the archived pool
and the metadata (settings + stats). A document is always read and
written whole.
"""

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class PoolDocument(Base):
    """
    One stored document for an app.

    `payload` holds the document exactly as the models serialize it,
    e.g. {"version": "1.0", "lastUpdated": "...", "words": [...]}.
    """
    __tablename__ = 'pool_documents'

    # Primary key: composite of app name and document name
    app_name = Column(String(50), primary_key=True, nullable=False)
    document = Column(String(20), primary_key=True, nullable=False)  # active | archived | metadata

    version = Column(String(10), nullable=False)
    payload = Column(JSON, nullable=False)
    last_updated = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<PoolDocument({self.app_name}, {self.document}, v{self.version})>"
