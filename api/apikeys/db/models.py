"""SQLAlchemy models for the API Key Directory schema."""

from sqlalchemy import Column, Text, Integer, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Create base class for models
Base = declarative_base()


class APIKey(Base):
    """API keys table model."""
    __tablename__ = 'api_keys'

    # "C" collation keeps index order equal to code point order
    id = Column(Text(collation='C'), primary_key=True)
    key = Column(Text, nullable=False, unique=True)
    usage_count = Column(Integer, nullable=False, server_default='0')
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
