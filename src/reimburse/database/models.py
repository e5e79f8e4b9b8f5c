"""SQLAlchemy models for the ownership configuration store."""

from datetime import datetime, UTC
from sqlalchemy import Column, String, DateTime, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class AccountType(Base):
    """Ownership tag for a budget account."""

    __tablename__ = "account_types"

    target_id = Column(String, primary_key=True)
    ownership_type = Column(String, nullable=False, default="Unset")
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class CategoryType(Base):
    """Ownership tag for a budget category."""

    __tablename__ = "category_types"

    target_id = Column(String, primary_key=True)
    ownership_type = Column(String, nullable=False, default="Unset")
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class CategoryGroupType(Base):
    """Ownership tag for a budget category group."""

    __tablename__ = "category_group_types"

    target_id = Column(String, primary_key=True)
    ownership_type = Column(String, nullable=False, default="Unset")
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
