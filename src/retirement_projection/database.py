"""
Database configuration and models for persisted projection settings.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import Column, Integer, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from .config import DATABASE_URL

# Data directory relative to project root
DATA_DIR = Path(__file__).parent.parent.parent / "data"
DB_PATH = DATA_DIR / "settings.db"

# Base class for SQLAlchemy models
Base = declarative_base()


class SettingRow(Base):
    """One persisted setting: a form field name and its JSON-encoded value"""
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(64), unique=True, nullable=False)
    value = Column(Text, nullable=False)


def make_engine(url: Optional[str] = None) -> Engine:
    """Create an engine and its tables; defaults to the sqlite file under data/."""
    if not url:
        DATA_DIR.mkdir(exist_ok=True)
        url = f"sqlite:///{DB_PATH}"
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    db_engine = create_engine(url, connect_args=connect_args)
    # Create tables if they don't exist
    Base.metadata.create_all(db_engine)
    return db_engine


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the application engine."""
    global _engine
    if _engine is None:
        _engine = make_engine(DATABASE_URL)
    return _engine
