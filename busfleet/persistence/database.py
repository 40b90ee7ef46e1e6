# Re-export the canonical database helpers so app code can depend on busfleet.persistence.database
from ..database import engine, create_db_and_tables, get_session

__all__ = [
    "engine",
    "create_db_and_tables",
    "get_session",
]


