"""DuckDB connection management."""

from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL


def db_exists(path: str) -> bool:
    """Check if database file exists."""
    return path == ":memory:" or Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)


def connect(path: str, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a connection, creating the file and tables when needed."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        if path != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        read_only = False
    conn = duckdb.connect(path, read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conn
