"""
Relational store integration.

This module owns the process-wide SQLAlchemy ``Engine`` built from
``settings.sqlalchemy_url`` (MySQL through PyMySQL by default) and
hands out connections through the ``get_connection`` context manager.
Every connection is scoped to a single operation: it is committed on
success, rolled back on error and returned to the pool on every exit
path.

The schema is owned by the store; this module never creates or
alters tables.  The expected table is::

    CREATE TABLE usuarios (
        id INT AUTO_INCREMENT PRIMARY KEY,
        nombre VARCHAR(255) NOT NULL,
        telefono VARCHAR(50),
        email VARCHAR(255) NOT NULL
    );
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the shared engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine(settings.sqlalchemy_url, pool_pre_ping=True, future=True)
    return _engine


def set_engine(engine: Optional[Engine]) -> None:
    """Replace the shared engine (``None`` resets to lazy creation)."""
    global _engine
    if _engine is not None and _engine is not engine:
        _engine.dispose()
    _engine = engine


@contextmanager
def get_connection() -> Iterator[Connection]:
    """Yield a connection inside a transaction scoped to one operation."""
    with get_engine().begin() as conn:
        yield conn


def check_connection() -> bool:
    """Try to reach the store once and log the outcome.

    Used at application startup.  A failure is logged and reported as
    ``False``; it is not retried and does not stop the server.
    """
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Error al conectar con la base de datos: %s", exc)
        return False
    logger.info("Conectado a la base de datos")
    return True
