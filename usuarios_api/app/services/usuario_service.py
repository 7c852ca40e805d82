"""
Business logic for user records.

Each public method of ``UsuarioService`` issues exactly one SQL
statement against the ``usuarios`` table.  All values are passed as
bound parameters.  Driver calls are blocking, so they run in the
threadpool and a request waiting on the store does not hold up the
event loop.  Any ``SQLAlchemyError`` is re-raised as ``StoreError``.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from usuarios_api.app.core.db import get_connection
from usuarios_api.app.core.errors import ClientError, StoreError
from usuarios_api.app.schemas.usuario import UsuarioIn, UsuarioRead

logger = logging.getLogger(__name__)

T = TypeVar("T")

MISSING_FIELDS_MESSAGE = "Nombre y email son obligatorios"

SELECT_ALL = text("SELECT id, nombre, telefono, email FROM usuarios ORDER BY id")
SELECT_ONE = text("SELECT id, nombre, telefono, email FROM usuarios WHERE id = :id")
INSERT = text("INSERT INTO usuarios (nombre, telefono, email) VALUES (:nombre, :telefono, :email)")
UPDATE = text(
    "UPDATE usuarios SET nombre = :nombre, telefono = :telefono, email = :email WHERE id = :id"
)
DELETE = text("DELETE FROM usuarios WHERE id = :id")


class UsuarioService:
    """CRUD operations over the ``usuarios`` table."""

    @classmethod
    async def list_usuarios(cls) -> List[UsuarioRead]:
        """Return every record in insertion order."""

        def query(conn: Connection) -> List[UsuarioRead]:
            rows = conn.execute(SELECT_ALL).mappings().all()
            return [cls._row_to_usuario(row) for row in rows]

        return await cls._run(query)

    @classmethod
    async def get_usuario(cls, usuario_id: int) -> Optional[UsuarioRead]:
        """Return the record with ``usuario_id`` or ``None``."""

        def query(conn: Connection) -> Optional[UsuarioRead]:
            row = conn.execute(SELECT_ONE, {"id": usuario_id}).mappings().first()
            return cls._row_to_usuario(row) if row is not None else None

        return await cls._run(query)

    @classmethod
    async def create_usuario(cls, data: UsuarioIn) -> UsuarioRead:
        """Insert a new record and return it with the generated id.

        ``nombre`` and ``email`` must be present and non-empty;
        otherwise ``ClientError`` is raised before touching the store.
        ``telefono`` is echoed back only when the request carried it, so
        an omitted phone stays unset on the returned model.
        """
        if not data.nombre or not data.email:
            raise ClientError(MISSING_FIELDS_MESSAGE)
        params = {"nombre": data.nombre, "telefono": data.telefono, "email": data.email}

        def query(conn: Connection) -> int:
            return conn.execute(INSERT, params).lastrowid

        new_id = await cls._run(query)
        logger.info("Created usuario %s", new_id)
        echoed = {key: value for key, value in params.items() if key in data.model_fields_set}
        return UsuarioRead(id=new_id, **echoed)

    @classmethod
    async def update_usuario(cls, usuario_id: int, data: UsuarioIn) -> int:
        """Overwrite all mutable fields of a record.

        Returns the number of affected rows; zero is not an error.
        """
        params = {
            "nombre": data.nombre,
            "telefono": data.telefono,
            "email": data.email,
            "id": usuario_id,
        }

        def query(conn: Connection) -> int:
            return conn.execute(UPDATE, params).rowcount

        affected = await cls._run(query)
        logger.info("Updated usuario %s (%s row(s) affected)", usuario_id, affected)
        return affected

    @classmethod
    async def delete_usuario(cls, usuario_id: int) -> int:
        """Delete a record and return the number of affected rows."""

        def query(conn: Connection) -> int:
            return conn.execute(DELETE, {"id": usuario_id}).rowcount

        affected = await cls._run(query)
        logger.info("Deleted usuario %s (%s row(s) affected)", usuario_id, affected)
        return affected

    @staticmethod
    async def _run(query: Callable[[Connection], T]) -> T:
        """Run ``query`` on a scoped connection in the threadpool."""

        def call() -> T:
            try:
                with get_connection() as conn:
                    return query(conn)
            except SQLAlchemyError as exc:
                raise StoreError(str(getattr(exc, "orig", None) or exc)) from exc

        return await run_in_threadpool(call)

    @staticmethod
    def _row_to_usuario(row: Mapping[str, Any]) -> UsuarioRead:
        return UsuarioRead(
            id=row["id"],
            nombre=row["nombre"],
            telefono=row["telefono"],
            email=row["email"],
        )
