"""
User endpoints.

Five routes map one-to-one onto ``UsuarioService`` operations.  A
missing record on lookup raises ``NotFound``; store failures surface
as ``StoreError`` and are rendered by the handlers registered in
``core.errors``.  Update and delete confirm success whenever the
statement executes, whether or not a row matched.
"""

from typing import List, Optional

from fastapi import APIRouter, status

from usuarios_api.app.core.errors import NotFound
from usuarios_api.app.schemas.usuario import MessageResponse, UsuarioIn, UsuarioRead
from usuarios_api.app.services.usuario_service import UsuarioService

router = APIRouter()

NOT_FOUND_MESSAGE = "Usuario no encontrado"


@router.get("", response_model=List[UsuarioRead])
async def list_usuarios() -> List[UsuarioRead]:
    """Return all users."""
    return await UsuarioService.list_usuarios()


@router.get("/{usuario_id}", response_model=UsuarioRead)
async def get_usuario(usuario_id: int) -> UsuarioRead:
    """Return a single user or 404."""
    usuario = await UsuarioService.get_usuario(usuario_id)
    if usuario is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return usuario


@router.post(
    "",
    response_model=UsuarioRead,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_usuario(data: Optional[UsuarioIn] = None) -> UsuarioRead:
    """Create a user; ``nombre`` and ``email`` are required."""
    # An absent body is handled like ``{}`` so it gets the same 400 message.
    return await UsuarioService.create_usuario(data or UsuarioIn())


@router.put("/{usuario_id}", response_model=MessageResponse)
async def update_usuario(usuario_id: int, data: Optional[UsuarioIn] = None) -> MessageResponse:
    """Overwrite a user's fields."""
    await UsuarioService.update_usuario(usuario_id, data or UsuarioIn())
    return MessageResponse(message="Usuario actualizado correctamente")


@router.delete("/{usuario_id}", response_model=MessageResponse)
async def delete_usuario(usuario_id: int) -> MessageResponse:
    """Delete a user."""
    await UsuarioService.delete_usuario(usuario_id)
    return MessageResponse(message="Usuario eliminado correctamente")
