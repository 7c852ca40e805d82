"""
Pydantic schemas for user records.

Field names follow the columns of the ``usuarios`` table (``nombre``,
``telefono``, ``email``).  Request bodies additionally accept the
English spellings ``name`` and ``phone``; when both spellings are
sent, the column name wins.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class UsuarioIn(BaseModel):
    """Request body for creating or updating a user.

    Every field is optional at the schema level: required-field checks
    for creation are done by ``UsuarioService`` so that a missing name
    or email produces the service's own 400 message.  On update, an
    omitted field is written as NULL.  Numeric values are accepted and
    kept in their text form.
    """

    model_config = ConfigDict(extra="ignore")

    nombre: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("nombre", "name"),
        description="Full name of the user",
    )
    telefono: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("telefono", "phone"),
        description="Contact phone number",
    )
    email: Optional[str] = Field(None, description="Contact e-mail address")

    @field_validator("nombre", "telefono", "email", mode="before")
    @classmethod
    def numbers_as_text(cls, v):
        # Phone numbers often arrive as JSON numbers; the columns are text.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class UsuarioRead(BaseModel):
    """A row of the ``usuarios`` table."""

    id: int
    nombre: Optional[str]
    telefono: Optional[str] = None
    email: Optional[str]


class MessageResponse(BaseModel):
    """Plain confirmation returned by update and delete."""

    message: str
