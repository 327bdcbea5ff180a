from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field
from sqlalchemy import UniqueConstraint
from app.model.base import BaseModel


class Usuario(BaseModel, table=True):
    """Modelo Usuario - contas do sistema, sempre vinculadas a uma empresa."""

    __tablename__ = "usuario"

    nome: str = Field(max_length=100)
    email: str = Field(max_length=100, index=True)
    senha: str = Field(max_length=100)  # hash bcrypt
    cargo: str | None = Field(default=None, max_length=100, nullable=True)
    empresa_id: int = Field(foreign_key="empresa.id", index=True)
    is_admin: bool = Field(default=False)
    is_premium: bool = Field(default=False)
    ultimo_login: datetime | None = Field(
        default=None,
        sa_type=sa.DateTime(timezone=True),
        nullable=True,
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_usuario_email"),
    )
