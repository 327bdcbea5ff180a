from sqlmodel import Field
from sqlalchemy import UniqueConstraint
from app.model.base import BaseModel


class Empresa(BaseModel, table=True):
    """Modelo Empresa - raiz do multi-tenant (não tem empresa_id)."""

    __tablename__ = "empresa"

    # Código da empresa no SOC; preenchido na primeira sincronização de funcionários
    codigo: str | None = Field(default=None, max_length=20, nullable=True, index=True)
    nome: str = Field(max_length=200)

    __table_args__ = (
        UniqueConstraint("codigo", name="uq_empresa_codigo"),
    )
