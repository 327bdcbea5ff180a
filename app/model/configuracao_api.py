from sqlmodel import Field
from sqlalchemy import UniqueConstraint
from app.model.base import BaseModel


class ConfiguracaoApi(BaseModel, table=True):
    """Credenciais e filtros das exportações SOC (uma por empresa)."""

    __tablename__ = "configuracao_api"

    empresa_id: int = Field(foreign_key="empresa.id", index=True)

    # Exportação de funcionários
    chave_funcionario: str | None = Field(default=None, max_length=100, nullable=True)
    codigo_funcionario: str | None = Field(default=None, max_length=100, nullable=True)
    codigo_empresa_funcionario: str = Field(default="", max_length=100)
    flag_ativo: bool = Field(default=True)
    flag_inativo: bool = Field(default=False)
    flag_pendente: bool = Field(default=False)
    flag_ferias: bool = Field(default=False)
    flag_afastado: bool = Field(default=False)

    # Exportação de absenteísmo
    chave_absenteismo: str | None = Field(default=None, max_length=100, nullable=True)
    codigo_absenteismo: str | None = Field(default=None, max_length=100, nullable=True)
    codigo_empresa_absenteismo: str = Field(default="", max_length=100)
    codigo_empresa_principal: str = Field(default="", max_length=100)

    __table_args__ = (
        UniqueConstraint("empresa_id", name="uq_configuracao_api_empresa"),
    )
