from datetime import date

from sqlmodel import Field
from app.model.base import BaseModel


class Absenteismo(BaseModel, table=True):
    """Registro de atestado/afastamento importado da exportação SOC (append-only)."""

    __tablename__ = "absenteismo"

    empresa_id: int = Field(foreign_key="empresa.id", index=True)
    # Vínculo best-effort por matrícula; pode permanecer NULL
    funcionario_id: int | None = Field(default=None, foreign_key="funcionario.id", nullable=True, index=True)

    unidade: str | None = Field(default=None, max_length=130)
    setor: str | None = Field(default=None, max_length=130)
    matricula_func: str | None = Field(default=None, max_length=30, index=True)
    dt_nascimento: date | None = None
    sexo: int | None = None
    tipo_atestado: int | None = None
    dt_inicio_atestado: date | None = Field(default=None, index=True)
    dt_fim_atestado: date | None = Field(default=None, index=True)
    hora_inicio_atestado: str | None = Field(default=None, max_length=5)
    hora_fim_atestado: str | None = Field(default=None, max_length=5)
    dias_afastados: int | None = None
    horas_afastado: str | None = Field(default=None, max_length=5)
    cid_principal: str | None = Field(default=None, max_length=10, index=True)
    descricao_cid: str | None = Field(default=None, max_length=264)
    grupo_patologico: str | None = Field(default=None, max_length=80)
    tipo_licenca: str | None = Field(default=None, max_length=100)
