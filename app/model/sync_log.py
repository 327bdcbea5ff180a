from datetime import datetime
from typing import Optional
import enum

import sqlalchemy as sa
from sqlmodel import SQLModel, Field

from app.model.base import utc_now


class SyncTipo(str, enum.Enum):
    FUNCIONARIOS = "funcionarios"
    ABSENTEISMO = "absenteismo"


class SyncStatus(str, enum.Enum):
    EM_ANDAMENTO = "em_andamento"
    CONCLUIDO = "concluido"
    ERRO = "erro"


class SyncLog(SQLModel, table=True):
    """
    Log de uma execução de sincronização com o SOC.

    Observações:
      - Nunca é removido.
      - Sai de `em_andamento` para `concluido` ou `erro` uma única vez.
    """

    __tablename__ = "sync_log"

    id: Optional[int] = Field(default=None, primary_key=True)
    empresa_id: int = Field(foreign_key="empresa.id", index=True)
    usuario_id: int | None = Field(default=None, foreign_key="usuario.id", nullable=True)

    # Persistir enums pelos *values* ("funcionarios", "em_andamento", etc)
    tipo: SyncTipo = Field(
        sa_type=sa.Enum(
            SyncTipo,
            name="sync_tipo",
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
        ),
    )
    status: SyncStatus = Field(
        default=SyncStatus.EM_ANDAMENTO,
        sa_type=sa.Enum(
            SyncStatus,
            name="sync_status",
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        index=True,
    )

    detalhes: str | None = Field(default=None, sa_type=sa.Text, nullable=True)
    mensagem_erro: str | None = Field(default=None, sa_type=sa.Text, nullable=True)
    total_registros: int = Field(default=0)
    registros_afetados: int = Field(default=0)

    data_inicio: datetime = Field(
        default_factory=utc_now,
        sa_type=sa.DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    data_fim: datetime | None = Field(
        default=None,
        sa_type=sa.DateTime(timezone=True),
        nullable=True,
    )
