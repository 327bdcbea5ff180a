from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlmodel import Session

from app.auth.dependencies import Principal, get_current_principal
from app.db.session import get_session
from app.model.sync_log import SyncLog, SyncStatus, SyncTipo
from app.services.sync_log_service import list_sync_logs

router = APIRouter(prefix="/sync", tags=["Sync"])


class SyncResponse(BaseModel):
    message: str
    totalRegistros: int
    registrosAtualizados: int
    registrosComErro: int
    logId: int


class SyncLogResponse(BaseModel):
    id: int
    empresa_id: int
    usuario_id: Optional[int] = None
    tipo: SyncTipo
    status: SyncStatus
    detalhes: Optional[str] = None
    mensagem_erro: Optional[str] = None
    total_registros: int
    registros_afetados: int
    data_inicio: datetime
    data_fim: Optional[datetime] = None

    class Config:
        from_attributes = True


class SyncLogListResponse(BaseModel):
    logs: list[SyncLogResponse]


class SyncLogDetailResponse(BaseModel):
    log: SyncLogResponse


@router.get("", response_model=SyncLogListResponse)
def list_logs(
    limit: int = Query(10, ge=1, le=100, description="Número máximo de logs"),
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    """Últimas sincronizações da empresa, mais recentes primeiro."""
    logs = list_sync_logs(session, empresa_id=principal.empresa_id, limit=limit)
    return SyncLogListResponse(logs=[SyncLogResponse.model_validate(log) for log in logs])


@router.get("/{log_id}", response_model=SyncLogDetailResponse)
def get_log(
    log_id: int,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    log = session.get(SyncLog, log_id)
    if not log:
        raise HTTPException(status_code=404, detail="Log de sincronização não encontrado")
    if log.empresa_id != principal.empresa_id:
        raise HTTPException(status_code=403, detail="Você não tem permissão para acessar este log")
    return SyncLogDetailResponse(log=SyncLogResponse.model_validate(log))
