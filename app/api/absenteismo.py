import logging
from datetime import date, datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, field_validator
from sqlmodel import Session

from app.api.sync import SyncResponse
from app.auth.dependencies import Principal, get_current_principal
from app.db.session import get_session
from app.lib.date_format import parse_date
from app.model.absenteismo import Absenteismo
from app.services.absenteismo_query import get_absenteismo_list_queries, get_absenteismo_with_nome
from app.services.soc_client import SocClient, get_soc_client
from app.services.stats_service import apply_visibility, get_absenteismo_stats
from app.services.sync_service import sync_absenteismo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/absenteismo", tags=["Absenteismo"])


class AbsenteismoResponse(BaseModel):
    id: int
    empresa_id: int
    funcionario_id: Optional[int] = None
    nome_funcionario: Optional[str] = None
    unidade: Optional[str] = None
    setor: Optional[str] = None
    matricula_func: Optional[str] = None
    dt_nascimento: Optional[date] = None
    sexo: Optional[int] = None
    tipo_atestado: Optional[int] = None
    dt_inicio_atestado: Optional[date] = None
    dt_fim_atestado: Optional[date] = None
    hora_inicio_atestado: Optional[str] = None
    hora_fim_atestado: Optional[str] = None
    dias_afastados: Optional[int] = None
    horas_afastado: Optional[str] = None
    cid_principal: Optional[str] = None
    descricao_cid: Optional[str] = None
    grupo_patologico: Optional[str] = None
    tipo_licenca: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_row(cls, absenteismo: Absenteismo, nome_funcionario: Optional[str]) -> "AbsenteismoResponse":
        return cls(**absenteismo.model_dump(), nome_funcionario=nome_funcionario)


class AbsenteismoListResponse(BaseModel):
    registros: list[AbsenteismoResponse]
    total: int


class AbsenteismoDetailResponse(BaseModel):
    registro: AbsenteismoResponse


class AbsenteismoSyncRequest(BaseModel):
    dataInicio: Optional[date] = None
    dataFim: Optional[date] = None

    @field_validator("dataInicio", "dataFim", mode="before")
    @classmethod
    def parse_data(cls, v: Any) -> Optional[date]:
        # Aceita YYYY-MM-DD e DD/MM/YYYY
        if v is None or isinstance(v, date):
            return v
        return parse_date(v)


@router.get("", response_model=AbsenteismoListResponse)
def list_absenteismo(
    data_inicio: Optional[date] = Query(None, alias="dataInicio", description="Início do atestado >= dataInicio"),
    data_fim: Optional[date] = Query(None, alias="dataFim", description="Fim do atestado <= dataFim"),
    setor: Optional[str] = Query(None, description="Filtrar por setor"),
    cid: Optional[str] = Query(None, description="Filtrar por CID principal"),
    limit: int = Query(100, ge=1, le=1000, description="Número máximo de itens"),
    offset: int = Query(0, ge=0, description="Offset para paginação"),
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    """Lista registros de absenteísmo da empresa, mais recentes primeiro."""
    query, count_query = get_absenteismo_list_queries(
        principal.empresa_id,
        data_inicio=data_inicio,
        data_fim=data_fim,
        setor=setor,
        cid=cid,
    )
    total = session.exec(count_query).one()
    rows = session.exec(query.limit(limit).offset(offset)).all()
    return AbsenteismoListResponse(
        registros=[AbsenteismoResponse.from_row(a, nome) for a, nome in rows],
        total=total,
    )


@router.get("/stats")
def stats(
    data_inicio: Optional[date] = Query(None, alias="dataInicio"),
    data_fim: Optional[date] = Query(None, alias="dataFim"),
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    """
    Indicadores de absenteísmo do período.

    Usuários sem assinatura premium recebem a versão reduzida
    (sem prejuízo financeiro e com top 5 em vez de top 10).
    """
    try:
        result = get_absenteismo_stats(session, principal.empresa_id, data_inicio=data_inicio, data_fim=data_fim)
        return apply_visibility(result, principal.is_premium)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[STATS] Erro ao calcular estatísticas empresa_id={principal.empresa_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Erro ao buscar estatísticas de absenteísmo") from e


@router.post("/sync", response_model=SyncResponse)
def sync(
    body: AbsenteismoSyncRequest,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
    soc_client: SocClient = Depends(get_soc_client),
):
    """
    Sincroniza atestados do período com a exportação SOC (máximo de 30 dias).
    Registros são sempre inseridos; sincronizar o mesmo período duas vezes duplica os dados.
    """
    try:
        result = sync_absenteismo(session, principal, soc_client, body.dataInicio, body.dataFim)
        return result.to_response()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[SYNC_ABSENTEISMO] Erro ao sincronizar empresa_id={principal.empresa_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={"message": "Erro ao sincronizar absenteísmo", "details": str(e)},
        ) from e


@router.get("/{absenteismo_id}", response_model=AbsenteismoDetailResponse)
def get_absenteismo(
    absenteismo_id: int,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    row = get_absenteismo_with_nome(session, absenteismo_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Registro de absenteísmo não encontrado")
    absenteismo, nome = row
    if absenteismo.empresa_id != principal.empresa_id:
        raise HTTPException(status_code=403, detail="Acesso negado")
    return AbsenteismoDetailResponse(registro=AbsenteismoResponse.from_row(absenteismo, nome))
