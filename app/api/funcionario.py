import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session, select

from app.api.sync import SyncResponse
from app.auth.dependencies import Principal, get_current_principal
from app.db.session import get_session
from app.model.funcionario import Funcionario
from app.services.soc_client import SocClient, get_soc_client
from app.services.sync_service import sync_funcionarios

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/funcionarios", tags=["Funcionario"])


class FuncionarioResponse(BaseModel):
    id: int
    empresa_id: int
    codigo: str
    nome: str
    matriculafuncionario: Optional[str] = None
    cpf: Optional[str] = None
    situacao: Optional[str] = None
    nomeempresa: Optional[str] = None
    nomeunidade: Optional[str] = None
    nomesetor: Optional[str] = None
    nomecargo: Optional[str] = None
    sexo: Optional[int] = None
    data_nascimento: Optional[date] = None
    data_admissao: Optional[date] = None
    data_demissao: Optional[date] = None
    email: Optional[str] = None
    telefonecelular: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FuncionarioDetailResponse(FuncionarioResponse):
    codigoempresa: Optional[str] = None
    codigounidade: Optional[str] = None
    codigosetor: Optional[str] = None
    codigocargo: Optional[str] = None
    cbocargo: Optional[str] = None
    ccusto: Optional[str] = None
    nomecentrocusto: Optional[str] = None
    rg: Optional[str] = None
    ufrg: Optional[str] = None
    orgaoemissorrg: Optional[str] = None
    pis: Optional[str] = None
    ctps: Optional[str] = None
    seriectps: Optional[str] = None
    estadocivil: Optional[int] = None
    tipocontatacao: Optional[int] = None
    endereco: Optional[str] = None
    numero_endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    cep: Optional[str] = None
    telefoneresidencial: Optional[str] = None
    deficiente: Optional[int] = None
    deficiencia: Optional[str] = None
    nm_mae_funcionario: Optional[str] = None
    dataultalteracao: Optional[date] = None
    matricularh: Optional[str] = None
    cor: Optional[int] = None
    escolaridade: Optional[int] = None
    naturalidade: Optional[str] = None
    ramal: Optional[str] = None
    regimerevezamento: Optional[int] = None
    regimetrabalho: Optional[str] = None
    telcomercial: Optional[str] = None
    turnotrabalho: Optional[int] = None
    rhunidade: Optional[str] = None
    rhsetor: Optional[str] = None
    rhcargo: Optional[str] = None
    rhcentrocustounidade: Optional[str] = None


class FuncionarioListResponse(BaseModel):
    funcionarios: list[FuncionarioResponse]


class FuncionarioDetailEnvelope(BaseModel):
    funcionario: FuncionarioDetailResponse


@router.get("", response_model=FuncionarioListResponse)
def list_funcionarios(
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    """Lista os funcionários da empresa do usuário, por nome."""
    items = session.exec(
        select(Funcionario)
        .where(Funcionario.empresa_id == principal.empresa_id)
        .order_by(Funcionario.nome)
    ).all()
    return FuncionarioListResponse(
        funcionarios=[FuncionarioResponse.model_validate(f) for f in items],
    )


@router.get("/{funcionario_id}", response_model=FuncionarioDetailEnvelope)
def get_funcionario(
    funcionario_id: int,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    funcionario = session.get(Funcionario, funcionario_id)
    if not funcionario:
        raise HTTPException(status_code=404, detail="Funcionário não encontrado")
    if funcionario.empresa_id != principal.empresa_id:
        raise HTTPException(status_code=403, detail="Acesso negado")
    return FuncionarioDetailEnvelope(funcionario=FuncionarioDetailResponse.model_validate(funcionario))


@router.post("/sync", response_model=SyncResponse)
def sync(
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
    soc_client: SocClient = Depends(get_soc_client),
):
    """
    Sincroniza funcionários com a exportação SOC.
    Roda de forma síncrona: a resposta só volta quando o lote termina.
    """
    try:
        result = sync_funcionarios(session, principal, soc_client)
        return result.to_response()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[SYNC_FUNCIONARIOS] Erro ao sincronizar empresa_id={principal.empresa_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={"message": "Erro ao sincronizar funcionários", "details": str(e)},
        ) from e
