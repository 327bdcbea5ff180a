from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session

from app.auth.dependencies import Principal, get_current_principal
from app.db.session import get_session
from app.services.config_service import default_configuracao, get_configuracao, save_configuracao

router = APIRouter(prefix="/config", tags=["Config"])


class ConfiguracaoResponse(BaseModel):
    empresa_id: int
    chave_funcionario: Optional[str] = ""
    codigo_funcionario: Optional[str] = ""
    codigo_empresa_funcionario: str = ""
    flag_ativo: bool = True
    flag_inativo: bool = False
    flag_pendente: bool = False
    flag_ferias: bool = False
    flag_afastado: bool = False
    chave_absenteismo: Optional[str] = ""
    codigo_absenteismo: Optional[str] = ""
    codigo_empresa_absenteismo: str = ""
    codigo_empresa_principal: str = ""

    class Config:
        from_attributes = True


class ConfiguracaoEnvelope(BaseModel):
    config: ConfiguracaoResponse


class ConfiguracaoSaveResponse(BaseModel):
    message: str
    config: ConfiguracaoResponse


class ConfiguracaoUpdate(BaseModel):
    chave_funcionario: Optional[str] = None
    codigo_funcionario: Optional[str] = None
    codigo_empresa_funcionario: Optional[str] = None
    flag_ativo: bool = False
    flag_inativo: bool = False
    flag_pendente: bool = False
    flag_ferias: bool = False
    flag_afastado: bool = False
    chave_absenteismo: Optional[str] = None
    codigo_absenteismo: Optional[str] = None
    codigo_empresa_absenteismo: Optional[str] = None
    codigo_empresa_principal: Optional[str] = None


@router.get("", response_model=ConfiguracaoEnvelope)
def read_config(
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    """Configuração SOC da empresa; valores padrão quando ainda não foi salva."""
    config = get_configuracao(session, principal.empresa_id) or default_configuracao(principal.empresa_id)
    return ConfiguracaoEnvelope(config=ConfiguracaoResponse.model_validate(config))


@router.post("", response_model=ConfiguracaoSaveResponse)
def save_config(
    body: ConfiguracaoUpdate,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
):
    obrigatorios = (body.chave_funcionario, body.codigo_funcionario, body.chave_absenteismo, body.codigo_absenteismo)
    if any(not (v or "").strip() for v in obrigatorios):
        raise HTTPException(status_code=400, detail="Todos os campos de chave e código são obrigatórios")

    config = save_configuracao(session, principal.empresa_id, body.model_dump())
    return ConfiguracaoSaveResponse(
        message="Configurações salvas com sucesso",
        config=ConfiguracaoResponse.model_validate(config),
    )
