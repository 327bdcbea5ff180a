from __future__ import annotations

from typing import Any

from sqlmodel import Session, select

from app.model.base import utc_now
from app.model.configuracao_api import ConfiguracaoApi

# Campos gravados a partir do POST /config
CONFIG_CAMPOS: tuple[str, ...] = (
    "chave_funcionario",
    "codigo_funcionario",
    "codigo_empresa_funcionario",
    "flag_ativo",
    "flag_inativo",
    "flag_pendente",
    "flag_ferias",
    "flag_afastado",
    "chave_absenteismo",
    "codigo_absenteismo",
    "codigo_empresa_absenteismo",
    "codigo_empresa_principal",
)


def get_configuracao(session: Session, empresa_id: int) -> ConfiguracaoApi | None:
    return session.exec(
        select(ConfiguracaoApi).where(ConfiguracaoApi.empresa_id == empresa_id)
    ).first()


def default_configuracao(empresa_id: int) -> ConfiguracaoApi:
    """Configuração vazia (não persistida) para empresas que ainda não salvaram nada."""
    return ConfiguracaoApi(
        empresa_id=empresa_id,
        chave_funcionario="",
        codigo_funcionario="",
        chave_absenteismo="",
        codigo_absenteismo="",
    )


def save_configuracao(session: Session, empresa_id: int, values: dict[str, Any]) -> ConfiguracaoApi:
    """Cria ou atualiza a configuração da empresa (upsert por empresa_id)."""
    config = get_configuracao(session, empresa_id)
    if config is None:
        config = ConfiguracaoApi(empresa_id=empresa_id)

    for campo in CONFIG_CAMPOS:
        if campo in values and values[campo] is not None:
            value = values[campo]
            setattr(config, campo, value.strip() if isinstance(value, str) else value)

    config.updated_at = utc_now()
    session.add(config)
    session.commit()
    session.refresh(config)
    return config
