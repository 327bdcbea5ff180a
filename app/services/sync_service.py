"""
Sincronização de funcionários e absenteísmo a partir da exportação SOC.

Fluxo de cada sincronização:
  1. valida entrada e credenciais (sem criar log em caso de erro)
  2. cria SyncLog em_andamento
  3. consulta o SOC (sem retry)
  4. grava registro a registro, cada um com seu próprio commit
  5. finaliza o SyncLog (concluido | erro)

Falhas de um registro não interrompem o lote; o total gravado fica no log.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from fastapi import HTTPException
from sqlmodel import Session, select

from app.auth.dependencies import Principal
from app.config import get_config
from app.lib.date_format import diff_days
from app.model.absenteismo import Absenteismo
from app.model.base import utc_now
from app.model.funcionario import Funcionario
from app.model.sync_log import SyncLog, SyncStatus, SyncTipo
from app.services.config_service import get_configuracao
from app.services.empresa_service import ensure_empresa_for_sync
from app.services.soc_client import (
    SocClient,
    SocRequestError,
    SocResponseError,
    build_absenteismo_params,
    build_funcionario_params,
)
from app.services.soc_mapping import map_absenteismo, map_funcionario, to_str
from app.services.sync_log_service import (
    SyncLogStateError,
    finish_sync_log,
    recover_stale_sync_logs,
    start_sync_log,
)

logger = logging.getLogger(__name__)

MAX_PERIODO_DIAS = 30


@dataclass
class SyncResult:
    log_id: int
    total_registros: int
    registros_atualizados: int
    registros_com_erro: int
    message: str

    def to_response(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "totalRegistros": self.total_registros,
            "registrosAtualizados": self.registros_atualizados,
            "registrosComErro": self.registros_com_erro,
            "logId": self.log_id,
        }


def _safe_error_message(e: Exception, max_len: int = 500) -> str:
    msg = f"{type(e).__name__}: {str(e)}".strip()
    return msg[:max_len]


def validate_periodo(data_inicio: date | None, data_fim: date | None) -> None:
    """Período obrigatório, não vazio e com no máximo 30 dias corridos."""
    if not data_inicio or not data_fim:
        raise HTTPException(status_code=400, detail="Data inicial e final são obrigatórias")
    dias = diff_days(data_inicio, data_fim)
    if dias < 0:
        raise HTTPException(status_code=400, detail="A data final deve ser igual ou posterior à data inicial")
    if dias > MAX_PERIODO_DIAS:
        raise HTTPException(status_code=400, detail="O intervalo máximo entre as datas é de 30 dias")


def _finish_log(session: Session, log: SyncLog, **kwargs: Any) -> None:
    """
    Transição terminal do log da sincronização em curso.

    Se a recuperação de logs presos já marcou este log como interrompido,
    o resultado real do lote só fica no aviso; os registros gravados valem.
    """
    try:
        finish_sync_log(session, log, **kwargs)
    except SyncLogStateError as e:
        logger.warning(
            f"[SYNC] log_id={log.id} não atualizado para {kwargs['status'].value} "
            f"(afetados={kwargs.get('registros_afetados', 0)}, total={kwargs.get('total_registros', 0)}): {e}"
        )


def _fetch_rows(session: Session, log: SyncLog, soc_client: SocClient, params: dict[str, str]) -> list[dict]:
    """Consulta o SOC; em falha finaliza o log com erro e levanta HTTPException."""
    try:
        return soc_client.exportar_dados(params)
    except SocResponseError as e:
        _finish_log(
            session,
            log,
            status=SyncStatus.ERRO,
            detalhes="Resposta da API inválida ou vazia",
            mensagem_erro=e.raw,
            registros_afetados=0,
        )
        raise HTTPException(status_code=400, detail=str(e)) from e
    except SocRequestError as e:
        _finish_log(
            session,
            log,
            status=SyncStatus.ERRO,
            detalhes="Erro na chamada à API SOC",
            mensagem_erro=str(e),
            registros_afetados=0,
        )
        raise HTTPException(
            status_code=500,
            detail={"message": "Erro ao chamar a API SOC", "details": str(e)},
        ) from e


def _fail_unexpected(session: Session, log: SyncLog, e: Exception) -> None:
    session.rollback()
    logger.error(f"[SYNC] Erro inesperado no log_id={log.id}: {e}", exc_info=True)
    _finish_log(
        session,
        log,
        status=SyncStatus.ERRO,
        detalhes="Erro inesperado durante a sincronização",
        mensagem_erro=_safe_error_message(e),
        registros_afetados=0,
    )


def _upsert_funcionario(session: Session, empresa_id: int, data: dict[str, Any]) -> Funcionario:
    existing = session.exec(
        select(Funcionario).where(
            Funcionario.codigo == data["codigo"],
            Funcionario.empresa_id == empresa_id,
        )
    ).first()

    if existing:
        # Só sobrescreve com valores presentes na exportação
        for column, value in data.items():
            if value is not None:
                setattr(existing, column, value)
        existing.updated_at = utc_now()
        funcionario = existing
    else:
        funcionario = Funcionario(empresa_id=empresa_id, **data)

    session.add(funcionario)
    session.commit()
    return funcionario


def sync_funcionarios(session: Session, principal: Principal, soc_client: SocClient) -> SyncResult:
    """Importa funcionários do SOC para a empresa do usuário (upsert por codigo)."""
    empresa_id = principal.empresa_id
    config = get_configuracao(session, empresa_id)
    if not config or not to_str(config.chave_funcionario) or not to_str(config.codigo_funcionario):
        raise HTTPException(status_code=400, detail="Configure os parâmetros da API de funcionários")

    recover_stale_sync_logs(session, empresa_id=empresa_id, stale_minutes=get_config().sync_stale_minutes)
    log = start_sync_log(
        session,
        tipo=SyncTipo.FUNCIONARIOS,
        empresa_id=empresa_id,
        usuario_id=principal.usuario_id,
        detalhes="Iniciando sincronização de funcionários",
    )
    logger.info(f"[SYNC_FUNCIONARIOS] Iniciando log_id={log.id}, empresa_id={empresa_id}")

    params = build_funcionario_params(config)
    rows = _fetch_rows(session, log, soc_client, params)

    try:
        primeiro = rows[0] if rows and isinstance(rows[0], dict) else {}
        try:
            ensure_empresa_for_sync(
                session,
                empresa_id=empresa_id,
                codigo=params["empresa"],
                nome=to_str(primeiro.get("NOMEEMPRESA")),
            )
        except HTTPException as e:
            session.rollback()
            _finish_log(
                session,
                log,
                status=SyncStatus.ERRO,
                detalhes="Não foi possível registrar a empresa",
                mensagem_erro=str(e.detail),
                total_registros=len(rows),
            )
            raise

        gravados = 0
        erros = 0
        for i, row in enumerate(rows):
            try:
                data = map_funcionario(row)
                _upsert_funcionario(session, empresa_id, data)
                gravados += 1
            except Exception as e:
                session.rollback()
                erros += 1
                codigo = row.get("CODIGO") if isinstance(row, dict) else None
                logger.warning(f"[SYNC_FUNCIONARIOS] Registro {i} (CODIGO={codigo}) ignorado: {e}")

        _finish_log(
            session,
            log,
            status=SyncStatus.CONCLUIDO,
            detalhes=(
                f"Sincronização concluída. Processados {len(rows)} funcionários "
                f"({gravados} gravados, {erros} com erro)."
            ),
            registros_afetados=gravados,
            total_registros=len(rows),
        )
    except HTTPException:
        raise
    except Exception as e:
        _fail_unexpected(session, log, e)
        raise

    logger.info(f"[SYNC_FUNCIONARIOS] Concluído log_id={log.id}: {gravados}/{len(rows)} gravados")
    return SyncResult(
        log_id=log.id,
        total_registros=len(rows),
        registros_atualizados=gravados,
        registros_com_erro=erros,
        message="Sincronização de funcionários realizada com sucesso",
    )


def _resolve_funcionario_id(
    session: Session,
    empresa_id: int,
    matricula: str | None,
    cache: dict[str, int | None],
) -> int | None:
    if not matricula:
        return None
    if matricula not in cache:
        cache[matricula] = session.exec(
            select(Funcionario.id).where(
                Funcionario.matriculafuncionario == matricula,
                Funcionario.empresa_id == empresa_id,
            ).limit(1)
        ).first()
    return cache[matricula]


def sync_absenteismo(
    session: Session,
    principal: Principal,
    soc_client: SocClient,
    data_inicio: date | None,
    data_fim: date | None,
) -> SyncResult:
    """Importa atestados do período (máx. 30 dias). Registros são sempre inseridos."""
    validate_periodo(data_inicio, data_fim)

    empresa_id = principal.empresa_id
    config = get_configuracao(session, empresa_id)
    if not config or not to_str(config.chave_absenteismo) or not to_str(config.codigo_absenteismo):
        raise HTTPException(status_code=400, detail="Configure os parâmetros da API de absenteísmo")

    recover_stale_sync_logs(session, empresa_id=empresa_id, stale_minutes=get_config().sync_stale_minutes)
    log = start_sync_log(
        session,
        tipo=SyncTipo.ABSENTEISMO,
        empresa_id=empresa_id,
        usuario_id=principal.usuario_id,
        detalhes=(
            "Iniciando sincronização de absenteísmo para o período de "
            f"{data_inicio.isoformat()} a {data_fim.isoformat()}"
        ),
    )
    logger.info(f"[SYNC_ABSENTEISMO] Iniciando log_id={log.id}, empresa_id={empresa_id}, periodo={data_inicio}..{data_fim}")

    params = build_absenteismo_params(config, data_inicio, data_fim)
    rows = _fetch_rows(session, log, soc_client, params)

    try:
        matriculas: dict[str, int | None] = {}
        gravados = 0
        erros = 0
        for i, row in enumerate(rows):
            try:
                data = map_absenteismo(row)
                funcionario_id = _resolve_funcionario_id(session, empresa_id, data["matricula_func"], matriculas)
                session.add(Absenteismo(empresa_id=empresa_id, funcionario_id=funcionario_id, **data))
                session.commit()
                gravados += 1
            except Exception as e:
                session.rollback()
                erros += 1
                logger.warning(f"[SYNC_ABSENTEISMO] Registro {i} ignorado: {e}")

        _finish_log(
            session,
            log,
            status=SyncStatus.CONCLUIDO,
            detalhes=(
                f"Sincronização concluída. Processados {len(rows)} registros de absenteísmo "
                f"({gravados} gravados, {erros} com erro)."
            ),
            registros_afetados=gravados,
            total_registros=len(rows),
        )
    except Exception as e:
        _fail_unexpected(session, log, e)
        raise

    logger.info(f"[SYNC_ABSENTEISMO] Concluído log_id={log.id}: {gravados}/{len(rows)} gravados")
    return SyncResult(
        log_id=log.id,
        total_registros=len(rows),
        registros_atualizados=gravados,
        registros_com_erro=erros,
        message="Sincronização de absenteísmo realizada com sucesso",
    )
