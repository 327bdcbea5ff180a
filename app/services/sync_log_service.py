from __future__ import annotations

import logging
from datetime import timedelta

from sqlmodel import Session, select

from app.model.base import as_utc, utc_now
from app.model.sync_log import SyncLog, SyncStatus, SyncTipo

logger = logging.getLogger(__name__)

MENSAGEM_INTERROMPIDA = "Sincronização interrompida"


class SyncLogStateError(RuntimeError):
    """Tentativa de finalizar um log que já saiu de em_andamento."""


def start_sync_log(
    session: Session,
    *,
    tipo: SyncTipo,
    empresa_id: int,
    usuario_id: int | None,
    detalhes: str,
) -> SyncLog:
    log = SyncLog(
        tipo=tipo,
        empresa_id=empresa_id,
        usuario_id=usuario_id,
        status=SyncStatus.EM_ANDAMENTO,
        detalhes=detalhes,
        data_inicio=utc_now(),
    )
    session.add(log)
    session.commit()
    session.refresh(log)
    return log


def finish_sync_log(
    session: Session,
    log: SyncLog,
    *,
    status: SyncStatus,
    detalhes: str,
    registros_afetados: int = 0,
    total_registros: int = 0,
    mensagem_erro: str | None = None,
) -> SyncLog:
    """
    Transição terminal em_andamento -> concluido | erro.

    Raises:
        SyncLogStateError: se o log não está em_andamento ou o status não é terminal
    """
    if status == SyncStatus.EM_ANDAMENTO:
        raise SyncLogStateError("Status final precisa ser concluido ou erro")
    session.refresh(log)
    if log.status != SyncStatus.EM_ANDAMENTO:
        raise SyncLogStateError(f"Log {log.id} já finalizado com status={log.status.value}")

    log.status = status
    log.detalhes = detalhes
    log.mensagem_erro = mensagem_erro
    log.registros_afetados = registros_afetados
    log.total_registros = total_registros
    log.data_fim = utc_now()
    session.add(log)
    session.commit()
    session.refresh(log)
    return log


def recover_stale_sync_logs(session: Session, *, empresa_id: int, stale_minutes: int) -> int:
    """
    Marca como erro os logs da empresa presos em em_andamento há mais de `stale_minutes`.

    Cobre o caso de processo derrubado no meio da sincronização.
    """
    cutoff = utc_now() - timedelta(minutes=stale_minutes)
    rows = session.exec(
        select(SyncLog).where(
            SyncLog.empresa_id == empresa_id,
            SyncLog.status == SyncStatus.EM_ANDAMENTO,
        )
    ).all()

    recovered = 0
    for log in rows:
        if as_utc(log.data_inicio) >= cutoff:
            continue
        log.status = SyncStatus.ERRO
        log.mensagem_erro = MENSAGEM_INTERROMPIDA
        log.data_fim = utc_now()
        session.add(log)
        recovered += 1

    if recovered:
        session.commit()
        logger.warning(f"[SYNC] {recovered} log(s) em_andamento marcados como erro (empresa_id={empresa_id})")
    return recovered


def list_sync_logs(session: Session, *, empresa_id: int, limit: int = 10) -> list[SyncLog]:
    return list(
        session.exec(
            select(SyncLog)
            .where(SyncLog.empresa_id == empresa_id)
            .order_by(SyncLog.data_inicio.desc(), SyncLog.id.desc())
            .limit(limit)
        ).all()
    )
