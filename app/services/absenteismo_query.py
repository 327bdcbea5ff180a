"""
Query compartilhada para Absenteismo: listagem paginada e detalhe.
Cada linha vem com o nome do funcionário vinculado (LEFT JOIN, pode ser None).
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.model.absenteismo import Absenteismo
from app.model.funcionario import Funcionario


def get_absenteismo_list_queries(
    empresa_id: int,
    *,
    data_inicio: Optional[date] = None,
    data_fim: Optional[date] = None,
    setor: Optional[str] = None,
    cid: Optional[str] = None,
):
    """
    Retorna (query, count_query) com os filtros aplicados.
    `query` seleciona (Absenteismo, nome_funcionario) ordenado por início do atestado (desc).
    """
    conditions = [Absenteismo.empresa_id == empresa_id]
    if data_inicio is not None:
        conditions.append(Absenteismo.dt_inicio_atestado >= data_inicio)
    if data_fim is not None:
        conditions.append(Absenteismo.dt_fim_atestado <= data_fim)
    if setor and setor.strip():
        conditions.append(Absenteismo.setor == setor.strip())
    if cid and cid.strip():
        conditions.append(Absenteismo.cid_principal == cid.strip())

    query = (
        select(Absenteismo, Funcionario.nome)
        .join(Funcionario, Funcionario.id == Absenteismo.funcionario_id, isouter=True)
        .where(*conditions)
        .order_by(Absenteismo.dt_inicio_atestado.desc(), Absenteismo.id.desc())
    )
    count_query = select(func.count(Absenteismo.id)).where(*conditions)
    return query, count_query


def get_absenteismo_with_nome(session: Session, absenteismo_id: int) -> tuple[Absenteismo, str | None] | None:
    row = session.exec(
        select(Absenteismo, Funcionario.nome)
        .join(Funcionario, Funcionario.id == Absenteismo.funcionario_id, isouter=True)
        .where(Absenteismo.id == absenteismo_id)
    ).first()
    if row is None:
        return None
    absenteismo, nome = row
    return absenteismo, nome
