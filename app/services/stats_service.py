"""
Estatísticas de absenteísmo por empresa.

Taxa de absenteísmo:  horas afastadas / (headcount * 220h) * 100
Prejuízo financeiro:  horas afastadas * (salário mínimo / 220h)
onde horas afastadas = soma(dias_afastados) * 8h.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any

from sqlalchemy import func, or_
from sqlmodel import Session, select

from app.config import get_config
from app.lib.date_format import format_month
from app.model.absenteismo import Absenteismo
from app.model.funcionario import Funcionario

HORAS_POR_DIA = 8
HORAS_MENSAIS = 220
TOP_N = 10
TOP_N_GRATUITO = 5


@dataclass
class AbsenteismoStats:
    taxaAbsenteismo: float
    prejuizoFinanceiro: float
    totalRegistros: int
    totalDiasAfastados: int
    totalFuncionariosAfastados: int
    totalFuncionarios: int
    topCids: list[dict[str, Any]] = field(default_factory=list)
    topSetores: list[dict[str, Any]] = field(default_factory=list)
    evolucaoMensal: list[dict[str, Any]] = field(default_factory=list)


def _filters(empresa_id: int, data_inicio: date | None, data_fim: date | None) -> list:
    # Filtro independente por data de início e fim (não é interseção de intervalos)
    conditions = [Absenteismo.empresa_id == empresa_id]
    if data_inicio is not None:
        conditions.append(Absenteismo.dt_inicio_atestado >= data_inicio)
    if data_fim is not None:
        conditions.append(Absenteismo.dt_fim_atestado <= data_fim)
    return conditions


def count_headcount(session: Session, empresa_id: int, hoje: date | None = None) -> int:
    """Funcionários sem demissão ou com demissão futura."""
    hoje = hoje or date.today()
    return session.exec(
        select(func.count(Funcionario.id)).where(
            Funcionario.empresa_id == empresa_id,
            or_(Funcionario.data_demissao.is_(None), Funcionario.data_demissao > hoje),
        )
    ).one()


def calc_taxa_absenteismo(total_dias: int, headcount: int) -> float:
    horas_trabalhadas = headcount * HORAS_MENSAIS
    if horas_trabalhadas <= 0:
        return 0.0
    return round(total_dias * HORAS_POR_DIA / horas_trabalhadas * 100, 2)


def calc_prejuizo_financeiro(total_dias: int, salario_minimo: float) -> float:
    valor_hora = salario_minimo / HORAS_MENSAIS
    return round(total_dias * HORAS_POR_DIA * valor_hora, 2)


def _evolucao_mensal(session: Session, conditions: list) -> list[dict[str, Any]]:
    # Agrupa por dia no banco e consolida por mês aqui (portável entre bancos)
    rows = session.exec(
        select(
            Absenteismo.dt_inicio_atestado,
            func.count(Absenteismo.id),
            func.coalesce(func.sum(Absenteismo.dias_afastados), 0),
        )
        .where(*conditions)
        .group_by(Absenteismo.dt_inicio_atestado)
    ).all()

    meses: dict[str | None, dict[str, Any]] = {}
    for dt_inicio, total, dias in rows:
        mes = format_month(dt_inicio)
        bucket = meses.setdefault(mes, {"mes": mes, "total_registros": 0, "total_dias": 0})
        bucket["total_registros"] += int(total)
        bucket["total_dias"] += int(dias or 0)

    # Cronológico; registros sem data de início ficam por último
    return sorted(meses.values(), key=lambda b: (b["mes"] is None, b["mes"] or ""))


def get_absenteismo_stats(
    session: Session,
    empresa_id: int,
    data_inicio: date | None = None,
    data_fim: date | None = None,
    salario_minimo: float | None = None,
) -> AbsenteismoStats:
    """Agrega os indicadores de absenteísmo da empresa no período informado."""
    if salario_minimo is None:
        salario_minimo = get_config().salario_minimo
    conditions = _filters(empresa_id, data_inicio, data_fim)

    total_registros = session.exec(select(func.count(Absenteismo.id)).where(*conditions)).one()

    total_dias, total_afastados = session.exec(
        select(
            func.coalesce(func.sum(Absenteismo.dias_afastados), 0),
            func.count(Absenteismo.matricula_func.distinct()),
        ).where(*conditions)
    ).one()

    cid_total = func.count(Absenteismo.id).label("total")
    top_cids = session.exec(
        select(Absenteismo.cid_principal, Absenteismo.descricao_cid, cid_total)
        .where(*conditions)
        .group_by(Absenteismo.cid_principal, Absenteismo.descricao_cid)
        .order_by(cid_total.desc(), Absenteismo.cid_principal)
        .limit(TOP_N)
    ).all()

    setor_dias = func.coalesce(func.sum(Absenteismo.dias_afastados), 0).label("total_dias")
    top_setores = session.exec(
        select(Absenteismo.setor, func.count(Absenteismo.id), setor_dias)
        .where(*conditions)
        .group_by(Absenteismo.setor)
        .order_by(setor_dias.desc(), Absenteismo.setor)
        .limit(TOP_N)
    ).all()

    headcount = count_headcount(session, empresa_id)
    total_dias = int(total_dias or 0)

    return AbsenteismoStats(
        taxaAbsenteismo=calc_taxa_absenteismo(total_dias, headcount),
        prejuizoFinanceiro=calc_prejuizo_financeiro(total_dias, salario_minimo),
        totalRegistros=int(total_registros or 0),
        totalDiasAfastados=total_dias,
        totalFuncionariosAfastados=int(total_afastados or 0),
        totalFuncionarios=int(headcount or 0),
        topCids=[
            {"cid_principal": cid, "descricao_cid": descricao, "total": int(total)}
            for cid, descricao, total in top_cids
        ],
        topSetores=[
            {"setor": setor, "total_registros": int(registros), "total_dias": int(dias or 0)}
            for setor, registros, dias in top_setores
        ],
        evolucaoMensal=_evolucao_mensal(session, conditions),
    )


def apply_visibility(stats: AbsenteismoStats, is_premium: bool) -> dict[str, Any]:
    """
    Política premium/gratuito.

    Gratuito: sem prejuizoFinanceiro e sem totalFuncionarios; top-N limitado a 5.
    Premium: tudo, sem filtro.
    """
    if is_premium:
        return {"isPremium": True, **asdict(stats)}

    return {
        "isPremium": False,
        "taxaAbsenteismo": stats.taxaAbsenteismo,
        "totalRegistros": stats.totalRegistros,
        "totalDiasAfastados": stats.totalDiasAfastados,
        "totalFuncionariosAfastados": stats.totalFuncionariosAfastados,
        "topCids": stats.topCids[:TOP_N_GRATUITO],
        "topSetores": stats.topSetores[:TOP_N_GRATUITO],
        "evolucaoMensal": stats.evolucaoMensal,
    }
