"""
Tests for absenteeism statistics and the premium/free visibility policy.
"""

from dataclasses import asdict
from datetime import date, timedelta

import pytest

from app.model.absenteismo import Absenteismo
from app.model.funcionario import Funcionario
from app.services.stats_service import (
    apply_visibility,
    calc_prejuizo_financeiro,
    calc_taxa_absenteismo,
    count_headcount,
    get_absenteismo_stats,
)

from conftest import make_empresa


def add_funcionarios(session, empresa_id: int, total: int, **kwargs) -> None:
    for i in range(total):
        session.add(Funcionario(codigo=f"F{i}", nome=f"Funcionário {i}", empresa_id=empresa_id, **kwargs))
    session.commit()


def add_absenteismo(session, empresa_id: int, **kwargs) -> Absenteismo:
    registro = Absenteismo(empresa_id=empresa_id, **kwargs)
    session.add(registro)
    session.commit()
    return registro


class TestFormulas:
    def test_rate_scenario_forty_percent(self):
        # 10 funcionários * 220h = 2200h; 110 dias * 8h = 880h
        assert calc_taxa_absenteismo(110, 10) == 40.0

    @pytest.mark.parametrize("total_dias", [0, 15, 1000])
    def test_rate_zero_headcount(self, total_dias):
        assert calc_taxa_absenteismo(total_dias, 0) == 0

    def test_rate_rounding(self):
        assert calc_taxa_absenteismo(1, 3) == 1.21

    def test_financial_loss(self):
        # 10 dias * 8h * (1412 / 220)
        assert calc_prejuizo_financeiro(10, 1412) == 513.45


class TestHeadcount:
    def test_counts_active_and_future_terminations(self, session, empresa):
        hoje = date(2024, 6, 1)
        add_funcionarios(session, empresa.id, 2)
        session.add(Funcionario(codigo="D1", nome="Demitido", empresa_id=empresa.id, data_demissao=date(2024, 5, 1)))
        session.add(Funcionario(codigo="D2", nome="Aviso", empresa_id=empresa.id, data_demissao=date(2024, 7, 1)))
        session.commit()

        assert count_headcount(session, empresa.id, hoje=hoje) == 3

    def test_other_tenant_not_counted(self, session, empresa):
        outra = make_empresa(session, nome="Outra")
        add_funcionarios(session, outra.id, 5)
        assert count_headcount(session, empresa.id) == 0


class TestGetStats:
    def test_forty_percent_scenario(self, session, empresa):
        add_funcionarios(session, empresa.id, 10)
        for i, dias in enumerate([30, 30, 30, 20]):
            add_absenteismo(
                session,
                empresa.id,
                matricula_func=f"M{i % 3}",
                dias_afastados=dias,
                dt_inicio_atestado=date(2024, 3, 1),
                dt_fim_atestado=date(2024, 3, 1) + timedelta(days=dias - 1),
            )

        stats = get_absenteismo_stats(session, empresa.id)

        assert stats.totalDiasAfastados == 110
        assert stats.totalFuncionarios == 10
        assert stats.taxaAbsenteismo == 40.0
        assert stats.totalRegistros == 4
        assert stats.totalFuncionariosAfastados == 3

    def test_headcount_zero_rate_is_zero(self, session, empresa):
        add_absenteismo(session, empresa.id, dias_afastados=5, dt_inicio_atestado=date(2024, 3, 1))

        stats = get_absenteismo_stats(session, empresa.id)

        assert stats.totalFuncionarios == 0
        assert stats.taxaAbsenteismo == 0
        assert stats.totalDiasAfastados == 5

    def test_empty_tenant(self, session, empresa):
        stats = get_absenteismo_stats(session, empresa.id)
        assert stats.totalRegistros == 0
        assert stats.totalDiasAfastados == 0
        assert stats.prejuizoFinanceiro == 0
        assert stats.topCids == []
        assert stats.topSetores == []
        assert stats.evolucaoMensal == []

    def test_salario_minimo_override(self, session, empresa):
        add_absenteismo(session, empresa.id, dias_afastados=10, dt_inicio_atestado=date(2024, 3, 1))

        assert get_absenteismo_stats(session, empresa.id).prejuizoFinanceiro == 513.45
        assert get_absenteismo_stats(session, empresa.id, salario_minimo=2200).prejuizoFinanceiro == 800.0

    def test_date_filter_applies_to_start_and_end_independently(self, session, empresa):
        add_absenteismo(
            session, empresa.id, dias_afastados=1,
            dt_inicio_atestado=date(2024, 3, 10), dt_fim_atestado=date(2024, 3, 10),
        )
        # começa antes do período
        add_absenteismo(
            session, empresa.id, dias_afastados=2,
            dt_inicio_atestado=date(2024, 2, 28), dt_fim_atestado=date(2024, 3, 1),
        )
        # termina depois do período
        add_absenteismo(
            session, empresa.id, dias_afastados=4,
            dt_inicio_atestado=date(2024, 3, 30), dt_fim_atestado=date(2024, 4, 2),
        )

        stats = get_absenteismo_stats(session, empresa.id, data_inicio=date(2024, 3, 1), data_fim=date(2024, 3, 31))

        assert stats.totalRegistros == 1
        assert stats.totalDiasAfastados == 1

    def test_other_tenant_excluded(self, session, empresa):
        outra = make_empresa(session, nome="Outra")
        add_absenteismo(session, outra.id, dias_afastados=50, dt_inicio_atestado=date(2024, 3, 1))

        assert get_absenteismo_stats(session, empresa.id).totalRegistros == 0

    def test_top_cids_and_setores(self, session, empresa):
        for _ in range(3):
            add_absenteismo(session, empresa.id, cid_principal="J11", descricao_cid="Influenza", setor="Produção",
                            dias_afastados=1, dt_inicio_atestado=date(2024, 3, 1))
        add_absenteismo(session, empresa.id, cid_principal="M54", descricao_cid="Dorsalgia", setor="Logística",
                        dias_afastados=10, dt_inicio_atestado=date(2024, 3, 2))

        stats = get_absenteismo_stats(session, empresa.id)

        assert stats.topCids[0] == {"cid_principal": "J11", "descricao_cid": "Influenza", "total": 3}
        assert stats.topCids[1] == {"cid_principal": "M54", "descricao_cid": "Dorsalgia", "total": 1}
        # setores ordenados por dias afastados
        assert stats.topSetores[0] == {"setor": "Logística", "total_registros": 1, "total_dias": 10}
        assert stats.topSetores[1] == {"setor": "Produção", "total_registros": 3, "total_dias": 3}

    def test_top_lists_limited_to_ten(self, session, empresa):
        for i in range(12):
            add_absenteismo(session, empresa.id, cid_principal=f"C{i:02d}", setor=f"Setor {i:02d}",
                            dias_afastados=i + 1, dt_inicio_atestado=date(2024, 3, 1))

        stats = get_absenteismo_stats(session, empresa.id)

        assert len(stats.topCids) == 10
        assert len(stats.topSetores) == 10
        assert stats.topSetores[0]["setor"] == "Setor 11"

    def test_monthly_evolution_is_chronological(self, session, empresa):
        add_absenteismo(session, empresa.id, dias_afastados=2, dt_inicio_atestado=date(2024, 4, 5))
        add_absenteismo(session, empresa.id, dias_afastados=3, dt_inicio_atestado=date(2024, 2, 10))
        add_absenteismo(session, empresa.id, dias_afastados=4, dt_inicio_atestado=date(2024, 2, 20))
        add_absenteismo(session, empresa.id, dias_afastados=1, dt_inicio_atestado=None)

        stats = get_absenteismo_stats(session, empresa.id)

        assert stats.evolucaoMensal == [
            {"mes": "2024-02", "total_registros": 2, "total_dias": 7},
            {"mes": "2024-04", "total_registros": 1, "total_dias": 2},
            {"mes": None, "total_registros": 1, "total_dias": 1},
        ]


class TestVisibility:
    @pytest.fixture
    def stats(self, session, empresa):
        add_funcionarios(session, empresa.id, 4)
        for i in range(8):
            add_absenteismo(session, empresa.id, cid_principal=f"C{i}", setor=f"S{i}",
                            dias_afastados=i + 1, dt_inicio_atestado=date(2024, 3, 1))
        return get_absenteismo_stats(session, empresa.id)

    def test_free_tier_hides_financial_loss_and_truncates(self, stats):
        result = apply_visibility(stats, is_premium=False)

        assert result["isPremium"] is False
        assert "prejuizoFinanceiro" not in result
        assert "totalFuncionarios" not in result
        assert len(result["topCids"]) == 5
        assert len(result["topSetores"]) == 5
        assert result["topCids"] == stats.topCids[:5]
        assert result["taxaAbsenteismo"] == stats.taxaAbsenteismo
        assert result["evolucaoMensal"] == stats.evolucaoMensal

    def test_premium_gets_everything(self, stats):
        result = apply_visibility(stats, is_premium=True)

        assert result == {"isPremium": True, **asdict(stats)}
        assert len(result["topCids"]) == 8
        assert result["prejuizoFinanceiro"] == stats.prejuizoFinanceiro
