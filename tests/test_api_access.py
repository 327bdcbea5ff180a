"""
Tests for tenant isolation, listing endpoints, config and admin-only routes.
"""

from datetime import date

from app.model.absenteismo import Absenteismo
from app.model.funcionario import Funcionario
from app.model.sync_log import SyncLog, SyncStatus, SyncTipo

from conftest import auth_headers_for, make_empresa, make_usuario


def add_funcionario(session, empresa_id: int, codigo: str = "1", nome: str = "Ana", **kwargs) -> Funcionario:
    funcionario = Funcionario(codigo=codigo, nome=nome, empresa_id=empresa_id, **kwargs)
    session.add(funcionario)
    session.commit()
    session.refresh(funcionario)
    return funcionario


def add_absenteismo(session, empresa_id: int, **kwargs) -> Absenteismo:
    registro = Absenteismo(empresa_id=empresa_id, **kwargs)
    session.add(registro)
    session.commit()
    session.refresh(registro)
    return registro


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["timestamp"]


class TestTenantIsolation:
    def test_funcionario_from_other_tenant_forbidden(self, client, session, auth_headers):
        outra = make_empresa(session, nome="Outra")
        funcionario = add_funcionario(session, outra.id)

        response = client.get(f"/funcionarios/{funcionario.id}", headers=auth_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_funcionario_not_found(self, client, auth_headers):
        response = client.get("/funcionarios/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_own_funcionario(self, client, session, empresa, auth_headers):
        funcionario = add_funcionario(session, empresa.id, cpf="111.222.333-44")

        response = client.get(f"/funcionarios/{funcionario.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["funcionario"]["cpf"] == "111.222.333-44"

    def test_absenteismo_from_other_tenant_forbidden(self, client, session, auth_headers):
        outra = make_empresa(session, nome="Outra")
        registro = add_absenteismo(session, outra.id, dias_afastados=2)

        response = client.get(f"/absenteismo/{registro.id}", headers=auth_headers)

        assert response.status_code == 403

    def test_sync_log_from_other_tenant_forbidden(self, client, session, auth_headers):
        outra = make_empresa(session, nome="Outra")
        log = SyncLog(empresa_id=outra.id, tipo=SyncTipo.FUNCIONARIOS, status=SyncStatus.CONCLUIDO)
        session.add(log)
        session.commit()
        session.refresh(log)

        response = client.get(f"/sync/{log.id}", headers=auth_headers)

        assert response.status_code == 403


class TestFuncionarioList:
    def test_list_ordered_by_name_and_scoped(self, client, session, empresa, auth_headers):
        add_funcionario(session, empresa.id, codigo="2", nome="Bruno")
        add_funcionario(session, empresa.id, codigo="1", nome="Ana")
        outra = make_empresa(session, nome="Outra")
        add_funcionario(session, outra.id, codigo="3", nome="Alguém de fora")

        response = client.get("/funcionarios", headers=auth_headers)

        assert response.status_code == 200
        assert [f["nome"] for f in response.json()["funcionarios"]] == ["Ana", "Bruno"]


class TestAbsenteismoList:
    def test_list_with_employee_name_and_filters(self, client, session, empresa, auth_headers):
        funcionario = add_funcionario(session, empresa.id, matriculafuncionario="M-1")
        add_absenteismo(session, empresa.id, funcionario_id=funcionario.id, setor="Produção", cid_principal="J11",
                        dt_inicio_atestado=date(2024, 3, 1), dt_fim_atestado=date(2024, 3, 2), dias_afastados=2)
        add_absenteismo(session, empresa.id, setor="Logística", cid_principal="M54",
                        dt_inicio_atestado=date(2024, 3, 10), dt_fim_atestado=date(2024, 3, 10), dias_afastados=1)

        response = client.get("/absenteismo", headers=auth_headers)
        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 2
        # mais recentes primeiro
        assert [r["setor"] for r in body["registros"]] == ["Logística", "Produção"]
        assert body["registros"][1]["nome_funcionario"] == "Ana"
        assert body["registros"][0]["nome_funcionario"] is None

        response = client.get("/absenteismo", headers=auth_headers, params={"setor": "Produção"})
        assert [r["cid_principal"] for r in response.json()["registros"]] == ["J11"]

        response = client.get("/absenteismo", headers=auth_headers, params={"cid": "M54"})
        assert [r["setor"] for r in response.json()["registros"]] == ["Logística"]

        response = client.get("/absenteismo", headers=auth_headers, params={"dataInicio": "2024-03-05"})
        assert response.json()["total"] == 1

    def test_pagination(self, client, session, empresa, auth_headers):
        for day in range(1, 6):
            add_absenteismo(session, empresa.id, dt_inicio_atestado=date(2024, 3, day), dias_afastados=1)

        response = client.get("/absenteismo", headers=auth_headers, params={"limit": 2, "offset": 1})

        body = response.json()
        assert body["total"] == 5
        assert [r["dt_inicio_atestado"] for r in body["registros"]] == ["2024-03-04", "2024-03-03"]

    def test_detail(self, client, session, empresa, auth_headers):
        registro = add_absenteismo(session, empresa.id, cid_principal="J11", dias_afastados=3)

        response = client.get(f"/absenteismo/{registro.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["registro"]["cid_principal"] == "J11"


class TestStatsEndpoint:
    def seed(self, session, empresa_id: int) -> None:
        for i in range(10):
            add_funcionario(session, empresa_id, codigo=str(i), nome=f"F{i}")
        for i in range(7):
            add_absenteismo(session, empresa_id, cid_principal=f"C{i}", setor=f"S{i}", dias_afastados=10,
                            dt_inicio_atestado=date(2024, 3, 1), dt_fim_atestado=date(2024, 3, 10))

    def test_free_user(self, client, session, empresa, auth_headers):
        self.seed(session, empresa.id)

        body = client.get("/absenteismo/stats", headers=auth_headers).json()

        assert body["isPremium"] is False
        assert "prejuizoFinanceiro" not in body
        assert len(body["topCids"]) == 5
        assert len(body["topSetores"]) == 5
        assert body["totalDiasAfastados"] == 70

    def test_premium_user(self, client, session, empresa):
        premium = make_usuario(session, empresa, email="diretoria@acme.com.br", is_premium=True)
        self.seed(session, empresa.id)

        body = client.get("/absenteismo/stats", headers=auth_headers_for(premium)).json()

        assert body["isPremium"] is True
        assert body["prejuizoFinanceiro"] == 3594.18
        assert body["totalFuncionarios"] == 10
        assert len(body["topCids"]) == 7
        # 70 dias * 8h / (10 * 220h)
        assert body["taxaAbsenteismo"] == 25.45

    def test_date_filter(self, client, session, empresa, auth_headers):
        self.seed(session, empresa.id)

        body = client.get(
            "/absenteismo/stats", headers=auth_headers, params={"dataInicio": "2024-04-01", "dataFim": "2024-04-30"}
        ).json()

        assert body["totalRegistros"] == 0


class TestSyncLogs:
    def test_list_newest_first_with_limit(self, client, session, empresa, auth_headers):
        for i in range(3):
            session.add(SyncLog(empresa_id=empresa.id, tipo=SyncTipo.FUNCIONARIOS, detalhes=f"log {i}"))
            session.commit()

        response = client.get("/sync", headers=auth_headers, params={"limit": 2})

        logs = response.json()["logs"]
        assert len(logs) == 2
        assert logs[0]["id"] > logs[1]["id"]
        assert logs[0]["status"] == "em_andamento"

    def test_detail(self, client, session, empresa, auth_headers):
        log = SyncLog(empresa_id=empresa.id, tipo=SyncTipo.ABSENTEISMO, status=SyncStatus.ERRO, mensagem_erro="x")
        session.add(log)
        session.commit()
        session.refresh(log)

        response = client.get(f"/sync/{log.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["log"]["tipo"] == "absenteismo"
        assert response.json()["log"]["mensagem_erro"] == "x"


class TestConfig:
    def test_defaults_when_not_saved(self, client, empresa, auth_headers):
        response = client.get("/config", headers=auth_headers)

        assert response.status_code == 200
        config = response.json()["config"]
        assert config["empresa_id"] == empresa.id
        assert config["chave_funcionario"] == ""
        assert config["flag_ativo"] is True

    def test_save_requires_all_keys(self, client, auth_headers):
        response = client.post("/config", headers=auth_headers, json={"chave_funcionario": "x"})

        assert response.status_code == 400

    def test_save_and_update(self, client, auth_headers):
        payload = {
            "chave_funcionario": " chave-f ",
            "codigo_funcionario": "1",
            "chave_absenteismo": "chave-a",
            "codigo_absenteismo": "2",
            "flag_inativo": True,
        }
        response = client.post("/config", headers=auth_headers, json=payload)
        assert response.status_code == 200
        assert response.json()["config"]["chave_funcionario"] == "chave-f"

        payload["codigo_funcionario"] = "10"
        client.post("/config", headers=auth_headers, json=payload)

        config = client.get("/config", headers=auth_headers).json()["config"]
        assert config["codigo_funcionario"] == "10"
        assert config["flag_inativo"] is True
        assert config["flag_ativo"] is False


class TestEmpresas:
    def test_admin_only(self, client, auth_headers):
        response = client.get("/empresas", headers=auth_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_admin_lists_all(self, client, session, empresa):
        make_empresa(session, nome="Outra")
        admin = make_usuario(session, empresa, email="admin@acme.com.br", is_admin=True)

        response = client.get("/empresas", headers=auth_headers_for(admin))

        assert response.status_code == 200
        assert response.json()["total"] == 2
