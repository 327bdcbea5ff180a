"""
Pytest fixtures: banco SQLite em memória, TestClient com dependências
substituídas e um SOC falso (httpx.MockTransport).
"""

import json
import os

# Variáveis de ambiente precisam existir antes de importar o app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ.setdefault("SALARIO_MINIMO", "1412")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import app.db.base  # noqa: E402,F401
from app.auth.jwt import create_access_token  # noqa: E402
from app.auth.password import hash_password  # noqa: E402
from app.db.session import get_session  # noqa: E402
from app.main import app  # noqa: E402
from app.model.configuracao_api import ConfiguracaoApi  # noqa: E402
from app.model.empresa import Empresa  # noqa: E402
from app.model.usuario import Usuario  # noqa: E402
from app.services.soc_client import SocClient, get_soc_client  # noqa: E402

SENHA_VALIDA = "Senha@123"
SOC_TEST_URL = "https://soc.test/WebSoc/exportadados"


class FakeSoc:
    """Servidor SOC falso: guarda as requisições e devolve a resposta configurada."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = "[]"
        self.error: Exception | None = None
        # Chamado a cada requisição, antes da resposta
        self.on_request = None

    def respond_json(self, data, status_code: int = 200) -> None:
        self.body = json.dumps(data)
        self.status_code = status_code

    def respond_text(self, text: str, status_code: int = 200) -> None:
        self.body = text
        self.status_code = status_code

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    def last_params(self) -> dict:
        return json.loads(self.requests[-1].url.params["parametro"])

    def client(self) -> SocClient:
        return SocClient(base_url=SOC_TEST_URL, timeout=5, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def fake_soc():
    return FakeSoc()


@pytest.fixture
def client(session, fake_soc):
    def _get_soc_client():
        with fake_soc.client() as soc_client:
            yield soc_client

    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_soc_client] = _get_soc_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_empresa(session: Session, nome: str = "Acme Indústria", codigo: str | None = None) -> Empresa:
    empresa = Empresa(nome=nome, codigo=codigo)
    session.add(empresa)
    session.commit()
    session.refresh(empresa)
    return empresa


def make_usuario(
    session: Session,
    empresa: Empresa,
    email: str = "rh@acme.com.br",
    *,
    is_premium: bool = False,
    is_admin: bool = False,
) -> Usuario:
    usuario = Usuario(
        nome="Maria RH",
        email=email,
        senha=hash_password(SENHA_VALIDA),
        cargo="Analista",
        empresa_id=empresa.id,
        is_premium=is_premium,
        is_admin=is_admin,
    )
    session.add(usuario)
    session.commit()
    session.refresh(usuario)
    return usuario


def auth_headers_for(usuario: Usuario) -> dict[str, str]:
    token = create_access_token(
        usuario_id=usuario.id,
        empresa_id=usuario.empresa_id,
        email=usuario.email,
        nome=usuario.nome,
        is_admin=usuario.is_admin,
        is_premium=usuario.is_premium,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def empresa(session):
    return make_empresa(session)


@pytest.fixture
def usuario(session, empresa):
    return make_usuario(session, empresa)


@pytest.fixture
def auth_headers(usuario):
    return auth_headers_for(usuario)


@pytest.fixture
def configuracao(session, empresa):
    config = ConfiguracaoApi(
        empresa_id=empresa.id,
        chave_funcionario="chave-func",
        codigo_funcionario="1001",
        codigo_empresa_funcionario="555",
        chave_absenteismo="chave-abs",
        codigo_absenteismo="2002",
        codigo_empresa_principal="777",
    )
    session.add(config)
    session.commit()
    session.refresh(config)
    return config
