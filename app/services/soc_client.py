"""
Cliente da exportação de dados do SOC (WebSoc/exportadados).

O SOC expõe um único GET que recebe os parâmetros como JSON no query string
(`?parametro=<json>`) e devolve um array JSON de registros com chaves em
maiúsculas, ou um payload de erro em qualquer outro formato.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Generator

import httpx

from app.config import get_config
from app.lib.date_format import format_date_soc
from app.model.configuracao_api import ConfiguracaoApi

logger = logging.getLogger(__name__)

_RAW_MAX_LEN = 2000


class SocError(Exception):
    """Erro ao consultar a exportação SOC."""


class SocRequestError(SocError):
    """Falha de rede ou status HTTP de erro."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SocResponseError(SocError):
    """Resposta recebida, mas não é um array JSON."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw[:_RAW_MAX_LEN]


def _flag(value: bool) -> str:
    return "Sim" if value else ""


def _clean(value: str | None) -> str:
    return (value or "").strip()


def build_funcionario_params(config: ConfiguracaoApi) -> dict[str, str]:
    """Parâmetros da exportação de funcionários a partir da configuração da empresa."""
    codigo = _clean(config.codigo_funcionario)
    return {
        "empresa": _clean(config.codigo_empresa_funcionario) or codigo,
        "codigo": codigo,
        "chave": _clean(config.chave_funcionario),
        "tipoSaida": "json",
        "ativo": _flag(config.flag_ativo),
        "inativo": _flag(config.flag_inativo),
        "afastado": _flag(config.flag_afastado),
        "pendente": _flag(config.flag_pendente),
        "ferias": _flag(config.flag_ferias),
    }


def build_absenteismo_params(config: ConfiguracaoApi, data_inicio: date, data_fim: date) -> dict[str, str]:
    """Parâmetros da exportação de absenteísmo; datas vão como DD/MM/YYYY."""
    codigo = _clean(config.codigo_absenteismo)
    return {
        "empresa": _clean(config.codigo_empresa_absenteismo) or codigo,
        "codigo": codigo,
        "chave": _clean(config.chave_absenteismo),
        "tipoSaida": "json",
        "empresaTrabalho": _clean(config.codigo_empresa_principal),
        "dataInicio": format_date_soc(data_inicio),
        "dataFim": format_date_soc(data_fim),
    }


class SocClient:
    """Cliente síncrono (httpx) da exportação SOC. Sem retry."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        config = get_config()
        self.base_url = base_url or config.soc_api_url
        self.timeout = timeout if timeout is not None else config.soc_timeout_seconds
        self._client = httpx.Client(timeout=self.timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SocClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def exportar_dados(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        """
        Executa a exportação e devolve a lista de registros.

        Raises:
            SocRequestError: falha de conexão ou status HTTP >= 400
            SocResponseError: corpo não é JSON ou não é um array
        """
        # A chave nunca vai para o log
        logger.info(f"[SOC] Exportando dados empresa={params.get('empresa')} codigo={params.get('codigo')}")
        try:
            response = self._client.get(self.base_url, params={"parametro": json.dumps(params)})
        except httpx.RequestError as e:
            logger.error(f"[SOC] Falha na requisição: {e}")
            raise SocRequestError(f"Erro ao chamar API SOC: {e}") from e

        if response.status_code >= 400:
            logger.error(f"[SOC] Status HTTP {response.status_code}")
            raise SocRequestError(
                f"Erro ao chamar API SOC: status HTTP {response.status_code}",
                status_code=response.status_code,
            )

        raw = response.text
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning(f"[SOC] Resposta não é JSON ({len(raw)} bytes)")
            raise SocResponseError("A API retornou uma resposta inválida ou vazia", raw=raw)

        if not isinstance(data, list):
            logger.warning(f"[SOC] Resposta JSON não é array: tipo={type(data).__name__}")
            raise SocResponseError("A API retornou uma resposta inválida ou vazia", raw=raw)

        logger.info(f"[SOC] {len(data)} registros recebidos")
        return data


def get_soc_client() -> Generator[SocClient, None, None]:
    """Dependency do FastAPI: um cliente SOC por request."""
    with SocClient() as client:
        yield client
