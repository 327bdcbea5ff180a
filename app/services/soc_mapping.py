"""
Mapeamento explícito dos registros SOC (chaves em maiúsculas) para colunas locais.

Só as colunas listadas aqui são gravadas; qualquer outra chave da exportação é ignorada.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from app.lib.date_format import parse_date


def to_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    return int(float(text)) if "." in text else int(text)


def to_date(value: Any) -> date | None:
    return parse_date(value)


Converter = Callable[[Any], Any]

# coluna -> (chave SOC, conversor)
FUNCIONARIO_FIELDS: dict[str, tuple[str, Converter]] = {
    "codigo": ("CODIGO", to_str),
    "nome": ("NOME", to_str),
    "codigoempresa": ("CODIGOEMPRESA", to_str),
    "nomeempresa": ("NOMEEMPRESA", to_str),
    "codigounidade": ("CODIGOUNIDADE", to_str),
    "nomeunidade": ("NOMEUNIDADE", to_str),
    "codigosetor": ("CODIGOSETOR", to_str),
    "nomesetor": ("NOMESETOR", to_str),
    "codigocargo": ("CODIGOCARGO", to_str),
    "nomecargo": ("NOMECARGO", to_str),
    "cbocargo": ("CBOCARGO", to_str),
    "ccusto": ("CCUSTO", to_str),
    "nomecentrocusto": ("NOMECENTROCUSTO", to_str),
    "matriculafuncionario": ("MATRICULAFUNCIONARIO", to_str),
    "cpf": ("CPF", to_str),
    "rg": ("RG", to_str),
    "ufrg": ("UFRG", to_str),
    "orgaoemissorrg": ("ORGAOEMISSORRG", to_str),
    "situacao": ("SITUACAO", to_str),
    "sexo": ("SEXO", to_int),
    "pis": ("PIS", to_str),
    "ctps": ("CTPS", to_str),
    "seriectps": ("SERIECTPS", to_str),
    "estadocivil": ("ESTADOCIVIL", to_int),
    "tipocontatacao": ("TIPOCONTATACAO", to_int),
    "data_nascimento": ("DATA_NASCIMENTO", to_date),
    "data_admissao": ("DATA_ADMISSAO", to_date),
    "data_demissao": ("DATA_DEMISSAO", to_date),
    "endereco": ("ENDERECO", to_str),
    "numero_endereco": ("NUMERO_ENDERECO", to_str),
    "bairro": ("BAIRRO", to_str),
    "cidade": ("CIDADE", to_str),
    "uf": ("UF", to_str),
    "cep": ("CEP", to_str),
    "telefoneresidencial": ("TELEFONERESIDENCIAL", to_str),
    "telefonecelular": ("TELEFONECELULAR", to_str),
    "email": ("EMAIL", to_str),
    "deficiente": ("DEFICIENTE", to_int),
    "deficiencia": ("DEFICIENCIA", to_str),
    "nm_mae_funcionario": ("NM_MAE_FUNCIONARIO", to_str),
    "dataultalteracao": ("DATAULTALTERACAO", to_date),
    "matricularh": ("MATRICULARH", to_str),
    "cor": ("COR", to_int),
    "escolaridade": ("ESCOLARIDADE", to_int),
    "naturalidade": ("NATURALIDADE", to_str),
    "ramal": ("RAMAL", to_str),
    "regimerevezamento": ("REGIMEREVEZAMENTO", to_int),
    "regimetrabalho": ("REGIMETRABALHO", to_str),
    "telcomercial": ("TELCOMERCIAL", to_str),
    "turnotrabalho": ("TURNOTRABALHO", to_int),
    "rhunidade": ("RHUNIDADE", to_str),
    "rhsetor": ("RHSETOR", to_str),
    "rhcargo": ("RHCARGO", to_str),
    "rhcentrocustounidade": ("RHCENTROCUSTOUNIDADE", to_str),
}

ABSENTEISMO_FIELDS: dict[str, tuple[str, Converter]] = {
    "unidade": ("UNIDADE", to_str),
    "setor": ("SETOR", to_str),
    "matricula_func": ("MATRICULA_FUNC", to_str),
    "dt_nascimento": ("DT_NASCIMENTO", to_date),
    "sexo": ("SEXO", to_int),
    "tipo_atestado": ("TIPO_ATESTADO", to_int),
    "dt_inicio_atestado": ("DT_INICIO_ATESTADO", to_date),
    "dt_fim_atestado": ("DT_FIM_ATESTADO", to_date),
    "hora_inicio_atestado": ("HORA_INICIO_ATESTADO", to_str),
    "hora_fim_atestado": ("HORA_FIM_ATESTADO", to_str),
    "dias_afastados": ("DIAS_AFASTADOS", to_int),
    "horas_afastado": ("HORAS_AFASTADO", to_str),
    "cid_principal": ("CID_PRINCIPAL", to_str),
    "descricao_cid": ("DESCRICAO_CID", to_str),
    "grupo_patologico": ("GRUPO_PATOLOGICO", to_str),
    "tipo_licenca": ("TIPO_LICENCA", to_str),
}


def _map_row(row: dict[str, Any], fields: dict[str, tuple[str, Converter]]) -> dict[str, Any]:
    if not isinstance(row, dict):
        raise ValueError(f"Registro não é um objeto: {type(row).__name__}")
    out: dict[str, Any] = {}
    for column, (soc_key, convert) in fields.items():
        try:
            out[column] = convert(row.get(soc_key))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Campo {soc_key} inválido: {e}") from e
    return out


def map_funcionario(row: dict[str, Any]) -> dict[str, Any]:
    """Converte um registro SOC de funcionário; CODIGO e NOME são obrigatórios."""
    data = _map_row(row, FUNCIONARIO_FIELDS)
    if not data["codigo"]:
        raise ValueError("Funcionário sem CODIGO")
    if not data["nome"]:
        raise ValueError(f"Funcionário {data['codigo']} sem NOME")
    return data


def map_absenteismo(row: dict[str, Any]) -> dict[str, Any]:
    return _map_row(row, ABSENTEISMO_FIELDS)
