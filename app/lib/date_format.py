"""
Conversão de datas entre o formato do SOC e `datetime.date`.

O SOC recebe e devolve datas no formato brasileiro (DD/MM/YYYY); algumas
exportações devolvem ISO. Reutilizar sempre que uma data cruzar essa fronteira.
"""

from datetime import date, datetime

SOC_DATE_FORMAT = "%d/%m/%Y"

# Formatos aceitos na leitura, em ordem de tentativa.
_INPUT_FORMATS: tuple[str, ...] = (
    "%d/%m/%Y",
    "%Y-%m-%d",
    "%d/%m/%Y %H:%M:%S",
    "%d-%m-%Y",
)


def format_date_soc(d: date) -> str:
    """Formata uma data como DD/MM/YYYY (formato exigido pelos parâmetros do SOC)."""
    return d.strftime(SOC_DATE_FORMAT)


def parse_date(value: object) -> date | None:
    """
    Converte um valor vindo do SOC em `date`.

    :param value: string (DD/MM/YYYY, YYYY-MM-DD ou ISO datetime), date/datetime ou None.
    :return: date, ou None para valores vazios.
    :raises ValueError: se a string não estiver em nenhum formato conhecido.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    for fmt in _INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    # ISO com hora/timezone (ex: 2024-03-01T00:00:00.000Z)
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Data inválida: {text!r}") from None


def diff_days(data_inicio: date, data_fim: date) -> int:
    """Diferença em dias corridos entre duas datas (negativa se fim < início)."""
    return (data_fim - data_inicio).days


def format_month(d: date | None) -> str | None:
    """Retorna o mês da data no formato YYYY-MM."""
    if d is None:
        return None
    return d.strftime("%Y-%m")
