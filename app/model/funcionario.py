from datetime import date

from sqlmodel import Field
from sqlalchemy import UniqueConstraint
from app.model.base import BaseModel


class Funcionario(BaseModel, table=True):
    """
    Funcionário importado da exportação SOC.

    Chave natural: (codigo, empresa_id). `matriculafuncionario` é a chave
    usada para vincular registros de absenteísmo.
    """

    __tablename__ = "funcionario"

    codigo: str = Field(max_length=20)
    nome: str = Field(max_length=120)
    empresa_id: int = Field(foreign_key="empresa.id", index=True)

    codigoempresa: str | None = Field(default=None, max_length=20)
    nomeempresa: str | None = Field(default=None, max_length=200)
    codigounidade: str | None = Field(default=None, max_length=20)
    nomeunidade: str | None = Field(default=None, max_length=130)
    codigosetor: str | None = Field(default=None, max_length=12)
    nomesetor: str | None = Field(default=None, max_length=130)
    codigocargo: str | None = Field(default=None, max_length=10)
    nomecargo: str | None = Field(default=None, max_length=130)
    cbocargo: str | None = Field(default=None, max_length=10)
    ccusto: str | None = Field(default=None, max_length=50)
    nomecentrocusto: str | None = Field(default=None, max_length=130)
    matriculafuncionario: str | None = Field(default=None, max_length=30, index=True)

    cpf: str | None = Field(default=None, max_length=19)
    rg: str | None = Field(default=None, max_length=19)
    ufrg: str | None = Field(default=None, max_length=10)
    orgaoemissorrg: str | None = Field(default=None, max_length=20)
    situacao: str | None = Field(default=None, max_length=12)
    sexo: int | None = None
    pis: str | None = Field(default=None, max_length=20)
    ctps: str | None = Field(default=None, max_length=30)
    seriectps: str | None = Field(default=None, max_length=25)
    estadocivil: int | None = None
    tipocontatacao: int | None = None

    data_nascimento: date | None = None
    data_admissao: date | None = None
    data_demissao: date | None = None

    endereco: str | None = Field(default=None, max_length=110)
    numero_endereco: str | None = Field(default=None, max_length=20)
    bairro: str | None = Field(default=None, max_length=80)
    cidade: str | None = Field(default=None, max_length=50)
    uf: str | None = Field(default=None, max_length=20)
    cep: str | None = Field(default=None, max_length=10)
    telefoneresidencial: str | None = Field(default=None, max_length=20)
    telefonecelular: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=400)

    deficiente: int | None = None
    deficiencia: str | None = Field(default=None, max_length=861)
    nm_mae_funcionario: str | None = Field(default=None, max_length=120)
    dataultalteracao: date | None = None
    matricularh: str | None = Field(default=None, max_length=30)
    cor: int | None = None
    escolaridade: int | None = None
    naturalidade: str | None = Field(default=None, max_length=50)
    ramal: str | None = Field(default=None, max_length=10)
    regimerevezamento: int | None = None
    regimetrabalho: str | None = Field(default=None, max_length=500)
    telcomercial: str | None = Field(default=None, max_length=20)
    turnotrabalho: int | None = None
    rhunidade: str | None = Field(default=None, max_length=80)
    rhsetor: str | None = Field(default=None, max_length=80)
    rhcargo: str | None = Field(default=None, max_length=80)
    rhcentrocustounidade: str | None = Field(default=None, max_length=80)

    __table_args__ = (
        UniqueConstraint("codigo", "empresa_id", name="uq_funcionario_codigo_empresa"),
    )
