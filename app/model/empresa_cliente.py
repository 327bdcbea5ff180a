from sqlmodel import Field
from sqlalchemy import UniqueConstraint
from app.model.base import BaseModel


class EmpresaCliente(BaseModel, table=True):
    """Registro público: nome do cliente -> schema onde vivem seus dados."""

    __tablename__ = "empresa_cliente"

    nome: str = Field(max_length=200)
    schema_name: str = Field(max_length=100)
    email_admin: str = Field(max_length=100)
    ativo: bool = Field(default=True)

    __table_args__ = (
        UniqueConstraint("schema_name", name="uq_empresa_cliente_schema_name"),
        UniqueConstraint("email_admin", name="uq_empresa_cliente_email_admin"),
    )
