from sqlmodel import SQLModel
from app.model import (  # noqa: F401
    Absenteismo,
    ConfiguracaoApi,
    Empresa,
    EmpresaCliente,
    Funcionario,
    SyncLog,
    Usuario,
)


# Importa todos os modelos para que o SQLModel os registre
__all__ = ["Base"]


# Base para criar tabelas
Base = SQLModel.metadata
