from app.model.base import BaseModel
from app.model.empresa import Empresa
from app.model.usuario import Usuario
from app.model.configuracao_api import ConfiguracaoApi
from app.model.funcionario import Funcionario
from app.model.absenteismo import Absenteismo
from app.model.sync_log import SyncLog, SyncStatus, SyncTipo
from app.model.empresa_cliente import EmpresaCliente

__all__ = [
    "BaseModel",
    "Empresa",
    "Usuario",
    "ConfiguracaoApi",
    "Funcionario",
    "Absenteismo",
    "SyncLog",
    "SyncStatus",
    "SyncTipo",
    "EmpresaCliente",
]
