"""
Dados iniciais: empresa de administração, usuário admin, configuração SOC vazia
e registro do cliente em empresa_cliente. Pode rodar várias vezes sem duplicar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlmodel import Session, select

from app.auth.password import hash_password
from app.model.empresa import Empresa
from app.model.empresa_cliente import EmpresaCliente
from app.model.usuario import Usuario
from app.services.config_service import default_configuracao, get_configuracao
from app.services.empresa_service import get_empresa_by_codigo
from app.services.usuario_service import get_usuario_by_email, normalize_email

logger = logging.getLogger(__name__)

ADMIN_EMPRESA_CODIGO = "admin"
ADMIN_EMPRESA_NOME = "Administração Vitalis"
ADMIN_NOME = "Administrador"
CLIENTE_PADRAO_NOME = "Vitalis"
CLIENTE_PADRAO_SCHEMA = "vitalis"


@dataclass
class SeedResult:
    empresa_id: int
    usuario_id: int
    empresa_criada: bool = False
    usuario_criado: bool = False
    config_criada: bool = False
    cliente_criado: bool = False


def seed_admin(session: Session, *, email: str, senha: str) -> SeedResult:
    email = normalize_email(email)

    empresa = get_empresa_by_codigo(session, ADMIN_EMPRESA_CODIGO)
    empresa_criada = empresa is None
    if empresa is None:
        empresa = Empresa(codigo=ADMIN_EMPRESA_CODIGO, nome=ADMIN_EMPRESA_NOME)
        session.add(empresa)
        session.commit()
        session.refresh(empresa)
        logger.info(f"[SEED] Empresa de administração criada id={empresa.id}")

    usuario = get_usuario_by_email(session, email)
    usuario_criado = usuario is None
    if usuario is None:
        # Senha do admin não passa pela política de força (definida por quem opera o deploy)
        usuario = Usuario(
            nome=ADMIN_NOME,
            email=email,
            senha=hash_password(senha),
            cargo=ADMIN_NOME,
            empresa_id=empresa.id,
            is_admin=True,
            is_premium=True,
        )
        session.add(usuario)
        session.commit()
        session.refresh(usuario)
        logger.info(f"[SEED] Usuário administrador criado id={usuario.id}")

    config_criada = get_configuracao(session, empresa.id) is None
    if config_criada:
        session.add(default_configuracao(empresa.id))
        session.commit()
        logger.info(f"[SEED] Configuração de API padrão criada para empresa_id={empresa.id}")

    cliente = session.exec(
        select(EmpresaCliente).where(EmpresaCliente.schema_name == CLIENTE_PADRAO_SCHEMA)
    ).first()
    cliente_criado = cliente is None
    if cliente is None:
        session.add(EmpresaCliente(nome=CLIENTE_PADRAO_NOME, schema_name=CLIENTE_PADRAO_SCHEMA, email_admin=email))
        session.commit()
        logger.info(f"[SEED] Cliente '{CLIENTE_PADRAO_SCHEMA}' registrado")

    return SeedResult(
        empresa_id=empresa.id,
        usuario_id=usuario.id,
        empresa_criada=empresa_criada,
        usuario_criado=usuario_criado,
        config_criada=config_criada,
        cliente_criado=cliente_criado,
    )
