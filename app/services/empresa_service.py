from __future__ import annotations

import logging

from fastapi import HTTPException
from sqlmodel import Session, select

from app.model.base import utc_now
from app.model.empresa import Empresa

logger = logging.getLogger(__name__)

EMPRESA_NOME_PADRAO = "Empresa não identificada"


def get_empresa_by_id(session: Session, empresa_id: int) -> Empresa | None:
    return session.exec(select(Empresa).where(Empresa.id == int(empresa_id))).first()


def get_empresa_by_codigo(session: Session, codigo: str) -> Empresa | None:
    return session.exec(select(Empresa).where(Empresa.codigo == codigo)).first()


def create_empresa(session: Session, *, nome: str, codigo: str | None = None) -> Empresa:
    """Adiciona a empresa e faz flush para obter o id. O commit fica com quem chama."""
    empresa = Empresa(nome=nome, codigo=codigo)
    session.add(empresa)
    session.flush()
    return empresa


def list_empresas(session: Session) -> list[Empresa]:
    return list(session.exec(select(Empresa).order_by(Empresa.nome)).all())


def ensure_empresa_for_sync(
    session: Session,
    *,
    empresa_id: int,
    codigo: str,
    nome: str | None,
) -> Empresa:
    """
    Garante a empresa do usuário antes de gravar funcionários.

    - Sem registro para `empresa_id`: cria com esse id, `codigo` e `nome`.
    - Registro sem `codigo`: preenche `codigo` (e `nome`, quando informado).
    - Registro com `codigo`: não altera.

    Raises:
        HTTPException(409): se outra empresa já usa o mesmo `codigo`
    """
    empresa = get_empresa_by_id(session, empresa_id)
    if empresa and empresa.codigo:
        return empresa

    owner = get_empresa_by_codigo(session, codigo)
    if owner and owner.id != empresa_id:
        logger.warning(f"[EMPRESA] codigo={codigo} já pertence à empresa_id={owner.id}")
        raise HTTPException(
            status_code=409,
            detail=f"O código de empresa {codigo} já está vinculado a outra empresa",
        )

    if not empresa:
        empresa = Empresa(id=empresa_id, codigo=codigo, nome=nome or EMPRESA_NOME_PADRAO)
        logger.info(f"[EMPRESA] Criando empresa id={empresa_id} codigo={codigo}")
    else:
        empresa.codigo = codigo
        if nome:
            empresa.nome = nome
        empresa.updated_at = utc_now()
        logger.info(f"[EMPRESA] Vinculando codigo={codigo} à empresa id={empresa_id}")

    session.add(empresa)
    session.commit()
    session.refresh(empresa)
    return empresa
