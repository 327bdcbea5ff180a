from __future__ import annotations

import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.auth.password import hash_password, is_business_email, is_strong_password, verify_password
from app.model.base import utc_now
from app.model.usuario import Usuario
from app.services.empresa_service import create_empresa

logger = logging.getLogger(__name__)

MENSAGEM_SENHA_FRACA = (
    "A senha deve ter pelo menos 8 caracteres, incluindo letra maiúscula, "
    "letra minúscula, número e caractere especial (@$!%*?&)"
)
MENSAGEM_EMAIL_GRATUITO = "Utilize um email corporativo. Emails de provedores gratuitos não são aceitos"

# Colunas que o próprio usuário pode alterar no perfil
PERFIL_CAMPOS_EDITAVEIS: tuple[str, ...] = ("nome", "email", "cargo")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_usuario_by_email(session: Session, email: str) -> Usuario | None:
    return session.exec(select(Usuario).where(Usuario.email == normalize_email(email))).first()


def _validate_email(email: str) -> None:
    if "@" not in email or email.startswith("@") or email.endswith("@"):
        raise HTTPException(status_code=400, detail="Email inválido")
    if not is_business_email(email):
        raise HTTPException(status_code=400, detail=MENSAGEM_EMAIL_GRATUITO)


def _validate_senha(senha: str) -> None:
    if not is_strong_password(senha):
        raise HTTPException(status_code=400, detail=MENSAGEM_SENHA_FRACA)


def register_usuario(
    session: Session,
    *,
    nome: str,
    email: str,
    senha: str,
    cargo: str | None = None,
    empresa_nome: str | None = None,
) -> Usuario:
    """
    Cadastra usuário novo junto com a empresa dele.

    A empresa nasce sem `codigo`; o código SOC é vinculado na primeira
    sincronização de funcionários.

    Raises:
        HTTPException(400): email gratuito/inválido ou senha fraca
        HTTPException(409): email já cadastrado
    """
    email = normalize_email(email)
    # Email é checado antes da senha: provedor gratuito é sempre rejeitado
    _validate_email(email)
    _validate_senha(senha)

    if get_usuario_by_email(session, email):
        raise HTTPException(status_code=409, detail="Email já cadastrado")

    # Empresa e usuário entram no mesmo commit
    empresa = create_empresa(session, nome=(empresa_nome or "").strip() or nome.strip())
    usuario = Usuario(
        nome=nome.strip(),
        email=email,
        senha=hash_password(senha),
        cargo=cargo,
        empresa_id=empresa.id,
    )
    session.add(usuario)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise HTTPException(status_code=409, detail="Email já cadastrado") from e
    session.refresh(usuario)
    logger.info(f"[AUTH] Usuário cadastrado id={usuario.id} empresa_id={usuario.empresa_id}")
    return usuario


def authenticate_usuario(session: Session, *, email: str, senha: str) -> Usuario:
    """Confere credenciais e registra `ultimo_login`. 401 em qualquer falha."""
    usuario = get_usuario_by_email(session, email)
    if not usuario or not verify_password(senha or "", usuario.senha):
        raise HTTPException(status_code=401, detail="Credenciais inválidas")

    usuario.ultimo_login = utc_now()
    session.add(usuario)
    session.commit()
    session.refresh(usuario)
    return usuario


def update_perfil(session: Session, usuario: Usuario, changes: dict) -> Usuario:
    """
    Atualiza o perfil usando apenas campos permitidos.

    `senha` é tratada à parte (validação de força + hash).
    """
    for campo in PERFIL_CAMPOS_EDITAVEIS:
        if campo not in changes or changes[campo] is None:
            continue
        value = changes[campo]
        if campo == "email":
            value = normalize_email(value)
            if value == usuario.email:
                continue
            _validate_email(value)
            if get_usuario_by_email(session, value):
                raise HTTPException(status_code=409, detail="Email já cadastrado")
        elif campo == "nome":
            value = value.strip()
            if not value:
                raise HTTPException(status_code=400, detail="Nome não pode estar vazio")
        setattr(usuario, campo, value)

    senha = changes.get("senha")
    if senha is not None:
        _validate_senha(senha)
        usuario.senha = hash_password(senha)

    usuario.updated_at = utc_now()
    session.add(usuario)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise HTTPException(status_code=409, detail="Email já cadastrado") from e
    session.refresh(usuario)
    return usuario


def update_assinatura(session: Session, usuario: Usuario, is_premium: bool) -> Usuario:
    usuario.is_premium = is_premium
    usuario.updated_at = utc_now()
    session.add(usuario)
    session.commit()
    session.refresh(usuario)
    logger.info(f"[ASSINATURA] usuario_id={usuario.id} is_premium={is_premium}")
    return usuario
