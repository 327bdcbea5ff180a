from dataclasses import dataclass
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sqlmodel import Session

from app.db.session import get_session
from app.model.usuario import Usuario
from app.auth.jwt import verify_token

bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """Usuário autenticado da request, passado explicitamente para handlers e services."""

    usuario_id: int
    empresa_id: int
    email: str
    nome: str
    is_admin: bool = False
    is_premium: bool = False

    @classmethod
    def from_usuario(cls, usuario: Usuario) -> "Principal":
        return cls(
            usuario_id=usuario.id,
            empresa_id=usuario.empresa_id,
            email=usuario.email,
            nome=usuario.nome,
            is_admin=usuario.is_admin,
            is_premium=usuario.is_premium,
        )


def get_token_payload(
    credentials: HTTPAuthorizationCredentials = Depends(bearer),
) -> dict[str, Any]:
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token de autenticação não fornecido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return verify_token(credentials.credentials)


def get_current_usuario(
    payload: dict[str, Any] = Depends(get_token_payload),
    session: Session = Depends(get_session),
) -> Usuario:
    """Dependency que retorna o usuário autenticado a partir do JWT."""
    usuario_id_raw = payload.get("sub")
    if not usuario_id_raw:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")
    try:
        usuario_id = int(usuario_id_raw)
    except (TypeError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")

    usuario = session.get(Usuario, usuario_id)
    if not usuario:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Usuário não encontrado")
    return usuario


def get_current_principal(usuario: Usuario = Depends(get_current_usuario)) -> Principal:
    """
    Dependency que monta o Principal a partir do registro atual do banco.

    Flags (is_premium, is_admin) vêm do banco, não do token, para refletir
    mudanças de assinatura sem novo login.
    """
    return Principal.from_usuario(usuario)


def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    if not principal.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Permissão de administrador necessária",
        )
    return principal
