import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator
from sqlmodel import Session

from app.auth.dependencies import get_current_usuario
from app.auth.jwt import create_access_token
from app.db.session import get_session
from app.model.usuario import Usuario
from app.services.usuario_service import authenticate_usuario, register_usuario

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


class LoginRequest(BaseModel):
    email: str
    senha: str


class RegisterRequest(BaseModel):
    nome: str
    email: str
    senha: str
    cargo: Optional[str] = None
    empresa_nome: Optional[str] = None

    @field_validator("nome", "email", "senha")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Campo não pode estar vazio")
        return v


class UsuarioResponse(BaseModel):
    id: int
    nome: str
    email: str
    cargo: Optional[str] = None
    empresa_id: int
    is_admin: bool
    is_premium: bool
    ultimo_login: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    user: UsuarioResponse
    token: str


class ProfileResponse(BaseModel):
    user: UsuarioResponse


def _issue_token(usuario: Usuario) -> str:
    return create_access_token(
        usuario_id=usuario.id,
        empresa_id=usuario.empresa_id,
        email=usuario.email,
        nome=usuario.nome,
        is_admin=usuario.is_admin,
        is_premium=usuario.is_premium,
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    session: Session = Depends(get_session),
):
    """Autentica por email/senha e devolve o token de acesso."""
    if not body.email or not body.senha:
        raise HTTPException(status_code=400, detail="Email e senha são obrigatórios")

    usuario = authenticate_usuario(session, email=body.email, senha=body.senha)
    logger.info(f"[AUTH] Login usuario_id={usuario.id}")
    return AuthResponse(
        message="Login realizado com sucesso",
        user=UsuarioResponse.model_validate(usuario),
        token=_issue_token(usuario),
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    body: RegisterRequest,
    session: Session = Depends(get_session),
):
    """
    Cadastra um novo usuário e a empresa dele.
    Rejeita emails de provedores gratuitos e senhas fracas.
    """
    usuario = register_usuario(
        session,
        nome=body.nome,
        email=body.email,
        senha=body.senha,
        cargo=body.cargo,
        empresa_nome=body.empresa_nome,
    )
    return AuthResponse(
        message="Usuário registrado com sucesso",
        user=UsuarioResponse.model_validate(usuario),
        token=_issue_token(usuario),
    )


@router.get("/profile", response_model=ProfileResponse)
def profile(usuario: Usuario = Depends(get_current_usuario)):
    return ProfileResponse(user=UsuarioResponse.model_validate(usuario))
