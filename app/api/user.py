from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session

from app.api.auth import UsuarioResponse
from app.auth.dependencies import get_current_usuario
from app.db.session import get_session
from app.model.usuario import Usuario
from app.services.usuario_service import update_assinatura, update_perfil

router = APIRouter(prefix="/users", tags=["User"])


class PerfilUpdate(BaseModel):
    nome: Optional[str] = None
    email: Optional[str] = None
    senha: Optional[str] = None
    cargo: Optional[str] = None


class AssinaturaUpdate(BaseModel):
    is_premium: bool


class UsuarioUpdateResponse(BaseModel):
    message: str
    user: UsuarioResponse


@router.put("/profile", response_model=UsuarioUpdateResponse)
def update_profile(
    body: PerfilUpdate,
    usuario: Usuario = Depends(get_current_usuario),
    session: Session = Depends(get_session),
):
    """
    Atualiza o perfil do usuário autenticado.
    Apenas nome, email, senha e cargo; qualquer outro campo é ignorado.
    """
    usuario = update_perfil(session, usuario, body.model_dump(exclude_unset=True))
    return UsuarioUpdateResponse(
        message="Perfil atualizado com sucesso",
        user=UsuarioResponse.model_validate(usuario),
    )


@router.put("/subscription", response_model=UsuarioUpdateResponse)
def update_subscription(
    body: AssinaturaUpdate,
    usuario: Usuario = Depends(get_current_usuario),
    session: Session = Depends(get_session),
):
    usuario = update_assinatura(session, usuario, body.is_premium)
    return UsuarioUpdateResponse(
        message="Assinatura atualizada com sucesso",
        user=UsuarioResponse.model_validate(usuario),
    )
