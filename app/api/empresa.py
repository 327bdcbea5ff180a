from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session

from app.auth.dependencies import Principal, require_admin
from app.db.session import get_session
from app.services.empresa_service import list_empresas

router = APIRouter(prefix="/empresas", tags=["Empresa"])


class EmpresaResponse(BaseModel):
    id: int
    codigo: Optional[str] = None
    nome: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EmpresaListResponse(BaseModel):
    items: list[EmpresaResponse]
    total: int


@router.get("", response_model=EmpresaListResponse)
def list_all(
    principal: Principal = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Lista todas as empresas (apenas admin)."""
    items = list_empresas(session)
    return EmpresaListResponse(
        items=[EmpresaResponse.model_validate(e) for e in items],
        total=len(items),
    )
