from fastapi import APIRouter

from app.api.absenteismo import router as absenteismo_router
from app.api.auth import router as auth_router
from app.api.config import router as config_router
from app.api.empresa import router as empresa_router
from app.api.funcionario import router as funcionario_router
from app.api.sync import router as sync_router
from app.api.user import router as user_router
from app.model.base import utc_now


router = APIRouter()  # Sem tag padrão - cada router define sua própria tag
router.include_router(auth_router)
router.include_router(user_router)
router.include_router(funcionario_router)
router.include_router(absenteismo_router)
router.include_router(sync_router)
router.include_router(config_router)
router.include_router(empresa_router)


@router.get("/health", tags=["System"])
def health():
    """Health check endpoint."""
    return {"status": "ok", "timestamp": utc_now().isoformat()}
