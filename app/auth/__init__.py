from app.auth.jwt import create_access_token, verify_token
from app.auth.dependencies import Principal, get_current_principal, get_current_usuario, require_admin
from app.auth.password import hash_password, verify_password

__all__ = [
    "create_access_token",
    "verify_token",
    "Principal",
    "get_current_principal",
    "get_current_usuario",
    "require_admin",
    "hash_password",
    "verify_password",
]
