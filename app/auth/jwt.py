from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt, JWTError
from fastapi import HTTPException

from app.config import get_config

JWT_ALGORITHM = "HS256"


def create_access_token(
    usuario_id: int,
    empresa_id: int,
    email: str,
    nome: str,
    is_admin: bool = False,
    is_premium: bool = False,
) -> str:
    """
    Cria um token JWT com as informações do usuário.

    Args:
        usuario_id: ID do usuário no banco
        empresa_id: ID da empresa (tenant) do usuário
        email: Email do usuário
        nome: Nome do usuário
        is_admin: Flag de administrador
        is_premium: Flag de assinatura premium

    Returns:
        Token JWT codificado
    """
    config = get_config()
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": str(usuario_id),  # Subject (usuario_id)
        "email": email,
        "nome": nome,
        "empresa_id": empresa_id,
        "is_admin": is_admin,
        "is_premium": is_premium,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=config.jwt_expiration_hours)).timestamp()),
        "iss": config.jwt_issuer,
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verifica e decodifica um token JWT.

    Raises:
        HTTPException: Se o token for inválido ou expirado
    """
    config = get_config()
    try:
        return jwt.decode(
            token,
            config.jwt_secret,
            algorithms=[JWT_ALGORITHM],
            issuer=config.jwt_issuer,
        )
    except JWTError:
        # Evita vazar detalhes internos no payload de erro.
        raise HTTPException(status_code=401, detail="Token inválido ou expirado")
