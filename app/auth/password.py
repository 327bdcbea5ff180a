import re

import bcrypt

# Mínimo 8 caracteres com minúscula, maiúscula, número e símbolo (@$!%*?&)
_SENHA_REGEX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$")

FREE_EMAIL_DOMAINS: frozenset[str] = frozenset({
    "gmail.com",
    "hotmail.com",
    "outlook.com",
    "yahoo.com",
    "icloud.com",
    "aol.com",
    "live.com",
    "mail.com",
    "protonmail.com",
    "gmx.com",
    "zoho.com",
    "yandex.com",
})


def hash_password(password: str) -> str:
    """Gera hash bcrypt para a senha."""
    salt = bcrypt.gensalt(rounds=10)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Confere a senha contra o hash bcrypt armazenado."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Hash corrompido/formato desconhecido
        return False


def is_strong_password(password: str) -> bool:
    return bool(_SENHA_REGEX.match(password or ""))


def is_business_email(email: str) -> bool:
    """Retorna False para emails de provedores gratuitos ou sem domínio."""
    if not email or "@" not in email:
        return False
    domain = email.rsplit("@", 1)[1].strip().lower()
    if not domain:
        return False
    return domain not in FREE_EMAIL_DOMAINS
