"""
Script para criar os dados iniciais (empresa de administração e usuário admin).

Uso:
    ADMIN_PASSWORD=... python script_seed_admin.py
    ADMIN_EMAIL=admin@empresa.com.br ADMIN_PASSWORD=... python script_seed_admin.py

Pode ser executado mais de uma vez: só cria o que ainda não existe.
Rode `alembic upgrade head` antes.
"""
import logging
import os
import sys

# Adiciona o diretório atual ao path
sys.path.insert(0, os.path.dirname(__file__))

from app.db.session import get_session_context  # noqa: E402
from app.services.seed_service import seed_admin  # noqa: E402


def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    email = os.getenv("ADMIN_EMAIL", "admin@admin.com")
    senha = os.getenv("ADMIN_PASSWORD")
    if not senha:
        print("ERRO: defina ADMIN_PASSWORD")
        return 1

    with get_session_context() as session:
        result = seed_admin(session, email=email, senha=senha)

    print(f"OK: empresa_id={result.empresa_id} (criada={result.empresa_criada})")
    print(f"OK: usuario_id={result.usuario_id} (criado={result.usuario_criado})")
    print(f"   configuracao_api criada={result.config_criada}")
    print(f"   empresa_cliente criado={result.cliente_criado}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
