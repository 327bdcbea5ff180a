import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.route import router
from app.config import get_config

logger = logging.getLogger(__name__)

config = get_config()

app = FastAPI(
    title="Vitalis Care API",
    description="API para gestão de funcionários e absenteísmo integrada ao SOC",
    version="1.0.0"
)

# Configuração CORS
# Pode ser configurado via variável de ambiente CORS_ORIGINS (separado por vírgula)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

# status HTTP -> categoria do erro no payload
ERROR_CATEGORIES: dict[int, str] = {
    400: "validation_error",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    409: "conflict",
    500: "internal_error",
}

MAX_MESSAGE_LENGTH = 500


def _error_category(status_code: int) -> str:
    if status_code in ERROR_CATEGORIES:
        return ERROR_CATEGORIES[status_code]
    return "internal_error" if status_code >= 500 else "request_error"


def _error_payload(*, error: str, message: str, details: object | None = None) -> dict:
    payload: dict = {"error": error, "message": message}
    if details is not None:
        payload["details"] = details
    return payload


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # detail pode ser texto ou {"message": ..., "details": ...}
    details = None
    if isinstance(exc.detail, dict):
        message = str(exc.detail.get("message") or "Erro na requisição")
        details = exc.detail.get("details")
    elif isinstance(exc.detail, str):
        message = exc.detail
    else:
        message = "Erro na requisição"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_payload(error=_error_category(exc.status_code), message=message, details=details),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Validação de entrada responde 400 (não 422)
    return JSONResponse(
        status_code=400,
        content=_error_payload(
            error="validation_error",
            message="Dados inválidos",
            details=jsonable_encoder([{k: v for k, v in e.items() if k != "ctx"} for e in exc.errors()]),
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Loga o erro completo para debug
    logger.error(f"Erro não tratado: {exc}", exc_info=True)

    if config.is_production:
        error_message = "Erro interno do servidor"
    else:
        # Fora de produção devolve a mensagem (truncada) para ajudar no debug, sem stacktrace
        error_message = str(exc) or "Erro interno do servidor"
        if len(error_message) > MAX_MESSAGE_LENGTH:
            error_message = error_message[:MAX_MESSAGE_LENGTH] + "..."

    return JSONResponse(
        status_code=500,
        content=_error_payload(error="internal_error", message=error_message),
    )
