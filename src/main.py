"""
API Neokids de operações da clínica
FastAPI application com routers de atendimentos, pacientes, catálogo e painel
"""

import time
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlmodel import Session, SQLModel, text
from starlette.exceptions import HTTPException as StarletteHTTPException

import models  # noqa: F401
from app_types.monitoring import HealthStatus
from routes import (
    appointments_router,
    dashboard_router,
    demo_router,
    patients_router,
    services_router,
)
from utils.logging_config import get_logger, setup_logging
from utils.settings import engine, settings

# Configurar sistema de logging
setup_logging()
logger = get_logger(__name__)

# Registrar tempo de início para cálculo de uptime
startup_time = time.time()

API_VERSION = "1.0.0"

# ============================================================================
# CONFIGURAÇÃO DA APLICAÇÃO
# ============================================================================

app = FastAPI(
    title="API Neokids",
    description="Cadastro de pacientes, catálogo de serviços, atendimentos, rastreio de amostras e painel gerencial",
    version=API_VERSION,
)

# Incluir routers
app.include_router(appointments_router)
app.include_router(patients_router)
app.include_router(services_router)
app.include_router(dashboard_router)
app.include_router(demo_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Toda resposta de erro segue o formato {"error": mensagem}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    erros = "; ".join(
        f"{'.'.join(str(p) for p in erro['loc'][1:]) or 'body'}: {erro['msg']}"
        for erro in exc.errors()
    )
    logger.info(f"Requisição inválida em {request.url.path}: {erros}")
    return JSONResponse(status_code=400, content={"error": f"Dados inválidos: {erros}"})


@app.on_event("startup")
async def startup_event():
    """Inicializar serviços ao subir a aplicação"""
    logger.info("Iniciando API...")
    if settings.create_tables_on_startup:
        try:
            SQLModel.metadata.create_all(engine)
            logger.info("Tabelas verificadas/criadas no arranque")
        except Exception as e:
            logger.error(f"Erro criando tabelas no arranque: {e}")


@app.get("/health", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    """
    Endpoint de verificação de saúde

    Verifica o estado da API e a conexão com o banco de dados.
    """
    db_connected = False
    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
            db_connected = True
    except Exception as e:
        logger.error(f"Falha na verificação de conexão com o banco: {e}")

    return HealthStatus(
        status="healthy" if db_connected else "unhealthy",
        database_connected=db_connected,
        timestamp=datetime.now(),
        uptime_seconds=round(time.time() - startup_time, 2),
        version=API_VERSION,
    )


# ============================================================================
# EXECUTAR SERVIDOR
# ============================================================================

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,  # Desativar em produção
    )
