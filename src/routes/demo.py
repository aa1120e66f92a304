"""
Rota de inicialização dos dados de demonstração
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from services.demo import inicializar_dados_demo
from utils.errors import NeokidsError
from utils.logging_config import get_logger
from utils.settings import get_session, settings

logger = get_logger(__name__)

router = APIRouter(prefix="/demo", tags=["demonstração"])


@router.post("/init")
async def post_inicializar_demo(
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """
    Criar dados de demonstração

    Disponível apenas com ENABLE_DEMO_SEED=true.
    """
    if not settings.enable_demo_seed:
        raise HTTPException(status_code=404, detail="Not Found")

    try:
        criados = inicializar_dados_demo(session)
        return {
            "success": True,
            "message": "Dados de demonstração criados com sucesso",
            **criados,
        }
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao inicializar demo: {e}")
        raise HTTPException(
            status_code=500, detail="Erro ao inicializar dados de demonstração"
        )
