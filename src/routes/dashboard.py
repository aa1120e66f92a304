"""
Rotas do painel gerencial
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app_types.dashboard import DashboardStats
from services.dashboard import obter_estatisticas
from utils.auth import get_current_user
from utils.errors import NeokidsError
from utils.logging_config import get_logger
from utils.settings import get_session

logger = get_logger(__name__)

router = APIRouter(
    prefix="/dashboard", tags=["painel"], dependencies=[Depends(get_current_user)]
)


@router.get("/stats", response_model=DashboardStats)
async def get_estatisticas(session: Session = Depends(get_session)) -> DashboardStats:
    """
    Estatísticas do painel

    Total e atendimentos do dia, receita total e do dia, contagem por status
    (status ausentes não aparecem) e ticket médio.
    """
    try:
        return obter_estatisticas(session)
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar estatísticas: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar estatísticas")
