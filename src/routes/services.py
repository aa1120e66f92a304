"""
Rotas do catálogo de serviços
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app_types.auth import AuthenticatedUser
from app_types.catalog import (
    ServiceCreate,
    ServiceListResponse,
    ServiceResponse,
    ServiceUpdate,
)
from app_types.common import SuccessResponse
from services.catalog import (
    atualizar_servico,
    criar_servico,
    listar_servicos,
    obter_servico,
    remover_servico,
    servico_para_resposta,
)
from utils.auth import get_current_user
from utils.errors import NeokidsError
from utils.logging_config import get_logger
from utils.settings import get_session

logger = get_logger(__name__)

router = APIRouter(
    prefix="/services", tags=["catálogo"], dependencies=[Depends(get_current_user)]
)


@router.post("", response_model=ServiceResponse)
async def post_servico(
    dados: ServiceCreate,
    session: Session = Depends(get_session),
    usuario: AuthenticatedUser = Depends(get_current_user),
) -> ServiceResponse:
    try:
        servico = criar_servico(session, dados, created_by=usuario.id)
        return ServiceResponse(service=servico_para_resposta(servico))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao criar serviço: {e}")
        raise HTTPException(status_code=500, detail="Erro ao criar serviço")


@router.get("", response_model=ServiceListResponse)
async def get_servicos(session: Session = Depends(get_session)) -> ServiceListResponse:
    """
    Listar catálogo

    Cada item traz a margem calculada: (basePrice - operationalCost) / basePrice.
    """
    try:
        servicos = listar_servicos(session)
        return ServiceListResponse(services=[servico_para_resposta(s) for s in servicos])
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar serviços: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar serviços")


@router.get("/{servico_id}", response_model=ServiceResponse)
async def get_servico(
    servico_id: str,
    session: Session = Depends(get_session),
) -> ServiceResponse:
    try:
        servico = obter_servico(session, servico_id)
        return ServiceResponse(service=servico_para_resposta(servico))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar serviço {servico_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar serviço")


@router.put("/{servico_id}", response_model=ServiceResponse)
async def put_servico(
    servico_id: str,
    dados: ServiceUpdate,
    session: Session = Depends(get_session),
) -> ServiceResponse:
    """
    Atualizar serviço

    Atendimentos já criados mantêm o preço copiado no pedido.
    """
    try:
        servico = atualizar_servico(session, servico_id, dados)
        return ServiceResponse(service=servico_para_resposta(servico))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao atualizar serviço {servico_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao atualizar serviço")


@router.delete("/{servico_id}", response_model=SuccessResponse)
async def delete_servico(
    servico_id: str,
    session: Session = Depends(get_session),
) -> SuccessResponse:
    try:
        remover_servico(session, servico_id)
        return SuccessResponse()
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao remover serviço {servico_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao remover serviço")
