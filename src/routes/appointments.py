"""
Rotas de atendimentos e amostras

Este módulo contém os endpoints para:
- Criação de atendimentos (com uma amostra por serviço)
- Busca e listagem para o quadro do laboratório
- Avanço de status pela cadeia fixa
- Remoção de atendimentos
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app_types.appointments import (
    AppointmentListResponse,
    AppointmentResponse,
    CreateAppointmentRequest,
    SampleListResponse,
    UpdateStatusRequest,
)
from app_types.auth import AuthenticatedUser
from app_types.common import SuccessResponse
from services.appointments import (
    amostra_para_resposta,
    atendimento_para_resposta,
    avancar_status,
    buscar_atendimentos,
    criar_atendimento,
    listar_amostras,
    obter_atendimento,
    remover_atendimento,
    resolver_nome_paciente,
    resolver_snapshots,
)
from utils.auth import get_current_user
from utils.errors import NeokidsError
from utils.logging_config import get_logger
from utils.settings import get_session

logger = get_logger(__name__)

router = APIRouter(tags=["atendimentos"], dependencies=[Depends(get_current_user)])


@router.post("/appointments", response_model=AppointmentResponse)
async def post_atendimento(
    request: CreateAppointmentRequest,
    session: Session = Depends(get_session),
    usuario: AuthenticatedUser = Depends(get_current_user),
) -> AppointmentResponse:
    """
    Criar atendimento

    Copia os serviços do catálogo com o preço vigente, calcula o total e gera
    uma amostra por serviço. Nasce em "Aguardando Coleta".
    """
    try:
        snapshots = resolver_snapshots(session, request.services)
        nome = resolver_nome_paciente(session, request.patient_id, request.patient_name)
        atendimento = criar_atendimento(
            session,
            patient_name=nome,
            snapshots=snapshots,
            patient_id=request.patient_id,
            insurance_type=request.insurance_type,
            created_by=usuario.id,
        )
        return AppointmentResponse(appointment=atendimento_para_resposta(atendimento))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao criar atendimento: {e}")
        raise HTTPException(status_code=500, detail="Erro ao criar atendimento")


@router.get("/appointments", response_model=AppointmentListResponse)
async def get_atendimentos(
    q: str = Query(default="", description="Nome do paciente, ID do atendimento ou da amostra"),
    status: Optional[str] = Query(default=None, description="Filtrar por status"),
    session: Session = Depends(get_session),
) -> AppointmentListResponse:
    """
    Listar atendimentos

    Sem parâmetros retorna todos; `q` faz busca sem diferenciar maiúsculas.
    """
    try:
        atendimentos = buscar_atendimentos(session, q, status)
        return AppointmentListResponse(
            appointments=[atendimento_para_resposta(a) for a in atendimentos]
        )
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar atendimentos: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar atendimentos")


@router.get("/appointments/{atendimento_id}", response_model=AppointmentResponse)
async def get_atendimento(
    atendimento_id: str,
    session: Session = Depends(get_session),
) -> AppointmentResponse:
    try:
        atendimento = obter_atendimento(session, atendimento_id)
        return AppointmentResponse(appointment=atendimento_para_resposta(atendimento))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar atendimento {atendimento_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar atendimento")


@router.patch("/appointments/{atendimento_id}/status", response_model=AppointmentResponse)
async def patch_status_atendimento(
    atendimento_id: str,
    request: UpdateStatusRequest,
    session: Session = Depends(get_session),
) -> AppointmentResponse:
    """
    Avançar status do atendimento

    Só aceita o status seguinte da cadeia:
    Aguardando Coleta -> Em Análise -> Aguardando Laudo -> Finalizado.
    Todas as amostras do atendimento recebem o mesmo status.
    """
    try:
        atendimento = avancar_status(
            session, atendimento_id, request.status, request.revision
        )
        return AppointmentResponse(appointment=atendimento_para_resposta(atendimento))
    except NeokidsError as e:
        if e.status_code >= 500:
            logger.error(f"Erro ao atualizar status de {atendimento_id}: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao atualizar status de {atendimento_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao atualizar status")


@router.delete("/appointments/{atendimento_id}", response_model=SuccessResponse)
async def delete_atendimento(
    atendimento_id: str,
    session: Session = Depends(get_session),
) -> SuccessResponse:
    try:
        remover_atendimento(session, atendimento_id)
        return SuccessResponse()
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao remover atendimento {atendimento_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao remover atendimento")


@router.get("/appointments/{atendimento_id}/samples", response_model=SampleListResponse)
async def get_amostras_do_atendimento(
    atendimento_id: str,
    session: Session = Depends(get_session),
) -> SampleListResponse:
    try:
        atendimento = obter_atendimento(session, atendimento_id)
        return SampleListResponse(
            samples=[amostra_para_resposta(a) for a in atendimento.amostras]
        )
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar amostras de {atendimento_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar amostras")


@router.get("/samples", response_model=SampleListResponse)
async def get_amostras(
    status: Optional[str] = Query(default=None, description="Filtrar por status"),
    session: Session = Depends(get_session),
) -> SampleListResponse:
    """
    Listar amostras para o laboratório
    """
    try:
        amostras = listar_amostras(session, status=status)
        return SampleListResponse(samples=[amostra_para_resposta(a) for a in amostras])
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar amostras: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar amostras")
