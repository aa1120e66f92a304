"""
Rotas de cadastro de pacientes
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app_types.auth import AuthenticatedUser
from app_types.common import SuccessResponse
from app_types.patients import (
    PatientCreate,
    PatientListResponse,
    PatientResponse,
    PatientUpdate,
)
from services.patients import (
    atualizar_paciente,
    buscar_pacientes,
    criar_paciente,
    obter_paciente,
    paciente_para_resposta,
    remover_paciente,
)
from utils.auth import get_current_user
from utils.errors import NeokidsError
from utils.logging_config import get_logger
from utils.settings import get_session

logger = get_logger(__name__)

router = APIRouter(
    prefix="/patients", tags=["pacientes"], dependencies=[Depends(get_current_user)]
)


@router.post("", response_model=PatientResponse)
async def post_paciente(
    dados: PatientCreate,
    session: Session = Depends(get_session),
    usuario: AuthenticatedUser = Depends(get_current_user),
) -> PatientResponse:
    try:
        paciente = criar_paciente(session, dados, created_by=usuario.id)
        return PatientResponse(patient=paciente_para_resposta(paciente))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao criar paciente: {e}")
        raise HTTPException(status_code=500, detail="Erro ao criar paciente")


@router.get("", response_model=PatientListResponse)
async def get_pacientes(session: Session = Depends(get_session)) -> PatientListResponse:
    try:
        pacientes = buscar_pacientes(session)
        return PatientListResponse(patients=[paciente_para_resposta(p) for p in pacientes])
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao listar pacientes: {e}")
        raise HTTPException(status_code=500, detail="Erro ao listar pacientes")


@router.get("/search", response_model=PatientListResponse)
async def search_pacientes(
    q: str = Query(default="", description="Nome, CPF, responsável ou telefone"),
    session: Session = Depends(get_session),
) -> PatientListResponse:
    """
    Buscar pacientes

    Busca sem diferenciar maiúsculas em nome, CPF, nome do responsável e telefone.
    """
    try:
        pacientes = buscar_pacientes(session, q)
        return PatientListResponse(patients=[paciente_para_resposta(p) for p in pacientes])
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro na busca de pacientes: {e}")
        raise HTTPException(status_code=500, detail="Erro na busca de pacientes")


@router.get("/{paciente_id}", response_model=PatientResponse)
async def get_paciente(
    paciente_id: str,
    session: Session = Depends(get_session),
) -> PatientResponse:
    try:
        paciente = obter_paciente(session, paciente_id)
        return PatientResponse(patient=paciente_para_resposta(paciente))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao buscar paciente {paciente_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao buscar paciente")


@router.put("/{paciente_id}", response_model=PatientResponse)
async def put_paciente(
    paciente_id: str,
    dados: PatientUpdate,
    session: Session = Depends(get_session),
) -> PatientResponse:
    try:
        paciente = atualizar_paciente(session, paciente_id, dados)
        return PatientResponse(patient=paciente_para_resposta(paciente))
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao atualizar paciente {paciente_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao atualizar paciente")


@router.delete("/{paciente_id}", response_model=SuccessResponse)
async def delete_paciente(
    paciente_id: str,
    session: Session = Depends(get_session),
) -> SuccessResponse:
    """
    Remover paciente

    Retorna 409 enquanto houver atendimento em andamento do paciente.
    """
    try:
        remover_paciente(session, paciente_id)
        return SuccessResponse()
    except NeokidsError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Erro ao remover paciente {paciente_id}: {e}")
        raise HTTPException(status_code=500, detail="Erro ao remover paciente")
