"""
Pydantic types for appointments and samples
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from app_types.common import CamelModel


class StatusAtendimento(str, Enum):
    """
    Cadeia de status do atendimento e de suas amostras

    Os valores são o contrato da API e não podem mudar.
    """

    AGUARDANDO_COLETA = "Aguardando Coleta"
    EM_ANALISE = "Em Análise"
    AGUARDANDO_LAUDO = "Aguardando Laudo"
    FINALIZADO = "Finalizado"


# Tabela de transições: cada status só avança para o seguinte
PROXIMO_STATUS: Dict[StatusAtendimento, Optional[StatusAtendimento]] = {
    StatusAtendimento.AGUARDANDO_COLETA: StatusAtendimento.EM_ANALISE,
    StatusAtendimento.EM_ANALISE: StatusAtendimento.AGUARDANDO_LAUDO,
    StatusAtendimento.AGUARDANDO_LAUDO: StatusAtendimento.FINALIZADO,
    StatusAtendimento.FINALIZADO: None,
}

STATUS_INICIAL = StatusAtendimento.AGUARDANDO_COLETA


class CreateAppointmentRequest(CamelModel):
    """
    Request model for appointment creation
    """

    patient_id: Optional[str] = Field(default=None, description="ID do paciente")
    patient_name: Optional[str] = Field(
        default=None, description="Nome do paciente quando não há cadastro"
    )
    services: List[str] = Field(..., description="IDs dos serviços, em ordem")
    insurance_type: Optional[str] = Field(default=None, description="Convênio")


class UpdateStatusRequest(CamelModel):
    """
    Request model for status transitions
    """

    status: str = Field(..., description="Próximo status da cadeia")
    revision: Optional[int] = Field(
        default=None, description="Revisão vista pelo cliente"
    )


class ServiceSnapshot(CamelModel):
    """Serviço como foi cobrado no atendimento"""

    id: str
    name: str
    code: str = ""
    category: str = ""
    base_price: float
    operational_cost: float = 0.0
    estimated_time: str = ""
    instructions: str = ""


class AppointmentOut(CamelModel):
    id: str
    patient_id: Optional[str] = None
    patient_name: str
    services: List[ServiceSnapshot]
    status: str
    total_amount: float
    sample_ids: List[str]
    insurance_type: Optional[str] = None
    revision: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None


class SampleOut(CamelModel):
    id: str
    appointment_id: str
    service_id: str
    position: int
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class AppointmentResponse(CamelModel):
    success: bool = True
    appointment: AppointmentOut


class AppointmentListResponse(CamelModel):
    appointments: List[AppointmentOut]


class SampleListResponse(CamelModel):
    samples: List[SampleOut]
