"""
Types module for API request/response models
"""

from app_types.appointments import (
    PROXIMO_STATUS,
    STATUS_INICIAL,
    AppointmentListResponse,
    AppointmentOut,
    AppointmentResponse,
    CreateAppointmentRequest,
    SampleListResponse,
    SampleOut,
    ServiceSnapshot,
    StatusAtendimento,
    UpdateStatusRequest,
)
from app_types.auth import AuthenticatedUser
from app_types.catalog import (
    CategoriaServico,
    ServiceCreate,
    ServiceListResponse,
    ServiceOut,
    ServiceResponse,
    ServiceUpdate,
)
from app_types.common import CamelModel, SuccessResponse
from app_types.dashboard import DashboardStats
from app_types.monitoring import HealthStatus
from app_types.patients import (
    PatientCreate,
    PatientListResponse,
    PatientOut,
    PatientResponse,
    PatientUpdate,
)

__all__ = [
    # Common
    "CamelModel",
    "SuccessResponse",
    "AuthenticatedUser",
    # Appointment types
    "StatusAtendimento",
    "PROXIMO_STATUS",
    "STATUS_INICIAL",
    "CreateAppointmentRequest",
    "UpdateStatusRequest",
    "ServiceSnapshot",
    "AppointmentOut",
    "AppointmentResponse",
    "AppointmentListResponse",
    "SampleOut",
    "SampleListResponse",
    # Catalog types
    "CategoriaServico",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceOut",
    "ServiceResponse",
    "ServiceListResponse",
    # Patient types
    "PatientCreate",
    "PatientUpdate",
    "PatientOut",
    "PatientResponse",
    "PatientListResponse",
    # Dashboard / monitoring
    "DashboardStats",
    "HealthStatus",
]
