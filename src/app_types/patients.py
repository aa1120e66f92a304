"""
Pydantic types for patient registration
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app_types.common import CamelModel


class PatientCreate(CamelModel):
    """
    Request model for patient registration
    """

    name: str = Field(..., min_length=1, description="Nome do paciente")
    birth_date: Optional[date] = None
    cpf: str = Field(..., min_length=1, description="CPF do paciente")
    phone: str = ""
    email: Optional[str] = None
    address: str = ""

    # Responsável legal
    responsible_name: str = ""
    responsible_cpf: str = ""
    responsible_phone: str = ""

    consent_lgpd: bool = Field(default=False, alias="consentLGPD")
    special_alert: Optional[str] = Field(
        default=None, description="Alerta clínico livre (ex.: alergias)"
    )


class PatientUpdate(CamelModel):
    """
    Request model for patient edition; only informed fields change
    """

    name: Optional[str] = Field(default=None, min_length=1)
    birth_date: Optional[date] = None
    cpf: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    responsible_name: Optional[str] = None
    responsible_cpf: Optional[str] = None
    responsible_phone: Optional[str] = None
    consent_lgpd: Optional[bool] = Field(default=None, alias="consentLGPD")
    special_alert: Optional[str] = None

    @field_validator(
        "name",
        "cpf",
        "phone",
        "address",
        "responsible_name",
        "responsible_cpf",
        "responsible_phone",
        "consent_lgpd",
        mode="before",
    )
    @classmethod
    def rejeitar_nulo(cls, v):
        # Campos obrigatórios podem ser omitidos, mas não apagados
        if v is None:
            raise ValueError("campo obrigatório não pode ser nulo")
        return v


class PatientOut(PatientCreate):
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None


class PatientResponse(CamelModel):
    success: bool = True
    patient: PatientOut


class PatientListResponse(CamelModel):
    patients: List[PatientOut]
