"""
Pydantic types for the service catalog
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from app_types.common import CamelModel


class CategoriaServico(str, Enum):
    """
    Categorias fixas do catálogo
    """

    ANALISES_CLINICAS = "Análises Clínicas"
    EXAMES_DE_IMAGEM = "Exames de Imagem"
    VACINAS = "Vacinas"
    CONSULTAS = "Consultas"
    PROCEDIMENTOS = "Procedimentos"


class ServiceCreate(CamelModel):
    """
    Request model for catalog items
    """

    name: str = Field(..., min_length=1)
    category: CategoriaServico
    code: str = Field(..., min_length=1, description="Código interno (ex.: HG001)")
    base_price: float = Field(..., ge=0.0, description="Preço de venda")
    operational_cost: float = Field(default=0.0, ge=0.0, description="Custo operacional")
    estimated_time: str = ""
    instructions: str = Field(default="", description="Instruções de preparo")


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[CategoriaServico] = None
    code: Optional[str] = Field(default=None, min_length=1)
    base_price: Optional[float] = Field(default=None, ge=0.0)
    operational_cost: Optional[float] = Field(default=None, ge=0.0)
    estimated_time: Optional[str] = None
    instructions: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def rejeitar_nulo(cls, v):
        # Todas as colunas do catálogo são NOT NULL
        if v is None:
            raise ValueError("campo obrigatório não pode ser nulo")
        return v


class ServiceOut(CamelModel):
    id: str
    name: str
    category: str
    code: str
    base_price: float
    operational_cost: float
    margin: float = Field(..., description="(basePrice - operationalCost) / basePrice")
    estimated_time: str
    instructions: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None


class ServiceResponse(CamelModel):
    success: bool = True
    service: ServiceOut


class ServiceListResponse(CamelModel):
    services: List[ServiceOut]
