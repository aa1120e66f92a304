"""
Modelos de banco de dados da clínica

Define as tabelas principais:
- Paciente: cadastro do paciente e do responsável legal
- Servico: item do catálogo com preço e custo operacional
- Atendimento: visita faturável com os serviços pedidos
- ServicoAtendimento: cópia (snapshot) do serviço no momento do pedido
- Amostra: rastreio laboratorial, uma por serviço do atendimento
"""

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from app_types.appointments import StatusAtendimento


def agora_utc() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# MODELO PACIENTE
# ============================================================================
class Paciente(SQLModel, table=True):
    """
    Tabela de pacientes

    Guarda identificação, contato e dados do responsável legal.
    """

    id: str = Field(primary_key=True)

    # Identificação
    name: str = Field(index=True)
    birth_date: Optional[date] = Field(default=None)
    cpf: str = Field(index=True)

    # Contato
    phone: str = ""
    email: Optional[str] = Field(default=None)
    address: str = ""

    # Responsável legal
    responsible_name: str = ""
    responsible_cpf: str = ""
    responsible_phone: str = ""

    consent_lgpd: bool = False
    special_alert: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=agora_utc, sa_type=DateTime(timezone=True))
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_by: Optional[str] = Field(default=None)


# ============================================================================
# MODELO SERVICO
# ============================================================================
class Servico(SQLModel, table=True):
    """
    Tabela do catálogo de serviços

    Atendimentos não referenciam esta tabela diretamente: copiam o serviço
    para ServicoAtendimento no momento do pedido.
    """

    id: str = Field(primary_key=True)

    name: str
    category: str = Field(index=True)
    code: str = Field(index=True)

    # Preço e custo
    base_price: float = 0.0
    operational_cost: float = 0.0

    estimated_time: str = ""
    instructions: str = ""

    created_at: datetime = Field(default_factory=agora_utc, sa_type=DateTime(timezone=True))
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_by: Optional[str] = Field(default=None)


# ============================================================================
# MODELO ATENDIMENTO
# ============================================================================
class Atendimento(SQLModel, table=True):
    """
    Tabela de atendimentos

    `revision` é incrementado a cada mudança de status e usado como
    compare-and-swap nas atualizações.
    """

    id: str = Field(primary_key=True)

    # Paciente: vínculo opcional, nome sempre copiado
    patient_id: Optional[str] = Field(
        default=None, foreign_key="paciente.id", index=True, ondelete="SET NULL"
    )
    patient_name: str = Field(index=True)
    insurance_type: Optional[str] = Field(default=None)

    status: str = Field(default=StatusAtendimento.AGUARDANDO_COLETA.value, index=True)
    total_amount: float = 0.0
    revision: int = 0

    created_at: datetime = Field(
        default_factory=agora_utc, sa_type=DateTime(timezone=True), index=True
    )
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_by: Optional[str] = Field(default=None)

    # Relações um-para-muitos, ordenadas pela posição do pedido
    servicos: List["ServicoAtendimento"] = Relationship(
        back_populates="atendimento",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "ServicoAtendimento.position",
        },
    )
    amostras: List["Amostra"] = Relationship(
        back_populates="atendimento",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "Amostra.position",
        },
    )


# ============================================================================
# MODELO SERVICO DO ATENDIMENTO (SNAPSHOT)
# ============================================================================
class ServicoAtendimento(SQLModel, table=True):
    """Cópia imutável do serviço no momento do pedido"""

    __tablename__ = "servico_atendimento"  # type: ignore[assignment]

    id: Optional[int] = Field(default=None, primary_key=True)
    position: int

    # Sem chave estrangeira: o serviço do catálogo pode ser removido depois
    service_id: str = Field(index=True)
    name: str
    code: str = ""
    category: str = ""
    base_price: float = 0.0
    operational_cost: float = 0.0
    estimated_time: str = ""
    instructions: str = ""

    appointment_id: str = Field(foreign_key="atendimento.id", index=True)
    atendimento: Atendimento = Relationship(back_populates="servicos")


# ============================================================================
# MODELO AMOSTRA
# ============================================================================
class Amostra(SQLModel, table=True):
    """
    Tabela de amostras

    Uma por serviço pedido; o status acompanha sempre o do atendimento.
    """

    id: str = Field(primary_key=True)
    position: int
    service_id: str

    status: str = Field(default=StatusAtendimento.AGUARDANDO_COLETA.value, index=True)

    created_at: datetime = Field(default_factory=agora_utc, sa_type=DateTime(timezone=True))
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    appointment_id: str = Field(foreign_key="atendimento.id", index=True)
    atendimento: Atendimento = Relationship(back_populates="amostras")
