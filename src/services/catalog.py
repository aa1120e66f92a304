"""
Serviço do catálogo de serviços e preços
"""

from typing import List, Optional

from sqlmodel import Session, select

from app_types.appointments import StatusAtendimento
from app_types.catalog import ServiceCreate, ServiceOut, ServiceUpdate
from models.tables import Atendimento, Servico, ServicoAtendimento, agora_utc
from utils.errors import ConflictError, NotFoundError
from utils.ids import gerar_id
from utils.logging_config import get_logger
from utils.settings import transaction

logger = get_logger(__name__)


def calcular_margem(base_price: float, operational_cost: float) -> float:
    """Margem de contribuição; zero quando o preço é zero"""
    if not base_price:
        return 0.0
    return (base_price - operational_cost) / base_price


def criar_servico(
    session: Session,
    dados: ServiceCreate,
    created_by: Optional[str] = None,
) -> Servico:
    servico = Servico(
        id=gerar_id("service"),
        **dados.model_dump(mode="json"),
        created_at=agora_utc(),
        created_by=created_by,
    )
    with transaction(session):
        session.add(servico)
    session.refresh(servico)
    logger.info(f"Serviço {servico.id} ({servico.code}) criado")
    return servico


def obter_servico(session: Session, servico_id: str) -> Servico:
    servico = session.get(Servico, servico_id)
    if servico is None:
        raise NotFoundError("Serviço não encontrado")
    return servico


def listar_servicos(session: Session) -> List[Servico]:
    statement = select(Servico).order_by(Servico.category, Servico.name)
    return list(session.exec(statement).all())


def atualizar_servico(
    session: Session,
    servico_id: str,
    dados: ServiceUpdate,
) -> Servico:
    """
    Atualizar serviço do catálogo

    Atendimentos já criados mantêm o snapshot com o preço antigo.
    """
    servico = obter_servico(session, servico_id)
    for campo, valor in dados.model_dump(mode="json", exclude_unset=True).items():
        setattr(servico, campo, valor)
    servico.updated_at = agora_utc()

    with transaction(session):
        session.add(servico)
    session.refresh(servico)
    logger.info(f"Serviço {servico_id} atualizado")
    return servico


def remover_servico(session: Session, servico_id: str) -> None:
    """
    Remover serviço do catálogo

    Bloqueado enquanto algum atendimento não finalizado o tiver pedido.
    """
    servico = obter_servico(session, servico_id)
    ativos = session.exec(
        select(Atendimento.id)
        .join(ServicoAtendimento)
        .where(ServicoAtendimento.service_id == servico_id)
        .where(Atendimento.status != StatusAtendimento.FINALIZADO.value)
        .distinct()
    ).all()
    if ativos:
        raise ConflictError(
            f"Serviço pedido em {len(ativos)} atendimento(s) em andamento"
        )

    with transaction(session):
        session.delete(servico)
    logger.info(f"Serviço {servico_id} removido")


def servico_para_resposta(servico: Servico) -> ServiceOut:
    return ServiceOut(
        id=servico.id,
        name=servico.name,
        category=servico.category,
        code=servico.code,
        base_price=servico.base_price,
        operational_cost=servico.operational_cost,
        margin=calcular_margem(servico.base_price, servico.operational_cost),
        estimated_time=servico.estimated_time,
        instructions=servico.instructions,
        created_at=servico.created_at,
        updated_at=servico.updated_at,
        created_by=servico.created_by,
    )
