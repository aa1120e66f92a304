"""
Serviço de cadastro de pacientes
"""

from typing import List, Optional

from sqlalchemy import func, or_
from sqlmodel import Session, select

from app_types.appointments import StatusAtendimento
from app_types.patients import PatientCreate, PatientOut, PatientUpdate
from models.tables import Atendimento, Paciente, agora_utc
from utils.errors import ConflictError, NotFoundError
from utils.ids import gerar_id
from utils.logging_config import get_logger
from utils.settings import transaction

logger = get_logger(__name__)


def criar_paciente(
    session: Session,
    dados: PatientCreate,
    created_by: Optional[str] = None,
) -> Paciente:
    paciente = Paciente(
        id=gerar_id("patient"),
        **dados.model_dump(),
        created_at=agora_utc(),
        created_by=created_by,
    )
    with transaction(session):
        session.add(paciente)
    session.refresh(paciente)
    logger.info(f"Paciente {paciente.id} cadastrado")
    return paciente


def obter_paciente(session: Session, paciente_id: str) -> Paciente:
    paciente = session.get(Paciente, paciente_id)
    if paciente is None:
        raise NotFoundError("Paciente não encontrado")
    return paciente


def buscar_pacientes(session: Session, query: str = "") -> List[Paciente]:
    """
    Buscar pacientes por nome, CPF, nome do responsável ou telefone

    Consulta vazia retorna todos os pacientes.
    """
    statement = select(Paciente)
    termo = (query or "").strip().lower()
    if termo:
        statement = statement.where(
            or_(
                func.lower(Paciente.name).contains(termo, autoescape=True),
                func.lower(Paciente.cpf).contains(termo, autoescape=True),
                func.lower(Paciente.responsible_name).contains(termo, autoescape=True),
                func.lower(Paciente.phone).contains(termo, autoescape=True),
            )
        )
    statement = statement.order_by(Paciente.name)
    return list(session.exec(statement).all())


def atualizar_paciente(
    session: Session,
    paciente_id: str,
    dados: PatientUpdate,
) -> Paciente:
    paciente = obter_paciente(session, paciente_id)
    for campo, valor in dados.model_dump(exclude_unset=True).items():
        setattr(paciente, campo, valor)
    paciente.updated_at = agora_utc()

    with transaction(session):
        session.add(paciente)
    session.refresh(paciente)
    logger.info(f"Paciente {paciente_id} atualizado")
    return paciente


def remover_paciente(session: Session, paciente_id: str) -> None:
    """
    Remover paciente

    Bloqueado enquanto houver atendimento não finalizado do paciente.
    Atendimentos finalizados perdem apenas o vínculo; o nome continua gravado.
    """
    paciente = obter_paciente(session, paciente_id)
    atendimentos = session.exec(
        select(Atendimento).where(Atendimento.patient_id == paciente_id)
    ).all()

    ativos = [a for a in atendimentos if a.status != StatusAtendimento.FINALIZADO.value]
    if ativos:
        raise ConflictError(
            f"Paciente possui {len(ativos)} atendimento(s) em andamento"
        )

    with transaction(session):
        for atendimento in atendimentos:
            atendimento.patient_id = None
            session.add(atendimento)
        session.delete(paciente)
    logger.info(f"Paciente {paciente_id} removido")


def paciente_para_resposta(paciente: Paciente) -> PatientOut:
    return PatientOut.model_validate(paciente)
