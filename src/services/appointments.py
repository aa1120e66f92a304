"""
Serviço de atendimentos e amostras

Cria atendimentos com suas amostras numa única transação, avança o status
pela cadeia fixa e responde às consultas do quadro do laboratório.
"""

from typing import List, Optional, Sequence

from sqlalchemy import func, or_, update
from sqlmodel import Session, select

from app_types.appointments import (
    PROXIMO_STATUS,
    STATUS_INICIAL,
    AppointmentOut,
    SampleOut,
    ServiceSnapshot,
    StatusAtendimento,
)
from models.tables import (
    Amostra,
    Atendimento,
    Paciente,
    Servico,
    ServicoAtendimento,
    agora_utc,
)
from utils.errors import (
    ConflictError,
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
)
from utils.ids import gerar_id
from utils.logging_config import get_logger
from utils.settings import transaction

logger = get_logger(__name__)


def snapshot_de_servico(servico: Servico) -> ServiceSnapshot:
    """Copiar o serviço do catálogo com o preço vigente"""
    return ServiceSnapshot(
        id=servico.id,
        name=servico.name,
        code=servico.code,
        category=servico.category,
        base_price=servico.base_price,
        operational_cost=servico.operational_cost,
        estimated_time=servico.estimated_time,
        instructions=servico.instructions,
    )


def resolver_snapshots(session: Session, service_ids: Sequence[str]) -> List[ServiceSnapshot]:
    """
    Converter IDs do catálogo em snapshots, preservando a ordem

    Raises:
        InvalidInputError: lista vazia
        NotFoundError: algum ID não existe no catálogo
    """
    if not service_ids:
        raise InvalidInputError("Selecione ao menos um serviço")

    snapshots = []
    for service_id in service_ids:
        servico = session.get(Servico, service_id)
        if servico is None:
            raise NotFoundError(f"Serviço não encontrado: {service_id}")
        snapshots.append(snapshot_de_servico(servico))
    return snapshots


def resolver_nome_paciente(
    session: Session,
    patient_id: Optional[str],
    patient_name: Optional[str],
) -> str:
    """Nome a gravar no atendimento: do cadastro, ou o informado"""
    if patient_id:
        paciente = session.get(Paciente, patient_id)
        if paciente is None:
            raise NotFoundError(f"Paciente não encontrado: {patient_id}")
        return paciente.name
    if patient_name and patient_name.strip():
        return patient_name.strip()
    raise InvalidInputError("Informe o paciente do atendimento")


def criar_atendimento(
    session: Session,
    patient_name: str,
    snapshots: Sequence[ServiceSnapshot],
    patient_id: Optional[str] = None,
    insurance_type: Optional[str] = None,
    created_by: Optional[str] = None,
) -> Atendimento:
    """
    Criar atendimento com uma amostra por serviço

    Atendimento, snapshots e amostras são gravados na mesma transação.

    Args:
        session: Sessão de banco de dados
        patient_name: Nome do paciente
        snapshots: Serviços com o preço capturado no pedido, em ordem
        patient_id: Vínculo opcional com o cadastro
        insurance_type: Convênio
        created_by: ID do usuário autenticado

    Returns:
        Atendimento criado, no status inicial
    """
    if not snapshots:
        raise InvalidInputError("Selecione ao menos um serviço")

    atendimento_id = gerar_id("appointment")
    criado_em = agora_utc()

    atendimento = Atendimento(
        id=atendimento_id,
        patient_id=patient_id,
        patient_name=patient_name,
        insurance_type=insurance_type,
        status=STATUS_INICIAL.value,
        total_amount=sum(s.base_price for s in snapshots),
        revision=0,
        created_at=criado_em,
        created_by=created_by,
    )

    for posicao, snapshot in enumerate(snapshots):
        atendimento.servicos.append(
            ServicoAtendimento(
                position=posicao,
                service_id=snapshot.id,
                name=snapshot.name,
                code=snapshot.code,
                category=snapshot.category,
                base_price=snapshot.base_price,
                operational_cost=snapshot.operational_cost,
                estimated_time=snapshot.estimated_time,
                instructions=snapshot.instructions,
            )
        )
        atendimento.amostras.append(
            Amostra(
                id=gerar_id("sample"),
                position=posicao,
                service_id=snapshot.id,
                status=STATUS_INICIAL.value,
                created_at=criado_em,
            )
        )

    with transaction(session):
        session.add(atendimento)

    session.refresh(atendimento)
    logger.info(
        f"Atendimento {atendimento.id} criado para '{patient_name}' "
        f"com {len(snapshots)} amostra(s), total {atendimento.total_amount:.2f}"
    )
    return atendimento


def obter_atendimento(session: Session, atendimento_id: str) -> Atendimento:
    atendimento = session.get(Atendimento, atendimento_id)
    if atendimento is None:
        raise NotFoundError("Atendimento não encontrado")
    return atendimento


def validar_transicao(atual: str, solicitado: str) -> StatusAtendimento:
    """
    Validar que `solicitado` é exatamente o sucessor de `atual`

    Returns:
        Status solicitado já convertido para o enum
    """
    try:
        novo = StatusAtendimento(solicitado)
    except ValueError as e:
        raise InvalidInputError(f"Status desconhecido: {solicitado}") from e

    status_atual = StatusAtendimento(atual)
    proximo = PROXIMO_STATUS[status_atual]
    if proximo is None:
        raise InvalidTransitionError(
            f"Atendimento já está '{status_atual.value}' e não pode avançar"
        )
    if novo != proximo:
        raise InvalidTransitionError(
            f"Transição inválida: '{status_atual.value}' só avança para '{proximo.value}'"
        )
    return novo


def avancar_status(
    session: Session,
    atendimento_id: str,
    status_solicitado: str,
    revisao_esperada: Optional[int] = None,
) -> Atendimento:
    """
    Avançar o atendimento para o próximo status e replicar nas amostras

    A escrita usa compare-and-swap sobre `revision`: se outro operador
    atualizou o atendimento depois da leitura, falha com ConflictError.

    Args:
        session: Sessão de banco de dados
        atendimento_id: ID do atendimento
        status_solicitado: Próximo status da cadeia
        revisao_esperada: Revisão que o cliente viu, se informada
    """
    atendimento = obter_atendimento(session, atendimento_id)
    revisao = atendimento.revision

    if revisao_esperada is not None and revisao_esperada != revisao:
        raise ConflictError(
            f"Atendimento alterado por outro usuário (revisão {revisao})"
        )

    novo_status = validar_transicao(atendimento.status, status_solicitado)
    atualizado_em = agora_utc()

    with transaction(session):
        resultado = session.execute(
            update(Atendimento)
            .where(Atendimento.id == atendimento_id)
            .where(Atendimento.revision == revisao)
            .values(
                status=novo_status.value,
                revision=revisao + 1,
                updated_at=atualizado_em,
            )
            .execution_options(synchronize_session=False)
        )
        if resultado.rowcount != 1:
            raise ConflictError("Atendimento alterado por outro usuário")

        session.execute(
            update(Amostra)
            .where(Amostra.appointment_id == atendimento_id)
            .values(status=novo_status.value, updated_at=atualizado_em)
            .execution_options(synchronize_session=False)
        )

    session.expire_all()
    atendimento = obter_atendimento(session, atendimento_id)
    logger.info(
        f"Atendimento {atendimento_id} avançou para '{novo_status.value}' "
        f"(revisão {atendimento.revision}, {len(atendimento.amostras)} amostra(s))"
    )
    return atendimento


def buscar_atendimentos(
    session: Session,
    query: str = "",
    status: Optional[str] = None,
) -> List[Atendimento]:
    """
    Buscar atendimentos por nome do paciente, ID do atendimento ou ID de amostra

    A busca ignora maiúsculas/minúsculas; consulta vazia retorna todos.
    """
    statement = select(Atendimento)

    termo = (query or "").strip().lower()
    if termo:
        amostras_correspondentes = select(Amostra.appointment_id).where(
            func.lower(Amostra.id).contains(termo, autoescape=True)
        )
        statement = statement.where(
            or_(
                func.lower(Atendimento.patient_name).contains(termo, autoescape=True),
                func.lower(Atendimento.id).contains(termo, autoescape=True),
                Atendimento.id.in_(amostras_correspondentes),  # type: ignore[union-attr]
            )
        )

    if status:
        statement = statement.where(Atendimento.status == status)

    statement = statement.order_by(Atendimento.created_at)
    return list(session.exec(statement).all())


def remover_atendimento(session: Session, atendimento_id: str) -> None:
    """Remover atendimento junto com snapshots e amostras"""
    atendimento = obter_atendimento(session, atendimento_id)
    with transaction(session):
        session.delete(atendimento)
    logger.info(f"Atendimento {atendimento_id} removido")


def listar_amostras(
    session: Session,
    status: Optional[str] = None,
    atendimento_id: Optional[str] = None,
) -> List[Amostra]:
    statement = select(Amostra)
    if status:
        statement = statement.where(Amostra.status == status)
    if atendimento_id:
        statement = statement.where(Amostra.appointment_id == atendimento_id)
    statement = statement.order_by(Amostra.appointment_id, Amostra.position)
    return list(session.exec(statement).all())


def atendimento_para_resposta(atendimento: Atendimento) -> AppointmentOut:
    """Montar a representação da API a partir das tabelas"""
    return AppointmentOut(
        id=atendimento.id,
        patient_id=atendimento.patient_id,
        patient_name=atendimento.patient_name,
        services=[
            ServiceSnapshot(
                id=item.service_id,
                name=item.name,
                code=item.code,
                category=item.category,
                base_price=item.base_price,
                operational_cost=item.operational_cost,
                estimated_time=item.estimated_time,
                instructions=item.instructions,
            )
            for item in atendimento.servicos
        ],
        status=atendimento.status,
        total_amount=atendimento.total_amount or 0.0,
        sample_ids=[amostra.id for amostra in atendimento.amostras],
        insurance_type=atendimento.insurance_type,
        revision=atendimento.revision,
        created_at=atendimento.created_at,
        updated_at=atendimento.updated_at,
        created_by=atendimento.created_by,
    )


def amostra_para_resposta(amostra: Amostra) -> SampleOut:
    return SampleOut.model_validate(amostra)
