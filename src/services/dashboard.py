from collections import Counter
from datetime import date, datetime, timezone
from typing import Iterable, Optional

from sqlmodel import Session, select

from app_types.dashboard import DashboardStats
from models.tables import Atendimento
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _data_utc(momento: datetime) -> date:
    # Colunas com fuso; o SQLite devolve sem fuso o valor gravado em UTC
    if momento.tzinfo is not None:
        momento = momento.astimezone(timezone.utc)
    return momento.date()


def calcular_estatisticas(
    atendimentos: Iterable[Atendimento],
    data_referencia: date,
) -> DashboardStats:
    """
    Calcular estatísticas do painel gerencial

    Varredura pura sobre os atendimentos, sem efeitos colaterais.

    Args:
        atendimentos: Atendimentos a agregar
        data_referencia: Dia considerado "hoje" (UTC)

    Returns:
        Totais, receita, histograma de status e ticket médio
    """
    total = 0
    total_hoje = 0
    receita_total = 0.0
    receita_hoje = 0.0
    contagem_status: Counter = Counter()

    for atendimento in atendimentos:
        valor = atendimento.total_amount or 0.0
        total += 1
        receita_total += valor
        contagem_status[atendimento.status] += 1

        if atendimento.created_at and _data_utc(atendimento.created_at) == data_referencia:
            total_hoje += 1
            receita_hoje += valor

    return DashboardStats(
        total_appointments=total,
        today_appointments=total_hoje,
        total_revenue=receita_total,
        today_revenue=receita_hoje,
        status_counts=dict(contagem_status),
        average_ticket=receita_total / total if total > 0 else 0.0,
    )


def obter_estatisticas(
    session: Session,
    data_referencia: Optional[date] = None,
) -> DashboardStats:
    """Carregar todos os atendimentos e agregá-los"""
    if data_referencia is None:
        data_referencia = datetime.now(timezone.utc).date()

    atendimentos = session.exec(select(Atendimento)).all()
    estatisticas = calcular_estatisticas(atendimentos, data_referencia)
    logger.debug(
        f"Estatísticas calculadas: {estatisticas.total_appointments} atendimento(s), "
        f"receita total {estatisticas.total_revenue:.2f}"
    )
    return estatisticas
