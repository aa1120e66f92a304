"""
Dados de demonstração

Popula o catálogo com os exames padrão e cadastra uma paciente de exemplo.
"""

from datetime import date
from typing import Any, Dict, List

from sqlmodel import Session, select

from app_types.catalog import CategoriaServico
from models.tables import Paciente, Servico, agora_utc
from utils.ids import gerar_id
from utils.logging_config import get_logger
from utils.settings import transaction

logger = get_logger(__name__)

SERVICOS_DEMO: List[Dict[str, Any]] = [
    {
        "name": "Hemograma Completo",
        "category": CategoriaServico.ANALISES_CLINICAS.value,
        "code": "HG001",
        "base_price": 45.00,
        "operational_cost": 12.00,
        "estimated_time": "2-4 horas",
        "instructions": "Não é necessário jejum. Evitar exercícios físicos intensos 24h antes.",
    },
    {
        "name": "Glicemia de Jejum",
        "category": CategoriaServico.ANALISES_CLINICAS.value,
        "code": "GL001",
        "base_price": 25.00,
        "operational_cost": 6.00,
        "estimated_time": "2 horas",
        "instructions": "Jejum de 8 a 12 horas. Apenas água é permitida.",
    },
    {
        "name": "Radiografia de Tórax",
        "category": CategoriaServico.EXAMES_DE_IMAGEM.value,
        "code": "RX001",
        "base_price": 120.00,
        "operational_cost": 35.00,
        "estimated_time": "30 minutos",
        "instructions": "Remover objetos metálicos. Evitar roupas com metais.",
    },
    {
        "name": "Ultrassom Abdominal",
        "category": CategoriaServico.EXAMES_DE_IMAGEM.value,
        "code": "US001",
        "base_price": 180.00,
        "operational_cost": 50.00,
        "estimated_time": "24 horas",
        "instructions": "Jejum de 8 horas. Beber 4 copos de água 1 hora antes do exame.",
    },
    {
        "name": "Vacina Tríplice Viral",
        "category": CategoriaServico.VACINAS.value,
        "code": "VT001",
        "base_price": 85.00,
        "operational_cost": 65.00,
        "estimated_time": "Imediato",
        "instructions": "Criança deve estar saudável. Informar sobre alergias.",
    },
]

PACIENTE_DEMO: Dict[str, Any] = {
    "name": "Ana Clara Silva",
    "birth_date": date(2018, 3, 15),
    "cpf": "12345678901",
    "phone": "11987654321",
    "email": "ana.clara@email.com",
    "address": "Rua das Flores, 123, Vila Nova, São Paulo, SP - 01234-567",
    "responsible_name": "Maria Silva Santos",
    "responsible_cpf": "98765432100",
    "responsible_phone": "11987654321",
    "consent_lgpd": True,
    "special_alert": "Alergia a penicilina",
}


def inicializar_dados_demo(session: Session) -> Dict[str, int]:
    """
    Criar serviços e paciente de demonstração

    Itens cujo código (serviço) ou CPF (paciente) já existe são ignorados,
    então a operação pode ser repetida.

    Returns:
        Quantidade de serviços e pacientes criados
    """
    codigos_existentes = set(session.exec(select(Servico.code)).all())
    criados = {"services": 0, "patients": 0}

    with transaction(session):
        for dados in SERVICOS_DEMO:
            if dados["code"] in codigos_existentes:
                continue
            session.add(
                Servico(
                    id=gerar_id("service"),
                    **dados,
                    created_at=agora_utc(),
                    created_by="system",
                )
            )
            criados["services"] += 1

        existente = session.exec(
            select(Paciente).where(Paciente.cpf == PACIENTE_DEMO["cpf"])
        ).first()
        if existente is None:
            session.add(
                Paciente(
                    id=gerar_id("patient"),
                    **PACIENTE_DEMO,
                    created_at=agora_utc(),
                    created_by="system",
                )
            )
            criados["patients"] += 1

    logger.info(
        f"Dados de demonstração: {criados['services']} serviço(s), "
        f"{criados['patients']} paciente(s) criados"
    )
    return criados
