"""
Testes da agregação do painel gerencial
"""

from datetime import date, datetime, timedelta, timezone

from models.tables import Amostra, Atendimento, Paciente, Servico
from services.dashboard import calcular_estatisticas, obter_estatisticas
from services.appointments import avancar_status, criar_atendimento, resolver_snapshots

HOJE = date(2026, 10, 19)


def _atendimento(valor, criado_em, status="Aguardando Coleta"):
    return Atendimento(
        id=f"appointment_{criado_em.timestamp()}_{valor}",
        patient_name="Paciente",
        status=status,
        total_amount=valor,
        created_at=criado_em,
    )


def test_sem_atendimentos():
    estatisticas = calcular_estatisticas([], HOJE)

    assert estatisticas.model_dump(by_alias=True) == {
        "totalAppointments": 0,
        "todayAppointments": 0,
        "totalRevenue": 0,
        "todayRevenue": 0,
        "statusCounts": {},
        "averageTicket": 0,
    }


def test_receita_de_hoje_e_ticket_medio():
    agora = datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)
    atendimentos = [
        _atendimento(100.0, agora),
        _atendimento(50.0, agora - timedelta(days=1)),
    ]

    estatisticas = calcular_estatisticas(atendimentos, HOJE)

    assert estatisticas.total_appointments == 2
    assert estatisticas.today_appointments == 1
    assert estatisticas.total_revenue == 150.0
    assert estatisticas.today_revenue == 100.0
    assert estatisticas.average_ticket == 75.0


def test_contagem_por_status_omite_ausentes():
    agora = datetime(2026, 10, 19, 9, 0)
    atendimentos = [
        _atendimento(10.0, agora, "Em Análise"),
        _atendimento(20.0, agora, "Em Análise"),
        _atendimento(30.0, agora, "Finalizado"),
    ]

    estatisticas = calcular_estatisticas(atendimentos, HOJE)

    assert estatisticas.status_counts == {"Em Análise": 2, "Finalizado": 1}
    assert "Aguardando Coleta" not in estatisticas.status_counts


def test_valor_nulo_conta_como_zero():
    atendimento = _atendimento(0.0, datetime(2026, 10, 19, 8, 0))
    atendimento.total_amount = None

    estatisticas = calcular_estatisticas([atendimento], HOJE)

    assert estatisticas.total_revenue == 0.0
    assert estatisticas.average_ticket == 0.0
    assert estatisticas.total_appointments == 1


def test_data_comparada_em_utc():
    # 23h30 em São Paulo (UTC-3) já é o dia seguinte em UTC
    fuso_sp = timezone(timedelta(hours=-3))
    criado = datetime(2026, 10, 18, 23, 30, tzinfo=fuso_sp)

    estatisticas = calcular_estatisticas([_atendimento(40.0, criado)], HOJE)

    assert estatisticas.today_appointments == 1
    assert estatisticas.today_revenue == 40.0


def test_obter_estatisticas_do_banco(session, hemograma, glicemia):
    snapshots = resolver_snapshots(session, [hemograma.id, glicemia.id])
    primeiro = criar_atendimento(session, patient_name="Ana", snapshots=snapshots)
    criar_atendimento(session, patient_name="Pedro", snapshots=snapshots[:1])
    avancar_status(session, primeiro.id, "Em Análise")

    estatisticas = obter_estatisticas(session)

    assert estatisticas.total_appointments == 2
    assert estatisticas.today_appointments == 2
    assert estatisticas.total_revenue == 115.0
    assert estatisticas.status_counts == {"Em Análise": 1, "Aguardando Coleta": 1}
    assert estatisticas.average_ticket == 57.5


def test_colunas_de_data_guardam_fuso():
    # Sem fuso, o PostgreSQL converteria para a hora local do servidor
    for tabela in (Atendimento.__table__, Amostra.__table__, Paciente.__table__, Servico.__table__):
        assert tabela.c.created_at.type.timezone is True
        assert tabela.c.updated_at.type.timezone is True
