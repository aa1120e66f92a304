"""
Testes do cadastro de pacientes, do catálogo e dos dados de demonstração
"""

import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from services.catalog import calcular_margem
from utils.settings import settings

NOVO_PACIENTE = {
    "name": "Lucas Pereira",
    "birthDate": "2019-07-02",
    "cpf": "11122233344",
    "phone": "11912345678",
    "address": "Av. Paulista, 1000",
    "responsibleName": "Carla Pereira",
    "responsibleCpf": "55566677788",
    "responsiblePhone": "11998765432",
    "consentLGPD": True,
    "specialAlert": "Asma",
}

NOVO_SERVICO = {
    "name": "Consulta Pediátrica",
    "category": "Consultas",
    "code": "CP001",
    "basePrice": 200.0,
    "operationalCost": 80.0,
    "estimatedTime": "40 minutos",
    "instructions": "Trazer carteira de vacinação.",
}


class TestPacientes:
    def test_criar_e_obter(self, client):
        response = client.post("/patients", json=NOVO_PACIENTE)

        assert response.status_code == status.HTTP_200_OK
        paciente = response.json()["patient"]
        assert paciente["consentLGPD"] is True
        assert paciente["birthDate"] == "2019-07-02"
        assert paciente["createdBy"] == "user-123"

        obtido = client.get(f"/patients/{paciente['id']}").json()["patient"]
        assert obtido["name"] == "Lucas Pereira"

    def test_campo_obrigatorio(self, client):
        response = client.post("/patients", json={"name": "Sem CPF"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "cpf" in response.json()["error"]

    def test_busca(self, client, paciente):
        client.post("/patients", json=NOVO_PACIENTE)

        por_cpf = client.get("/patients/search", params={"q": "111222"}).json()["patients"]
        assert [p["name"] for p in por_cpf] == ["Lucas Pereira"]

        por_responsavel = client.get(
            "/patients/search", params={"q": "maria silva"}
        ).json()["patients"]
        assert [p["id"] for p in por_responsavel] == [paciente.id]

        assert len(client.get("/patients").json()["patients"]) == 2

    def test_atualizar(self, client, paciente):
        response = client.put(
            f"/patients/{paciente.id}", json={"specialAlert": "Alergia a dipirona"}
        )

        assert response.status_code == status.HTTP_200_OK
        atualizado = response.json()["patient"]
        assert atualizado["specialAlert"] == "Alergia a dipirona"
        assert atualizado["name"] == "Ana Clara Silva"
        assert atualizado["updatedAt"] is not None

    def test_atualizar_com_nulo_em_campo_obrigatorio(self, client, paciente):
        response = client.put(f"/patients/{paciente.id}", json={"name": None})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.json()["error"]
        obtido = client.get(f"/patients/{paciente.id}").json()["patient"]
        assert obtido["name"] == "Ana Clara Silva"

    def test_atualizar_com_nulo_em_campo_opcional(self, client, paciente):
        response = client.put(f"/patients/{paciente.id}", json={"specialAlert": None})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["patient"]["specialAlert"] is None

    def test_falha_de_banco_nao_expoe_sql(self, client, paciente, monkeypatch):
        paciente_id = paciente.id

        def commit_falho(self):
            raise OperationalError(
                "UPDATE paciente SET phone=? WHERE paciente.id = ?",
                ("11900000000", paciente_id),
                Exception("database is locked"),
            )

        monkeypatch.setattr(Session, "commit", commit_falho)
        response = client.put(f"/patients/{paciente_id}", json={"phone": "11900000000"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Falha no armazenamento"}
        assert "UPDATE" not in response.text
        assert "11900000000" not in response.text

    def test_inexistente(self, client):
        response = client.get("/patients/patient_x")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Paciente não encontrado"}

    def test_remocao_bloqueada_com_atendimento_ativo(self, client, paciente, hemograma):
        atendimento = client.post(
            "/appointments", json={"patientId": paciente.id, "services": [hemograma.id]}
        ).json()["appointment"]

        response = client.delete(f"/patients/{paciente.id}")
        assert response.status_code == status.HTTP_409_CONFLICT

        for proximo in ["Em Análise", "Aguardando Laudo", "Finalizado"]:
            client.patch(f"/appointments/{atendimento['id']}/status", json={"status": proximo})

        response = client.delete(f"/patients/{paciente.id}")
        assert response.status_code == status.HTTP_200_OK

        mantido = client.get(f"/appointments/{atendimento['id']}").json()["appointment"]
        assert mantido["patientId"] is None
        assert mantido["patientName"] == "Ana Clara Silva"


class TestCatalogo:
    def test_criar_com_margem(self, client):
        response = client.post("/services", json=NOVO_SERVICO)

        assert response.status_code == status.HTTP_200_OK
        servico = response.json()["service"]
        assert servico["margin"] == pytest.approx(0.6)
        assert servico["category"] == "Consultas"

    def test_categoria_invalida(self, client):
        response = client.post("/services", json={**NOVO_SERVICO, "category": "Estética"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_listar_e_atualizar(self, client, hemograma):
        response = client.put(f"/services/{hemograma.id}", json={"basePrice": 50.0})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["service"]["basePrice"] == 50.0
        assert response.json()["service"]["margin"] == pytest.approx(0.76)

        servicos = client.get("/services").json()["services"]
        assert [s["code"] for s in servicos] == ["HG001"]

    def test_atualizar_com_nulo(self, client, hemograma):
        response = client.put(f"/services/{hemograma.id}", json={"basePrice": None})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "basePrice" in response.json()["error"]
        assert client.get(f"/services/{hemograma.id}").json()["service"]["basePrice"] == 45.0

    def test_remocao_bloqueada_com_atendimento_ativo(self, client, hemograma, glicemia):
        client.post("/appointments", json={"patientName": "Ana", "services": [hemograma.id]})

        assert client.delete(f"/services/{hemograma.id}").status_code == status.HTTP_409_CONFLICT
        assert client.delete(f"/services/{glicemia.id}").status_code == status.HTTP_200_OK
        assert client.get(f"/services/{glicemia.id}").status_code == status.HTTP_404_NOT_FOUND

    def test_margem(self):
        assert calcular_margem(45.0, 12.0) == pytest.approx(0.7333, rel=1e-3)
        assert calcular_margem(0.0, 10.0) == 0.0


class TestDemo:
    def test_desabilitado_por_padrao(self, client, monkeypatch):
        monkeypatch.setattr(settings, "enable_demo_seed", False)

        response = client.post("/demo/init")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_inicializar_e_repetir(self, client, monkeypatch):
        monkeypatch.setattr(settings, "enable_demo_seed", True)

        data = client.post("/demo/init").json()
        assert data["success"] is True
        assert data["services"] == 5
        assert data["patients"] == 1

        repetido = client.post("/demo/init").json()
        assert repetido["services"] == 0
        assert repetido["patients"] == 0

        ana = client.get("/patients/search", params={"q": "ana"}).json()["patients"]
        assert ana[0]["specialAlert"] == "Alergia a penicilina"
        assert len(client.get("/services").json()["services"]) == 5
