"""
Fixtures compartilhadas dos testes

Banco SQLite em memória (StaticPool) e autenticação substituída via
dependency_overrides.
"""

import os
import tempfile

os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="neokids-logs-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import models  # noqa: E402,F401
from app_types.auth import AuthenticatedUser  # noqa: E402
from app_types.catalog import CategoriaServico, ServiceCreate  # noqa: E402
from app_types.patients import PatientCreate  # noqa: E402
from services.catalog import criar_servico  # noqa: E402
from services.patients import criar_paciente  # noqa: E402
from utils.auth import get_current_user  # noqa: E402
from utils.settings import get_session  # noqa: E402

USUARIO_TESTE = AuthenticatedUser(
    id="user-123", email="atendente@neokids.com", name="Maria Silva", role="atendente"
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def app(engine):
    """App FastAPI com banco de teste e usuário autenticado fixo"""
    from main import app as application

    def override_get_session():
        with Session(engine) as session:
            yield session

    application.dependency_overrides[get_session] = override_get_session
    application.dependency_overrides[get_current_user] = lambda: USUARIO_TESTE
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def hemograma(session):
    return criar_servico(
        session,
        ServiceCreate(
            name="Hemograma Completo",
            category=CategoriaServico.ANALISES_CLINICAS,
            code="HG001",
            base_price=45.0,
            operational_cost=12.0,
            estimated_time="2-4 horas",
            instructions="Não é necessário jejum.",
        ),
    )


@pytest.fixture
def glicemia(session):
    return criar_servico(
        session,
        ServiceCreate(
            name="Glicemia de Jejum",
            category=CategoriaServico.ANALISES_CLINICAS,
            code="GL001",
            base_price=25.0,
            operational_cost=6.0,
            estimated_time="2 horas",
            instructions="Jejum de 8 a 12 horas.",
        ),
    )


@pytest.fixture
def paciente(session):
    return criar_paciente(
        session,
        PatientCreate(
            name="Ana Clara Silva",
            cpf="12345678901",
            phone="11987654321",
            responsible_name="Maria Silva Santos",
            consent_lgpd=True,
            special_alert="Alergia a penicilina",
        ),
    )
