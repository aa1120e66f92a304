"""
Configuração da aplicação e do banco de dados

Gerencia variáveis de ambiente, a conexão com PostgreSQL e o escopo
transacional usado pelos serviços.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from utils.errors import StorageFailureError

# utils.logging_config importa este módulo
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Configuração da aplicação carregada de variáveis de ambiente"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    db_username: str = "neokids"
    db_password: str = "neokids"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "neokids"

    # Sobrescreve a URL montada a partir dos campos db_* (ex.: sqlite local)
    database_url_override: Optional[str] = None

    supabase_url: str = ""
    supabase_service_role_key: str = ""
    auth_timeout_seconds: float = 5.0

    log_level: str = "INFO"
    log_dir: str = "logs"

    enable_demo_seed: bool = False
    create_tables_on_startup: bool = False

    @property
    def database_url(self) -> str:
        """Construir URL de conexão"""
        if self.database_url_override:
            return self.database_url_override
        return f"postgresql+psycopg://{self.db_username}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


# Instância global de configuração
settings = Settings()

# Motor de banco de dados
engine = create_engine(settings.database_url, echo=False)


def get_session():
    """
    Dependência que entrega uma sessão de banco de dados

    Yields:
        Session: Sessão do SQLModel para a requisição
    """
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    Escopo transacional com rollback garantido

    Confirma tudo o que foi adicionado à sessão ao sair do bloco. Qualquer
    exceção desfaz a transação inteira; erros do SQLAlchemy são registrados
    no log e convertidos em StorageFailureError com mensagem fixa, sem o SQL
    nem os parâmetros.
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Erro de banco de dados, transação desfeita: {e}")
        raise StorageFailureError("Falha no armazenamento") from e
    except Exception:
        session.rollback()
        raise
