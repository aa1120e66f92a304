"""
Configuração do sistema de logging da aplicação

Envia logs ao console e a arquivos no diretório definido em LOG_DIR.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from utils.settings import settings


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Configurar logging para toda a aplicação

    Args:
        log_level: Nível de logging; por padrão o de LOG_LEVEL
        log_file: Arquivo adicional dentro de LOG_DIR
        format_string: Formato personalizado opcional
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "[%(filename)s:%(lineno)d] - %(message)s"
        )
    level = (log_level or settings.log_level).upper()

    logs_dir = Path(settings.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(format_string)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(logs_dir / log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Log geral da aplicação
    app_file_handler = logging.FileHandler(logs_dir / "neokids.log")
    app_file_handler.setLevel(logging.DEBUG)
    app_file_handler.setFormatter(formatter)
    root_logger.addHandler(app_file_handler)

    # SQLAlchemy só registra avisos
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Obter logger de um módulo

    Args:
        name: Nome do logger (tipicamente __name__)
    """
    return logging.getLogger(name)
