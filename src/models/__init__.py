"""
Models package.
Import all models here so they are automatically registered with SQLModel.metadata
"""

from models.tables import Amostra, Atendimento, Paciente, Servico, ServicoAtendimento

__all__ = ["Paciente", "Servico", "Atendimento", "ServicoAtendimento", "Amostra"]
