"""
Pydantic types for the managerial dashboard
"""

from typing import Dict

from pydantic import Field

from app_types.common import CamelModel


class DashboardStats(CamelModel):
    """
    Estatísticas agregadas dos atendimentos

    `status_counts` só contém os status presentes; ausência equivale a zero.
    """

    total_appointments: int = 0
    today_appointments: int = 0
    total_revenue: float = 0.0
    today_revenue: float = 0.0
    status_counts: Dict[str, int] = Field(default_factory=dict)
    average_ticket: float = 0.0
