"""
Routes package - routers de atendimentos, pacientes, catálogo, painel e demonstração
"""

from routes.appointments import router as appointments_router
from routes.dashboard import router as dashboard_router
from routes.demo import router as demo_router
from routes.patients import router as patients_router
from routes.services import router as services_router

__all__ = [
    "appointments_router",
    "dashboard_router",
    "demo_router",
    "patients_router",
    "services_router",
]
