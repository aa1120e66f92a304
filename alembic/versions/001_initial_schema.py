"""Initial schema - pacientes, catálogo, atendimentos e amostras.

Revision ID: 001_initial_schema
Revises: None
Create Date: 2026-10-19

Tables created:
- paciente
- servico
- atendimento
- servico_atendimento (snapshot dos serviços pedidos)
- amostra
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "paciente",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("cpf", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("responsible_name", sa.String(), nullable=False),
        sa.Column("responsible_cpf", sa.String(), nullable=False),
        sa.Column("responsible_phone", sa.String(), nullable=False),
        sa.Column("consent_lgpd", sa.Boolean(), nullable=False),
        sa.Column("special_alert", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(), nullable=True),
    )
    op.create_index("ix_paciente_name", "paciente", ["name"])
    op.create_index("ix_paciente_cpf", "paciente", ["cpf"])

    op.create_table(
        "servico",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("base_price", sa.Float(), nullable=False),
        sa.Column("operational_cost", sa.Float(), nullable=False),
        sa.Column("estimated_time", sa.String(), nullable=False),
        sa.Column("instructions", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(), nullable=True),
    )
    op.create_index("ix_servico_category", "servico", ["category"])
    op.create_index("ix_servico_code", "servico", ["code"])

    op.create_table(
        "atendimento",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "patient_id",
            sa.String(),
            sa.ForeignKey("paciente.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("patient_name", sa.String(), nullable=False),
        sa.Column("insurance_type", sa.String(), nullable=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("revision", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(), nullable=True),
    )
    op.create_index("ix_atendimento_patient_id", "atendimento", ["patient_id"])
    op.create_index("ix_atendimento_patient_name", "atendimento", ["patient_name"])
    op.create_index("ix_atendimento_status", "atendimento", ["status"])
    op.create_index("ix_atendimento_created_at", "atendimento", ["created_at"])

    op.create_table(
        "servico_atendimento",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("service_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("base_price", sa.Float(), nullable=False),
        sa.Column("operational_cost", sa.Float(), nullable=False),
        sa.Column("estimated_time", sa.String(), nullable=False),
        sa.Column("instructions", sa.String(), nullable=False),
        sa.Column(
            "appointment_id",
            sa.String(),
            sa.ForeignKey("atendimento.id"),
            nullable=False,
        ),
    )
    op.create_index(
        "ix_servico_atendimento_service_id", "servico_atendimento", ["service_id"]
    )
    op.create_index(
        "ix_servico_atendimento_appointment_id",
        "servico_atendimento",
        ["appointment_id"],
    )

    op.create_table(
        "amostra",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("service_id", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "appointment_id",
            sa.String(),
            sa.ForeignKey("atendimento.id"),
            nullable=False,
        ),
    )
    op.create_index("ix_amostra_status", "amostra", ["status"])
    op.create_index("ix_amostra_appointment_id", "amostra", ["appointment_id"])


def downgrade() -> None:
    op.drop_table("amostra")
    op.drop_table("servico_atendimento")
    op.drop_table("atendimento")
    op.drop_table("servico")
    op.drop_table("paciente")
