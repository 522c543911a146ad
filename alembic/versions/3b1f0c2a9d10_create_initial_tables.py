"""Create initial tables

Revision ID: 3b1f0c2a9d10
Revises:
Create Date: 2025-05-20 18:12:40.118204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b1f0c2a9d10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "reservas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("apellido", sa.String(length=100), nullable=False),
        sa.Column("whatsapp", sa.String(length=30), nullable=False),
        sa.Column("deporte", sa.String(length=50), nullable=True),
        sa.Column("cancha", sa.String(length=100), nullable=False),
        sa.Column("fecha", sa.String(length=100), nullable=False),
        sa.Column("horario", sa.String(length=10), nullable=False),
        sa.Column("precio", sa.Integer(), nullable=True),
        sa.Column("fecha_creacion", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_reservas_id"), "reservas", ["id"], unique=False)

    op.create_table(
        "precios",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("cancha", sa.String(length=100), nullable=False),
        sa.Column("precio", sa.Integer(), nullable=False),
        sa.Column("actualizado", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cancha"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("precios")
    op.drop_index(op.f("ix_reservas_id"), table_name="reservas")
    op.drop_table("reservas")
