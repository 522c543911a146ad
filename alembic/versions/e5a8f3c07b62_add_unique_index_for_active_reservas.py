"""add_unique_index_for_active_reservas

Revision ID: e5a8f3c07b62
Revises: 7c4e2d915ab3
Create Date: 2025-06-09 21:03:55.870412

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'e5a8f3c07b62'
down_revision: Union[str, None] = '7c4e2d915ab3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TURNO_ACTIVO = sa.text("estado <> 'cancelada'")


def upgrade() -> None:
    """Upgrade schema."""
    # PRIMERO: cancelar duplicados activos, conservando la reserva más antigua
    op.execute("""
        UPDATE reservas
        SET estado = 'cancelada'
        WHERE estado <> 'cancelada'
        AND EXISTS (
            SELECT 1
            FROM reservas r2
            WHERE r2.cancha = reservas.cancha
            AND r2.fecha = reservas.fecha
            AND r2.horario = reservas.horario
            AND r2.estado <> 'cancelada'
            AND r2.id < reservas.id
        );
    """)

    # SEGUNDO: índice único parcial, dos pedidos simultáneos no pueden
    # reservar la misma cancha, fecha y horario
    op.create_index(
        'uq_reservas_turno_activo',
        'reservas',
        ['cancha', 'fecha', 'horario'],
        unique=True,
        postgresql_where=TURNO_ACTIVO,
        sqlite_where=TURNO_ACTIVO,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('uq_reservas_turno_activo', table_name='reservas')
