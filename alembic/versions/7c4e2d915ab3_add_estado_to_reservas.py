"""add_estado_to_reservas

Revision ID: 7c4e2d915ab3
Revises: 3b1f0c2a9d10
Create Date: 2025-06-02 10:41:07.553190

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c4e2d915ab3'
down_revision: Union[str, None] = '3b1f0c2a9d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Las reservas existentes quedan confirmadas
    op.add_column(
        'reservas',
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='confirmada'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('reservas') as batch_op:
        batch_op.drop_column('estado')
