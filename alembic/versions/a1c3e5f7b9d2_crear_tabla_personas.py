"""Crear tabla personas (Persona y Cliente en tabla única)

Revision ID: a1c3e5f7b9d2
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f7b9d2'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'personas',
        sa.Column('id', sa.Integer(), primary_key=True),
        # Discriminador de la herencia de tabla única ('Persona', 'Cliente', ...)
        sa.Column('tipo_persona', sa.String(length=31), nullable=False),
        sa.Column('nombre', sa.String(length=100), nullable=True),
        sa.Column('genero', sa.String(length=20), nullable=True),
        sa.Column('edad', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('identificacion', sa.String(length=20), nullable=True),
        sa.Column('direccion', sa.String(length=255), nullable=True),
        sa.Column('telefono', sa.String(length=20), nullable=True),
        # Columnas propias de Cliente (nulas para otras especializaciones)
        sa.Column('cliente_id', sa.String(length=8), nullable=True),
        sa.Column('contraseña', sa.String(length=255), nullable=True),
        sa.Column('estado', sa.Boolean(), nullable=True),
    )
    op.create_index(op.f('ix_personas_id'), 'personas', ['id'], unique=False)
    op.create_index(op.f('ix_personas_identificacion'), 'personas', ['identificacion'], unique=True)
    op.create_index(op.f('ix_personas_cliente_id'), 'personas', ['cliente_id'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_personas_cliente_id'), table_name='personas')
    op.drop_index(op.f('ix_personas_identificacion'), table_name='personas')
    op.drop_index(op.f('ix_personas_id'), table_name='personas')
    op.drop_table('personas')
