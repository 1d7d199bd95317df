"""initial_schema

Revision ID: 3b9e52d0a7c1
Revises: 
Create Date: 2025-06-07 10:38:05.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3b9e52d0a7c1'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create api_keys table; ids compare bytewise so pages follow code point order
    op.create_table('api_keys',
        sa.Column('id', sa.Text(collation='C'), nullable=False),
        sa.Column('key', sa.Text(), nullable=False),
        sa.Column('usage_count', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('key', name='api_keys_key_key')
    )


def downgrade() -> None:
    op.drop_table('api_keys')
