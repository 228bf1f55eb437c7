"""Create users and books tables

Revision ID: 3c9e2f1a7b04
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9e2f1a7b04'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, comment="User's email address"),
        sa.Column('name', sa.String(length=255), nullable=False, comment='Display name'),
        sa.Column('role', sa.String(length=20), nullable=False, comment='Role name, mapped to rights in app.roles'),
        sa.Column('is_active', sa.Boolean(), nullable=False, comment='Whether the account can call the API'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('books',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('publication_year', sa.String(length=100), nullable=False, comment='Publication year or date as entered'),
        sa.Column('author', sa.String(length=255), nullable=False, comment='Author name'),
        sa.Column('description', sa.Text(), nullable=False, comment='Book description or summary'),
        sa.Column('publisher', sa.String(length=255), nullable=False, comment='Publisher name'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
