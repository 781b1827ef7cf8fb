"""create_catalog_tables

Revision ID: 001_create_catalog
Revises:
Create Date: 2025-12-15

Creates orders, products and books. The unique constraints on ISBN/SKU and
on (title, author) / (name, brand) back the validator's duplicate checks
when two requests race past them.

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '001_create_catalog'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


order_category = postgresql.ENUM(
    'Fiction', 'NonFiction', 'Technical', 'Children',
    name='order_category',
    create_type=False,
)
product_category = postgresql.ENUM(
    'Electronics', 'Clothing', 'Books', 'Home',
    name='product_category',
    create_type=False,
)


def upgrade() -> None:
    bind = op.get_bind()
    order_category.create(bind, checkfirst=True)
    product_category.create(bind, checkfirst=True)

    op.create_table(
        'orders',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('author', sa.String(100), nullable=False),
        sa.Column('isbn', sa.String(32), nullable=False),
        sa.Column('category', order_category, nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('published_date', sa.DateTime(), nullable=False),
        sa.Column('cover_image_url', sa.String(500), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('isbn', name='uq_orders_isbn'),
        sa.UniqueConstraint('title', 'author', name='uq_orders_title_author'),
    )
    op.create_index('ix_orders_created_at', 'orders', ['created_at'])

    op.create_table(
        'products',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('brand', sa.String(100), nullable=False),
        sa.Column('sku', sa.String(20), nullable=False),
        sa.Column('category', product_category, nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('release_date', sa.DateTime(), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('sku', name='uq_products_sku'),
        sa.UniqueConstraint('name', 'brand', name='uq_products_name_brand'),
    )
    op.create_index('ix_products_created_at', 'products', ['created_at'])

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('author', sa.String(100), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('books')
    op.drop_index('ix_products_created_at', table_name='products')
    op.drop_table('products')
    op.drop_index('ix_orders_created_at', table_name='orders')
    op.drop_table('orders')

    bind = op.get_bind()
    product_category.drop(bind, checkfirst=True)
    order_category.drop(bind, checkfirst=True)
