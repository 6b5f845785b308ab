"""initial_catalog_schema

Revision ID: 0001_initial_catalog_schema
Revises: 
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_catalog_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns():
    return [
        sa.Column('created_date', sa.DateTime(), nullable=False),
        sa.Column('last_modified_date', sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'library',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('root', sa.String(1024), nullable=False),
        *_audit_columns(),
    )
    op.create_index('idx_library_name', 'library', ['name'])

    op.create_table(
        'series',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('url', sa.String(1024), nullable=False),
        sa.Column('file_last_modified', sa.DateTime(), nullable=False),
        sa.Column('library_id', sa.String(64), sa.ForeignKey('library.id', ondelete='CASCADE'), nullable=False),
        *_audit_columns(),
    )
    op.create_index('idx_series_library_id', 'series', ['library_id'])

    op.create_table(
        'book',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('url', sa.String(1024), nullable=False),
        sa.Column('file_size', sa.BigInteger(), nullable=False),
        sa.Column('file_last_modified', sa.DateTime(), nullable=False),
        sa.Column('series_id', sa.String(64), sa.ForeignKey('series.id', ondelete='CASCADE'), nullable=False),
        sa.Column('library_id', sa.String(64), sa.ForeignKey('library.id', ondelete='CASCADE'), nullable=False),
        *_audit_columns(),
    )
    op.create_index('idx_book_library_id', 'book', ['library_id'])
    op.create_index('idx_book_series_id', 'book', ['series_id'])

    op.create_table(
        'book_metadata',
        sa.Column('book_id', sa.String(64), sa.ForeignKey('book.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('number', sa.String(50), nullable=False),
        sa.Column('number_sort', sa.Float(), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('title_lock', sa.Boolean(), nullable=False),
        sa.Column('summary_lock', sa.Boolean(), nullable=False),
        sa.Column('number_lock', sa.Boolean(), nullable=False),
        sa.Column('number_sort_lock', sa.Boolean(), nullable=False),
        sa.Column('release_date_lock', sa.Boolean(), nullable=False),
        sa.Column('authors_lock', sa.Boolean(), nullable=False),
        sa.Column('tags_lock', sa.Boolean(), nullable=False),
        *_audit_columns(),
    )

    # Author order is kept in position
    op.create_table(
        'book_metadata_author',
        sa.Column('book_id', sa.String(64), sa.ForeignKey('book_metadata.book_id', ondelete='CASCADE'), primary_key=True),
        sa.Column('position', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('role', sa.String(100), nullable=False),
    )

    op.create_table(
        'book_metadata_tag',
        sa.Column('book_id', sa.String(64), sa.ForeignKey('book_metadata.book_id', ondelete='CASCADE'), primary_key=True),
        sa.Column('tag', sa.String(255), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table('book_metadata_tag')
    op.drop_table('book_metadata_author')
    op.drop_table('book_metadata')
    op.drop_index('idx_book_series_id', table_name='book')
    op.drop_index('idx_book_library_id', table_name='book')
    op.drop_table('book')
    op.drop_index('idx_series_library_id', table_name='series')
    op.drop_table('series')
    op.drop_index('idx_library_name', table_name='library')
    op.drop_table('library')
