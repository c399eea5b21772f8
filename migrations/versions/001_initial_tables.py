"""Create users, friendships and reviews tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TASTING_ATTRIBUTES = ('size', 'body', 'sweet_brininess', 'flavorfulness', 'creaminess')


def upgrade() -> None:
    """Create users, friendships and reviews tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('username', sa.String(50), nullable=True),
        sa.Column('profile_photo_url', sa.String(500), nullable=True),
        sa.Column('friends_private', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('user_id', name='pk_users'),
        sa.UniqueConstraint('username', name='uq_users_username'),
    )

    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2. Create friendships table
    op.create_table('friendships',
        sa.Column('friendship_id', sa.String(36), nullable=False),
        sa.Column('sender_id', sa.String(36), nullable=False),
        sa.Column('receiver_id', sa.String(36), nullable=False),
        sa.Column('status', sa.String(16), nullable=False, server_default='PENDING'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('friendship_id', name='pk_friendships'),
        sa.ForeignKeyConstraint(['sender_id'], ['users.user_id'], ondelete='CASCADE',
                                name='fk_friendships_sender_id_users'),
        sa.ForeignKeyConstraint(['receiver_id'], ['users.user_id'], ondelete='CASCADE',
                                name='fk_friendships_receiver_id_users'),
        sa.UniqueConstraint('sender_id', 'receiver_id', name='uq_friendships_sender_receiver'),
        sa.CheckConstraint('sender_id <> receiver_id', name='ck_friendships_not_self'),
    )

    op.create_index('ix_friendships_sender_id', 'friendships', ['sender_id'])
    op.create_index('ix_friendships_receiver_id', 'friendships', ['receiver_id'])

    # 3. Create reviews table
    op.create_table('reviews',
        sa.Column('review_id', sa.String(36), nullable=False),
        sa.Column('author_id', sa.String(36), nullable=False),
        sa.Column('subject_id', sa.String(36), nullable=False),
        sa.Column('rating', sa.String(16), nullable=False),
        sa.Column('text', sa.Text(), nullable=True),
        *[sa.Column(name, sa.Integer(), nullable=True) for name in TASTING_ATTRIBUTES],
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('review_id', name='pk_reviews'),
        sa.UniqueConstraint('author_id', 'subject_id', name='uq_reviews_author_subject'),
        *[
            sa.CheckConstraint(f'{name} BETWEEN 1 AND 10', name=f'ck_reviews_{name}_range')
            for name in TASTING_ATTRIBUTES
        ],
    )

    op.create_index('ix_reviews_author_id', 'reviews', ['author_id'])
    op.create_index('ix_reviews_subject_id', 'reviews', ['subject_id'])


def downgrade() -> None:
    """Drop users, friendships and reviews tables"""
    op.drop_index('ix_reviews_subject_id', table_name='reviews')
    op.drop_index('ix_reviews_author_id', table_name='reviews')
    op.drop_table('reviews')

    op.drop_index('ix_friendships_receiver_id', table_name='friendships')
    op.drop_index('ix_friendships_sender_id', table_name='friendships')
    op.drop_table('friendships')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
