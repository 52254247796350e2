"""Initial marketplace schema

Revision ID: initial_marketplace_001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'initial_marketplace_001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    userrole = sa.Enum('creator', 'brand', 'admin', name='userrole')
    campaignstatus = sa.Enum('draft', 'active', 'paused', 'completed', 'cancelled', name='campaignstatus')
    applicationstatus = sa.Enum('pending', 'approved', 'rejected', name='applicationstatus')
    creatorresponse = sa.Enum('accepted', 'declined', name='creatorresponse')
    dealstatus = sa.Enum('new', 'negotiating', 'active', 'completed', 'lost', name='dealstatus')
    invoicestatus = sa.Enum('draft', 'sent', 'paid', 'overdue', name='invoicestatus')
    ideastatus = sa.Enum('draft', 'planned', 'published', 'archived', name='ideastatus')
    ideapriority = sa.Enum('low', 'medium', 'high', name='ideapriority')

    # Accounts
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', userrole, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'creators',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('username', sa.String(30), nullable=False, unique=True),
        sa.Column('display_name', sa.String(100), nullable=False),
        sa.Column('bio', sa.Text()),
        sa.Column('avatar_url', sa.String(500)),
        sa.Column('instagram_handle', sa.String(100)),
        sa.Column('instagram_followers', sa.Integer()),
        sa.Column('tiktok_handle', sa.String(100)),
        sa.Column('tiktok_followers', sa.Integer()),
        sa.Column('youtube_handle', sa.String(100)),
        sa.Column('youtube_followers', sa.Integer()),
        sa.Column('avg_engagement_rate', sa.Float()),
        sa.Column('base_price', sa.Float()),
        sa.Column('age', sa.Integer()),
        sa.Column('gender', sa.String(20)),
        sa.Column('location', sa.String(100)),
        sa.Column('categories', sa.JSON()),
        sa.Column('is_verified', sa.Boolean(), server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_creators_username', 'creators', ['username'])

    op.create_table(
        'brands',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('company_name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('logo_url', sa.String(500)),
        sa.Column('website', sa.String(500)),
        sa.Column('industry', sa.String(50)),
        sa.Column('contact_email', sa.String(255)),
        sa.Column('contact_phone', sa.String(20)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )

    # Marketplace
    op.create_table(
        'campaigns',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('brand_id', sa.String(36), sa.ForeignKey('brands.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('budget', sa.Float(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('deliverables', sa.JSON(), nullable=False),
        sa.Column('requirements', sa.JSON()),
        sa.Column('target_audience', sa.String(500)),
        sa.Column('preferred_categories', sa.JSON()),
        sa.Column('min_followers', sa.Integer()),
        sa.Column('max_followers', sa.Integer()),
        sa.Column('status', campaignstatus, nullable=False, server_default='draft'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_campaigns_brand_id', 'campaigns', ['brand_id'])

    op.create_table(
        'campaign_applications',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('campaign_id', sa.String(36), sa.ForeignKey('campaigns.id', ondelete='CASCADE'), nullable=False),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', applicationstatus, nullable=False, server_default='pending'),
        sa.Column('proposed_price', sa.Float()),
        sa.Column('message', sa.Text()),
        sa.Column('portfolio', sa.JSON()),
        sa.Column('creator_response', creatorresponse, nullable=True),
        sa.Column('responded_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('campaign_id', 'creator_id', name='uq_campaign_application_pair')
    )
    op.create_index('ix_campaign_applications_campaign_id', 'campaign_applications', ['campaign_id'])
    op.create_index('ix_campaign_applications_creator_id', 'campaign_applications', ['creator_id'])

    op.create_table(
        'shortlists',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('brand_id', sa.String(36), sa.ForeignKey('brands.id', ondelete='CASCADE'), nullable=False),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('brand_id', 'creator_id', name='uq_shortlist_brand_creator')
    )
    op.create_index('ix_shortlists_brand_id', 'shortlists', ['brand_id'])

    # Creator tools
    op.create_table(
        'deals',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('brand', sa.String(200)),
        sa.Column('value', sa.Float()),
        sa.Column('status', dealstatus, nullable=False, server_default='new'),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_deals_creator_id', 'deals', ['creator_id'])

    op.create_table(
        'invoices',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('deal_id', sa.String(36), sa.ForeignKey('deals.id', ondelete='SET NULL'), nullable=True),
        sa.Column('invoice_number', sa.String(50), nullable=False),
        sa.Column('issue_date', sa.DateTime(), nullable=False),
        sa.Column('due_date', sa.DateTime()),
        sa.Column('status', invoicestatus, nullable=False, server_default='draft'),
        sa.Column('client_name', sa.String(200)),
        sa.Column('client_email', sa.String(255)),
        sa.Column('client_company', sa.String(200)),
        sa.Column('client_address', sa.String(500)),
        sa.Column('client_city', sa.String(100)),
        sa.Column('client_state', sa.String(100)),
        sa.Column('client_zip', sa.String(20)),
        sa.Column('client_country', sa.String(100)),
        sa.Column('client_tax_id', sa.String(50)),
        sa.Column('payment_terms', sa.String(200)),
        sa.Column('currency', sa.String(3), server_default='USD'),
        sa.Column('subtotal', sa.Float()),
        sa.Column('tax', sa.Float()),
        sa.Column('total', sa.Float()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_invoices_creator_id', 'invoices', ['creator_id'])

    op.create_table(
        'invoice_items',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('invoice_id', sa.String(36), sa.ForeignKey('invoices.id', ondelete='CASCADE'), nullable=False),
        sa.Column('description', sa.String(500), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit_price', sa.Float(), nullable=False),
        sa.Column('total', sa.Float(), nullable=False)
    )

    op.create_table(
        'ideas',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('tags', sa.JSON()),
        sa.Column('status', ideastatus, nullable=False, server_default='draft'),
        sa.Column('priority', ideapriority, nullable=False, server_default='medium'),
        sa.Column('attachments', sa.JSON()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_ideas_creator_id', 'ideas', ['creator_id'])

    op.create_table(
        'events',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('start_at', sa.DateTime(), nullable=False),
        sa.Column('end_at', sa.DateTime()),
        sa.Column('location', sa.String(200)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )
    op.create_index('ix_events_creator_id', 'events', ['creator_id'])

    op.create_table(
        'analytics_snapshots',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False),
        sa.Column('platform', sa.String(50), nullable=False),
        sa.Column('date', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('followers', sa.Integer()),
        sa.Column('engagement_rate', sa.Float()),
        sa.Column('reach', sa.Integer()),
        sa.Column('impressions', sa.Integer())
    )
    op.create_index('ix_analytics_snapshots_creator_id', 'analytics_snapshots', ['creator_id'])

    op.create_table(
        'media_kits',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('creator_id', sa.String(36), sa.ForeignKey('creators.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now())
    )


def downgrade():
    # Drop tables in reverse order
    op.drop_table('media_kits')
    op.drop_table('analytics_snapshots')
    op.drop_table('events')
    op.drop_table('ideas')
    op.drop_table('invoice_items')
    op.drop_table('invoices')
    op.drop_table('deals')
    op.drop_table('shortlists')
    op.drop_table('campaign_applications')
    op.drop_table('campaigns')
    op.drop_table('brands')
    op.drop_table('creators')
    op.drop_table('users')

    # Drop enums (no-op outside PostgreSQL)
    bind = op.get_bind()
    for name in ('ideapriority', 'ideastatus', 'invoicestatus', 'dealstatus',
                 'creatorresponse', 'applicationstatus', 'campaignstatus', 'userrole'):
        sa.Enum(name=name).drop(bind, checkfirst=True)
