# Services Module for the Inverso marketplace
# Contains business logic services

from services.matching import reach_score, rank_creators
from services.campaign_service import CampaignService
from services.application_service import ApplicationService
from services.calendar_service import CalendarService
from services.creator_import import import_creators, normalize_stored_categories

__all__ = [
    'reach_score',
    'rank_creators',
    'CampaignService',
    'ApplicationService',
    'CalendarService',
    'import_creators',
    'normalize_stored_categories',
]
