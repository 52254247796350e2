# Calendar Service
# Puts accepted campaigns on the creator's calendar

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from database.creator_tools_models import Event
from database.marketplace_models import CampaignApplication

logger = logging.getLogger(__name__)

DEFAULT_EVENT_DESCRIPTION = "Accepted campaign"


class CalendarService:
    def __init__(self, db: Session):
        self.db = db

    def create_campaign_event(self, application: CampaignApplication) -> Event:
        """Persist a calendar event spanning the campaign dates."""
        campaign = application.campaign
        event = Event(
            creator_id=application.creator_id,
            title=f"Campaign: {campaign.title}",
            start_at=campaign.start_date or datetime.utcnow(),
            end_at=campaign.end_date or None,
            description=campaign.description or DEFAULT_EVENT_DESCRIPTION,
        )
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)

        logger.info("Calendar event %s created for application %s", event.id, application.id)
        return event
