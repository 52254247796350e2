# Campaign Application Service
# The application state machine:
#   pending -> approved | rejected     (brand)
#   approved -> accepted | declined    (creator response, one-way)

import logging
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from auth.decorators import get_creator_profile
from core.errors import ConflictError, InvalidStateError, ForbiddenError, NotFoundError
from database.models import User, Creator
from database.marketplace_models import (
    Campaign, CampaignApplication, ApplicationStatusDB, CreatorResponseDB,
)
from database.creator_tools_models import Event
from schemas.marketplace import ApplicationCreate, ApplicationUpdate, CampaignInvite, ApplicationRespond
from services.calendar_service import CalendarService
from services.campaign_service import CampaignService

logger = logging.getLogger(__name__)

CALENDAR_WARNING = "Response saved, but the calendar event could not be created"


class ApplicationService:
    """Creator applications, brand decisions, invitations and creator responses."""

    def __init__(self, db: Session):
        self.db = db

    def _load(self, application_id: str) -> Optional[CampaignApplication]:
        return (
            self.db.query(CampaignApplication)
            .options(
                joinedload(CampaignApplication.campaign),
                joinedload(CampaignApplication.creator),
            )
            .filter(CampaignApplication.id == application_id)
            .first()
        )

    def _find_pair(self, campaign_id: str, creator_id: str) -> Optional[CampaignApplication]:
        return self.db.query(CampaignApplication).filter(
            CampaignApplication.campaign_id == campaign_id,
            CampaignApplication.creator_id == creator_id,
        ).first()

    def _commit_unique(self, message: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(message)

    # =========================================================================
    # CREATOR: APPLY
    # =========================================================================

    def apply(self, user: User, campaign_id: str, data: ApplicationCreate) -> CampaignApplication:
        creator = get_creator_profile(self.db, user)

        campaign = self.db.query(Campaign).filter(Campaign.id == campaign_id).first()
        if not campaign:
            raise NotFoundError("Campaign not found")

        if self._find_pair(campaign_id, creator.id):
            raise ConflictError("You have already applied to this campaign")

        application = CampaignApplication(
            campaign_id=campaign_id,
            creator_id=creator.id,
            status=ApplicationStatusDB.PENDING,
            proposed_price=data.proposed_price,
            message=data.message,
            portfolio=data.portfolio or [],
        )
        self.db.add(application)
        self._commit_unique("You have already applied to this campaign")
        self.db.refresh(application)

        logger.info("Creator %s applied to campaign %s", creator.id, campaign_id)
        return application

    # =========================================================================
    # BRAND: DECIDE
    # =========================================================================

    def update_application(
        self, user: User, campaign_id: str, application_id: str, data: ApplicationUpdate
    ) -> CampaignApplication:
        CampaignService(self.db).get_owned_campaign(user, campaign_id)

        application = self.db.query(CampaignApplication).filter(
            CampaignApplication.id == application_id,
            CampaignApplication.campaign_id == campaign_id,
        ).first()
        if not application:
            raise NotFoundError("Application not found")

        changes = data.model_dump(exclude_unset=True)
        previous = application.status
        if changes.get("status") is not None:
            changes["status"] = ApplicationStatusDB(changes["status"])
        else:
            changes.pop("status", None)

        for field, value in changes.items():
            setattr(application, field, value)

        self.db.commit()
        self.db.refresh(application)

        if application.status != previous:
            logger.info(
                "Application %s moved %s -> %s",
                application.id, previous.value, application.status.value,
            )
        return application

    def invite(self, user: User, campaign_id: str, data: CampaignInvite) -> Tuple[CampaignApplication, bool]:
        """
        Put a creator straight onto a campaign as approved.

        Returns the application and whether it was newly created. An existing
        application is forced to approved; only supplied fields are overwritten.
        """
        campaign = CampaignService(self.db).get_owned_campaign(user, campaign_id)

        creator = self.db.query(Creator).filter(Creator.id == data.creator_id).first()
        if not creator:
            raise NotFoundError("Creator not found")

        supplied = {
            field: value
            for field, value in data.model_dump(exclude={"creator_id"}).items()
            if value is not None
        }

        application = self._find_pair(campaign.id, creator.id)
        created = application is None
        if created:
            application = CampaignApplication(
                campaign_id=campaign.id,
                creator_id=creator.id,
                portfolio=[],
            )
            self.db.add(application)

        application.status = ApplicationStatusDB.APPROVED
        for field, value in supplied.items():
            setattr(application, field, value)

        self._commit_unique("Creator already has an application for this campaign")
        logger.info(
            "Creator %s invited to campaign %s (%s)",
            creator.id, campaign.id, "new application" if created else "existing application approved",
        )
        return self._load(application.id), created

    # =========================================================================
    # CREATOR: RESPOND
    # =========================================================================

    def respond(
        self, user: User, application_id: str, data: ApplicationRespond
    ) -> Tuple[CampaignApplication, Optional[Event], Optional[str]]:
        """
        Record the creator's accept/decline on an approved application.

        Returns (application, calendar event or None, warning or None). The
        calendar entry is written after the response is committed; if it fails
        the response stands and a warning is returned instead.
        """
        application = self._load(application_id)
        if not application:
            raise NotFoundError("Application not found")

        if application.status != ApplicationStatusDB.APPROVED:
            raise InvalidStateError("Can only respond to approved applications")

        creator = get_creator_profile(self.db, user)
        if application.creator_id != creator.id:
            raise ForbiddenError("Not authorized to respond to this application")

        if application.creator_response is not None:
            raise InvalidStateError("Application has already been responded to")

        response = CreatorResponseDB(data.response.value)
        application.creator_response = response
        application.responded_at = datetime.utcnow()
        self.db.commit()
        logger.info("Creator %s %s application %s", creator.id, response.value, application.id)

        event = None
        warning = None
        if response == CreatorResponseDB.ACCEPTED:
            try:
                event = CalendarService(self.db).create_campaign_event(application)
            except Exception:
                self.db.rollback()
                logger.warning(
                    "Calendar event for application %s failed", application.id, exc_info=True
                )
                warning = CALENDAR_WARNING

        return self._load(application.id), event, warning
