# Campaign Lifecycle Service
# Create, update, delete and query brand campaigns

import logging
import math
from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from auth.decorators import get_brand_profile, get_creator_profile, get_user_type
from auth.roles import UserType
from core.errors import ForbiddenError, NotFoundError, ValidationError
from database.models import User, Creator
from database.marketplace_models import (
    Campaign, CampaignApplication, CampaignStatusDB, ApplicationStatusDB,
)
from schemas.marketplace import CampaignCreate, CampaignUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "budget", "start_date", "end_date", "deliverables", "status")


class CampaignService:
    """
    Business rules for campaigns.

    Routers stay thin: they hand the validated payload and the caller to this
    service, which enforces ownership and cross-field rules before writing.
    """

    def __init__(self, db: Session):
        self.db = db

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list_campaigns(
        self,
        page: int = 1,
        page_size: int = 20,
        status: Optional[str] = None,
        brand_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> dict:
        query = self.db.query(Campaign)

        if status:
            try:
                status_db = CampaignStatusDB(status.lower())
            except ValueError:
                raise ValidationError(
                    "Validation error",
                    details=[f"status: must be one of {', '.join(s.value for s in CampaignStatusDB)}"],
                )
            query = query.filter(Campaign.status == status_db)
        if brand_id:
            query = query.filter(Campaign.brand_id == brand_id)
        if search:
            query = query.filter(Campaign.title.ilike(f"%{search}%"))

        total = query.count()
        items = (
            query.options(joinedload(Campaign.brand))
            .order_by(Campaign.created_at.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )

        return {
            "items": items,
            "page": page,
            "page_size": page_size,
            "total": total,
            "pages": math.ceil(total / page_size) if total else 0,
        }

    def get_campaign(self, campaign_id: str) -> Campaign:
        campaign = (
            self.db.query(Campaign)
            .options(
                joinedload(Campaign.brand),
                selectinload(Campaign.applications).joinedload(CampaignApplication.creator),
            )
            .filter(Campaign.id == campaign_id)
            .first()
        )
        if not campaign:
            raise NotFoundError("Campaign not found")
        return campaign

    def approved_campaigns_for_creator(self, user: User, creator_id: str) -> list:
        """Campaigns where the creator's application has been approved."""
        if get_user_type(user) != UserType.ADMIN:
            creator = get_creator_profile(self.db, user)
            if creator.id != creator_id:
                raise ForbiddenError("Not authorized")
        elif not self.db.query(Creator).filter(Creator.id == creator_id).first():
            raise NotFoundError("Creator not found")

        applications = (
            self.db.query(CampaignApplication)
            .options(joinedload(CampaignApplication.campaign).joinedload(Campaign.brand))
            .filter(
                CampaignApplication.creator_id == creator_id,
                CampaignApplication.status == ApplicationStatusDB.APPROVED,
            )
            .order_by(CampaignApplication.created_at.desc())
            .all()
        )
        return [app.campaign for app in applications]

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def create_campaign(self, user: User, data: CampaignCreate) -> Campaign:
        brand = get_brand_profile(self.db, user)

        campaign = Campaign(
            brand_id=brand.id,
            requirements=data.requirements or [],
            preferred_categories=data.preferred_categories or [],
            **data.model_dump(exclude={"requirements", "preferred_categories"}),
        )
        self.db.add(campaign)
        self.db.commit()
        self.db.refresh(campaign)

        logger.info("Campaign %s created by brand %s", campaign.id, brand.id)
        return campaign

    def update_campaign(self, user: User, campaign_id: str, data: CampaignUpdate) -> Campaign:
        campaign = self.get_owned_campaign(user, campaign_id, action="update")
        changes = data.model_dump(exclude_unset=True)
        # Required columns cannot be cleared
        for field in REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                del changes[field]

        start = changes.get("start_date", campaign.start_date)
        end = changes.get("end_date", campaign.end_date)
        if ("start_date" in changes or "end_date" in changes) and end <= start:
            raise ValidationError(
                "Validation error",
                details=["end_date: end_date must be after start_date"],
            )

        minimum = changes.get("min_followers", campaign.min_followers)
        maximum = changes.get("max_followers", campaign.max_followers)
        if minimum is not None and maximum is not None and maximum < minimum:
            raise ValidationError(
                "Validation error",
                details=["max_followers: max_followers must be greater than or equal to min_followers"],
            )

        if "status" in changes:
            changes["status"] = CampaignStatusDB(changes["status"])

        for field, value in changes.items():
            setattr(campaign, field, value)

        self.db.commit()
        self.db.refresh(campaign)
        logger.info("Campaign %s updated: %s", campaign.id, ", ".join(sorted(changes)))
        return campaign

    def delete_campaign(self, user: User, campaign_id: str) -> None:
        campaign = self.get_owned_campaign(user, campaign_id, action="delete")
        self.db.delete(campaign)
        self.db.commit()
        logger.info("Campaign %s deleted", campaign_id)

    # =========================================================================
    # OWNERSHIP
    # =========================================================================

    def get_owned_campaign(self, user: User, campaign_id: str, action: str = "manage") -> Campaign:
        """Load a campaign the caller may manage: its owning brand or an admin."""
        campaign = self.db.query(Campaign).filter(Campaign.id == campaign_id).first()
        if not campaign:
            raise NotFoundError("Campaign not found")

        if get_user_type(user) == UserType.ADMIN:
            return campaign

        brand = get_brand_profile(self.db, user)
        if campaign.brand_id != brand.id:
            raise ForbiddenError(f"Not authorized to {action} this campaign")
        return campaign
