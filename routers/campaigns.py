# Campaign Router for the Inverso marketplace
# Campaign lifecycle, applications, invitations and creator responses

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config.app_config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from database.config import get_db
from database.models import User
from schemas.marketplace import (
    CampaignCreate,
    CampaignUpdate,
    CampaignResponse,
    CampaignDetailResponse,
    CampaignListResponse,
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
    ApplicationDetailResponse,
    ApplicationRespond,
    CampaignInvite,
    RespondResult,
    SuccessResponse,
)
from auth.roles import UserType
from auth.decorators import require_user_type
from services.campaign_service import CampaignService
from services.application_service import ApplicationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/campaigns", tags=["Campaigns"])


# ============================================================================
# PUBLIC ENDPOINTS
# ============================================================================

@router.get("", response_model=CampaignListResponse)
def list_campaigns(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    status: Optional[str] = None,
    brand_id: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """List campaigns, newest first. Filter by status, brand or title."""
    return CampaignService(db).list_campaigns(
        page=page, page_size=page_size, status=status, brand_id=brand_id, search=search,
    )


@router.get("/creator/{creator_id}")
def list_creator_campaigns(
    creator_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.CREATOR)),
):
    """Campaigns the creator has been approved for."""
    campaigns = CampaignService(db).approved_campaigns_for_creator(current_user, creator_id)
    return {"items": [CampaignResponse.model_validate(c) for c in campaigns]}


@router.get("/{campaign_id}", response_model=CampaignDetailResponse)
def get_campaign(campaign_id: str, db: Session = Depends(get_db)):
    return CampaignService(db).get_campaign(campaign_id)


# ============================================================================
# BRAND: CAMPAIGN LIFECYCLE
# ============================================================================

@router.post("", response_model=CampaignResponse, status_code=status.HTTP_201_CREATED)
def create_campaign(
    campaign_data: CampaignCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    return CampaignService(db).create_campaign(current_user, campaign_data)


@router.put("/{campaign_id}", response_model=CampaignResponse)
def update_campaign(
    campaign_id: str,
    campaign_data: CampaignUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    return CampaignService(db).update_campaign(current_user, campaign_id, campaign_data)


@router.delete("/{campaign_id}", response_model=SuccessResponse)
def delete_campaign(
    campaign_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    CampaignService(db).delete_campaign(current_user, campaign_id)
    return {"success": True}


@router.post("/{campaign_id}/invite", response_model=ApplicationDetailResponse)
def invite_creator(
    campaign_id: str,
    invite: CampaignInvite,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    """
    Invite a creator to a campaign.

    Creates an approved application (201) or approves the existing one (200).
    """
    application, created = ApplicationService(db).invite(current_user, campaign_id, invite)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return application


# ============================================================================
# APPLICATIONS
# ============================================================================

@router.put("/applications/{application_id}/respond", response_model=RespondResult)
def respond_to_application(
    application_id: str,
    answer: ApplicationRespond,
    db: Session = Depends(get_db),
    # Role check runs first, so a non-creator gets 403 before any state check
    current_user: User = Depends(require_user_type(UserType.CREATOR)),
):
    """
    Accept or decline an approved application. Accepting also adds the
    campaign to the creator's calendar; if that fails the response still
    stands and `calendar_warning` explains why.
    """
    application, event, warning = ApplicationService(db).respond(current_user, application_id, answer)

    result = ApplicationDetailResponse.model_validate(application).model_dump()
    result["calendar_event_id"] = event.id if event else None
    result["calendar_warning"] = warning
    return result


@router.post("/{campaign_id}/applications", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_to_campaign(
    campaign_id: str,
    application_data: ApplicationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.CREATOR)),
):
    return ApplicationService(db).apply(current_user, campaign_id, application_data)


@router.put("/{campaign_id}/applications/{application_id}", response_model=ApplicationResponse)
def update_application(
    campaign_id: str,
    application_id: str,
    application_data: ApplicationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    """Brand decision on an application: approve, reject or edit terms."""
    return ApplicationService(db).update_application(
        current_user, campaign_id, application_id, application_data
    )
