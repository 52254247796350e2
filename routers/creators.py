# Creator Router for the Inverso marketplace
# Public discovery, profile management, stats and bulk import

import logging
import math
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy import and_, func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from config.app_config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, RECOMMENDED_CREATORS_LIMIT
from database.config import get_db
from database.models import User, Creator
from database.marketplace_models import (
    Campaign, CampaignApplication, Shortlist, ApplicationStatusDB,
)
from schemas.marketplace import (
    ApplicationStatus,
    ApplicationDetailResponse,
    CreatorProfileCreate,
    CreatorProfileUpdate,
    CreatorProfileResponse,
    CreatorStatsResponse,
    RankedCreatorResponse,
)
from auth.roles import UserType
from auth.decorators import require_user_type, require_admin, require_creator_owner
from core.categories import normalize_categories
from core.errors import ConflictError, NotFoundError
from services.matching import rank_creators, reach_score
from services.creator_import import import_creators

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("display_name",)

router = APIRouter(prefix="/creators", tags=["Creators"])

AGE_GROUPS = {
    "18-24": (18, 24),
    "25-34": (25, 34),
    "35-44": (35, 44),
    "45+": (45, None),
}

RECOMMENDED_MAX = 50

_total_followers = (
    func.coalesce(Creator.instagram_followers, 0)
    + func.coalesce(Creator.tiktok_followers, 0)
    + func.coalesce(Creator.youtube_followers, 0)
)

SORT_COLUMNS = {
    "created_at": Creator.created_at,
    "followers": _total_followers,
    "engagement": Creator.avg_engagement_rate,
    "price": Creator.base_price,
}


# ============================================================================
# PUBLIC ENDPOINTS
# ============================================================================

@router.get("")
def list_creators(
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_followers: Optional[int] = Query(None, ge=0),
    max_followers: Optional[int] = Query(None, ge=0),
    min_engagement: Optional[float] = Query(None, ge=0),
    max_engagement: Optional[float] = Query(None, ge=0),
    location: Optional[str] = None,
    age_group: Optional[str] = Query(None, pattern="^(18-24|25-34|35-44|45\\+)$"),
    sort_by: str = Query("created_at", pattern="^(created_at|followers|engagement|price)$"),
    sort_order: str = Query("desc", pattern="^(asc|desc)$"),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    """
    Browse active creators.

    min_followers matches a creator whose largest platform reaches it;
    max_followers requires every platform to stay under it.
    """
    query = db.query(Creator).filter(Creator.is_active == True)

    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Creator.display_name.ilike(pattern),
            Creator.username.ilike(pattern),
            Creator.bio.ilike(pattern),
        ))
    if location:
        query = query.filter(Creator.location.ilike(f"%{location}%"))
    if min_followers is not None:
        query = query.filter(or_(
            Creator.instagram_followers >= min_followers,
            Creator.tiktok_followers >= min_followers,
            Creator.youtube_followers >= min_followers,
        ))
    if max_followers is not None:
        query = query.filter(and_(
            func.coalesce(Creator.instagram_followers, 0) <= max_followers,
            func.coalesce(Creator.tiktok_followers, 0) <= max_followers,
            func.coalesce(Creator.youtube_followers, 0) <= max_followers,
        ))
    if min_engagement is not None:
        query = query.filter(Creator.avg_engagement_rate >= min_engagement)
    if max_engagement is not None:
        query = query.filter(Creator.avg_engagement_rate <= max_engagement)
    if age_group:
        low, high = AGE_GROUPS[age_group]
        query = query.filter(Creator.age >= low)
        if high is not None:
            query = query.filter(Creator.age <= high)

    column = SORT_COLUMNS[sort_by]
    query = query.order_by(column.asc() if sort_order == "asc" else column.desc(), Creator.id)
    offset = (page - 1) * limit

    if category:
        # Categories live in a JSON column; match them in Python.
        wanted = category.strip().lower()
        matching = [c for c in query.all() if wanted in normalize_categories(c.categories)]
        total = len(matching)
        creators = matching[offset:offset + limit]
    else:
        total = query.count()
        creators = query.offset(offset).limit(limit).all()

    return {
        "items": [CreatorProfileResponse.model_validate(c) for c in creators],
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if total else 0,
    }


@router.get("/recommended")
def recommended_creators(
    category: Optional[str] = None,
    limit: int = Query(RECOMMENDED_CREATORS_LIMIT, ge=1, le=RECOMMENDED_MAX),
    db: Session = Depends(get_db),
):
    """Active creators ranked by reach score, optionally within one category."""
    pool = (
        db.query(Creator)
        .filter(Creator.is_active == True)
        .order_by(Creator.created_at, Creator.id)
        .all()
    )
    ranked = rank_creators(pool, category)[:limit]

    return {
        "items": [
            RankedCreatorResponse(
                **CreatorProfileResponse.model_validate(c).model_dump(),
                reach_score=reach_score(c),
            )
            for c in ranked
        ],
        "total": len(ranked),
    }


@router.get("/{creator_id}", response_model=CreatorProfileResponse)
def get_creator(creator_id: str, db: Session = Depends(get_db)):
    creator = db.query(Creator).filter(Creator.id == creator_id).first()
    if not creator:
        raise NotFoundError("Creator not found")
    return creator


# ============================================================================
# PROFILE MANAGEMENT
# ============================================================================

@router.post("", response_model=CreatorProfileResponse, status_code=status.HTTP_201_CREATED)
def create_creator_profile(
    profile_data: CreatorProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.CREATOR)),
):
    """Create the caller's creator profile. One profile per user."""
    if db.query(Creator).filter(Creator.user_id == current_user.id).first():
        raise ConflictError("Creator profile already exists")

    if db.query(Creator).filter(Creator.username == profile_data.username).first():
        raise ConflictError("Username already taken")

    data = profile_data.model_dump()
    data["categories"] = data.get("categories") or []
    creator = Creator(user_id=current_user.id, **data)
    db.add(creator)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Creator profile already exists")
    db.refresh(creator)

    logger.info("Creator profile %s created for user %s", creator.id, current_user.id)
    return creator


@router.put("/{creator_id}", response_model=CreatorProfileResponse)
def update_creator_profile(
    profile_data: CreatorProfileUpdate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    update_data = profile_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # Required columns cannot be cleared
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(creator, field, value)

    db.commit()
    db.refresh(creator)
    return creator


@router.delete("/{creator_id}")
def delete_creator_profile(
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    db.delete(creator)
    db.commit()
    logger.info("Creator profile %s deleted", creator.id)
    return {"message": "Creator profile deleted successfully"}


# ============================================================================
# OWNER DASHBOARD
# ============================================================================

@router.get("/{creator_id}/stats", response_model=CreatorStatsResponse)
def get_creator_stats(
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    applications = db.query(CampaignApplication).filter(CampaignApplication.creator_id == creator.id)

    total = applications.count()
    approved = applications.filter(CampaignApplication.status == ApplicationStatusDB.APPROVED).count()
    pending = applications.filter(CampaignApplication.status == ApplicationStatusDB.PENDING).count()
    shortlisted = db.query(Shortlist).filter(Shortlist.creator_id == creator.id).count()

    return {
        "total_applications": total,
        "approved_applications": approved,
        "pending_applications": pending,
        "rejected_applications": total - approved - pending,
        "shortlist_count": shortlisted,
        "approval_rate": round(approved / total * 100, 1) if total else 0.0,
    }


@router.get("/{creator_id}/applications")
def get_creator_applications(
    application_status: Optional[ApplicationStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    """The creator's applications with their campaigns, newest first."""
    query = db.query(CampaignApplication).filter(CampaignApplication.creator_id == creator.id)
    if application_status:
        query = query.filter(CampaignApplication.status == ApplicationStatusDB(application_status.value))

    total = query.count()
    applications = (
        query.options(joinedload(CampaignApplication.campaign).joinedload(Campaign.brand))
        .order_by(CampaignApplication.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "items": [ApplicationDetailResponse.model_validate(a) for a in applications],
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if total else 0,
    }


# ============================================================================
# ADMIN
# ============================================================================

@router.post("/import")
def bulk_import_creators(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin()),
):
    """Upsert creators from loosely-keyed records: {"items": [...]}."""
    result = import_creators(db, payload.get("items"))
    logger.info("Admin %s imported %d creators", admin.id, result["imported"])
    return result
