# Brand Router for the Inverso marketplace
# Public brand directory and brand profile management

import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config.app_config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from database.config import get_db
from database.models import User, Brand
from database.marketplace_models import (
    Campaign, CampaignApplication, CampaignStatusDB, ApplicationStatusDB,
)
from schemas.marketplace import (
    BrandProfileCreate,
    BrandProfileUpdate,
    BrandProfileResponse,
)
from auth.roles import UserType
from auth.dependencies import get_current_user
from auth.decorators import require_user_type, ensure_owner_or_admin
from core.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("company_name",)

router = APIRouter(prefix="/brands", tags=["Brands"])


def _get_brand_or_404(db: Session, brand_id: str) -> Brand:
    brand = db.query(Brand).filter(Brand.id == brand_id).first()
    if not brand:
        raise NotFoundError("Brand not found")
    return brand


# ============================================================================
# PUBLIC ENDPOINTS
# ============================================================================

@router.get("")
def list_brands(
    search: Optional[str] = None,
    industry: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    query = db.query(Brand)
    if search:
        query = query.filter(or_(
            Brand.company_name.ilike(f"%{search}%"),
            Brand.description.ilike(f"%{search}%"),
        ))
    if industry:
        query = query.filter(Brand.industry.ilike(f"%{industry}%"))

    total = query.count()
    brands = (
        query.order_by(Brand.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "items": [BrandProfileResponse.model_validate(b) for b in brands],
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if total else 0,
    }


@router.get("/{brand_id}", response_model=BrandProfileResponse)
def get_brand(brand_id: str, db: Session = Depends(get_db)):
    return _get_brand_or_404(db, brand_id)


# ============================================================================
# PROFILE MANAGEMENT
# ============================================================================

@router.post("", response_model=BrandProfileResponse, status_code=status.HTTP_201_CREATED)
def create_brand_profile(
    brand_data: BrandProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    """Create the caller's brand profile. One profile per user."""
    if db.query(Brand).filter(Brand.user_id == current_user.id).first():
        raise ConflictError("Brand profile already exists")

    brand = Brand(user_id=current_user.id, **brand_data.model_dump())
    db.add(brand)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Brand profile already exists")
    db.refresh(brand)

    logger.info("Brand profile %s created for user %s", brand.id, current_user.id)
    return brand


@router.put("/{brand_id}", response_model=BrandProfileResponse)
def update_brand_profile(
    brand_id: str,
    brand_data: BrandProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    brand = _get_brand_or_404(db, brand_id)
    ensure_owner_or_admin(current_user, brand.user_id)

    update_data = brand_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # Required columns cannot be cleared
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(brand, field, value)

    db.commit()
    db.refresh(brand)
    return brand


@router.delete("/{brand_id}")
def delete_brand_profile(
    brand_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a brand profile along with its campaigns and shortlist."""
    brand = _get_brand_or_404(db, brand_id)
    ensure_owner_or_admin(current_user, brand.user_id)

    db.delete(brand)
    db.commit()
    logger.info("Brand profile %s deleted by %s", brand_id, current_user.id)
    return {"message": "Brand profile deleted successfully"}


@router.get("/{brand_id}/stats")
def get_brand_stats(
    brand_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Campaign and application counts plus budget totals for the owner."""
    brand = _get_brand_or_404(db, brand_id)
    ensure_owner_or_admin(current_user, brand.user_id)

    campaigns = db.query(Campaign).filter(Campaign.brand_id == brand.id)
    applications = db.query(CampaignApplication).join(Campaign).filter(Campaign.brand_id == brand.id)

    total_campaigns = campaigns.count()
    active_campaigns = campaigns.filter(Campaign.status == CampaignStatusDB.ACTIVE).count()
    completed_campaigns = campaigns.filter(Campaign.status == CampaignStatusDB.COMPLETED).count()
    total_applications = applications.count()
    approved_applications = applications.filter(
        CampaignApplication.status == ApplicationStatusDB.APPROVED
    ).count()

    total_budget = db.query(func.coalesce(func.sum(Campaign.budget), 0)).filter(
        Campaign.brand_id == brand.id
    ).scalar()
    committed_budget = db.query(func.coalesce(func.sum(Campaign.budget), 0)).filter(
        Campaign.brand_id == brand.id,
        Campaign.status.in_([CampaignStatusDB.ACTIVE, CampaignStatusDB.COMPLETED]),
    ).scalar()

    return {
        "total_campaigns": total_campaigns,
        "active_campaigns": active_campaigns,
        "completed_campaigns": completed_campaigns,
        "other_campaigns": total_campaigns - active_campaigns - completed_campaigns,
        "total_applications": total_applications,
        "approved_applications": approved_applications,
        "total_budget": float(total_budget or 0),
        "committed_budget": float(committed_budget or 0),
        "available_budget": float((total_budget or 0) - (committed_budget or 0)),
    }
