# Bulk creator import
# Maps loosely-keyed influencer records (spreadsheets, scraped JSON) onto
# Creator profiles. Used by POST /api/creators/import and `main.py import-creators`.

import logging
import re
import secrets
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from sqlalchemy.orm import Session

from auth.utils import get_password_hash
from core.categories import normalize_categories
from core.errors import ValidationError
from database.models import User, Creator, UserRole

logger = logging.getLogger(__name__)

# First non-empty alias wins, in the order listed.
FIELD_ALIASES = {
    "display_name": ("displayName", "name", "fullName"),
    "username": ("username", "handle", "instagramHandle", "instagram_handle", "ig", "instagram"),
    "email": ("email", "mail"),
    "instagram_handle": ("instagramHandle", "instagram_handle", "instagram", "ig", "handle"),
    "instagram_followers": ("instagramFollowers", "instagram_followers", "followers", "ig_followers"),
    "tiktok_handle": ("tiktokHandle", "tiktok_handle", "tiktok"),
    "tiktok_followers": ("tiktokFollowers", "tiktok_followers"),
    "youtube_handle": ("youtubeHandle", "youtube_handle", "youtube", "yt"),
    "youtube_followers": ("youtubeFollowers", "youtube_followers"),
    "avg_engagement_rate": ("avgEngagementRate", "engagementRate", "engagement_rate"),
    "base_price": ("basePrice", "rate", "price"),
    "age": ("age",),
    "gender": ("gender",),
    "location": ("location", "city"),
    "categories": ("categories", "category", "niche", "tags"),
    "bio": ("bio", "about"),
    "is_verified": ("isVerified", "verified"),
}

INT_FIELDS = ("instagram_followers", "tiktok_followers", "youtube_followers", "age")
FLOAT_FIELDS = ("avg_engagement_rate", "base_price")

PROFILE_FIELDS = (
    "display_name", "bio",
    "instagram_handle", "instagram_followers",
    "tiktok_handle", "tiktok_followers",
    "youtube_handle", "youtube_followers",
    "avg_engagement_rate", "base_price",
    "age", "gender", "location", "categories", "is_verified",
)


def _first(raw: Dict[str, Any], aliases: Iterable[str]):
    for key in aliases:
        value = raw.get(key)
        if value is not None and str(value) != "":
            return value
    return None


def _number(value, cast):
    if value is None:
        return None
    try:
        return cast(float(value))
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric import value %r", value)
        return None


def _truthy(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no")
    return bool(value)


def extract_handle(value) -> Optional[str]:
    """'@name', 'name' or a profile URL such as https://instagram.com/name/ -> 'name'."""
    if value is None:
        return None
    raw = str(value).strip()
    if raw.startswith("http"):
        parts = [p for p in urlparse(raw).path.split("/") if p]
        raw = parts[0] if parts else ""
    return raw.lstrip("@").split("?")[0].split("#")[0] or None


def slugify_username(display_name: Optional[str]) -> Optional[str]:
    if not display_name:
        return None
    slug = re.sub(r"\s+", "_", str(display_name).lower())
    slug = re.sub(r"[^a-z0-9_]", "", slug)[:30]
    return slug or None


def normalize_entry(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve aliases and coerce types for one imported record."""
    entry = {field: _first(raw, aliases) for field, aliases in FIELD_ALIASES.items()}

    for field in INT_FIELDS:
        entry[field] = _number(entry[field], int)
    for field in FLOAT_FIELDS:
        entry[field] = _number(entry[field], float)

    for field in ("username", "instagram_handle"):
        entry[field] = extract_handle(entry[field])

    entry["email"] = str(entry["email"] or "").strip().lower() or None
    entry["categories"] = normalize_categories(entry["categories"])
    entry["is_verified"] = _truthy(entry["is_verified"])

    entry["username"] = (
        entry["username"]
        or slugify_username(entry["display_name"])
        or f"creator_{secrets.token_hex(4)}"
    )
    entry["email"] = entry["email"] or f"{entry['username']}@import.local"
    entry["display_name"] = entry["display_name"] or entry["username"]
    return entry


def import_creators(db: Session, items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Find-or-create a creator user per record and upsert its profile by username.

    Returns {"imported": n, "creators": [{id, username, email}, ...]}.
    """
    if not isinstance(items, list) or not items:
        raise ValidationError("Provide an array `items` with influencer entries")

    results = []
    for raw in items:
        if not isinstance(raw, dict):
            raise ValidationError("Each imported item must be an object")
        entry = normalize_entry(raw)

        user = db.query(User).filter(User.email == entry["email"]).first()
        if not user:
            password = raw.get("password") or f"Imported#{secrets.token_urlsafe(8)}"
            user = User(
                email=entry["email"],
                password_hash=get_password_hash(password),
                role=UserRole.CREATOR,
            )
            db.add(user)
            db.flush()

        creator = db.query(Creator).filter(Creator.username == entry["username"]).first()
        if creator is None:
            creator = db.query(Creator).filter(Creator.user_id == user.id).first()
        if creator is None:
            creator = Creator(user_id=user.id, username=entry["username"])
            db.add(creator)

        for field in PROFILE_FIELDS:
            setattr(creator, field, entry[field])
        creator.is_active = True
        db.flush()

        results.append({"id": creator.id, "username": creator.username, "email": entry["email"]})

    db.commit()
    logger.info("Imported %d creators", len(results))
    return {"imported": len(results), "creators": results}


def normalize_stored_categories(db: Session) -> Dict[str, int]:
    """Rewrite every creator's categories in normalized form. Returns counts."""
    creators = db.query(Creator).all()
    updated = 0
    for creator in creators:
        normalized = normalize_categories(creator.categories)
        if normalized != (creator.categories or []):
            creator.categories = normalized
            updated += 1
    db.commit()
    logger.info("Normalized categories for %d of %d creators", updated, len(creators))
    return {"updated": updated, "total": len(creators)}
