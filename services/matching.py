# Creator matching and ranking
# Pure helpers: no database access, callers pass in the creator pool.

from typing import Iterable, List, Optional

from core.categories import normalize_categories


def reach_score(creator) -> float:
    """
    Combined audience weighted by engagement.

    (instagram + tiktok + youtube followers) * (1 + avg_engagement_rate / 100),
    with missing values counted as zero.
    """
    followers = (
        (creator.instagram_followers or 0)
        + (creator.tiktok_followers or 0)
        + (creator.youtube_followers or 0)
    )
    engagement = creator.avg_engagement_rate or 0
    return followers * (1 + engagement / 100.0)


def matches_category(creator, category: Optional[str]) -> bool:
    if not category:
        return True
    wanted = category.strip().lower()
    return wanted in normalize_categories(creator.categories)


def rank_creators(pool: Iterable, category: Optional[str] = None) -> List:
    """Filter by category and order by reach score, highest first.

    sorted() is stable, so equal scores keep their input order.
    """
    candidates = [c for c in pool if matches_category(c, category)]
    return sorted(candidates, key=reach_score, reverse=True)
