# Marketplace Routers Module
# Exports all modular API routers for the marketplace

from routers.auth import router as auth_router
from routers.users import router as users_router
from routers.creators import router as creators_router
from routers.creator_tools import router as creator_tools_router
from routers.brands import router as brands_router
from routers.campaigns import router as campaigns_router
from routers.shortlists import router as shortlists_router
from routers.uploads import router as uploads_router

__all__ = [
    'auth_router',
    'users_router',
    'creators_router',
    'creator_tools_router',
    'brands_router',
    'campaigns_router',
    'shortlists_router',
    'uploads_router',
]
