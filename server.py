# FastAPI Server for the Inverso creator/brand marketplace

import logging
import os
import re
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.app_config import ALLOWED_ORIGINS, ENVIRONMENT, LOG_LEVEL
from database.config import init_db, SessionLocal
from database.models import User, UserRole
from auth.utils import get_password_hash
from core.errors import register_exception_handlers
from routers import (
    auth_router,
    users_router,
    creators_router,
    creator_tools_router,
    brands_router,
    campaigns_router,
    shortlists_router,
    uploads_router,
)

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Inverso API",
    description="Creator/brand sponsored-content marketplace API",
    version="1.0.0",
)


def _seed_admin():
    """Create the admin account named by ADMIN_EMAIL / ADMIN_PASSWORD if missing."""
    admin_email = os.getenv("ADMIN_EMAIL")
    admin_pass = os.getenv("ADMIN_PASSWORD")
    if not admin_email or not admin_pass:
        return

    db = SessionLocal()
    try:
        if not db.query(User).filter(User.email == admin_email.lower()).first():
            db.add(User(
                email=admin_email.lower(),
                password_hash=get_password_hash(admin_pass),
                role=UserRole.ADMIN,
            ))
            db.commit()
            logger.info("Seeded admin user %s", admin_email)
    finally:
        db.close()


@app.on_event("startup")
def startup_event():
    init_db()
    _seed_admin()


# ============================================================================
# CORS
# ============================================================================
# "*" allows any origin; entries like https://*.netlify.app match subdomains.

def _cors_options(origins):
    if "*" in origins:
        return {"allow_origins": ["*"], "allow_credentials": False}

    exact = [o for o in origins if "*" not in o]
    patterns = [re.escape(o).replace(r"\*", ".*") for o in origins if "*" in o]
    options = {"allow_origins": exact, "allow_credentials": True}
    if patterns:
        options["allow_origin_regex"] = "^(" + "|".join(patterns) + ")$"
    return options


app.add_middleware(
    CORSMiddleware,
    allow_methods=["*"],
    allow_headers=["*"],
    **_cors_options(ALLOWED_ORIGINS),
)

register_exception_handlers(app)


# ============================================================================
# ROUTERS
# ============================================================================

app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(creators_router, prefix="/api")
app.include_router(creator_tools_router, prefix="/api")
app.include_router(brands_router, prefix="/api")
app.include_router(campaigns_router, prefix="/api")
app.include_router(shortlists_router, prefix="/api")
app.include_router(uploads_router, prefix="/api")


# Health Check
@app.get("/")
def root():
    return {"status": "OK"}


@app.get("/api/health")
def health_check():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": ENVIRONMENT,
    }
