# Database package: importing it registers every mapped table on Base.metadata

from database import models, marketplace_models, creator_tools_models  # noqa: F401
