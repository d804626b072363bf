"""User store endpoint: /users."""

from toolshare.api.collection import build_collection_router
from toolshare.services.collections import USERS

router = build_collection_router(USERS)
