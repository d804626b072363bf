"""Tool store endpoint: /werkzeuge. New tools always start out not borrowed."""

from toolshare.api.collection import build_collection_router
from toolshare.services.collections import WERKZEUGE

router = build_collection_router(WERKZEUGE)
