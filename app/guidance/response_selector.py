"""
Course Guide Assistant - Response Selector
Picks a catalog variant by rotation and fills its placeholders.
"""
import logging
from typing import Optional, Tuple

from app.guidance.response_catalog import DEFAULT_KEY, RESPONSE_CATALOG, Catalog, get_variants
from app.guidance.templating import render
from app.models import PlaceholderValues

logger = logging.getLogger(__name__)


class ResponseSelector:
    """
    Deterministic template rotation.

    The variant index is message_count % len(variants), so consecutive
    messages hitting the same key cycle through every phrasing before
    repeating. No randomness and no memory of earlier replies.
    """

    def __init__(self, catalog: Catalog = RESPONSE_CATALOG):
        self.catalog = catalog

    def respond(
        self,
        key: Tuple[str, str],
        data: Optional[PlaceholderValues] = None,
        message_count: int = 0,
    ) -> str:
        variants = get_variants(key, self.catalog)
        if not variants:
            logger.warning(f"No templates for {key}; using fallback")
            variants = get_variants(DEFAULT_KEY, self.catalog)

        template = variants[self.rotation_index(message_count, len(variants))]
        tokens = data.as_tokens() if data is not None else {}
        return render(template, tokens)

    @staticmethod
    def rotation_index(message_count: int, variant_count: int) -> int:
        if variant_count <= 0:
            return 0
        return message_count % variant_count
