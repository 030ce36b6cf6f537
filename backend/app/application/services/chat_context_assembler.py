"""Builds the platform summary injected into the chatbot's system prompt."""

import logging

from app.application.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

FALLBACK_CONTEXT = (
    "This is an AI Catalog Platform that helps users discover AI tools "
    "and development resources."
)
_DESCRIPTION_LIMIT = 100


class ChatContextAssembler:
    """Snapshot of the active catalog rendered as plain text."""

    def __init__(self, catalog_service: CatalogService, max_products: int = 10):
        self._catalog = catalog_service
        self._max_products = max_products

    async def build_context(self) -> str:
        """Never raises; on failure the fixed fallback sentence is returned."""
        try:
            domains = await self._catalog.get_domains()
            categories = await self._catalog.get_categories()
            products = (await self._catalog.get_products())[: self._max_products]
        except Exception:
            logger.exception("Could not assemble chatbot context")
            return FALLBACK_CONTEXT

        lines = [
            "Platform Context:",
            "This is an AI Catalog Platform with the following content:",
            "",
            "DOMAINS:",
            *(_line(d.name, d.description) for d in domains),
            "",
            "CATEGORIES:",
            *(_line(c.name, c.description) for c in categories),
            "",
            "FEATURED TOOLS:",
            *(
                _line(p.name, p.subtitle or (p.description or "")[:_DESCRIPTION_LIMIT])
                for p in products
            ),
            "",
            "The platform helps users discover AI tools, development resources, "
            "and technical solutions.",
            "Users can search, filter, and explore various categories of tools and resources.",
        ]
        return "\n".join(lines)


def _line(name: str, summary: str | None) -> str:
    return f"- {name}: {summary}" if summary else f"- {name}"
