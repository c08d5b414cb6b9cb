"""Showcase loading services."""

import asyncio
import logging

from apps.core.backend import BackendClient, BackendError

from .types import Article, Package, Project, Showcase

logger = logging.getLogger(__name__)


def parse_items(data, item_type) -> tuple | None:
    """
    Build a tuple of ``item_type`` from a decoded JSON body.

    Returns None when the body is not a JSON array of objects. Order is kept
    exactly as the backend sent it.
    """
    if not isinstance(data, list):
        return None
    if not all(isinstance(entry, dict) for entry in data):
        return None
    return tuple(item_type.from_dict(entry) for entry in data)


class ShowcaseLoader:
    """Overlay backend-provided showcase content onto the static fallback."""

    def __init__(self, client: BackendClient, fallback: Showcase | None = None) -> None:
        self.client = client
        self.fallback = Showcase.fallback() if fallback is None else fallback

    async def load(self) -> Showcase:
        """
        Fetch all three categories concurrently.

        Each category is either the full backend sequence or the untouched
        fallback sequence. Never raises.
        """
        projects, packages, articles = await asyncio.gather(
            self._load_category("projects", Project, self.fallback.projects),
            self._load_category("packages", Package, self.fallback.packages),
            self._load_category("articles", Article, self.fallback.articles),
        )
        return Showcase(projects=projects, packages=packages, articles=articles)

    async def _load_category(self, resource: str, item_type, fallback: tuple) -> tuple:
        try:
            return await self._fetch_category(resource, item_type, fallback)
        except Exception:
            logger.exception("Failed to load showcase %s, using fallback", resource)
            return fallback

    async def _fetch_category(self, resource: str, item_type, fallback: tuple) -> tuple:
        try:
            response = await self.client.get(f"/{resource}")
        except BackendError as exc:
            logger.warning("Showcase %s unavailable: %s", resource, exc)
            return fallback

        if not response.ok:
            logger.warning("Showcase %s returned HTTP %s, using fallback", resource, response.status)
            return fallback

        try:
            data = response.json()
        except ValueError:
            logger.warning("Showcase %s returned a malformed body, using fallback", resource)
            return fallback

        items = parse_items(data, item_type)
        if items is None:
            logger.warning("Showcase %s did not return a list of objects, using fallback", resource)
            return fallback
        if not items:
            logger.info("Showcase %s is empty, using fallback", resource)
            return fallback

        logger.info("Loaded %d %s from backend", len(items), resource)
        return items
