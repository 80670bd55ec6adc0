import logging
from typing import Any, List, Mapping, Optional

import httpx

from property_feed.core.config import get_settings
from property_feed.core.errors import FeedFetchError
from property_feed.schemas.property import PropertyRecord
from property_feed.services.normalization import normalize_feed
from property_feed.services.xml_tree import parse_xml

from .base import BaseFeedConnector

logger = logging.getLogger(__name__)


class AgentsSocietyConnector(BaseFeedConnector):
    name = "agents_society"

    def __init__(
        self,
        feed_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self.feed_url = feed_url or settings.feed_url
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.user_agent = settings.user_agent
        self._client = client

    def _new_client(self) -> httpx.Client:
        return httpx.Client(headers={"User-Agent": self.user_agent}, timeout=self.timeout, follow_redirects=True)

    def fetch_feed(self) -> str:
        logger.info("Fetching XML feed from %s", self.feed_url)
        owns_client = self._client is None
        client = self._client or self._new_client()
        try:
            response = client.get(self.feed_url)
        except httpx.HTTPError as exc:
            raise FeedFetchError(f"Unable to fetch feed {self.feed_url}: {exc}") from exc
        finally:
            if owns_client:
                client.close()

        if not response.is_success:
            logger.warning("Feed responded with HTTP %s, using body as-is", response.status_code)
        logger.info("Fetched %s bytes", len(response.content))
        return response.text

    def parse_feed(self, payload: str) -> Mapping[str, Any]:
        logger.info("Parsing XML")
        return parse_xml(payload)

    def normalize_fields(self, parsed: Mapping[str, Any]) -> List[PropertyRecord]:
        return normalize_feed(parsed)
