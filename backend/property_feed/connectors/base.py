from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from property_feed.schemas.property import PropertyRecord


class BaseFeedConnector(ABC):
    name: str

    @abstractmethod
    def fetch_feed(self) -> str:  # pragma: no cover - interface
        """Fetch the raw feed document in a single request."""

    @abstractmethod
    def parse_feed(self, payload: str) -> Mapping[str, Any]:  # pragma: no cover - interface
        """Parse the raw document into a generic tree."""

    @abstractmethod
    def normalize_fields(self, parsed: Mapping[str, Any]) -> List[PropertyRecord]:  # pragma: no cover - interface
        """Map source nodes into normalized property records."""

    def fetch_properties(self) -> List[PropertyRecord]:
        return self.normalize_fields(self.parse_feed(self.fetch_feed()))
