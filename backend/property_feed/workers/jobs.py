import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from property_feed.connectors.agents_society import AgentsSocietyConnector
from property_feed.connectors.base import BaseFeedConnector
from property_feed.core.config import get_settings
from property_feed.services.storage import write_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    count: int
    output_path: Path


def build_properties_json(
    output_path: Optional[str] = None,
    connector: Optional[BaseFeedConnector] = None,
) -> BuildResult:
    settings = get_settings()
    connector = connector or AgentsSocietyConnector()
    records = connector.fetch_properties()
    written = write_records(records, output_path or settings.output_path)
    logger.info("[%s] build finished records=%s output=%s", connector.name, len(records), written)
    return BuildResult(count=len(records), output_path=written)
