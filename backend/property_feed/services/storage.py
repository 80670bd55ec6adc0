import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from property_feed.core.errors import FeedWriteError
from property_feed.schemas.property import PropertyRecord, dump_records

logger = logging.getLogger(__name__)


def write_records(records: Sequence[PropertyRecord], path: str | Path) -> Path:
    """Replace ``path`` with the serialized records.

    The payload goes to a temporary file beside the target and is renamed into
    place, so readers never observe a truncated file.
    """
    target = Path(path)
    payload = dump_records(records)
    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(payload)
            handle.write(b"\n")
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FeedWriteError(f"Unable to write {target}: {exc}") from exc

    logger.info("Wrote %s records to %s", len(records), target)
    return target
