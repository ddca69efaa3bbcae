"""
Serialized commit messages document.

The extractor writes a pretty-printed JSON array of strings; the chart
renderer reads it back from disk or fetches it over HTTP when it is served as
a static asset.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

import httpx

from shared.exceptions import FetchError

logger = logging.getLogger(__name__)


def _validate_messages(payload: Any) -> List[str]:
    if not isinstance(payload, list):
        raise ValueError("Commit messages document must be a JSON array")
    for index, item in enumerate(payload):
        if not isinstance(item, str):
            raise ValueError(f"Entry {index} is not a string")
    return payload


def write_messages(path: Union[str, Path], messages: Sequence[str], indent: int = 2) -> Path:
    """Write ``messages`` to ``path``, replacing any existing document."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    content = json.dumps(list(messages), indent=indent, ensure_ascii=False)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {len(messages)} commit messages to {path}")
    return path


def read_messages(path: Union[str, Path]) -> List[str]:
    """Read a commit messages document written by :func:`write_messages`."""
    with open(path, "r", encoding="utf-8") as f:
        return _validate_messages(json.load(f))


def is_remote_source(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def fetch_messages(
    source: str,
    timeout: float = 10.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[str]:
    """
    Retrieve the commit messages document.

    ``source`` is either an http(s) URL or a local path. Every failure mode
    (non-success status, network error, missing file, malformed body) is
    reported as :class:`FetchError`.
    """
    if not is_remote_source(source):
        try:
            return read_messages(source)
        except FileNotFoundError:
            raise FetchError(source, "document not found")
        except (OSError, ValueError) as e:
            raise FetchError(source, str(e))

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(source)
            response.raise_for_status()
            return _validate_messages(response.json())
    except httpx.HTTPStatusError as e:
        raise FetchError(
            source,
            f"Network response was not ok ({e.response.status_code})",
            status_code=e.response.status_code,
        )
    except httpx.HTTPError as e:
        raise FetchError(source, str(e) or e.__class__.__name__)
    except ValueError as e:
        raise FetchError(source, f"invalid document: {e}")
