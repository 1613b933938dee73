"""File sinks: hand encoded export content to the user's environment.

Every sink acquires a temporary handle for a single delivery and releases it
before (or, for HTTP responses, when) the delivery ends.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol
import io
import logging
import os
import tempfile

from flask import Response, send_file

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class FileSink(Protocol):
    def deliver(self, content: str, filename: str, media_type: str) -> None:
        ...


class DirectorySink:
    """Writes each delivered file into ``root``.

    Content is staged in a temporary file next to the target and moved into
    place, so a failed write never leaves a truncated export behind.
    """

    def __init__(self, root: str | Path, encoding: str = DEFAULT_ENCODING):
        self.root = Path(root)
        self.encoding = encoding

    def path_for(self, filename: str) -> Path:
        # Only the base name is honoured; callers cannot escape the root
        return self.root / Path(filename).name

    def deliver(self, content: str, filename: str, media_type: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        target = self.path_for(filename)
        fd, staging = tempfile.mkstemp(prefix=".export-", dir=self.root)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content.encode(self.encoding))
            os.replace(staging, target)
        finally:
            if os.path.exists(staging):
                os.remove(staging)
        logger.info("Wrote %s (%s, %d chars)", target, media_type, len(content))


class ResponseSink:
    """Builds a Flask attachment response for the delivered file.

    The in-memory buffer stays open while the response streams and is closed
    when the response is closed.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self.encoding = encoding
        self.response: Optional[Response] = None

    def deliver(self, content: str, filename: str, media_type: str) -> None:
        buf = io.BytesIO(content.encode(self.encoding))
        try:
            resp = send_file(
                buf,
                mimetype=media_type,
                as_attachment=True,
                download_name=filename,
            )
        except Exception:
            buf.close()
            raise
        # Werkzeug appends its own charset to text/* types; send the media type as given
        resp.headers["Content-Type"] = media_type
        resp.call_on_close(buf.close)
        self.response = resp
        logger.debug("Prepared download %s (%s)", filename, media_type)
