from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol, Tuple

import requests

from core.errors import ClipboardError, DownloadError
from core.models.document import Document

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10
GENERATE_PATH = "/api/generate"


class Transport(Protocol):
    def post_json(self, path: str, payload: Dict) -> Tuple[int, Dict]: ...


class HttpTransport:
    """Posts JSON to a running blog writer server."""

    def __init__(self, base_url: str = "http://127.0.0.1:5000", session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def post_json(self, path: str, payload: Dict) -> Tuple[int, Dict]:
        resp = self.session.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        try:
            data = resp.json()
        except ValueError:
            data = {}
        return resp.status_code, data if isinstance(data, dict) else {}


class BlogWriterView:
    """Form and request state of the single-page tool.

    Mirrors what the browser page does: one request in flight at a time,
    errors surface as messages instead of exceptions, and generated posts
    are kept in a most-recent-first history capped at ``HISTORY_LIMIT``.
    """

    def __init__(self, transport: Optional[Transport] = None,
                 clipboard: Optional[Callable[[str], None]] = None):
        self.transport = transport or HttpTransport()
        self.clipboard = clipboard

        self.topic = ""
        self.tone = "professional"
        self.length = "medium"
        self.keywords = ""

        self.loading = False
        self.error = ""
        self.notice = ""
        self.current: Optional[Document] = None
        self.history: List[Document] = []

    def keyword_list(self) -> List[str]:
        return [k.strip() for k in self.keywords.split(",") if k.strip()]

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.topic.strip())

    def generate(self) -> Optional[Document]:
        if not self.topic.strip():
            self.error = "Please enter a topic"
            return None

        self.loading = True
        self.error = ""
        try:
            status, data = self.transport.post_json(GENERATE_PATH, {
                "topic": self.topic,
                "tone": self.tone,
                "length": self.length,
                "keywords": self.keyword_list(),
            })
            if not 200 <= status < 300:
                self.error = data.get("error") or "Failed to generate blog post"
                return None

            doc = Document.from_response(data)
            self.current = doc
            self.history = [doc, *self.history][:HISTORY_LIMIT]
            return doc
        except Exception as e:
            logger.warning("[view] generate failed: %s", e)
            self.error = str(e) or "An error occurred"
            return None
        finally:
            self.loading = False

    def select(self, index: int) -> Document:
        self.current = self.history[index]
        return self.current

    def _write_clipboard(self, text: str) -> None:
        if self.clipboard is None:
            raise ClipboardError("No clipboard available")
        try:
            self.clipboard(text)
        except Exception as e:
            raise ClipboardError(str(e)) from e

    def copy_to_clipboard(self) -> bool:
        if self.current is None:
            return False
        try:
            self._write_clipboard(self.current.to_markdown())
        except ClipboardError as e:
            logger.warning("[view] copy failed: %s", e)
            self.notice = "Failed to copy"
            return False
        self.notice = "Copied to clipboard!"
        return True

    def _write_file(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise DownloadError(str(e)) from e

    def download(self, directory: str | Path = ".") -> Optional[Path]:
        if self.current is None:
            return None
        path = Path(directory) / self.current.filename()
        try:
            self._write_file(path, self.current.to_markdown())
        except DownloadError as e:
            logger.warning("[view] download failed: %s", e)
            self.notice = "Failed to download"
            return None
        self.notice = f"Downloaded {path.name}"
        return path
