from __future__ import annotations


class BlogWriterError(Exception):
    """Base error for blog generation. Carries the HTTP status it maps to."""

    status_code = 500


class ValidationError(BlogWriterError):
    """Request rejected before any generation happens (e.g. missing topic)."""

    status_code = 400


class UpstreamError(BlogWriterError):
    """The text-generation API failed or returned nothing usable."""

    status_code = 500


class ClipboardError(BlogWriterError):
    """Writing to the clipboard failed or no clipboard is available."""


class DownloadError(BlogWriterError):
    """Writing the markdown file failed."""


__all__ = [
    "BlogWriterError",
    "ValidationError",
    "UpstreamError",
    "ClipboardError",
    "DownloadError",
]
