from .view import BlogWriterView, HttpTransport, HISTORY_LIMIT

__all__ = ["BlogWriterView", "HttpTransport", "HISTORY_LIMIT"]
