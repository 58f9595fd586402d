from datetime import datetime

from core.models.document import Document, markdown_filename


def test_filename_replaces_each_unsafe_char():
    assert markdown_filename("Hello, World!") == "hello--world-.md"
    assert markdown_filename("ABC 123") == "abc-123.md"


def test_from_response_and_dict():
    ts = datetime(2024, 5, 1, 12, 30)
    doc = Document.from_response({"title": "  T  ", "content": "c"}, created_at=ts)
    assert doc.title == "T"
    assert doc.to_markdown() == "# T\n\nc"
    assert doc.to_dict() == {"title": "T", "content": "c", "createdAt": "2024-05-01T12:30:00"}
    assert Document.from_response({}).title == "Untitled"
