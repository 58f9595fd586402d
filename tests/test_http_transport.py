from core.client import HttpTransport


class DummyResp:
    def __init__(self, status, json_data=None, raises=False):
        self.status_code = status
        self._json = json_data
        self._raises = raises

    def json(self):
        if self._raises:
            raise ValueError("no json")
        return self._json


class DummySession:
    def __init__(self, resp):
        self.resp = resp
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append((url, json, timeout))
        return self.resp


def test_post_json_returns_status_and_body():
    session = DummySession(DummyResp(200, {"title": "T", "content": "c"}))
    t = HttpTransport("http://example.test/", session=session, timeout=5)
    assert t.post_json("/api/generate", {"topic": "x"}) == (200, {"title": "T", "content": "c"})
    assert session.calls == [("http://example.test/api/generate", {"topic": "x"}, 5)]


def test_non_json_body_becomes_empty_dict():
    t = HttpTransport("http://example.test", session=DummySession(DummyResp(502, raises=True)))
    assert t.post_json("/api/generate", {}) == (502, {})


def test_non_object_body_becomes_empty_dict():
    t = HttpTransport("http://example.test", session=DummySession(DummyResp(200, ["not", "a", "dict"])))
    assert t.post_json("/api/generate", {}) == (200, {})
