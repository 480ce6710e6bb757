import logging
from unittest import mock

import pytest
import requests

BASE_URL = "http://jira.test"


def make_response(status, body=b"", url=BASE_URL):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body if isinstance(body, bytes) else body.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


class FakeJira:
    """Stands in for the network: records prepared requests, replays queued replies in order."""

    def __init__(self):
        self.requests = []
        self.send_kwargs = []
        self._replies = []

    def reply(self, status_or_exc, body=b""):
        self._replies.append((status_or_exc, body))
        return self

    def send(self, session, prepped, **kwargs):
        self.requests.append(prepped)
        self.send_kwargs.append(kwargs)
        status, body = self._replies.pop(0)
        if isinstance(status, Exception):
            raise status
        return make_response(status, body, url=prepped.url)


@pytest.fixture
def jira():
    fake = FakeJira()
    with mock.patch.object(requests.Session, "send", autospec=True, side_effect=fake.send):
        yield fake


@pytest.fixture
def root_handlers():
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    root.handlers = []
    yield root
    for h in root.handlers:
        h.close()
    root.handlers = saved
    root.setLevel(level)
