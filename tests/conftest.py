"""
Shared fixtures: an app wired to mock upstreams and a fake ``requests.post``.
"""
import json
from unittest.mock import patch

import pytest
import requests

from crowdin_bridge import create_app
from crowdin_bridge.config import Config

OAUTH_HOST = "https://mock.crowdin/oauth"
API_HOST = "https://mock.crowdin/api/graphql"
HANDOVER_URI = "https://mock.pycord/crowdin/handover"


class StubConfig(Config):
    TESTING = True
    CROWDIN_OAUTH_HOST = OAUTH_HOST
    CROWDIN_API_HOST = API_HOST
    CLIENT_ID = "client-abc"
    CLIENT_SECRET = "secret-xyz"
    REDIRECT_URI = "https://bridge.example/crowdin/callback"
    REDIRECT_URI_HANDOVER = "https://bridge.example/crowdin/handover"
    HANDOVER_URI = HANDOVER_URI
    PYCORD_SUPPORT_API_KEY = "pycord-key"
    APP_NAME = "Pycord Support"
    ROUTE_PREFIX = "/crowdin"
    HTTP_TIMEOUT = None


ALICE = {"username": "alice", "isAdmin": False, "id": 42, "createdAt": "2020-01-01"}


def make_response(status_code=200, body=None):
    """Build a real ``requests.Response`` carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


def usage_body(total_count=7):
    return {
        "data": {
            "viewer": {
                "projects": {
                    "edges": [
                        {
                            "node": {
                                "id": 1,
                                "identifier": "pycord",
                                "description": "",
                                "nodeId": "UHJvamVjdDox",
                                "name": "Pycord",
                                "translations": {"totalCount": total_count},
                            }
                        }
                    ]
                }
            }
        }
    }


class FakeUpstream:
    """
    Stand-in for every outbound ``requests.post`` the bridge makes.

    Each endpoint answers with a configurable ``requests.Response`` or raises
    a configured exception. Every call is recorded in ``calls``.
    """

    def __init__(self):
        self.calls = []
        self.token = make_response(200, {"access_token": "tok123", "token_type": "bearer"})
        self.identity = make_response(200, {"data": {"viewer": dict(ALICE)}})
        self.usage = make_response(200, usage_body(7))
        self.handover = make_response(200, {"ok": True})

    def __call__(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers or {}, "timeout": timeout})
        if url == f"{OAUTH_HOST}/token":
            outcome = self.token
        elif url == API_HOST:
            query = json.loads(data)["query"]
            outcome = self.usage if "GetUserTotalTranslations" in query else self.identity
        elif url == HANDOVER_URI:
            outcome = self.handover
        else:
            raise AssertionError(f"Unexpected outbound POST to {url}")

        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def calls_to(self, url):
        return [call for call in self.calls if call["url"] == url]


@pytest.fixture
def app():
    return create_app(StubConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upstream():
    fake = FakeUpstream()
    with patch("requests.post", side_effect=fake):
        yield fake
