"""
Crowdin OAuth + GraphQL client.
"""
import json
import logging
from typing import Optional, Tuple
from urllib.parse import quote

import requests

from crowdin_bridge.errors import (
    CrowdinApiError,
    MalformedResponseError,
    NoProjectsError,
    TokenExchangeError,
)
from crowdin_bridge.models import CrowdinUser

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics and -_.~
URI_COMPONENT_SAFE = "!*'()"

USER_INFO_QUERY = """
      query GetUserInfo {
        viewer {
          username
          isAdmin
          id
          createdAt
        }
      }
    """

# Only totalCount is read, so the page size of 10 has no effect.
USER_TOTAL_TRANSLATIONS_QUERY = """
      query GetUserTotalTranslations {
        viewer {
          projects(first: 1) {
            edges {
              node {
                id
                identifier
                description
                nodeId
                name
                translations(userId: %d, first: 10) {
                  totalCount
                }
              }
            }
          }
        }
      }
    """


def is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _parse_json(response: requests.Response, what: str):
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(f"{what} response is not valid JSON") from e


class CrowdinClient:
    """Talks to the Crowdin OAuth endpoints and the GraphQL API for one app config."""

    def __init__(self, oauth_host: str, api_host: str, client_id: str,
                 client_secret: str, timeout: Optional[float] = None):
        self.oauth_host = oauth_host
        self.api_host = api_host
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "CrowdinClient":
        return cls(
            oauth_host=config['CROWDIN_OAUTH_HOST'],
            api_host=config['CROWDIN_API_HOST'],
            client_id=config['CLIENT_ID'],
            client_secret=config['CLIENT_SECRET'],
            timeout=config.get('HTTP_TIMEOUT'),
        )

    def authorization_url(self, redirect_uri: str) -> str:
        """Build the provider authorize URL the browser is sent to."""
        return (
            f"{self.oauth_host}/authorize"
            f"?client_id={self.client_id}"
            f"&redirect_uri={quote(redirect_uri, safe=URI_COMPONENT_SAFE)}"
            f"&response_type=code&scope=*"
        )

    def exchange_code(self, code: str, redirect_uri: str) -> str:
        """
        Trade an authorization code for an access token.

        Args:
            code: The code Crowdin passed to our callback
            redirect_uri: Must be the URI the matching login redirect used

        Returns:
            The bearer access token

        Raises:
            TokenExchangeError: If the token endpoint does not answer 2xx
            MalformedResponseError: If the body carries no access_token
        """
        response = requests.post(
            f"{self.oauth_host}/token",
            data={
                'client_id': self.client_id,
                'client_secret': self.client_secret,
                'redirect_uri': redirect_uri,
                'code': code,
                'grant_type': 'authorization_code',
            },
            timeout=self.timeout,
        )
        if not is_success(response):
            logger.warning(f"Token exchange failed with HTTP {response.status_code}")
            raise TokenExchangeError(response.status_code)

        token_data = _parse_json(response, "Token")
        access_token = token_data.get('access_token') if isinstance(token_data, dict) else None
        if not access_token:
            raise MalformedResponseError("Token response has no access_token")
        return access_token

    def query(self, query: str, access_token: str) -> dict:
        """
        Run a GraphQL query and return its ``data`` object.

        Only the first entry of a non-empty ``errors`` list is reported.
        """
        response = requests.post(
            self.api_host,
            data=json.dumps({'query': query}),
            headers={
                'Content-Type': 'application/json',
                'Authorization': f"Bearer {access_token}",
            },
            timeout=self.timeout,
        )
        body = _parse_json(response, "GraphQL")
        if not isinstance(body, dict):
            raise MalformedResponseError("GraphQL response is not an object")

        errors = body.get('errors')
        if errors:
            first = errors[0] if isinstance(errors, list) else errors
            message = (first.get('message') or '') if isinstance(first, dict) else str(first)
            raise CrowdinApiError(message)

        data = body.get('data')
        if not isinstance(data, dict):
            raise MalformedResponseError("GraphQL response has no data")
        return data

    def fetch_user_info(self, access_token: str) -> CrowdinUser:
        data = self.query(USER_INFO_QUERY, access_token)
        viewer = data.get('viewer')
        if not isinstance(viewer, dict):
            raise MalformedResponseError("GraphQL response has no viewer")
        user_id = viewer.get('id')
        # bool is an int subclass; reject it so True never becomes user 1
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise MalformedResponseError("Viewer has no integer id")
        return CrowdinUser.from_viewer(viewer)

    def fetch_total_translations(self, access_token: str, user_id: int) -> int:
        """Count the user's translations in the viewer's first project."""
        data = self.query(USER_TOTAL_TRANSLATIONS_QUERY % user_id, access_token)
        try:
            edges = data['viewer']['projects']['edges']
        except (KeyError, TypeError) as e:
            raise MalformedResponseError("GraphQL response has no project edges") from e
        if not edges:
            raise NoProjectsError()

        try:
            total = edges[0]['node']['translations']['totalCount']
        except (KeyError, TypeError) as e:
            raise MalformedResponseError("Project has no translation totalCount") from e
        if not isinstance(total, int) or isinstance(total, bool):
            raise MalformedResponseError("Translation totalCount is not an integer")
        return total

    def exchange_and_fetch(self, code: str, redirect_uri: str) -> Tuple[CrowdinUser, int]:
        """Run the full code -> token -> profile -> usage sequence."""
        access_token = self.exchange_code(code, redirect_uri)
        user = self.fetch_user_info(access_token)
        translations = self.fetch_total_translations(access_token, user.id)
        logger.info(f"Fetched {translations} translations for Crowdin user {user.id}")
        return user, translations
