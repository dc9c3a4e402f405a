"""
Exceptions raised while talking to Crowdin.
"""


class CrowdinError(Exception):
    """Base class for upstream Crowdin failures."""


class TokenExchangeError(CrowdinError):
    """The token endpoint answered with a non-success status."""

    def __init__(self, status_code):
        super().__init__(f"Token endpoint returned HTTP {status_code}")
        self.status_code = status_code


class CrowdinApiError(CrowdinError):
    """The GraphQL API reported an error."""


class NoProjectsError(CrowdinApiError):
    """The authenticated viewer has no projects to count translations in."""

    def __init__(self):
        super().__init__("No Crowdin projects found for this account.")


class MalformedResponseError(CrowdinError):
    """An upstream response did not have the expected shape."""
