"""
Application configuration.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name):
    value = os.environ.get(name)
    return float(value) if value else None


class Config:
    """Base configuration."""
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'

    # Crowdin OAuth provider and GraphQL API
    CROWDIN_OAUTH_HOST = os.environ.get('CROWDIN_OAUTH_HOST', 'https://accounts.crowdin.com/oauth')
    CROWDIN_API_HOST = os.environ.get('CROWDIN_API_HOST', 'https://api.crowdin.com/api/graphql')
    CLIENT_ID = os.environ.get('CLIENT_ID', '')
    CLIENT_SECRET = os.environ.get('CLIENT_SECRET', '')

    # Registered redirect URIs: one per login flavour
    REDIRECT_URI = os.environ.get('REDIRECT_URI', '')
    REDIRECT_URI_HANDOVER = os.environ.get('REDIRECT_URI_HANDOVER', '')

    # Pycord Support handover endpoint
    HANDOVER_URI = os.environ.get('HANDOVER_URI', '')
    PYCORD_SUPPORT_API_KEY = os.environ.get('PYCORD_SUPPORT_API_KEY', '')

    APP_NAME = os.environ.get('APP_NAME', 'Pycord Support')
    ROUTE_PREFIX = os.environ.get('ROUTE_PREFIX', '/crowdin')

    # Outbound request timeout in seconds; None leaves requests unbounded
    HTTP_TIMEOUT = _optional_float('HTTP_TIMEOUT')
