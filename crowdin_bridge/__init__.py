"""
Flask application factory for the Crowdin OAuth bridge.
"""
import logging

import requests
from flask import Flask

from crowdin_bridge.config import Config
from crowdin_bridge.errors import CrowdinError, TokenExchangeError
from crowdin_bridge.services import CrowdinClient, HandoverService
from crowdin_bridge.utils.responses import plain_text

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Services are bound to this app's config, not to module globals
    app.extensions['crowdin_client'] = CrowdinClient.from_config(app.config)
    app.extensions['handover_service'] = HandoverService.from_config(app.config)

    from crowdin_bridge.routes.crowdin import crowdin_bp
    app.register_blueprint(crowdin_bp, url_prefix=app.config['ROUTE_PREFIX'])

    _register_error_handlers(app)
    return app


def _register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(e):
        return plain_text('Not Found', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return plain_text('Method Not Allowed', 405)

    @app.errorhandler(TokenExchangeError)
    def token_exchange_failed(e):
        return plain_text('Failed to fetch access token.', 500)

    @app.errorhandler(CrowdinError)
    def crowdin_error(e):
        logger.error(f"Crowdin request failed: {e}")
        return plain_text(str(e), 500)

    @app.errorhandler(requests.RequestException)
    def upstream_unreachable(e):
        logger.error(f"Upstream request failed: {e}", exc_info=True)
        return plain_text('Upstream request failed.', 500)
