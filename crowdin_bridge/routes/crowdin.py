"""
Crowdin login, callback and handover routes.
"""
from flask import Blueprint, current_app, redirect, request

from crowdin_bridge.utils.responses import plain_text

crowdin_bp = Blueprint('crowdin', __name__)

SUMMARY_TEMPLATE = (
    "Hi there {username}! You have {count} translations. "
    "Please make sure you execute '/crowdin-sync' on the server with the {app_name} application"
)


def _login(redirect_uri):
    crowdin_client = current_app.extensions['crowdin_client']
    return redirect(crowdin_client.authorization_url(redirect_uri), code=302)


@crowdin_bp.route('/handover-login')
def handover_login():
    """Send the browser to Crowdin, returning to the handover callback."""
    return _login(current_app.config['REDIRECT_URI_HANDOVER'])


@crowdin_bp.route('/login')
def login():
    """Send the browser to Crowdin, returning to the standard callback."""
    return _login(current_app.config['REDIRECT_URI'])


@crowdin_bp.route('/callback')
def callback():
    """Exchange the code and greet the user with their translation count."""
    code = request.args.get('code')
    if not code:
        return plain_text('Authorization code not found.', 400)

    crowdin_client = current_app.extensions['crowdin_client']
    user, translations = crowdin_client.exchange_and_fetch(code, current_app.config['REDIRECT_URI'])
    return plain_text(SUMMARY_TEMPLATE.format(
        username=user.username,
        count=translations,
        app_name=current_app.config['APP_NAME'],
    ))


@crowdin_bp.route('/handover')
def handover():
    """Exchange the code and forward the user's data to Pycord Support."""
    code = request.args.get('code')
    if not code:
        return plain_text('Authorization code not found.', 400)

    crowdin_client = current_app.extensions['crowdin_client']
    user, translations = crowdin_client.exchange_and_fetch(code, current_app.config['REDIRECT_URI_HANDOVER'])

    if not current_app.extensions['handover_service'].hand_over(user, translations):
        return plain_text('Failed to hand over data.', 500)
    return plain_text('Data successfully handed over.')
