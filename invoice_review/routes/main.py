from flask import Blueprint, current_app

from ..errors import json_success
from ..slack.bolt_app import is_socket_mode_running

main = Blueprint('main', __name__)


@main.route('/health')
def health():
    settings = current_app.config['SETTINGS']
    return json_success({
        'app': settings.app_name,
        'slack': 'slack_bolt_app' in current_app.extensions,
        'socket_mode': is_socket_mode_running(),
    })
