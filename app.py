import atexit
import logging

from invoice_review import create_app
from invoice_review.config import configure_logging, load_settings
from invoice_review.slack.bolt_app import start_socket_mode, stop_socket_mode

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

app = create_app(settings)

if __name__ == '__main__':
    bolt_app = app.extensions.get('slack_bolt_app')
    if bolt_app and settings.socket_mode_enabled:
        start_socket_mode(bolt_app, settings.app_token)
        atexit.register(stop_socket_mode)

    logger.info(f"{settings.app_name} running on port {settings.port}")
    app.run(host='0.0.0.0', port=settings.port)
