from flask import Flask

from .config import Settings, load_settings
from .routes.main import main
from .routes.slack_interactivity import slack_bp
from .slack.bolt_app import create_bolt_app, get_flask_handler
from .suppliers.store import SupplierStore


def create_app(settings: Settings = None, store: SupplierStore = None):
    """Build the Flask app serving the Slack endpoints.

    Args:
        settings: Resolved settings (defaults to load_settings() from the environment)
        store: Supplier store (defaults to one at settings.suppliers_file)
    """
    if settings is None:
        settings = load_settings()
    if store is None:
        store = SupplierStore(settings.suppliers_file, seed=settings.supplier_seed)

    app = Flask(__name__)
    app.config['SETTINGS'] = settings

    store.ensure_initialized()
    app.extensions['supplier_store'] = store

    # Only initialize Bolt if we have the required token
    # This allows the app to start without Slack credentials (e.g., for health checks)
    if settings.slack_enabled:
        bolt_app = create_bolt_app(settings, store)
        app.extensions['slack_bolt_app'] = bolt_app
        app.extensions['slack_handler'] = get_flask_handler(bolt_app)
    else:
        app.logger.warning("SLACK_BOT_TOKEN not set - Slack Bolt app disabled")

    app.register_blueprint(main)
    app.register_blueprint(slack_bp)

    return app
