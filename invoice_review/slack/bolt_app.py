"""Slack Bolt app for handling all Slack interactions.

This module builds a Bolt-based Slack app that handles:
- Slash commands (/invoice-review, /invoice-supplier-add, /invoice-suppliers, /invoice-help)
- View submissions (the invoice review modal)

Supports two modes:
1. Socket Mode: Uses WebSocket connection, no public URL needed
   - Requires SLACK_APP_TOKEN (xapp-...) with connections:write scope
2. HTTP Mode: Uses SlackRequestHandler with Flask routes
   - Requires SLACK_SIGNING_SECRET for request verification

Listener bodies live in module-level functions that take the store
explicitly; register_handlers() binds them to a Bolt app.
"""

import logging
import threading

from slack_bolt import App

from invoice_review.config import Settings
from invoice_review.constants import Commands, REVIEW_CALLBACK_ID
from invoice_review.slack.client import post_ephemeral_best_effort
from invoice_review.slack.commands import (
    handle_help_command,
    handle_supplier_add_command,
    handle_suppliers_command,
    no_suppliers_response,
)
from invoice_review.slack.modals import (
    build_invoice_review_modal,
    format_review_confirmation,
    parse_review_submission,
)
from invoice_review.suppliers.store import SupplierStore

logger = logging.getLogger(__name__)

# Socket Mode state (one connection per process)
_socket_mode_handler = None
_socket_mode_started = False


def create_bolt_app(settings: Settings, store: SupplierStore) -> App:
    """Build the Bolt app and register all listeners.

    Requires settings.bot_token. The signing secret may be unset when only
    Socket Mode is used; HTTP requests are then rejected by Bolt's
    signature verification.
    """
    if not settings.bot_token:
        raise ValueError("SLACK_BOT_TOKEN not configured")

    bolt_app = App(
        name=settings.app_name,
        token=settings.bot_token,
        signing_secret=settings.signing_secret or "",
        token_verification_enabled=settings.verify_token,
        # Process events synchronously before returning response
        # This ensures we're still in Flask's request context
        process_before_response=True
    )
    register_handlers(bolt_app, store)
    logger.info(f"Slack Bolt app initialized for {settings.app_name}")
    return bolt_app


def register_handlers(bolt_app: App, store: SupplierStore):
    """Attach command, view, and error listeners to bolt_app."""

    # =========================================================================
    # Slash Commands
    # =========================================================================

    @bolt_app.command(Commands.REVIEW)
    def handle_review_command(ack, body, client, respond):
        """Handle /invoice-review: open the review modal."""
        open_review_modal(ack, body, client, respond, store)

    @bolt_app.command(Commands.SUPPLIER_ADD)
    def handle_supplier_add(ack, command, respond):
        """Handle /invoice-supplier-add <Name>."""
        ack()
        respond(handle_supplier_add_command(store, command.get("text", ""), command.get("user_id", "")))

    @bolt_app.command(Commands.SUPPLIERS)
    def handle_suppliers(ack, respond):
        """Handle /invoice-suppliers."""
        ack()
        respond(handle_suppliers_command(store))

    @bolt_app.command(Commands.HELP)
    def handle_help(ack, respond):
        """Handle /invoice-help."""
        ack()
        respond(handle_help_command())

    # =========================================================================
    # View Submissions (Modal Forms)
    # =========================================================================

    @bolt_app.view(REVIEW_CALLBACK_ID)
    def handle_review_submission(ack, body, view, client):
        """Handle the invoice review modal submit."""
        submit_review(ack, body, view, client)

    # =========================================================================
    # Errors
    # =========================================================================

    @bolt_app.error
    def handle_errors(error, body):
        """Log listener failures (e.g. a supplier file that cannot be written)."""
        request_type = body.get("command") or body.get("type") or "unknown request"
        logger.error(f"Unhandled error in {request_type}: {error}", exc_info=error)


def open_review_modal(ack, body: dict, client, respond, store: SupplierStore):
    """Open the review modal populated with the current suppliers."""
    ack()

    suppliers = store.load()
    if not suppliers:
        respond(no_suppliers_response())
        return

    trigger_id = body.get("trigger_id")
    if not trigger_id:
        logger.error("No trigger_id in /invoice-review command")
        return

    modal = build_invoice_review_modal(suppliers, channel_id=body.get("channel_id"))
    client.views_open(trigger_id=trigger_id, view=modal)


def submit_review(ack, body: dict, view: dict, client):
    """Acknowledge a review submission and confirm it to the user.

    The confirmation is best-effort: its result is intentionally discarded
    so a delivery problem never fails the submission.
    """
    ack()

    request = parse_review_submission(body, view)
    logger.info(
        f"Invoice review request from {request.user_id}: "
        f"supplier={request.supplier or 'N/A'}, notes={len(request.notes)} chars"
    )

    post_ephemeral_best_effort(
        client,
        channel_id=request.channel_id,
        user_id=request.user_id,
        text=format_review_confirmation(request)
    )
    return request


def get_flask_handler(bolt_app: App):
    """Wrap bolt_app in a Flask request handler for HTTP mode."""
    from slack_bolt.adapter.flask import SlackRequestHandler
    return SlackRequestHandler(bolt_app)


def is_socket_mode_running():
    """Check if Socket Mode is currently running."""
    return _socket_mode_started


def start_socket_mode(bolt_app: App, app_token: str) -> bool:
    """Start Socket Mode connection in a background thread.

    Socket Mode allows the app to receive events via WebSocket,
    eliminating the need for a public URL.

    Returns True if started successfully, False if not available.
    """
    global _socket_mode_handler, _socket_mode_started

    if not app_token:
        logger.warning("Socket Mode not available - SLACK_APP_TOKEN not set")
        return False

    if _socket_mode_started:
        logger.info("Socket Mode already running")
        return True

    from slack_bolt.adapter.socket_mode import SocketModeHandler
    _socket_mode_handler = SocketModeHandler(bolt_app, app_token)

    def run_socket_mode():
        global _socket_mode_started
        try:
            logger.info("Starting Socket Mode connection...")
            _socket_mode_started = True
            _socket_mode_handler.start()
        except Exception as e:
            logger.error(f"Socket Mode error: {e}")
            _socket_mode_started = False

    # Start in background thread so it doesn't block Flask
    thread = threading.Thread(target=run_socket_mode, daemon=True)
    thread.start()
    logger.info("Socket Mode started in background thread")
    return True


def stop_socket_mode():
    """Stop the Socket Mode connection."""
    global _socket_mode_started

    if _socket_mode_handler and _socket_mode_started:
        try:
            _socket_mode_handler.close()
            _socket_mode_started = False
            logger.info("Socket Mode stopped")
        except Exception as e:
            logger.error(f"Error stopping Socket Mode: {e}")
