"""Slack integration module.

Includes:
- bolt_app: Slack Bolt app for handling all interactions (commands, modals)
- client: best-effort ephemeral messaging
- commands: Slash command handlers for the supplier list
- modals: Modal view builders and submission parsing

The Bolt app is served via Flask routes in invoice_review/routes/slack_interactivity.py
or over Socket Mode when SLACK_APP_TOKEN is set.
"""

from invoice_review.slack.bolt_app import (
    create_bolt_app,
    start_socket_mode,
    stop_socket_mode
)

from invoice_review.slack.commands import (
    handle_help_command,
    handle_supplier_add_command,
    handle_suppliers_command
)

__all__ = [
    'create_bolt_app',
    'start_socket_mode',
    'stop_socket_mode',
    'handle_help_command',
    'handle_supplier_add_command',
    'handle_suppliers_command'
]
