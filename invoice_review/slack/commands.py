"""Slack slash command handlers for the supplier commands.

Each handler returns a response dict suitable for Bolt's respond():
- response_type: always 'ephemeral'
- text: Response text (Slack mrkdwn)
"""

import logging

from invoice_review.constants import Commands, MAX_OPTION_VALUE_LENGTH
from invoice_review.suppliers.store import SupplierStore

logger = logging.getLogger(__name__)


def _ephemeral(text: str) -> dict:
    return {
        'response_type': 'ephemeral',
        'text': text
    }


def handle_supplier_add_command(store: SupplierStore, command_text: str, user_id: str = '') -> dict:
    """Handle /invoice-supplier-add <Name>.

    Args:
        store: Supplier store to update
        command_text: Text after the command (the supplier name)
        user_id: Slack user ID, for logging

    Returns:
        Slack response dict. A blank or over-long name returns a warning and
        the store is not touched.
    """
    name = (command_text or '').strip()
    if not name:
        return _ephemeral(f':warning: Usage: `{Commands.SUPPLIER_ADD} <Name>`')
    if len(name) > MAX_OPTION_VALUE_LENGTH:
        return _ephemeral(f':warning: Supplier names can be at most {MAX_OPTION_VALUE_LENGTH} characters.')

    updated = store.add(name)
    logger.info(f"Supplier '{name}' added by {user_id or 'unknown user'}")

    return _ephemeral(
        f':white_check_mark: Added supplier *{name}*.\n'
        f'Current: {", ".join(updated)}'
    )


def handle_suppliers_command(store: SupplierStore) -> dict:
    """Handle /invoice-suppliers: list the current suppliers."""
    suppliers = store.load()
    return _ephemeral(f'Suppliers: {", ".join(suppliers) if suppliers else "none"}')


def handle_help_command() -> dict:
    """Show help text for the invoice review commands."""
    help_text = f"""*Invoice Review Bot - Commands*
• `{Commands.REVIEW}` - open the review modal (choose supplier)
• `{Commands.SUPPLIER_ADD} <Name>` - add a supplier (persists to data/suppliers.json)
• `{Commands.SUPPLIERS}` - list current suppliers"""

    return _ephemeral(help_text)


def no_suppliers_response() -> dict:
    """Reply for /invoice-review when there is nothing to choose from."""
    return _ephemeral(
        f':warning: No suppliers configured yet. '
        f'Add one with `{Commands.SUPPLIER_ADD} <Name>` and try again.'
    )
