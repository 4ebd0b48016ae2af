"""Slack modal view builders and parsers for invoice review requests."""

import logging
from typing import Optional

from invoice_review.constants import (
    MAX_OPTION_TEXT_LENGTH,
    MAX_OPTION_VALUE_LENGTH,
    MAX_SELECT_OPTIONS,
    NOTES_ACTION_ID,
    NOTES_BLOCK_ID,
    REVIEW_CALLBACK_ID,
    SUPPLIER_ACTION_ID,
    SUPPLIER_BLOCK_ID,
)
from invoice_review.suppliers.interfaces import ReviewRequest

logger = logging.getLogger(__name__)


def _safe_get(d: dict, *keys, default=None):
    """Safely traverse nested dicts (Slack payloads omit empty fields)."""
    for key in keys:
        if not isinstance(d, dict):
            return default
        d = d.get(key)
        if d is None:
            return default
    return d


def build_supplier_options(suppliers: list[str]) -> list[dict]:
    """Build static_select options within Slack's size limits.

    Display text is shortened; names too long to round-trip as an option
    value are left out rather than cut, so a submitted value always matches
    a stored supplier.
    """
    options = []
    for name in suppliers:
        if len(options) == MAX_SELECT_OPTIONS:
            break
        if len(name) > MAX_OPTION_VALUE_LENGTH:
            logger.warning(f"Supplier name longer than {MAX_OPTION_VALUE_LENGTH} chars left out of modal: {name[:40]}...")
            continue
        text = name
        if len(text) > MAX_OPTION_TEXT_LENGTH:
            text = text[:MAX_OPTION_TEXT_LENGTH - 1] + '…'
        options.append({
            "text": {"type": "plain_text", "text": text},
            "value": name
        })
    return options


def build_invoice_review_modal(suppliers: list[str], channel_id: Optional[str] = None) -> dict:
    """Build the invoice review modal.

    Args:
        suppliers: Supplier names for the dropdown (must not be empty)
        channel_id: Channel the command came from, echoed back on submit

    Returns:
        Slack modal view payload
    """
    return {
        "type": "modal",
        "callback_id": REVIEW_CALLBACK_ID,
        "private_metadata": channel_id or "",
        "title": {
            "type": "plain_text",
            "text": "Invoice Review"
        },
        "submit": {
            "type": "plain_text",
            "text": "Continue"
        },
        "close": {
            "type": "plain_text",
            "text": "Cancel"
        },
        "blocks": [
            {
                "type": "input",
                "block_id": SUPPLIER_BLOCK_ID,
                "label": {
                    "type": "plain_text",
                    "text": "Supplier"
                },
                "element": {
                    "type": "static_select",
                    "action_id": SUPPLIER_ACTION_ID,
                    "placeholder": {
                        "type": "plain_text",
                        "text": "Choose a supplier"
                    },
                    "options": build_supplier_options(suppliers)
                }
            },
            {
                "type": "input",
                "block_id": NOTES_BLOCK_ID,
                "optional": True,
                "label": {
                    "type": "plain_text",
                    "text": "Notes (optional)"
                },
                "element": {
                    "type": "plain_text_input",
                    "action_id": NOTES_ACTION_ID,
                    "multiline": True
                }
            }
        ]
    }


def parse_review_submission(body: dict, view: dict) -> ReviewRequest:
    """Extract a ReviewRequest from a view_submission payload."""
    values = _safe_get(view, "state", "values", default={})
    supplier = _safe_get(values, SUPPLIER_BLOCK_ID, SUPPLIER_ACTION_ID, "selected_option", "value")
    notes = _safe_get(values, NOTES_BLOCK_ID, NOTES_ACTION_ID, "value", default="")

    return ReviewRequest(
        user_id=_safe_get(body, "user", "id", default=""),
        supplier=supplier,
        notes=notes.strip(),
        channel_id=view.get("private_metadata") or None
    )


def format_review_confirmation(request: ReviewRequest) -> str:
    """Text of the ephemeral confirmation sent after a submission."""
    return (
        f":white_check_mark: Received invoice review request for *{request.supplier or 'N/A'}*.\n"
        f"Notes: {request.notes or '_none_'}"
    )
