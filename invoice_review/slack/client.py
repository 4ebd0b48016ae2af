"""Slack WebClient helpers."""
import logging
from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

logger = logging.getLogger(__name__)


def post_ephemeral_best_effort(client: WebClient, channel_id: Optional[str], user_id: str, text: str) -> bool:
    """Post an ephemeral message, never raising.

    Used for confirmations whose delivery is optional: a failed post is
    logged and reported through the return value, which callers are free
    to ignore.

    Returns:
        True if Slack accepted the message, False otherwise.
    """
    if not channel_id:
        logger.info(f"No channel context for ephemeral message to {user_id}; skipping")
        return False

    try:
        client.chat_postEphemeral(channel=channel_id, user=user_id, text=text)
        return True
    except SlackApiError as e:
        error_msg = e.response.get('error', str(e))
        logger.warning(f"Slack API error sending ephemeral to {user_id} in {channel_id}: {error_msg}")
    except Exception as e:
        logger.warning(f"Could not send ephemeral to {user_id} in {channel_id}: {e}")
    return False
