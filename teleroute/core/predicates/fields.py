"""
Field extractors for the text-bearing update slots.
"""

from enum import Enum
from typing import Optional

from ..domain.updates import Update


class TextField(Enum):
    """Text-bearing slots that text matchers can inspect."""
    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CALLBACK_DATA = "callback_data"


def extract_text(update: Update, field: TextField) -> Optional[str]:
    """
    Get the raw text of a slot.

    Returns:
        The slot's text, or None when the slot is not populated
    """
    if field is TextField.INLINE_QUERY:
        query = update.inline_query
        return query.query if query is not None else None

    if field is TextField.CALLBACK_DATA:
        callback = update.callback_query
        return callback.data if callback is not None else None

    message = getattr(update, field.value)
    return message.text if message is not None else None
