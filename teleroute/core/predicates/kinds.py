"""
Predicates testing which slot of an update is populated.
"""

from ..domain.updates import Update, UpdateKind
from .base import Predicate
from .fields import TextField, extract_text


class KindIs(Predicate):
    """True if the update populates the given slot."""

    def __init__(self, kind: UpdateKind) -> None:
        self.kind = kind

    def __call__(self, update: Update) -> bool:
        return update.kind is self.kind

    def __repr__(self) -> str:
        return f"KindIs({self.kind.value})"


class HasText(Predicate):
    """True if the slot is populated and its text is not empty."""

    def __init__(self, field: TextField) -> None:
        self.field = field

    def __call__(self, update: Update) -> bool:
        return bool(extract_text(update, self.field))

    def __repr__(self) -> str:
        return f"HasText({self.field.value})"


class CallbackQueryWithMessage(Predicate):
    """True if the update is a callback query attached to a message."""

    def __call__(self, update: Update) -> bool:
        callback = update.callback_query
        return callback is not None and callback.message is not None

    def __repr__(self) -> str:
        return "CallbackQueryWithMessage()"


def any_message() -> Predicate:
    return KindIs(UpdateKind.MESSAGE)


def any_message_with_text() -> Predicate:
    return HasText(TextField.MESSAGE)


def any_edited_message() -> Predicate:
    return KindIs(UpdateKind.EDITED_MESSAGE)


def any_edited_message_with_text() -> Predicate:
    return HasText(TextField.EDITED_MESSAGE)


def any_channel_post() -> Predicate:
    return KindIs(UpdateKind.CHANNEL_POST)


def any_channel_post_with_text() -> Predicate:
    return HasText(TextField.CHANNEL_POST)


def any_edited_channel_post() -> Predicate:
    return KindIs(UpdateKind.EDITED_CHANNEL_POST)


def any_edited_channel_post_with_text() -> Predicate:
    return HasText(TextField.EDITED_CHANNEL_POST)


def any_inline_query() -> Predicate:
    return KindIs(UpdateKind.INLINE_QUERY)


def any_chosen_inline_result() -> Predicate:
    return KindIs(UpdateKind.CHOSEN_INLINE_RESULT)


def any_callback_query() -> Predicate:
    return KindIs(UpdateKind.CALLBACK_QUERY)


def any_callback_query_with_message() -> Predicate:
    return CallbackQueryWithMessage()


def any_shipping_query() -> Predicate:
    return KindIs(UpdateKind.SHIPPING_QUERY)


def any_pre_checkout_query() -> Predicate:
    return KindIs(UpdateKind.PRE_CHECKOUT_QUERY)


def any_poll() -> Predicate:
    return KindIs(UpdateKind.POLL)


def any_poll_answer() -> Predicate:
    return KindIs(UpdateKind.POLL_ANSWER)


def any_my_chat_member() -> Predicate:
    return KindIs(UpdateKind.MY_CHAT_MEMBER)


def any_chat_member() -> Predicate:
    return KindIs(UpdateKind.CHAT_MEMBER)


def any_chat_join_request() -> Predicate:
    return KindIs(UpdateKind.CHAT_JOIN_REQUEST)
