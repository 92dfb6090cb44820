"""
Update domain models.

An update is one inbound event from the bot platform. It is a closed
variant: exactly one kind tag and the payload that belongs to that kind.
Slots that do not match the kind read as ``None``, which downstream code
treats as "does not apply".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class UpdateKind(Enum):
    """Kinds of updates, valued by their Bot API field names."""
    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"
    UNKNOWN = "unknown"


def _user(data: Optional[Mapping[str, Any]]) -> Optional['User']:
    return User.from_dict(data) if data else None


def _chat(data: Optional[Mapping[str, Any]]) -> Optional['Chat']:
    return Chat.from_dict(data) if data else None


@dataclass(frozen=True)
class User:
    """A user or bot account."""

    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'User':
        return cls(
            id=int(data['id']),
            is_bot=bool(data.get('is_bot', False)),
            first_name=data.get('first_name') or "",
            last_name=data.get('last_name'),
            username=data.get('username'),
            language_code=data.get('language_code')
        )


@dataclass(frozen=True)
class Chat:
    """A private chat, group, supergroup or channel."""

    id: int
    type: str = "private"
    title: Optional[str] = None
    username: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Chat':
        return cls(
            id=int(data['id']),
            type=data.get('type') or "private",
            title=data.get('title'),
            username=data.get('username')
        )


@dataclass(frozen=True)
class Message:
    """
    A message-like payload.

    Used for the message, edited message, channel post and edited channel
    post slots. ``text`` is the empty string when the message carries none.
    """

    message_id: int
    chat: Optional[Chat] = None
    from_user: Optional[User] = None
    date: int = 0
    text: str = ""
    caption: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Message':
        return cls(
            message_id=int(data.get('message_id', 0)),
            chat=_chat(data.get('chat')),
            from_user=_user(data.get('from')),
            date=int(data.get('date', 0)),
            text=data.get('text') or "",
            caption=data.get('caption')
        )


@dataclass(frozen=True)
class InlineQuery:
    """An incoming inline query."""

    id: str
    from_user: Optional[User] = None
    query: str = ""
    offset: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'InlineQuery':
        return cls(
            id=str(data.get('id', "")),
            from_user=_user(data.get('from')),
            query=data.get('query') or "",
            offset=data.get('offset') or ""
        )


@dataclass(frozen=True)
class ChosenInlineResult:
    """An inline result chosen by a user."""

    result_id: str
    from_user: Optional[User] = None
    query: str = ""
    inline_message_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ChosenInlineResult':
        return cls(
            result_id=str(data.get('result_id', "")),
            from_user=_user(data.get('from')),
            query=data.get('query') or "",
            inline_message_id=data.get('inline_message_id')
        )


@dataclass(frozen=True)
class CallbackQuery:
    """A callback from an inline keyboard button."""

    id: str
    from_user: Optional[User] = None
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    chat_instance: str = ""
    data: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'CallbackQuery':
        message = data.get('message')
        return cls(
            id=str(data.get('id', "")),
            from_user=_user(data.get('from')),
            message=Message.from_dict(message) if message else None,
            inline_message_id=data.get('inline_message_id'),
            chat_instance=data.get('chat_instance') or "",
            data=data.get('data') or ""
        )


@dataclass(frozen=True)
class ShippingQuery:
    """An incoming shipping query for flexible-price invoices."""

    id: str
    from_user: Optional[User] = None
    invoice_payload: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ShippingQuery':
        return cls(
            id=str(data.get('id', "")),
            from_user=_user(data.get('from')),
            invoice_payload=data.get('invoice_payload') or ""
        )


@dataclass(frozen=True)
class PreCheckoutQuery:
    """An incoming pre-checkout query."""

    id: str
    from_user: Optional[User] = None
    currency: str = ""
    total_amount: int = 0
    invoice_payload: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PreCheckoutQuery':
        return cls(
            id=str(data.get('id', "")),
            from_user=_user(data.get('from')),
            currency=data.get('currency') or "",
            total_amount=int(data.get('total_amount', 0)),
            invoice_payload=data.get('invoice_payload') or ""
        )


@dataclass(frozen=True)
class Poll:
    """A poll state snapshot."""

    id: str
    question: str = ""
    options: Tuple[str, ...] = ()
    total_voter_count: int = 0
    is_closed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Poll':
        return cls(
            id=str(data.get('id', "")),
            question=data.get('question') or "",
            options=tuple(option.get('text', "") for option in data.get('options') or ()),
            total_voter_count=int(data.get('total_voter_count', 0)),
            is_closed=bool(data.get('is_closed', False))
        )


@dataclass(frozen=True)
class PollAnswer:
    """A user's answer in a non-anonymous poll."""

    poll_id: str
    user: Optional[User] = None
    option_ids: Tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PollAnswer':
        return cls(
            poll_id=str(data.get('poll_id', "")),
            user=_user(data.get('user')),
            option_ids=tuple(int(option) for option in data.get('option_ids') or ())
        )


@dataclass(frozen=True)
class ChatMemberUpdated:
    """A change of a chat member's status."""

    chat: Optional[Chat] = None
    from_user: Optional[User] = None
    date: int = 0
    old_status: str = ""
    new_status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ChatMemberUpdated':
        return cls(
            chat=_chat(data.get('chat')),
            from_user=_user(data.get('from')),
            date=int(data.get('date', 0)),
            old_status=(data.get('old_chat_member') or {}).get('status', ""),
            new_status=(data.get('new_chat_member') or {}).get('status', "")
        )


@dataclass(frozen=True)
class ChatJoinRequest:
    """A request to join a chat."""

    chat: Optional[Chat] = None
    from_user: Optional[User] = None
    date: int = 0
    bio: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ChatJoinRequest':
        return cls(
            chat=_chat(data.get('chat')),
            from_user=_user(data.get('from')),
            date=int(data.get('date', 0)),
            bio=data.get('bio')
        )


_PAYLOAD_TYPES: Dict[UpdateKind, type] = {
    UpdateKind.MESSAGE: Message,
    UpdateKind.EDITED_MESSAGE: Message,
    UpdateKind.CHANNEL_POST: Message,
    UpdateKind.EDITED_CHANNEL_POST: Message,
    UpdateKind.INLINE_QUERY: InlineQuery,
    UpdateKind.CHOSEN_INLINE_RESULT: ChosenInlineResult,
    UpdateKind.CALLBACK_QUERY: CallbackQuery,
    UpdateKind.SHIPPING_QUERY: ShippingQuery,
    UpdateKind.PRE_CHECKOUT_QUERY: PreCheckoutQuery,
    UpdateKind.POLL: Poll,
    UpdateKind.POLL_ANSWER: PollAnswer,
    UpdateKind.MY_CHAT_MEMBER: ChatMemberUpdated,
    UpdateKind.CHAT_MEMBER: ChatMemberUpdated,
    UpdateKind.CHAT_JOIN_REQUEST: ChatJoinRequest,
}


@dataclass(frozen=True)
class Update:
    """
    Immutable inbound update.

    The kind tag selects which slot the payload fills. The constructor
    rejects a payload whose type does not belong to the kind, so an update
    can never populate more than one slot.
    """

    kind: UpdateKind
    """Which slot this update populates."""

    payload: Any = None
    """Payload for the slot, ``None`` for unknown updates."""

    update_id: int = 0
    """Sequential identifier assigned by the platform."""

    def __post_init__(self) -> None:
        """Validate that the payload belongs to the kind."""
        if not isinstance(self.kind, UpdateKind):
            raise ValueError("Kind must be an UpdateKind enum value")

        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            if self.payload is not None:
                raise ValueError("Unknown updates cannot carry a payload")
        elif not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.kind.value} update requires a {expected.__name__} payload, "
                f"got {type(self.payload).__name__}")

    def _slot(self, kind: UpdateKind) -> Any:
        return self.payload if self.kind is kind else None

    @property
    def message(self) -> Optional[Message]:
        return self._slot(UpdateKind.MESSAGE)  # type: ignore[no-any-return]

    @property
    def edited_message(self) -> Optional[Message]:
        return self._slot(UpdateKind.EDITED_MESSAGE)  # type: ignore[no-any-return]

    @property
    def channel_post(self) -> Optional[Message]:
        return self._slot(UpdateKind.CHANNEL_POST)  # type: ignore[no-any-return]

    @property
    def edited_channel_post(self) -> Optional[Message]:
        return self._slot(UpdateKind.EDITED_CHANNEL_POST)  # type: ignore[no-any-return]

    @property
    def inline_query(self) -> Optional[InlineQuery]:
        return self._slot(UpdateKind.INLINE_QUERY)  # type: ignore[no-any-return]

    @property
    def chosen_inline_result(self) -> Optional[ChosenInlineResult]:
        return self._slot(UpdateKind.CHOSEN_INLINE_RESULT)  # type: ignore[no-any-return]

    @property
    def callback_query(self) -> Optional[CallbackQuery]:
        return self._slot(UpdateKind.CALLBACK_QUERY)  # type: ignore[no-any-return]

    @property
    def shipping_query(self) -> Optional[ShippingQuery]:
        return self._slot(UpdateKind.SHIPPING_QUERY)  # type: ignore[no-any-return]

    @property
    def pre_checkout_query(self) -> Optional[PreCheckoutQuery]:
        return self._slot(UpdateKind.PRE_CHECKOUT_QUERY)  # type: ignore[no-any-return]

    @property
    def poll(self) -> Optional[Poll]:
        return self._slot(UpdateKind.POLL)  # type: ignore[no-any-return]

    @property
    def poll_answer(self) -> Optional[PollAnswer]:
        return self._slot(UpdateKind.POLL_ANSWER)  # type: ignore[no-any-return]

    @property
    def my_chat_member(self) -> Optional[ChatMemberUpdated]:
        return self._slot(UpdateKind.MY_CHAT_MEMBER)  # type: ignore[no-any-return]

    @property
    def chat_member(self) -> Optional[ChatMemberUpdated]:
        return self._slot(UpdateKind.CHAT_MEMBER)  # type: ignore[no-any-return]

    @property
    def chat_join_request(self) -> Optional[ChatJoinRequest]:
        return self._slot(UpdateKind.CHAT_JOIN_REQUEST)  # type: ignore[no-any-return]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Update':
        """
        Create an update from a Bot API shaped mapping.

        Args:
            data: Mapping with ``update_id`` and at most one slot key

        Returns:
            Update instance; ``UpdateKind.UNKNOWN`` when no known slot is set

        Raises:
            ValueError: If more than one slot is populated
        """
        populated = [
            kind for kind in _PAYLOAD_TYPES
            if data.get(kind.value) is not None
        ]
        if len(populated) > 1:
            names = ", ".join(kind.value for kind in populated)
            raise ValueError(f"Update populates more than one slot: {names}")

        update_id = int(data.get('update_id', 0))
        if not populated:
            return cls(kind=UpdateKind.UNKNOWN, update_id=update_id)

        kind = populated[0]
        payload = _PAYLOAD_TYPES[kind].from_dict(data[kind.value])  # type: ignore[attr-defined]
        return cls(kind=kind, payload=payload, update_id=update_id)
