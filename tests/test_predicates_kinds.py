"""
Tests for the slot-kind predicates.
"""

import pytest

from teleroute.core.domain.updates import (
    CallbackQuery, Chat, ChatJoinRequest, ChatMemberUpdated, ChosenInlineResult,
    InlineQuery, Message, Poll, PollAnswer, PreCheckoutQuery, ShippingQuery,
    Update, UpdateKind,
)
from teleroute.core.predicates import (
    any_callback_query, any_callback_query_with_message, any_channel_post,
    any_channel_post_with_text, any_chat_join_request, any_chat_member,
    any_chosen_inline_result, any_edited_channel_post,
    any_edited_channel_post_with_text, any_edited_message,
    any_edited_message_with_text, any_inline_query, any_message,
    any_message_with_text, any_my_chat_member, any_poll, any_poll_answer,
    any_pre_checkout_query, any_shipping_query,
)


SAMPLES = {
    UpdateKind.MESSAGE: Message(message_id=1, text="m"),
    UpdateKind.EDITED_MESSAGE: Message(message_id=1, text="m"),
    UpdateKind.CHANNEL_POST: Message(message_id=1, text="m"),
    UpdateKind.EDITED_CHANNEL_POST: Message(message_id=1, text="m"),
    UpdateKind.INLINE_QUERY: InlineQuery(id="q"),
    UpdateKind.CHOSEN_INLINE_RESULT: ChosenInlineResult(result_id="r"),
    UpdateKind.CALLBACK_QUERY: CallbackQuery(id="c"),
    UpdateKind.SHIPPING_QUERY: ShippingQuery(id="s"),
    UpdateKind.PRE_CHECKOUT_QUERY: PreCheckoutQuery(id="p"),
    UpdateKind.POLL: Poll(id="poll"),
    UpdateKind.POLL_ANSWER: PollAnswer(poll_id="poll"),
    UpdateKind.MY_CHAT_MEMBER: ChatMemberUpdated(chat=Chat(id=1)),
    UpdateKind.CHAT_MEMBER: ChatMemberUpdated(chat=Chat(id=1)),
    UpdateKind.CHAT_JOIN_REQUEST: ChatJoinRequest(chat=Chat(id=1)),
}

KIND_PREDICATES = {
    UpdateKind.MESSAGE: any_message,
    UpdateKind.EDITED_MESSAGE: any_edited_message,
    UpdateKind.CHANNEL_POST: any_channel_post,
    UpdateKind.EDITED_CHANNEL_POST: any_edited_channel_post,
    UpdateKind.INLINE_QUERY: any_inline_query,
    UpdateKind.CHOSEN_INLINE_RESULT: any_chosen_inline_result,
    UpdateKind.CALLBACK_QUERY: any_callback_query,
    UpdateKind.SHIPPING_QUERY: any_shipping_query,
    UpdateKind.PRE_CHECKOUT_QUERY: any_pre_checkout_query,
    UpdateKind.POLL: any_poll,
    UpdateKind.POLL_ANSWER: any_poll_answer,
    UpdateKind.MY_CHAT_MEMBER: any_my_chat_member,
    UpdateKind.CHAT_MEMBER: any_chat_member,
    UpdateKind.CHAT_JOIN_REQUEST: any_chat_join_request,
}

WITH_TEXT_PREDICATES = {
    UpdateKind.MESSAGE: any_message_with_text,
    UpdateKind.EDITED_MESSAGE: any_edited_message_with_text,
    UpdateKind.CHANNEL_POST: any_channel_post_with_text,
    UpdateKind.EDITED_CHANNEL_POST: any_edited_channel_post_with_text,
}


def all_updates():
    updates = [Update(kind, payload) for kind, payload in SAMPLES.items()]
    updates.append(Update(UpdateKind.UNKNOWN))
    return updates


class TestAnyKind:
    """Test cases for the any_* slot predicates."""

    @pytest.mark.parametrize("kind", list(KIND_PREDICATES))
    def test_exactly_one_kind_matches(self, kind):
        """Test that each predicate holds for its own slot only."""
        predicate = KIND_PREDICATES[kind]()

        for update in all_updates():
            assert predicate(update) is (update.kind is kind)

    def test_every_known_kind_has_a_predicate(self):
        known = {kind for kind in UpdateKind if kind is not UpdateKind.UNKNOWN}

        assert set(KIND_PREDICATES) == known

    def test_unknown_matches_nothing(self):
        update = Update(UpdateKind.UNKNOWN)

        for factory in KIND_PREDICATES.values():
            assert factory()(update) is False


class TestWithText:
    """Test cases for the *_with_text predicates."""

    @pytest.mark.parametrize("kind", list(WITH_TEXT_PREDICATES))
    def test_requires_non_empty_text(self, kind):
        predicate = WITH_TEXT_PREDICATES[kind]()

        assert predicate(Update(kind, Message(message_id=1, text="hi"))) is True
        assert predicate(Update(kind, Message(message_id=1, text=""))) is False
        assert predicate(Update(kind, Message(message_id=1, caption="photo"))) is False

    @pytest.mark.parametrize("kind", list(WITH_TEXT_PREDICATES))
    def test_other_slots_never_match(self, kind):
        predicate = WITH_TEXT_PREDICATES[kind]()

        for update in all_updates():
            if update.kind is not kind:
                assert predicate(update) is False


class TestCallbackQueryWithMessage:
    """Test cases for any_callback_query_with_message."""

    def test_with_message(self):
        update = Update(UpdateKind.CALLBACK_QUERY,
                        CallbackQuery(id="c", message=Message(message_id=3, text="Vote?")))

        assert any_callback_query_with_message()(update) is True

    def test_inline_message_callback(self):
        """Test that callbacks from inline messages carry no message."""
        update = Update(UpdateKind.CALLBACK_QUERY,
                        CallbackQuery(id="c", inline_message_id="im1"))

        assert any_callback_query_with_message()(update) is False

    def test_not_a_callback(self):
        update = Update(UpdateKind.MESSAGE, Message(message_id=1))

        assert any_callback_query_with_message()(update) is False
