"""
Predicates for routing updates to handlers.

Leaf matchers test one aspect of an update; ``Union``, ``All`` and ``Not``
compose them.
"""

from .base import All, FunctionPredicate, Not, Predicate, PredicateLike, Union, as_predicate
from .fields import TextField, extract_text
from .kinds import (
    CallbackQueryWithMessage, HasText, KindIs,
    any_callback_query, any_callback_query_with_message, any_channel_post,
    any_channel_post_with_text, any_chat_join_request, any_chat_member,
    any_chosen_inline_result, any_edited_channel_post,
    any_edited_channel_post_with_text, any_edited_message,
    any_edited_message_with_text, any_inline_query, any_message,
    any_message_with_text, any_my_chat_member, any_poll, any_poll_answer,
    any_pre_checkout_query, any_shipping_query,
)
from .text import (
    Contains, Equal, EqualFold, Matches, Prefix, Suffix, TextMatcher,
    callback_data_contains, callback_data_equal, callback_data_equal_fold,
    callback_data_matches, callback_data_prefix, callback_data_suffix,
    edited_post_text_contains, edited_post_text_equal,
    edited_post_text_equal_fold, edited_post_text_matches,
    edited_post_text_prefix, edited_post_text_suffix,
    edited_text_contains, edited_text_equal, edited_text_equal_fold,
    edited_text_matches, edited_text_prefix, edited_text_suffix,
    inline_query_contains, inline_query_equal, inline_query_equal_fold,
    inline_query_matches, inline_query_prefix, inline_query_suffix,
    post_text_contains, post_text_equal, post_text_equal_fold,
    post_text_matches, post_text_prefix, post_text_suffix,
    text_contains, text_equal, text_equal_fold, text_matches, text_prefix,
    text_suffix,
)
from .commands import (
    AnyCommand, CommandEqual, CommandEqualArgc, CommandEqualArgv, CommandPredicate,
    any_command, command_equal, command_equal_argc, command_equal_argv,
    message_command,
)

__all__ = [
    # Algebra
    "Predicate",
    "PredicateLike",
    "FunctionPredicate",
    "as_predicate",
    "Union",
    "All",
    "Not",
    # Fields
    "TextField",
    "extract_text",
    # Kinds
    "KindIs",
    "HasText",
    "CallbackQueryWithMessage",
    "any_message",
    "any_message_with_text",
    "any_edited_message",
    "any_edited_message_with_text",
    "any_channel_post",
    "any_channel_post_with_text",
    "any_edited_channel_post",
    "any_edited_channel_post_with_text",
    "any_inline_query",
    "any_chosen_inline_result",
    "any_callback_query",
    "any_callback_query_with_message",
    "any_shipping_query",
    "any_pre_checkout_query",
    "any_poll",
    "any_poll_answer",
    "any_my_chat_member",
    "any_chat_member",
    "any_chat_join_request",
    # Text
    "TextMatcher",
    "Equal",
    "EqualFold",
    "Contains",
    "Prefix",
    "Suffix",
    "Matches",
    "text_equal",
    "text_equal_fold",
    "text_contains",
    "text_prefix",
    "text_suffix",
    "text_matches",
    "edited_text_equal",
    "edited_text_equal_fold",
    "edited_text_contains",
    "edited_text_prefix",
    "edited_text_suffix",
    "edited_text_matches",
    "post_text_equal",
    "post_text_equal_fold",
    "post_text_contains",
    "post_text_prefix",
    "post_text_suffix",
    "post_text_matches",
    "edited_post_text_equal",
    "edited_post_text_equal_fold",
    "edited_post_text_contains",
    "edited_post_text_prefix",
    "edited_post_text_suffix",
    "edited_post_text_matches",
    "inline_query_equal",
    "inline_query_equal_fold",
    "inline_query_contains",
    "inline_query_prefix",
    "inline_query_suffix",
    "inline_query_matches",
    "callback_data_equal",
    "callback_data_equal_fold",
    "callback_data_contains",
    "callback_data_prefix",
    "callback_data_suffix",
    "callback_data_matches",
    # Commands
    "CommandPredicate",
    "AnyCommand",
    "CommandEqual",
    "CommandEqualArgc",
    "CommandEqualArgv",
    "any_command",
    "command_equal",
    "command_equal_argc",
    "command_equal_argv",
    "message_command",
]
