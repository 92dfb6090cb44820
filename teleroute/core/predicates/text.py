"""
Text matchers.

Each matcher is parameterized by the slot it reads (``TextField``) and by
its comparison target. A matcher whose slot is not populated is false.
The factory functions below give every slot its own named family.
"""

import re
from abc import abstractmethod
from typing import Pattern, Union as TypingUnion

from ..domain.updates import Update
from .base import Predicate
from .fields import TextField, extract_text


PatternLike = TypingUnion[str, Pattern[str]]


class TextMatcher(Predicate):
    """Base class for predicates comparing a slot's text against a target."""

    def __init__(self, field: TextField, target: str) -> None:
        self.field = field
        self.target = target

    def __call__(self, update: Update) -> bool:
        text = extract_text(update, self.field)
        if text is None:
            return False
        return self.compare(text)

    @abstractmethod
    def compare(self, text: str) -> bool:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field.value}, {self.target!r})"


class Equal(TextMatcher):
    """Text is exactly the target."""

    def compare(self, text: str) -> bool:
        return text == self.target


class EqualFold(TextMatcher):
    """Text equals the target under Unicode case folding."""

    def __init__(self, field: TextField, target: str) -> None:
        super().__init__(field, target)
        self._folded = target.casefold()

    def compare(self, text: str) -> bool:
        return text.casefold() == self._folded


class Contains(TextMatcher):
    """Text contains the target."""

    def compare(self, text: str) -> bool:
        return self.target in text


class Prefix(TextMatcher):
    """Text starts with the target."""

    def compare(self, text: str) -> bool:
        return text.startswith(self.target)


class Suffix(TextMatcher):
    """Text ends with the target."""

    def compare(self, text: str) -> bool:
        return text.endswith(self.target)


class Matches(Predicate):
    """
    Text matches a regular expression anywhere.

    No anchoring is added; use ``^`` and ``$`` in the pattern to anchor.
    """

    def __init__(self, field: TextField, pattern: PatternLike) -> None:
        self.field = field
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def __call__(self, update: Update) -> bool:
        text = extract_text(update, self.field)
        return text is not None and self.pattern.search(text) is not None

    def __repr__(self) -> str:
        return f"Matches({self.field.value}, {self.pattern.pattern!r})"


# Message

def text_equal(text: str) -> Predicate:
    return Equal(TextField.MESSAGE, text)


def text_equal_fold(text: str) -> Predicate:
    return EqualFold(TextField.MESSAGE, text)


def text_contains(text: str) -> Predicate:
    return Contains(TextField.MESSAGE, text)


def text_prefix(prefix: str) -> Predicate:
    return Prefix(TextField.MESSAGE, prefix)


def text_suffix(suffix: str) -> Predicate:
    return Suffix(TextField.MESSAGE, suffix)


def text_matches(pattern: PatternLike) -> Predicate:
    return Matches(TextField.MESSAGE, pattern)


# Edited message

def edited_text_equal(text: str) -> Predicate:
    return Equal(TextField.EDITED_MESSAGE, text)


def edited_text_equal_fold(text: str) -> Predicate:
    return EqualFold(TextField.EDITED_MESSAGE, text)


def edited_text_contains(text: str) -> Predicate:
    return Contains(TextField.EDITED_MESSAGE, text)


def edited_text_prefix(prefix: str) -> Predicate:
    return Prefix(TextField.EDITED_MESSAGE, prefix)


def edited_text_suffix(suffix: str) -> Predicate:
    return Suffix(TextField.EDITED_MESSAGE, suffix)


def edited_text_matches(pattern: PatternLike) -> Predicate:
    return Matches(TextField.EDITED_MESSAGE, pattern)


# Channel post

def post_text_equal(text: str) -> Predicate:
    return Equal(TextField.CHANNEL_POST, text)


def post_text_equal_fold(text: str) -> Predicate:
    return EqualFold(TextField.CHANNEL_POST, text)


def post_text_contains(text: str) -> Predicate:
    return Contains(TextField.CHANNEL_POST, text)


def post_text_prefix(prefix: str) -> Predicate:
    return Prefix(TextField.CHANNEL_POST, prefix)


def post_text_suffix(suffix: str) -> Predicate:
    return Suffix(TextField.CHANNEL_POST, suffix)


def post_text_matches(pattern: PatternLike) -> Predicate:
    return Matches(TextField.CHANNEL_POST, pattern)


# Edited channel post

def edited_post_text_equal(text: str) -> Predicate:
    return Equal(TextField.EDITED_CHANNEL_POST, text)


def edited_post_text_equal_fold(text: str) -> Predicate:
    return EqualFold(TextField.EDITED_CHANNEL_POST, text)


def edited_post_text_contains(text: str) -> Predicate:
    return Contains(TextField.EDITED_CHANNEL_POST, text)


def edited_post_text_prefix(prefix: str) -> Predicate:
    return Prefix(TextField.EDITED_CHANNEL_POST, prefix)


def edited_post_text_suffix(suffix: str) -> Predicate:
    return Suffix(TextField.EDITED_CHANNEL_POST, suffix)


def edited_post_text_matches(pattern: PatternLike) -> Predicate:
    return Matches(TextField.EDITED_CHANNEL_POST, pattern)


# Inline query

def inline_query_equal(text: str) -> Predicate:
    return Equal(TextField.INLINE_QUERY, text)


def inline_query_equal_fold(text: str) -> Predicate:
    return EqualFold(TextField.INLINE_QUERY, text)


def inline_query_contains(text: str) -> Predicate:
    return Contains(TextField.INLINE_QUERY, text)


def inline_query_prefix(prefix: str) -> Predicate:
    return Prefix(TextField.INLINE_QUERY, prefix)


def inline_query_suffix(suffix: str) -> Predicate:
    return Suffix(TextField.INLINE_QUERY, suffix)


def inline_query_matches(pattern: PatternLike) -> Predicate:
    return Matches(TextField.INLINE_QUERY, pattern)


# Callback data

def callback_data_equal(text: str) -> Predicate:
    return Equal(TextField.CALLBACK_DATA, text)


def callback_data_equal_fold(text: str) -> Predicate:
    return EqualFold(TextField.CALLBACK_DATA, text)


def callback_data_contains(text: str) -> Predicate:
    return Contains(TextField.CALLBACK_DATA, text)


def callback_data_prefix(prefix: str) -> Predicate:
    return Prefix(TextField.CALLBACK_DATA, prefix)


def callback_data_suffix(suffix: str) -> Predicate:
    return Suffix(TextField.CALLBACK_DATA, suffix)


def callback_data_matches(pattern: PatternLike) -> Predicate:
    return Matches(TextField.CALLBACK_DATA, pattern)
