"""
Integration tests for teleroute.

This module wires predicates, the bot handler and the update sources
together the way an application does.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, List, Tuple

import pytest

import teleroute
from teleroute import (
    BotHandler, InlineQuery, IterableUpdateSource, JsonLinesUpdateSource, Message,
    Not, QueueUpdateSource, Union, Update, UpdateKind, any_message,
    command_equal, command_equal_argc, command_equal_argv, text_equal,
)
from teleroute.infrastructure.config import ConfigLoader


def message(text: str, update_id: int) -> Update:
    return Update(UpdateKind.MESSAGE, Message(message_id=update_id, text=text), update_id=update_id)


def build_router(routed: List[Tuple[str, int]], source: Any) -> BotHandler:
    """Register the three handlers of a small bot."""
    bh = BotHandler("bot", source)

    def other(bot: Any, update: Update) -> None:
        routed.append(("other", update.update_id))

    async def long_text(bot: Any, update: Update) -> None:
        routed.append(("long", update.update_id))

    def commands(bot: Any, update: Update) -> None:
        routed.append(("command", update.update_id))

    bh.handle(other, Union(Not(any_message()), text_equal("Hmm?")))
    bh.handle(long_text, any_message(), lambda update: len(update.message.text) > 7)
    bh.handle(commands, Union(
        command_equal_argc("start", 0),
        command_equal_argv("how", "works"),
        command_equal("help"),
    ))
    return bh


class TestRouting:
    """End-to-end routing scenarios."""

    @pytest.mark.asyncio
    async def test_router_scenario(self) -> None:
        routed: List[Tuple[str, int]] = []
        updates = [
            message("Hmm?", 1),
            message("this is long", 2),
            message("/start", 3),
            message("/help extra args", 4),
            Update(UpdateKind.INLINE_QUERY, InlineQuery(id="q", query="x"), update_id=5),
            message("short", 6),
            message("/help", 7),
            message("/start 1", 8),
        ]
        bh = build_router(routed, IterableUpdateSource(updates))

        await bh.start()

        assert routed == [
            ("other", 1),
            ("long", 2),
            ("command", 3),
            # Longer than 7 characters, so the earlier handler wins
            ("long", 4),
            ("other", 5),
            ("command", 7),
            ("long", 8),
        ]
        metrics = await bh.get_metrics()
        assert metrics['updates_dropped'] == 1

    @pytest.mark.asyncio
    async def test_short_commands_route_to_commands(self) -> None:
        routed: List[Tuple[str, int]] = []
        updates = [message("/help x", 1), message("/HELP", 2), message("/stop", 3)]
        bh = build_router(routed, IterableUpdateSource(updates))

        await bh.start()

        assert routed == [("command", 1), ("command", 2)]

    @pytest.mark.asyncio
    async def test_argv_command_without_length_guard(self) -> None:
        """Test the argv branch when no earlier handler claims long texts."""
        routed: List[str] = []
        bh = BotHandler(None, IterableUpdateSource([
            message("/how works", 1), message("/how  works", 2),
        ]))
        bh.handle(lambda bot, update: routed.append(update.message.text),
                  command_equal_argv("how", "works"))

        await bh.start()

        assert routed == ["/how works"]

    @pytest.mark.asyncio
    async def test_replay_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "updates.jsonl"
        path.write_text("\n".join(json.dumps(u) for u in [
            {"update_id": 1, "message": {"message_id": 1, "text": "/start"}},
            {"update_id": 2, "inline_query": {"id": "q", "query": "cats"}},
            {"update_id": 3, "edited_message": {"message_id": 1, "text": "/start"}},
        ]))
        routed: List[Tuple[str, int]] = []
        bh = build_router(routed, JsonLinesUpdateSource(path))

        await bh.start()

        assert routed == [("command", 1), ("other", 2), ("other", 3)]

    @pytest.mark.asyncio
    async def test_configured_from_loader(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test configuring the engine from loaded settings."""
        monkeypatch.setenv("TELEROUTE_MAX_WORKERS", "2")
        monkeypatch.setenv("TELEROUTE_QUEUE_SIZE", "5")
        config = ConfigLoader().load_config()

        source = QueueUpdateSource(maxsize=config.dispatcher.queue_size)
        bh = BotHandler(None, source, config.dispatcher)

        seen = []

        async def handler(bot: Any, update: Update) -> None:
            await asyncio.sleep(0.01)
            seen.append(update.update_id)

        bh.handle(handler)
        task = asyncio.create_task(bh.start())
        for i in range(5):
            await source.put(message("x", i))
        await source.close()
        await asyncio.wait_for(task, timeout=5)

        health = await bh.check_health()
        assert health['details']['max_workers'] == 2
        assert sorted(seen) == [0, 1, 2, 3, 4]


class TestPublicApi:
    """Test cases for the package surface."""

    def test_version(self) -> None:
        assert teleroute.__version__ == "0.1.0"

    def test_exports(self) -> None:
        for name in ("BotHandler", "Update", "any_message", "text_matches",
                     "callback_data_prefix", "command_equal_argv", "Union", "All", "Not"):
            assert name in teleroute.__all__
            assert hasattr(teleroute, name)
