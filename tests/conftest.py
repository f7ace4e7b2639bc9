"""Shared fixtures: aiogram messages and a Bot stand-in."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.types import Chat, Message


def make_message(message_id: int = 1, **fields: Any) -> Message:
    return Message(
        message_id=message_id,
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        chat=Chat(id=100, type="private"),
        **fields,
    )


def make_bot(tg_file: Any = None, chunks: list[bytes] | None = None, error: BaseException | None = None) -> MagicMock:
    """Bot mock whose session streams ``chunks`` and then raises ``error`` if given."""

    async def stream_content(**kwargs: Any):
        for chunk in chunks or []:
            yield chunk
        if error is not None:
            raise error

    bot = MagicMock()
    bot.token = "42:TEST"
    bot.get_file = AsyncMock(return_value=tg_file)
    bot.session.api.file_url = MagicMock(side_effect=lambda token, path: f"https://files.example/{token}/{path}")
    bot.session.stream_content = MagicMock(side_effect=stream_content)
    bot.send_chat_action = AsyncMock(return_value=True)
    return bot


@pytest.fixture(autouse=True)
def _isolate_temp_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    from botkit.common.config import settings

    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    monkeypatch.setattr(settings, "temp_dir", str(temp_dir))
    return temp_dir
