from __future__ import annotations

import asyncio
import logging

import aiohttp
from aiogram import Bot
from aiogram.enums import ChatAction
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

from botkit.common.errors import TransportError
from botkit.common.tg_text import split_text

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (TelegramAPIError, aiohttp.ClientError, asyncio.TimeoutError)


class ChatHelper:
    def __init__(self, bot: Bot):
        self.bot = bot

    async def typing(self, chat_id: int | str) -> None:
        """Show "typing…" in ``chat_id``. Sent once; a failure is raised, not retried."""
        try:
            await self.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
        except _TRANSPORT_ERRORS as e:
            logger.warning("send_chat_action failed chat=%s: %s", chat_id, e)
            raise TransportError(f"Cannot send typing action to {chat_id}: {e}", chat_id=chat_id) from e

    async def send_long_text(
        self,
        chat_id: int | str,
        text: str,
        *,
        reply_to_message_id: int | None = None,
        limit: int | None = None,
    ) -> list[Message]:
        """Send ``text`` split into message-sized parts.

        Each part replies to the previous one, so the pieces stay together in
        busy chats. Parts sent before a failure are not recalled.
        """
        sent: list[Message] = []
        reply_to = reply_to_message_id
        parts = split_text(text, limit)
        for part in parts:
            try:
                msg = await self.bot.send_message(chat_id=chat_id, text=part, reply_to_message_id=reply_to)
            except _TRANSPORT_ERRORS as e:
                logger.warning("send_message failed chat=%s part=%s/%s: %s", chat_id, len(sent) + 1, len(parts), e)
                raise TransportError(f"Cannot send message to {chat_id}: {e}", chat_id=chat_id) from e
            sent.append(msg)
            reply_to = msg.message_id
        return sent
