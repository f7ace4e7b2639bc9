from __future__ import annotations

import logging

from aiogram import Bot
from aiogram.client.session.aiohttp import AiohttpSession
from aiogram.client.telegram import TelegramAPIServer

from botkit.common.config import settings

logger = logging.getLogger(__name__)


def create_bot(token: str | None = None) -> Bot:
    token = token or settings.telegram_bot_token
    if not token:
        raise ValueError("TELEGRAM_BOT_TOKEN is not set")

    if not settings.telegram_api_server:
        return Bot(token=token)

    api = TelegramAPIServer.from_base(settings.telegram_api_server, is_local=settings.telegram_api_is_local)
    logger.info("Using Bot API server %s (local=%s)", settings.telegram_api_server, settings.telegram_api_is_local)
    return Bot(token=token, session=AiohttpSession(api=api))
