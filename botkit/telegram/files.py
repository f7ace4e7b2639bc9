from __future__ import annotations

import asyncio
import logging
import tempfile
from contextlib import asynccontextmanager
from io import BytesIO
from pathlib import Path
from typing import IO, Any, AsyncIterator, BinaryIO, Optional, Tuple

import aiohttp
from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import File

from botkit.common.config import settings
from botkit.common.errors import ResourceError, TransportError
from botkit.telegram.media import FileRef

logger = logging.getLogger(__name__)

# Everything the bot session, the Bot API or a local read may raise.
_TRANSPORT_ERRORS = (TelegramAPIError, aiohttp.ClientError, asyncio.TimeoutError, OSError)


def is_local_file(tg_file: File) -> bool:
    """A local Bot API server reports absolute paths on its own filesystem."""
    return bool(tg_file.file_path) and Path(tg_file.file_path).is_absolute()


def _file_id(file: FileRef | str | Any) -> str:
    return file if isinstance(file, str) else file.file_id


class BotFiles:
    def __init__(self, bot: Bot, *, chunk_size: int | None = None, timeout: int | None = None):
        self.bot = bot
        self.chunk_size = chunk_size or settings.download_chunk_size
        self.timeout = timeout or settings.download_timeout

    async def _resolve(self, file_id: str) -> File:
        try:
            tg_file = await self.bot.get_file(file_id)
        except _TRANSPORT_ERRORS as e:
            logger.warning("get_file failed file_id=%s: %s", file_id, e)
            raise TransportError(f"Cannot resolve file {file_id}: {e}", file_id=file_id) from e
        if not tg_file.file_path:
            raise TransportError(f"Bot API returned no path for file {file_id}", file_id=file_id)
        return tg_file

    async def _stream_into(self, tg_file: File, destination: BinaryIO) -> int:
        url = self.bot.session.api.file_url(self.bot.token, tg_file.file_path)
        written = 0
        try:
            async for chunk in self.bot.session.stream_content(
                url=url,
                timeout=self.timeout,
                chunk_size=self.chunk_size,
                raise_for_status=True,
            ):
                await self._write(destination, chunk)
                written += len(chunk)
        except _TRANSPORT_ERRORS as e:
            logger.warning("Download failed file_id=%s after %s bytes: %s", tg_file.file_id, written, e)
            raise TransportError(f"Cannot download file {tg_file.file_id}: {e}", file_id=tg_file.file_id) from e
        await self._write(destination, None)
        return written

    @staticmethod
    async def _write(destination: BinaryIO, chunk: bytes | None) -> None:
        """Write ``chunk`` (or flush when None) off the event loop."""
        try:
            if chunk is None:
                await asyncio.to_thread(destination.flush)
            else:
                await asyncio.to_thread(destination.write, chunk)
        except OSError as e:
            logger.error("Write to %s failed: %s", getattr(destination, "name", destination), e)
            raise ResourceError(f"Cannot write downloaded data: {e}") from e

    async def download_file_to_bytes(self, file: FileRef | str) -> bytes:
        """Return the full content of ``file``.

        Reads straight from disk when the Bot API server is local, streams it
        otherwise.
        """
        file_id = _file_id(file)
        tg_file = await self._resolve(file_id)

        if is_local_file(tg_file):
            try:
                data = await asyncio.to_thread(Path(tg_file.file_path).read_bytes)
            except OSError as e:
                logger.warning("Local read failed path=%s: %s", tg_file.file_path, e)
                raise TransportError(f"Cannot read local file {tg_file.file_path}: {e}", file_id=file_id) from e
        else:
            buf = BytesIO()
            await self._stream_into(tg_file, buf)
            data = buf.getvalue()

        if tg_file.file_size is not None and tg_file.file_size != len(data):
            logger.debug("Size mismatch file_id=%s declared=%s actual=%s", file_id, tg_file.file_size, len(data))
        return data

    async def download_file_to_temp_or_directly(self, file: FileRef | str) -> Tuple[Path, Optional[IO[bytes]]]:
        """Return a readable path for ``file`` and the temp file backing it, if any.

        For a local Bot API server the path is the server's own file and the
        second element is None; the file must not be deleted. Otherwise the
        content is written into a new temporary file which is removed as soon
        as the returned handle is closed.
        """
        file_id = _file_id(file)
        tg_file = await self._resolve(file_id)

        if is_local_file(tg_file):
            return Path(tg_file.file_path), None

        try:
            tmp = tempfile.NamedTemporaryFile(prefix="tg_", suffix=Path(tg_file.file_path).suffix, dir=settings.temp_dir)
        except OSError as e:
            logger.error("Cannot create temporary file in %s: %s", settings.temp_dir or tempfile.gettempdir(), e)
            raise ResourceError(f"Cannot create temporary file: {e}") from e

        try:
            written = await self._stream_into(tg_file, tmp)
        except BaseException:
            tmp.close()
            raise

        logger.debug("Downloaded file_id=%s into %s (%s bytes)", file_id, tmp.name, written)
        return Path(tmp.name), tmp

    @asynccontextmanager
    async def materialize(self, file: FileRef | str) -> AsyncIterator[Path]:
        """Yield a readable path for ``file``; a temp copy is deleted on exit."""
        path, tmp = await self.download_file_to_temp_or_directly(file)
        try:
            yield path
        finally:
            if tmp is not None:
                tmp.close()
