from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from aiogram.types import Message, PhotoSize


@dataclass(frozen=True)
class FileRef:
    """Telegram file handle copied out of a message attachment."""

    file_id: str
    file_unique_id: str
    file_size: int | None = None

    @classmethod
    def of(cls, obj: Any) -> "FileRef":
        return cls(
            file_id=obj.file_id,
            file_unique_id=obj.file_unique_id,
            file_size=getattr(obj, "file_size", None),
        )


@dataclass(frozen=True)
class MediaInfo:
    width: int
    height: int
    file: FileRef
    is_sticker: bool = False
    is_gif: bool = False
    is_video: bool = False
    is_image: bool = False
    is_sound: bool = False
    is_voice_or_video_note: bool = False
    is_vector_sticker: bool = False

    @property
    def is_still_image(self) -> bool:
        """Usable as a single still picture (photo or static raster sticker)."""
        return not self.is_video and self.is_raster

    @property
    def is_raster(self) -> bool:
        return not self.is_vector_sticker and not self.is_sound


class MediaKind(enum.Enum):
    PHOTO = "photo"
    STICKER = "sticker"
    VIDEO = "video"
    ANIMATION = "animation"
    VIDEO_NOTE = "video_note"
    VOICE = "voice"
    NONE = "none"


def text_full(message: Message) -> Optional[str]:
    return message.text or message.caption or None


def find_biggest_photo(message: Message) -> Optional[PhotoSize]:
    if not message.photo:
        return None
    # max() keeps the first of equal keys
    return max(message.photo, key=lambda p: p.width + p.height)


def _attachment(message: Message) -> MediaKind:
    if message.photo:
        return MediaKind.PHOTO
    if message.sticker:
        return MediaKind.STICKER
    if message.video:
        return MediaKind.VIDEO
    if message.animation:
        return MediaKind.ANIMATION
    # Without a thumbnail there are no dimensions to report.
    if message.video_note and message.video_note.thumbnail:
        return MediaKind.VIDEO_NOTE
    if message.voice:
        return MediaKind.VOICE
    return MediaKind.NONE


def get_media_info(message: Message) -> Optional[MediaInfo]:
    """Describe the media attached to ``message``.

    Falls back to the replied-to message when this one carries nothing
    recognizable, and returns None when neither does.
    """
    while message is not None:
        match _attachment(message):
            case MediaKind.PHOTO:
                biggest = find_biggest_photo(message)
                return MediaInfo(
                    width=biggest.width,
                    height=biggest.height,
                    file=FileRef.of(biggest),
                    is_image=True,
                )
            case MediaKind.STICKER:
                sticker = message.sticker
                return MediaInfo(
                    width=sticker.width,
                    height=sticker.height,
                    file=FileRef.of(sticker),
                    is_sticker=True,
                    is_video=sticker.is_video,
                    is_image=not sticker.is_video and not sticker.is_animated,
                    is_vector_sticker=sticker.is_animated,
                )
            case MediaKind.VIDEO:
                video = message.video
                return MediaInfo(
                    width=video.width,
                    height=video.height,
                    file=FileRef.of(video),
                    is_video=True,
                )
            case MediaKind.ANIMATION:
                animation = message.animation
                return MediaInfo(
                    width=animation.width,
                    height=animation.height,
                    file=FileRef.of(animation),
                    is_video=True,
                    is_gif=True,
                )
            case MediaKind.VIDEO_NOTE:
                note = message.video_note
                return MediaInfo(
                    width=note.thumbnail.width,
                    height=note.thumbnail.height,
                    file=FileRef.of(note),
                    is_video=True,
                    is_voice_or_video_note=True,
                )
            case MediaKind.VOICE:
                return MediaInfo(
                    width=0,
                    height=0,
                    file=FileRef.of(message.voice),
                    is_sound=True,
                    is_voice_or_video_note=True,
                )
            case MediaKind.NONE:
                message = message.reply_to_message
    return None
