from __future__ import annotations

from typing import List

from botkit.common.config import settings


# Bot API text limits are counted in UTF-16 code units, so emoji and other
# astral characters take two units each.
def tg_utf16_len(text: str) -> int:
    return len((text or "").encode("utf-16-le")) // 2


def _fitting_prefix(text: str, limit: int) -> int:
    """Return the largest number of code points of ``text`` that fit into ``limit`` units."""
    lo, hi = 0, len(text)
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if tg_utf16_len(text[:mid]) <= limit:
            lo = mid
        else:
            hi = mid - 1
    return lo


def split_text(text: str, limit: int | None = None) -> List[str]:
    """Split ``text`` into pieces that each fit into one Telegram message.

    A cut is made at the last paragraph break inside the limit, then at the
    last line break, then at the last space; a word longer than the limit is
    cut hard. ``limit`` defaults to ``MESSAGE_LIMIT`` from the settings.
    """
    if limit is None:
        limit = settings.message_limit
    # Any single code point needs at most two UTF-16 units.
    if limit < 2:
        raise ValueError("limit must be at least 2")

    t = (text or "").strip()
    chunks: List[str] = []
    while t:
        if tg_utf16_len(t) <= limit:
            chunks.append(t)
            break

        fit = _fitting_prefix(t, limit)
        prefix = t[:fit]
        cut = fit
        for sep in ("\n\n", "\n", " "):
            at = prefix.rfind(sep)
            if at > 0:
                cut = at + len(sep)
                break

        part = t[:cut].strip()
        if part:
            chunks.append(part)
        t = t[cut:].strip()

    return chunks
