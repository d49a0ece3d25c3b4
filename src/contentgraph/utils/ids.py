from __future__ import annotations

import hashlib
from typing import Iterable

HEX_PREFIX = "0x"


def content_id(data: bytes | str) -> str:
    """
    Content-addressed identifier: 0x-prefixed sha256 of the payload.

    Strings are encoded as UTF-8 without normalization, so the id
    addresses the exact bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return HEX_PREFIX + hashlib.sha256(data).hexdigest()


def is_zero_identifier(
    value: str | None,
    *,
    sentinels: Iterable[str] = (),
    hex_prefix: str = HEX_PREFIX,
) -> bool:
    """
    True for the empty/zero identifier.

    Covers None, blank strings, configured sentinels and any
    hex string made only of zeros ("0x0", "0x000...000").
    """
    if value is None:
        return True
    text = value.strip()
    if not text or text in set(sentinels):
        return True
    prefix = hex_prefix.lower()
    if prefix and text.lower().startswith(prefix):
        digits = text[len(prefix):]
        return not digits or set(digits) == {"0"}
    return False
