"""Base64 helpers for Judge0's ``base64_encoded=true`` mode."""

from __future__ import annotations

import base64
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")


def encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode(value: Optional[str]) -> str:
    """Decode a base64 field; ``None`` or empty yields ``""``.

    Never raises. Judge0 wraps long fields with newlines, so non-alphabet
    characters are discarded, url-safe characters are accepted, broken
    padding is repaired, and invalid UTF-8 is replaced.
    """
    if not value:
        return ""
    cleaned = _NON_ALPHABET.sub("", value.replace("-", "+").replace("_", "/"))
    if len("".join(value.split())) % 4:
        logger.debug("Repaired base64 padding on a %d char field", len(value))
    # a lone trailing sextet carries no whole byte
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    padded = cleaned + "=" * (-len(cleaned) % 4)
    raw = base64.b64decode(padded, validate=True)
    return raw.decode("utf-8", errors="replace")
