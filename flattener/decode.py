"""
Turn uploaded bytes into text for the extractor.

Rules:
- Detect encoding best-effort via charset-normalizer.
- A UTF-8 BOM is consumed by decoding with utf-8-sig.
- If decoding with the detected encoding fails, try UTF-8, then UTF-8
  with replacement characters. Never raises on undecodable input.
- Newlines are normalized to LF.

Detection is a heuristic. Short single-byte uploads can be read as the
wrong code page (cp1252 "é" coming back as "ķ"), so UTF-8 is the
encoding to recommend to people exporting the CSV.
"""

from __future__ import annotations

from charset_normalizer import from_bytes

from .log import get_logger

logger = get_logger(__name__)


def _is_utf8(name: str) -> bool:
    return name.lower().replace("-", "_") in ("utf_8", "utf8")


def decode_upload(raw: bytes) -> str:
    if not raw:
        return ""

    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and _is_utf8(decode_used):
        decode_used = "utf-8-sig"

    logger.debug("detected encoding %s, decoding with %s", detected, decode_used)

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            logger.warning("could not decode as %s, fell back to utf-8", decode_used)
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            logger.warning("upload is not valid utf-8, undecodable bytes replaced")

    return text.replace("\r\n", "\n").replace("\r", "\n")
