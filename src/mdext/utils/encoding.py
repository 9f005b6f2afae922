#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/utils/encoding.py
"""Character encoding detection for Markdown sources read as bytes."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if nothing was detected with
        enough confidence

    """
    import chardet

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)
    if confidence < confidence_threshold:
        logger.debug("chardet confidence %.2f below threshold %s", confidence, confidence_threshold)
        return None
    return encoding


def read_text_with_encoding_detection(data: bytes) -> str:
    """Decode ``data``, trying chardet first and then :data:`DEFAULT_FALLBACK_ENCODINGS`.

    Parameters
    ----------
    data : bytes
        Binary data to decode

    Returns
    -------
    str
        Decoded text content

    """
    candidates = list(DEFAULT_FALLBACK_ENCODINGS)
    detected = detect_encoding(data)
    if detected:
        candidates.insert(0, detected)

    for encoding in candidates:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("Failed to decode with %s: %s", encoding, e)
            continue
        logger.debug("Successfully decoded with encoding: %s", encoding)
        return text

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")
