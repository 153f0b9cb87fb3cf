"""Utility helpers for pdfofficex."""
from __future__ import annotations

import logging
import os
import re
import time
from contextlib import contextmanager
from datetime import datetime, timezone, timedelta
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, os.PathLike[str]]

_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")
_PDF_DATE = re.compile(
    r"(?:D:)?(\d{4})(\d{2})?(\d{2})?(\d{2})?(\d{2})?(\d{2})?"
    r"(?:([Zz+-])(\d{2})?'?(\d{2})?'?)?"
)
_MAX_UTC_OFFSET = timedelta(hours=24)


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def to_path(path: PathLike) -> Path:
    """Normalize an input path to :class:`Path`."""
    return Path(path).expanduser().resolve()


def ensure_output_directory(path: Path) -> None:
    """Ensure the parent directory of ``path`` exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def safe_name_with_extension(name: str, extension: str) -> str:
    """Return a filesystem-safe file name that ends with ``extension``."""
    safe = _UNSAFE_NAME_CHARS.sub("_", name).strip() or "converted"
    if safe.lower().endswith(extension.lower()):
        return safe
    return f"{safe}{extension}"


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Log how long the wrapped block took, including when it raises."""
    start = time.perf_counter()
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        logger.info("%s completed in %.3fs", message, time.perf_counter() - start)


def parse_pdf_date(raw: str | None) -> datetime | None:
    """Parse a PDF date string (``D:YYYYMMDDHHmmSSOHH'mm'``) into an aware datetime.

    Trailing fields may be omitted and default to their lowest value.  An
    absent or out-of-range offset (24 hours or more) is read as UTC.  Returns
    ``None`` for anything that is not a representable date.
    """
    if not raw:
        return None
    match = _PDF_DATE.match(raw.strip())
    if match is None:
        return None
    year, month, day, hour, minute, second, sign, tz_hours, tz_minutes = match.groups()

    tz = timezone.utc
    if sign in ("+", "-"):
        offset = timedelta(hours=int(tz_hours or 0), minutes=int(tz_minutes or 0))
        if offset < _MAX_UTC_OFFSET:
            tz = timezone(-offset if sign == "-" else offset)

    try:
        value = datetime(
            int(year),
            int(month or 1),
            int(day or 1),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
            tzinfo=tz,
        )
        # Must stay representable once normalised to UTC for W3CDTF output.
        value.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
    return value
