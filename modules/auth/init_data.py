"""
initData payload parsing.

Telegram hands the Mini App a URL-encoded query string. This module turns
it into an ordered mapping; duplicate keys keep the last value.
"""

from urllib.parse import parse_qsl

from .exceptions import MalformedInitDataError, MissingInitDataError


def parse_init_data(raw: str) -> dict[str, str]:
    """
    Decode a raw initData string into key/value pairs.

    Args:
        raw: initData as received from the client.

    Returns:
        Mapping of decoded keys to decoded values, in first-seen key order.

    Raises:
        MissingInitDataError: If raw is empty.
        MalformedInitDataError: If raw is not a valid query string.
    """
    if not raw:
        raise MissingInitDataError()

    try:
        pairs = parse_qsl(
            raw,
            keep_blank_values=True,
            strict_parsing=True,
            errors="strict",
        )
    except ValueError as e:
        raise MalformedInitDataError(str(e)) from e

    fields: dict[str, str] = {}
    for key, value in pairs:
        fields[key] = value
    return fields


def build_data_check_string(fields: dict[str, str]) -> str:
    """
    Serialize fields the way Telegram signs them.

    Keys are sorted, each pair rendered as key=value, joined by a single
    newline with no trailing newline. The hash field never participates.
    """
    return "\n".join(
        f"{key}={fields[key]}" for key in sorted(fields) if key != "hash"
    )
