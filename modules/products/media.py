"""
Media type derivation for product media URLs.

media_type is always computed here from media_url and never taken from
the client.
"""

from typing import Optional

from .models import MediaType

VIDEO_HOSTS = ("youtube.com", "youtu.be")


def detect_media_type(media_url: Optional[str]) -> Optional[MediaType]:
    """
    Classify a media URL.

    Returns YOUTUBE if the URL mentions a known video host, IMAGE for any
    other non-empty URL, and None when there is no URL.
    """
    if not media_url:
        return None

    lowered = media_url.lower()
    if any(host in lowered for host in VIDEO_HOSTS):
        return MediaType.YOUTUBE
    return MediaType.IMAGE
