# Fetching avatars from remote URLs

import logging

import requests

from .errors import AvatarUnreachable, InvalidAvatarType

logger = logging.getLogger(__name__)

AVATAR_CONTENT_TYPE = 'image/png'


def fetch_avatar(url: str, timeout=None) -> bytes:
    """Download an avatar with a single GET and return its raw bytes.

    The response must declare exactly ``image/png``; the body itself is not
    inspected. There is no retry.
    """
    logger.debug(f'Fetching avatar from {url} (timeout={timeout})')
    try:
        response = requests.get(url, timeout=timeout)
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'Avatar fetch failed for {url}: {e}')
        raise AvatarUnreachable(f'Could not fetch avatar: {e}') from e

    content_type = response.headers.get('Content-Type')
    if content_type is None:
        raise InvalidAvatarType("Avatar isn't a PNG (no Content-Type)")
    if content_type != AVATAR_CONTENT_TYPE:
        raise InvalidAvatarType(f"Avatar isn't a PNG ({content_type})")

    data = response.content
    logger.debug(f'Fetched avatar from {url}: {len(data)} bytes')
    return data
