# Writing avatar and image files addressed by post id

import os
import logging
from enum import Enum
from typing import Optional

from flask import current_app

from .errors import MediaWriteError

logger = logging.getLogger(__name__)


class MediaKind(Enum):
    AVATAR = 'avatars'
    IMAGE = 'images'


def media_path(kind: MediaKind, post_id: int, assets_folder: str) -> str:
    return os.path.join(assets_folder, kind.value, f'{post_id}.png')


def media_url(kind: MediaKind, post_id: int) -> str:
    return f'/assets/{kind.value}/{post_id}.png'


def write_media(kind: MediaKind, post_id: int, data: bytes, assets_folder: Optional[str] = None) -> str:
    """Write bytes verbatim to <assets>/<kind>/<id>.png and return the path.

    Existing files are overwritten. The kind directory must already exist.
    """
    if assets_folder is None:
        assets_folder = current_app.config['ASSETS_FOLDER']
    path = media_path(kind, post_id, assets_folder)
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        logger.error(f'Could not write {kind.name.lower()} for post {post_id} to {path}: {e}')
        raise MediaWriteError(f'Could not save {kind.name.lower()}: {e}') from e
    logger.debug(f'Wrote {len(data)} bytes to {path}')
    return path
