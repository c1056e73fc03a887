"""
Post submission pipeline.

A submission is validated, its avatar fetched, a hidden row inserted, the
media written under the new id, and only then is the row made visible.
Every step runs once; the first failure ends the submission. A failure
after the row exists leaves it hidden, and files already written stay on
disk.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app

from . import store
from .avatar import fetch_avatar
from .errors import MissingField, StoreError
from .media import MediaKind, write_media
from .validation import validate_submission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('user', 'date', 'text')


@dataclass
class Submission:
    user: str
    date: str
    text: str
    avatar: str = ''
    image: bytes = b''
    image_content_type: Optional[str] = None

    @classmethod
    def from_form(cls, form, files):
        """Build a submission from multipart form fields and uploaded files."""
        for field in REQUIRED_FIELDS:
            if form.get(field) is None:
                raise MissingField(field)

        image = b''
        image_content_type = None
        upload = files.get('image')
        if upload is not None:
            image = upload.read()
            image_content_type = upload.mimetype

        return cls(
            user=form['user'],
            date=form['date'],
            text=form['text'],
            avatar=form.get('avatar', ''),
            image=image,
            image_content_type=image_content_type,
        )


def submit_post(submission: Submission) -> int:
    """Run the whole pipeline and return the id of the now visible post."""
    config = current_app.config
    validate_submission(submission, config.get('MAX_IMAGE_BYTES'))

    avatar = None
    if submission.avatar:
        avatar = fetch_avatar(submission.avatar, timeout=config.get('AVATAR_FETCH_TIMEOUT'))

    post_id = store.create_invisible(submission.user, submission.date, submission.text)

    has_avatar = False
    if avatar is not None:
        write_media(MediaKind.AVATAR, post_id, avatar)
        has_avatar = True

    has_image = False
    if submission.image:
        write_media(MediaKind.IMAGE, post_id, submission.image)
        has_image = True

    store.finalize(post_id, has_image=has_image, has_avatar=has_avatar)
    logger.info(f'Published post {post_id} by {submission.user!r}')
    return post_id


def load_feed():
    """Return (posts, error). A store failure yields no posts and a message."""
    try:
        return store.list_visible(), None
    except StoreError as e:
        return [], f'Unable to load posts: {e}'
