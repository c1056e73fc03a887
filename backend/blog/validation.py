# Checks run on a submission before anything touches the network or disk

import re
import logging

from .errors import InvalidDateFormat, InvalidImageType, ImageTooLarge

logger = logging.getLogger(__name__)

# Shape only, ASCII digits: 9999-99-99 passes
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
IMAGE_CONTENT_TYPE = 'image/png'


def validate_date(date: str):
    if date is None or DATE_PATTERN.fullmatch(date) is None:
        raise InvalidDateFormat(f'Invalid date {date!r}, expected YYYY-MM-DD')


def validate_image(image: bytes, content_type, max_bytes=None):
    """An empty image means no image and always passes."""
    if not image:
        return
    if content_type != IMAGE_CONTENT_TYPE:
        raise InvalidImageType(f"Image isn't a PNG ({content_type})")
    if max_bytes is not None and len(image) > max_bytes:
        raise ImageTooLarge(f'Image is {len(image)} bytes, limit is {max_bytes}')


def validate_submission(submission, max_image_bytes=None):
    """Raise the first ValidationError found; the date is checked first."""
    validate_date(submission.date)
    validate_image(submission.image, submission.image_content_type, max_image_bytes)
    logger.debug(f'Submission from {submission.user!r} passed validation')
