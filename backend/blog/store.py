# All access to the posts table goes through here

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from . import db
from .errors import StoreError
from .models import Post

logger = logging.getLogger(__name__)


def _store_failure(action, e):
    db.session.rollback()
    logger.exception(f'Store failure while trying to {action}')
    return StoreError(f'Database error while trying to {action}: {e}')


def create_invisible(author: str, date: str, content: str) -> int:
    """Insert a hidden post and return its id.

    The row stays out of the feed until finalize() is called, so media file
    names can be derived from the id before the post is public.
    """
    post = Post(author=author, date=date, content=content,
                has_image=False, has_avatar=False, visible=False)
    try:
        db.session.add(post)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_failure('create a post', e) from e
    logger.debug(f'Created invisible post {post.id}')
    return post.id


def finalize(post_id: int, has_image: bool, has_avatar: bool):
    """Record which media were written and make the post visible."""
    try:
        post = db.session.get(Post, post_id)
        if post is None:
            raise StoreError(f'Post {post_id} does not exist')
        post.has_image = has_image
        post.has_avatar = has_avatar
        post.visible = True
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_failure(f'finalize post {post_id}', e) from e
    logger.debug(f'Post {post_id} is now visible (image={has_image}, avatar={has_avatar})')


def list_visible():
    """Visible posts, newest date first.

    Dates are compared as strings, which matches chronological order for
    fixed-width YYYY-MM-DD values only.
    """
    query = (
        db.select(Post)
        .where(Post.visible.is_(True))
        .order_by(Post.date.desc(), Post.id.desc())
    )
    try:
        return list(db.session.execute(query).scalars())
    except SQLAlchemyError as e:
        raise _store_failure('list posts', e) from e


def count_invisible() -> int:
    """Number of orphaned rows left behind by failed submissions."""
    query = db.select(func.count(Post.id)).where(Post.visible.is_(False))
    try:
        return db.session.execute(query).scalar_one()
    except SQLAlchemyError as e:
        raise _store_failure('count hidden posts', e) from e
