"""
Exception classes for the blog.

Every failure of a submission is one of four kinds: validation, avatar
fetch, store, or media write. The kind is kept as a class so callers can
branch on it; ``str(err)`` is the message shown to the visitor.
"""


class BlogError(Exception):
    """Base exception for all blog errors."""
    pass


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(BlogError):
    """Raised when a submission is rejected before anything is persisted."""
    pass


class MissingField(ValidationError):
    """Raised when a required form field is absent."""

    def __init__(self, field):
        self.field = field
        super().__init__(f'Missing field: {field}')


class InvalidDateFormat(ValidationError):
    """Raised when the date is not shaped like YYYY-MM-DD."""
    pass


class InvalidImageType(ValidationError):
    """Raised when an uploaded image is not declared as image/png."""
    pass


class ImageTooLarge(ValidationError):
    """Raised when an uploaded image exceeds the configured size cap."""
    pass


# =============================================================================
# Avatar Fetch Errors
# =============================================================================

class FetchError(BlogError):
    """Base exception for remote avatar failures."""
    pass


class InvalidAvatarType(FetchError):
    """Raised when the avatar response is not declared as image/png."""
    pass


class AvatarUnreachable(FetchError):
    """Raised when the avatar URL cannot be fetched at all."""
    pass


# =============================================================================
# Persistence Errors
# =============================================================================

class StoreError(BlogError):
    """Raised for any database failure."""
    pass


class MediaWriteError(BlogError):
    """Raised when an avatar or image file cannot be written."""
    pass
