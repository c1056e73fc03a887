"""Tests for submission validation."""

import pytest

from blog.errors import ImageTooLarge, InvalidDateFormat, InvalidImageType, ValidationError
from blog.validation import validate_date, validate_image, validate_submission


class TestDateValidation:

    @pytest.mark.parametrize('date', ['2024-03-01', '1999-12-31', '9999-99-99', '0000-00-00'])
    def test_accepts_date_shape(self, date):
        validate_date(date)

    @pytest.mark.parametrize('date', [
        '2024-3-1', '24-03-01', '2024/03/01', '2024-03-01x', ' 2024-03-01', '', 'yesterday',
        '\u0662\u0660\u0662\u0664-\u0660\u0663-\u0660\u0661',
    ])
    def test_rejects_other_shapes(self, date):
        with pytest.raises(InvalidDateFormat):
            validate_date(date)

    def test_rejects_none(self):
        with pytest.raises(InvalidDateFormat):
            validate_date(None)

    def test_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            validate_date('2024-3-1')


class TestImageValidation:

    def test_empty_image_always_passes(self):
        validate_image(b'', 'image/jpeg')
        validate_image(b'', None)

    def test_accepts_png(self, png_bytes):
        validate_image(png_bytes, 'image/png')

    @pytest.mark.parametrize('content_type', ['image/jpeg', 'image/PNG', 'image/png; charset=x', None])
    def test_rejects_non_png(self, png_bytes, content_type):
        with pytest.raises(InvalidImageType):
            validate_image(png_bytes, content_type)

    def test_rejects_oversized_image(self, png_bytes):
        with pytest.raises(ImageTooLarge):
            validate_image(png_bytes, 'image/png', max_bytes=len(png_bytes) - 1)

    def test_size_at_limit_passes(self, png_bytes):
        validate_image(png_bytes, 'image/png', max_bytes=len(png_bytes))


class TestSubmissionValidation:

    def test_valid_submission(self, make_submission, png_bytes):
        validate_submission(make_submission(image=png_bytes, image_content_type='image/png'))

    def test_date_checked_before_image(self, make_submission, png_bytes):
        submission = make_submission(date='bad', image=png_bytes, image_content_type='image/jpeg')
        with pytest.raises(InvalidDateFormat):
            validate_submission(submission)
