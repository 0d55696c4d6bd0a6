"""Unit tests for row mappers."""

from datetime import datetime, timedelta, timezone

from forum.persistence.mappers import (
    format_timestamp,
    row_to_comment,
    row_to_reply,
    row_to_thread,
)

CREATED_AT = datetime(2021, 8, 8, 7, 19, 9, 775123, tzinfo=timezone.utc)


class TestFormatTimestamp:
    """Tests for the ISO-8601 timestamp format."""

    def test_formats_utc_with_milliseconds(self):
        assert format_timestamp(CREATED_AT) == "2021-08-08T07:19:09.775Z"

    def test_converts_other_offsets_to_utc(self):
        jakarta = timezone(timedelta(hours=7))
        value = datetime(2021, 8, 8, 14, 19, 9, 775000, tzinfo=jakarta)

        assert format_timestamp(value) == "2021-08-08T07:19:09.775Z"

    def test_treats_naive_as_utc(self):
        value = datetime(2021, 8, 8, 7, 19, 9)

        assert format_timestamp(value) == "2021-08-08T07:19:09.000Z"


class TestRowMappers:
    """Tests for converting joined rows to read models."""

    def test_row_to_thread(self):
        thread = row_to_thread(
            {
                "id": "thread-123",
                "title": "Dicoding",
                "body": "Indonesia",
                "owner": "user-123",
                "created_at": CREATED_AT,
                "username": "dicoding",
            }
        )

        assert thread.date == "2021-08-08T07:19:09.775Z"
        assert thread.username == "dicoding"

    def test_row_to_comment_defaults(self):
        """Live comments have no deletion time and zero likes."""
        comment = row_to_comment(
            {
                "id": "comment-123",
                "content": "a comment",
                "created_at": CREATED_AT,
                "username": "dicoding",
                "deleted_at": None,
                "like_count": None,
            }
        )

        assert comment.deleted_at is None
        assert comment.like_count == 0

    def test_row_to_comment_formats_deleted_at(self):
        comment = row_to_comment(
            {
                "id": "comment-123",
                "content": "a comment",
                "created_at": CREATED_AT,
                "username": "dicoding",
                "deleted_at": CREATED_AT + timedelta(days=1),
                "like_count": 3,
            }
        )

        assert comment.deleted_at == "2021-08-09T07:19:09.775Z"
        assert comment.like_count == 3

    def test_row_to_reply_reads_comment_column(self):
        reply = row_to_reply(
            {
                "id": "reply-123",
                "comment": "comment-123",
                "content": "a reply",
                "created_at": CREATED_AT,
                "username": "johndoe",
                "deleted_at": None,
            }
        )

        assert reply.comment_id == "comment-123"
        assert reply.username == "johndoe"
