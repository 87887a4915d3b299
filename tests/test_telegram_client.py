"""TDD: TelegramClient tests written FIRST"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hypecheck.constants import (
    MAX_UPLOAD_BYTES,
    MSG_HELP,
    MSG_MEDIA_DOWNLOAD_FAILED,
    MSG_MEDIA_NOT_SUPPORTED,
    MSG_MEDIA_TOO_LARGE,
)
from hypecheck.message_handler import MediaMessage
from hypecheck.models import MediaType
from hypecheck.telegram.client import TelegramClient, Upload, split_message

MEDIA_ATTRS = ("photo", "video", "video_note", "audio", "voice", "document")


def make_update(*, chat_id: int, **media) -> MagicMock:
    """Build a minimal mock of a python-telegram-bot Update carrying media."""
    update = MagicMock()
    update.effective_chat.id = chat_id
    for attr in MEDIA_ATTRS:
        setattr(update.message, attr, media.get(attr))
    update.message.caption = "my caption"
    update.message.date.timestamp.return_value = 1000.0
    return update


def make_file(*, mime_type: str | None = None, size: int = 1024) -> MagicMock:
    media = MagicMock()
    media.mime_type = mime_type
    media.file_size = size
    return media


# ── allowed-chat filter ───────────────────────────────────────────────────────


def test_allowed_chat_id_passes_filter(config):
    client = TelegramClient(config)
    assert client._is_allowed(make_update(chat_id=123456789))


def test_blocked_chat_id_fails_filter(config):
    client = TelegramClient(config)
    assert not client._is_allowed(make_update(chat_id=999999999))


def test_update_without_chat_is_blocked(config):
    update = make_update(chat_id=123456789)
    update.effective_chat = None
    assert not TelegramClient(config)._is_allowed(update)


# ── media extraction ──────────────────────────────────────────────────────────


def test_photo_uses_largest_size():
    small, large = make_file(size=10), make_file(size=500)
    update = make_update(chat_id=1, photo=[small, large])

    upload = TelegramClient._extract_upload(update.message)

    assert upload == Upload(large, None, MediaType.IMAGE, 500)


def test_video_keeps_mime_type():
    video = make_file(mime_type="video/mp4")
    upload = TelegramClient._extract_upload(make_update(chat_id=1, video=video).message)

    assert upload.file is video
    assert upload.mime_type == "video/mp4"
    assert upload.fallback is MediaType.VIDEO


def test_voice_falls_back_to_audio():
    voice = make_file(mime_type="audio/ogg")
    upload = TelegramClient._extract_upload(make_update(chat_id=1, voice=voice).message)

    assert upload.fallback is MediaType.AUDIO


def test_document_has_no_fallback():
    doc = make_file(mime_type="image/png")
    upload = TelegramClient._extract_upload(make_update(chat_id=1, document=doc).message)

    assert upload.mime_type == "image/png"
    assert upload.fallback is None


def test_message_without_media_returns_none():
    assert TelegramClient._extract_upload(make_update(chat_id=1).message) is None


# ── message splitting ─────────────────────────────────────────────────────────


def test_short_message_is_single_chunk():
    assert split_message("hello\nworld") == ["hello\nworld"]


def test_long_message_splits_on_lines():
    text = "\n".join(["x" * 30] * 10)
    chunks = split_message(text, limit=100)

    assert all(len(c) <= 100 for c in chunks)
    assert "\n".join(chunks) == text


def test_overlong_line_is_hard_split():
    chunks = split_message("y" * 250, limit=100)
    assert [len(c) for c in chunks] == [100, 100, 50]


# ── media handler ─────────────────────────────────────────────────────────────


async def test_non_media_message_replies_not_supported(config):
    client = TelegramClient(config)
    on_media = AsyncMock()

    with patch.object(client, "send_message", new_callable=AsyncMock) as mock_send:
        handler = client._make_media_handler(on_media)
        await handler(make_update(chat_id=123456789), MagicMock())
        mock_send.assert_called_once_with("123456789", MSG_MEDIA_NOT_SUPPORTED)
    on_media.assert_not_called()


async def test_oversized_upload_is_rejected(config):
    client = TelegramClient(config)
    on_media = AsyncMock()
    update = make_update(chat_id=123456789, video=make_file(size=MAX_UPLOAD_BYTES + 1))

    with patch.object(client, "send_message", new_callable=AsyncMock) as mock_send:
        await client._make_media_handler(on_media)(update, MagicMock())
        mock_send.assert_called_once_with("123456789", MSG_MEDIA_TOO_LARGE)
    on_media.assert_not_called()


async def test_download_failure_is_reported(config):
    client = TelegramClient(config)
    on_media = AsyncMock()
    update = make_update(chat_id=123456789, audio=make_file(mime_type="audio/mpeg"))

    with patch.object(client, "send_message", new_callable=AsyncMock) as mock_send, \
            patch.object(client, "_download", AsyncMock(side_effect=OSError("boom"))):
        await client._make_media_handler(on_media)(update, MagicMock())
        mock_send.assert_called_once_with("123456789", MSG_MEDIA_DOWNLOAD_FAILED)
    on_media.assert_not_called()


async def test_media_is_passed_to_callback(config):
    client = TelegramClient(config)
    on_media = AsyncMock(return_value="report")
    update = make_update(chat_id=123456789, video=make_file(mime_type="video/mp4"))

    with patch.object(client, "send_message", new_callable=AsyncMock) as mock_send, \
            patch.object(client, "_download", AsyncMock(return_value=b"bytes")), \
            patch("hypecheck.telegram.client.TelegramTypingIndicator") as indicator:
        indicator.return_value.__aenter__ = AsyncMock()
        indicator.return_value.__aexit__ = AsyncMock(return_value=False)
        await client._make_media_handler(on_media)(update, MagicMock())

    message = on_media.await_args.args[0]
    assert isinstance(message, MediaMessage)
    assert message.media_type is MediaType.VIDEO
    assert message.payload == b"bytes"
    assert message.caption == "my caption"
    assert message.timestamp == 1000
    mock_send.assert_called_once_with("123456789", "report")


async def test_blocked_chat_is_ignored(config):
    client = TelegramClient(config)
    on_media = AsyncMock()

    with patch.object(client, "send_message", new_callable=AsyncMock) as mock_send:
        await client._make_media_handler(on_media)(make_update(chat_id=42), MagicMock())
        mock_send.assert_not_called()
    on_media.assert_not_called()


# ── commands ──────────────────────────────────────────────────────────────────


async def test_command_handler_passes_joined_args(config):
    client = TelegramClient(config)
    callback = MagicMock(return_value="ok")
    context = MagicMock()
    context.args = ["South", "Korea"]

    with patch.object(client, "send_message", new_callable=AsyncMock) as mock_send:
        await client._make_command_handler(callback)(make_update(chat_id=123456789), context)
        mock_send.assert_called_once_with("123456789", "ok")
    callback.assert_called_once_with("123456789", "South Korea")


async def test_send_before_run_returns_false(config):
    assert await TelegramClient(config).send_message("1", "hi") is False


def test_help_text_mentions_commands():
    for command in ("/region", "/trend", "/history", "/demo", "/json"):
        assert command in MSG_HELP
