"""TelegramClient — event-driven transport via python-telegram-bot."""
import logging
import time
from typing import Any, Callable, NamedTuple, Optional

from telegram import Bot, Message, Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from hypecheck.bot_client import BotClient, OnCommand, OnMedia
from hypecheck.config import Config
from hypecheck.constants import (
    CMD_HELP,
    MAX_UPLOAD_BYTES,
    MSG_BLOCKED_CHAT,
    MSG_HELP,
    MSG_MEDIA_DOWNLOAD_FAILED,
    MSG_MEDIA_NOT_SUPPORTED,
    MSG_MEDIA_TOO_LARGE,
    MSG_NO_RESPONSE,
    MSG_SEND_FAIL,
    MSG_SEND_OK,
    TELEGRAM_MAX_MESSAGE_LEN,
)
from hypecheck.message_handler import MediaMessage, normalize_chat_id, to_media_message
from hypecheck.models import MediaType
from hypecheck.telegram.typing import TelegramTypingIndicator

logger = logging.getLogger(__name__)

MEDIA_FILTER = (
    filters.PHOTO
    | filters.VIDEO
    | filters.VIDEO_NOTE
    | filters.AUDIO
    | filters.VOICE
    | filters.Document.IMAGE
    | filters.Document.VIDEO
    | filters.Document.AUDIO
)


class Upload(NamedTuple):
    file: Any
    mime_type: Optional[str]
    fallback: Optional[MediaType]
    size: Optional[int]


def split_message(text: str, limit: int = TELEGRAM_MAX_MESSAGE_LEN) -> list[str]:
    """Split on line boundaries so each chunk fits one Telegram message."""
    chunks: list[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            chunks += [current] if current else []
            current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        match len(candidate) > limit:
            case True:
                chunks.append(current)
                current = line
            case False:
                current = candidate
    return chunks + ([current] if current else [])


class TelegramClient(BotClient):

    def __init__(self, config: Config) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = config.allowed_chat_id
        self._app: Optional[Application] = None

    # ── BotClient interface ───────────────────────────────────────────────────

    def run(self, on_media: OnMedia, commands: dict[str, OnCommand] | None = None) -> None:
        self._app = Application.builder().token(self._token).build()
        for name, callback in (commands or {}).items():
            self._app.add_handler(CommandHandler(name, self._make_command_handler(callback)))
        self._app.add_handler(
            CommandHandler(CMD_HELP, self._make_command_handler(lambda _s, _a: MSG_HELP))
        )
        self._app.add_handler(TGMessageHandler(MEDIA_FILTER, self._make_media_handler(on_media)))
        self._app.add_handler(
            TGMessageHandler(
                filters.TEXT & ~filters.COMMAND,
                self._make_command_handler(lambda _s, _a: MSG_MEDIA_NOT_SUPPORTED),
            )
        )
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return False
            case app:
                try:
                    for chunk in split_message(text):
                        await app.bot.send_message(chat_id=int(to), text=chunk)
                    return True
                except Exception as exc:
                    logger.error("Telegram send_message failed: %s", exc)
                    return False

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        incoming = normalize_chat_id(str(update.effective_chat.id))
        allowed = normalize_chat_id(self._allowed_chat_id)
        return incoming == allowed

    def _sender_of(self, update: Update) -> str:
        return str(update.effective_chat.id) if update.effective_chat else ""

    @staticmethod
    def _extract_upload(message: Message) -> Optional[Upload]:
        """Pick the downloadable media object out of a Telegram message."""
        match message:
            case m if m.photo:
                return Upload(m.photo[-1], None, MediaType.IMAGE, m.photo[-1].file_size)
            case m if m.video:
                return Upload(m.video, m.video.mime_type, MediaType.VIDEO, m.video.file_size)
            case m if m.video_note:
                return Upload(m.video_note, None, MediaType.VIDEO, m.video_note.file_size)
            case m if m.audio:
                return Upload(m.audio, m.audio.mime_type, MediaType.AUDIO, m.audio.file_size)
            case m if m.voice:
                return Upload(m.voice, m.voice.mime_type, MediaType.AUDIO, m.voice.file_size)
            case m if m.document:
                return Upload(m.document, m.document.mime_type, None, m.document.file_size)
            case _:
                return None

    async def _download(self, upload: Upload) -> bytes:
        tg_file = await upload.file.get_file()
        return bytes(await tg_file.download_as_bytearray())

    # ── internal handler factory ──────────────────────────────────────────────

    def _make_command_handler(self, callback: OnCommand) -> Callable:
        """Handler for commands: pass sender and joined args, reply with the result."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass
            sender = self._sender_of(update)
            args = " ".join(context.args or [])
            await self.send_message(sender, callback(sender, args))

        return _handler

    def _make_media_handler(self, on_media: OnMedia) -> Callable:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass

            sender = self._sender_of(update)
            upload = self._extract_upload(update.message) if update.message else None
            match upload:
                case None:
                    await self.send_message(sender, MSG_MEDIA_NOT_SUPPORTED)
                    return
                case Upload(size=size) if size is not None and size > MAX_UPLOAD_BYTES:
                    await self.send_message(sender, MSG_MEDIA_TOO_LARGE)
                    return
                case _:
                    pass

            try:
                payload = await self._download(upload)
            except Exception:
                logger.exception("Media download failed")
                await self.send_message(sender, MSG_MEDIA_DOWNLOAD_FAILED)
                return

            message = to_media_message(
                sender=sender,
                payload=payload,
                mime_type=upload.mime_type,
                caption=update.message.caption,
                timestamp=int(update.message.date.timestamp()),
                fallback=upload.fallback,
            )
            match message:
                case None:
                    await self.send_message(sender, MSG_MEDIA_NOT_SUPPORTED)
                case media:
                    await self._process(media, context.bot, on_media)

        return _handler

    async def _process(self, message: MediaMessage, bot: Bot, on_media: OnMedia) -> None:
        start = time.time()
        async with TelegramTypingIndicator(bot, message.sender):
            response = await on_media(message)

        elapsed = time.time() - start
        match response.strip() if response else "":
            case "":
                logger.warning(MSG_NO_RESPONSE)
            case text:
                success = await self.send_message(message.sender, text)
                match success:
                    case True:
                        logger.info(MSG_SEND_OK, elapsed)
                    case False:
                        logger.error(MSG_SEND_FAIL, elapsed)
