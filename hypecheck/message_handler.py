from dataclasses import dataclass
from typing import Optional
import logging

from hypecheck.constants import DEFAULT_MIME_TYPES
from hypecheck.models import MediaType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaMessage:
    sender: str
    payload: bytes
    mime_type: str
    media_type: MediaType
    caption: str
    timestamp: int


def normalize_chat_id(s: str) -> str:
    return "".join(c for c in s if c.isdigit() or c == "-")


def to_media_message(
    sender: str,
    payload: bytes,
    mime_type: Optional[str],
    caption: Optional[str],
    timestamp: int,
    fallback: Optional[MediaType] = None,
) -> Optional[MediaMessage]:
    """Build a MediaMessage, or None when neither MIME type nor fallback names a media kind."""
    media_type = MediaType.from_mime(mime_type) or fallback
    match media_type:
        case None:
            logger.debug("Ignoring upload with MIME type %s", mime_type)
            return None
        case kind:
            return MediaMessage(
                sender=sender,
                payload=payload,
                mime_type=mime_type or DEFAULT_MIME_TYPES[kind.value],
                media_type=kind,
                caption=(caption or "").strip(),
                timestamp=timestamp,
            )
