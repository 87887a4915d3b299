"""ClaudeBackend — Anthropic Claude vision backend (images only)."""
import base64

from anthropic import AsyncAnthropic

from hypecheck.backends.client import ModelBackend
from hypecheck.constants import CLAUDE_MAX_TOKENS, CLAUDE_MODEL, MSG_ERR_UNSUPPORTED_MEDIA
from hypecheck.errors import UnsupportedMediaError
from hypecheck.models import MediaType, ModelRequest


class ClaudeBackend(ModelBackend):
    name = "Claude"

    async def generate(self, request: ModelRequest) -> str | None:
        match request.media_type:
            case MediaType.IMAGE:
                pass
            case other:
                raise UnsupportedMediaError(MSG_ERR_UNSUPPORTED_MEDIA % (self.name, other.value))

        client = AsyncAnthropic(api_key=self._api_key)
        image_data = base64.standard_b64encode(request.media.data).decode()
        message = await client.messages.create(
            model=CLAUDE_MODEL,
            max_tokens=CLAUDE_MAX_TOKENS,
            system=request.system_instruction,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": request.media.mime_type,
                                "data": image_data,
                            },
                        },
                        {"type": "text", "text": request.prompt},
                    ],
                }
            ],
        )
        match message.content:
            case []:
                return None
            case [first, *_]:
                return first.text.strip()
