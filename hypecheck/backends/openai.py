"""OpenAIBackend — OpenAI GPT-4o vision backend (images only)."""
import base64

from openai import AsyncOpenAI

from hypecheck.backends.client import ModelBackend
from hypecheck.constants import MSG_ERR_UNSUPPORTED_MEDIA, OPENAI_MODEL
from hypecheck.errors import UnsupportedMediaError
from hypecheck.models import MediaType, ModelRequest


class OpenAIBackend(ModelBackend):
    name = "OpenAI"

    async def generate(self, request: ModelRequest) -> str | None:
        match request.media_type:
            case MediaType.IMAGE:
                pass
            case other:
                raise UnsupportedMediaError(MSG_ERR_UNSUPPORTED_MEDIA % (self.name, other.value))

        client = AsyncOpenAI(api_key=self._api_key)
        image_data = base64.standard_b64encode(request.media.data).decode()
        response = await client.chat.completions.create(
            model=OPENAI_MODEL,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": request.system_instruction},
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": f"data:{request.media.mime_type};base64,{image_data}"
                            },
                        },
                        {"type": "text", "text": request.prompt},
                    ],
                },
            ],
        )
        content = response.choices[0].message.content
        return content.strip() if content else None
