"""GeminiBackend — Google Gemini multimodal backend (image, video, audio)."""
from typing import Optional

from google import genai
from google.genai import types

from hypecheck.backends.client import ModelBackend
from hypecheck.constants import GEMINI_MODEL, JSON_MIME_TYPE
from hypecheck.models import ModelRequest


class GeminiBackend(ModelBackend):
    name = "Gemini"

    def __init__(self, api_key: Optional[str], model: str = GEMINI_MODEL) -> None:
        super().__init__(api_key)
        self._model = model

    async def generate(self, request: ModelRequest) -> str | None:
        client = genai.Client(api_key=self._api_key)
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=[
                types.Part.from_bytes(
                    data=request.media.data,
                    mime_type=request.media.mime_type,
                ),
                request.prompt,
            ],
            config=types.GenerateContentConfig(
                system_instruction=request.system_instruction,
                response_mime_type=JSON_MIME_TYPE,
            ),
        )
        return response.text
