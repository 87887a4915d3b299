"""ModelBackend — abstract base for multimodal analysis backends."""
from abc import ABC, abstractmethod
from typing import Optional

from hypecheck.models import ModelRequest


class ModelBackend(ABC):
    name: str = "model"

    def __init__(self, api_key: Optional[str]) -> None:
        self._api_key = api_key

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @abstractmethod
    async def generate(self, request: ModelRequest) -> str | None:
        """Send one JSON-mode generation request and return the raw body. Raises on failure."""
        ...
