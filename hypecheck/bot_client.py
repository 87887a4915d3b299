"""Abstract interfaces for transport-agnostic bot clients."""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from hypecheck.message_handler import MediaMessage

OnMedia = Callable[[MediaMessage], Awaitable[str]]
# command callbacks: (sender, args) -> reply
OnCommand = Callable[[str, str], str]


class TypingIndicator(ABC):
    @abstractmethod
    async def start(self, to: str) -> None: ...

    @abstractmethod
    async def stop(self, to: str) -> None: ...


class BotClient(ABC):
    @abstractmethod
    def run(self, on_media: OnMedia, commands: dict[str, OnCommand] | None = None) -> None: ...

    @abstractmethod
    async def send_message(self, to: str, text: str) -> bool: ...
