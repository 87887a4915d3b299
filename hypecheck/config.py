from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from hypecheck.constants import (
    DEFAULT_HISTORY_MAX_ENTRIES,
    GEMINI_MODEL,
    GLOBAL_REGION,
    PROVIDER_GEMINI,
    PROVIDERS,
)


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_id: str
    log_level: str
    analysis_provider: str
    gemini_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]
    gemini_model: str
    default_region: str
    history_max_entries: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        token = os.getenv("TELEGRAM_BOT_TOKEN")
        chat_id = os.getenv("ALLOWED_CHAT_ID")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        provider = os.getenv("ANALYSIS_PROVIDER", PROVIDER_GEMINI).strip().lower()
        gemini_api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        gemini_model = os.getenv("GEMINI_MODEL") or GEMINI_MODEL
        default_region = os.getenv("DEFAULT_REGION") or GLOBAL_REGION
        history_max = os.getenv("HISTORY_MAX_ENTRIES", str(DEFAULT_HISTORY_MAX_ENTRIES))

        return cls._validate(
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            log_level=log_level,
            analysis_provider=provider,
            gemini_api_key=gemini_api_key,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            gemini_model=gemini_model,
            default_region=default_region,
            history_max_entries=int(history_max),
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        log_level: str,
        analysis_provider: str,
        gemini_api_key: Optional[str],
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        gemini_model: str,
        default_region: str,
        history_max_entries: int,
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match allowed_chat_id:
            case None | "":
                raise ValueError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass

        match analysis_provider:
            case p if p in PROVIDERS:
                pass
            case other:
                raise ValueError(
                    f"ANALYSIS_PROVIDER must be one of {', '.join(PROVIDERS)}, got {other!r}"
                )

        match history_max_entries:
            case n if n > 0:
                pass
            case _:
                raise ValueError("HISTORY_MAX_ENTRIES must be a positive integer")

        # API keys stay optional here: a missing key is reported per analysis.
        return Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            log_level=log_level,
            analysis_provider=analysis_provider,
            gemini_api_key=gemini_api_key,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            gemini_model=gemini_model,
            default_region=default_region,
            history_max_entries=history_max_entries,
        )

    def api_key_for(self, provider: str) -> Optional[str]:
        match provider:
            case "gemini":
                return self.gemini_api_key
            case "claude":
                return self.anthropic_api_key
            case "openai":
                return self.openai_api_key
            case _:
                return None
