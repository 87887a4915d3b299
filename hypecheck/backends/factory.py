"""Picks the analysis backend named by ANALYSIS_PROVIDER."""
from hypecheck.backends.claude import ClaudeBackend
from hypecheck.backends.client import ModelBackend
from hypecheck.backends.gemini import GeminiBackend
from hypecheck.backends.openai import OpenAIBackend
from hypecheck.config import Config


def make_backend(config: Config) -> ModelBackend:
    key = config.api_key_for(config.analysis_provider)
    match config.analysis_provider:
        case "claude":
            return ClaudeBackend(key)
        case "openai":
            return OpenAIBackend(key)
        case _:
            return GeminiBackend(key, model=config.gemini_model)
