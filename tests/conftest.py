import pytest

from hypecheck.config import Config


@pytest.fixture
def config() -> Config:
    return Config(
        telegram_bot_token="test-token",
        allowed_chat_id="123456789",
        log_level="INFO",
        analysis_provider="gemini",
        gemini_api_key="test-key",
        anthropic_api_key=None,
        openai_api_key=None,
        gemini_model="gemini-2.5-flash",
        default_region="Global / International",
        history_max_entries=5,
    )


@pytest.fixture
def image_payload() -> dict:
    return {
        "score": 72,
        "verdict": "YES",
        "confidence": 0.8,
        "rationale": "Relatable and on-trend.",
        "top_fixes": ["Boost contrast", "Trim intro"],
        "platform_predictions": [
            {"platformName": "TikTok", "probability": 81},
            {"platformName": "Instagram Reels", "probability": 64},
        ],
        "hashtags": ["#corecore", "#foryou"],
        "post_times": ["18:00 EST", "21:00 EST", "12:00 EST"],
        "caption_variants": ["a", "b", "c", "d"],
        "thumbnail_suggestions": ["close-up"],
        "edit_recipes": ["Crop to 9:16"],
        "hook_line": "Wait for it",
        "trend_match": "Matches #corecore",
    }


@pytest.fixture
def video_payload(image_payload) -> dict:
    return {
        **image_payload,
        "video_analysis": {
            "attention_drops": [
                {"timestamp": "00:04", "reason": "dead air", "fix": "cut"},
            ],
            "rewritten_hook": "Stop scrolling.",
        },
    }
