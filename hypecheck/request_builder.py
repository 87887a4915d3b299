"""Builds the exact instruction payload sent to the analysis model."""
from hypecheck.constants import (
    DEFAULT_TREND_SNAPSHOT,
    GLOBAL_REGION,
    PROMPT_NON_VIDEO_STEP,
    PROMPT_TEMPLATE,
    PROMPT_VIDEO_STEP,
    SYSTEM_INSTRUCTION,
)
from hypecheck.models import AnalysisRequest, MediaPart, MediaType, ModelRequest


def _or_default(value: str | None, default: str) -> str:
    match (value or "").strip():
        case "":
            return default
        case _:
            return value


def resolve_media_type(media_type: MediaType | str | None, mime_type: str | None) -> MediaType:
    """Coerce a category tag; unknown tags fall back to the MIME type, then to image."""
    match media_type:
        case MediaType():
            return media_type
        case str() if media_type.strip().lower() in {m.value for m in MediaType}:
            return MediaType(media_type.strip().lower())
        case _:
            return MediaType.from_mime(mime_type) or MediaType.IMAGE


def make_analysis_request(
    media_payload: bytes,
    mime_type: str,
    caption: str | None,
    trend_context: str | None,
    media_type: MediaType | str | None,
    target_region: str | None,
) -> AnalysisRequest:
    return AnalysisRequest(
        media_payload=media_payload,
        mime_type=mime_type,
        media_type=resolve_media_type(media_type, mime_type),
        caption=caption or "",
        trend_context=_or_default(trend_context, DEFAULT_TREND_SNAPSHOT),
        target_region=_or_default(target_region, GLOBAL_REGION),
    )


def render_prompt(request: AnalysisRequest) -> str:
    media_step = (
        PROMPT_VIDEO_STEP if request.media_type is MediaType.VIDEO else PROMPT_NON_VIDEO_STEP
    )
    return PROMPT_TEMPLATE.format(
        input_type=request.media_type.value.upper(),
        caption=request.caption,
        region=request.target_region,
        trend=request.trend_context,
        media_step=media_step,
    )


def to_model_request(request: AnalysisRequest) -> ModelRequest:
    return ModelRequest(
        system_instruction=SYSTEM_INSTRUCTION,
        media=MediaPart(mime_type=request.mime_type, data=request.media_payload),
        prompt=render_prompt(request),
        media_type=request.media_type,
    )


def build_request(
    media_payload: bytes,
    mime_type: str,
    caption: str | None = "",
    trend_context: str | None = None,
    media_type: MediaType | str | None = None,
    target_region: str | None = None,
) -> ModelRequest:
    """Assemble the composite model request. Never raises on empty optional inputs."""
    return to_model_request(
        make_analysis_request(
            media_payload, mime_type, caption, trend_context, media_type, target_region
        )
    )
