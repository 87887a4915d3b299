"""Request and result records exchanged with the analysis model."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from hypecheck.constants import MAX_TOP_FIXES, VERDICT_NO, VERDICT_YES


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"

    @classmethod
    def from_mime(cls, mime_type: str | None) -> Optional["MediaType"]:
        """Infer the content category from a MIME type, or None if it is not media."""
        prefix = (mime_type or "").split("/", 1)[0].strip().lower()
        match prefix:
            case "image":
                return cls.IMAGE
            case "video":
                return cls.VIDEO
            case "audio":
                return cls.AUDIO
            case _:
                return None


@dataclass(frozen=True)
class AnalysisRequest:
    media_payload: bytes
    mime_type: str
    media_type: MediaType
    caption: str
    trend_context: str
    target_region: str


@dataclass(frozen=True)
class MediaPart:
    mime_type: str
    data: bytes


@dataclass(frozen=True)
class ModelRequest:
    """Everything one generation call needs: instruction, media part and prompt."""

    system_instruction: str
    media: MediaPart
    prompt: str
    media_type: MediaType


@dataclass(frozen=True)
class PlatformPrediction:
    platform_name: str
    probability: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlatformPrediction":
        return cls(
            platform_name=str(data.get("platformName", "")),
            probability=int(_finite(data.get("probability", 0))),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"platformName": self.platform_name, "probability": self.probability}


@dataclass(frozen=True)
class AttentionDrop:
    timestamp: str
    reason: str
    fix: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttentionDrop":
        return cls(
            timestamp=str(data.get("timestamp", "")),
            reason=str(data.get("reason", "")),
            fix=str(data.get("fix", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, "reason": self.reason, "fix": self.fix}


@dataclass(frozen=True)
class VideoAnalysis:
    attention_drops: tuple[AttentionDrop, ...] = ()
    rewritten_hook: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "VideoAnalysis":
        data = data or {}
        return cls(
            attention_drops=tuple(
                map(AttentionDrop.from_dict, _dicts(data.get("attention_drops")))
            ),
            rewritten_hook=str(data.get("rewritten_hook", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "attention_drops": [d.to_dict() for d in self.attention_drops],
            "rewritten_hook": self.rewritten_hook,
        }


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    verdict: str
    confidence: float
    rationale: str
    top_fixes: tuple[str, ...] = ()
    platform_predictions: tuple[PlatformPrediction, ...] = ()
    hashtags: tuple[str, ...] = ()
    post_times: tuple[str, ...] = ()
    caption_variants: tuple[str, ...] = ()
    thumbnail_suggestions: tuple[str, ...] = ()
    edit_recipes: tuple[str, ...] = ()
    hook_line: str = ""
    trend_match: str = ""

    @property
    def is_viral(self) -> bool:
        return self.verdict == VERDICT_YES

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "verdict": self.verdict,
            "confidence": self.confidence,
            "rationale": self.rationale,
            "top_fixes": list(self.top_fixes),
            "platform_predictions": [p.to_dict() for p in self.platform_predictions],
            "hashtags": list(self.hashtags),
            "post_times": list(self.post_times),
            "caption_variants": list(self.caption_variants),
            "thumbnail_suggestions": list(self.thumbnail_suggestions),
            "edit_recipes": list(self.edit_recipes),
            "hook_line": self.hook_line,
            "trend_match": self.trend_match,
        }


@dataclass(frozen=True)
class VideoAnalysisResult(AnalysisResult):
    """Result for video input; the only variant that carries attention-drop data."""

    video_analysis: VideoAnalysis = field(default_factory=VideoAnalysis)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["video_analysis"] = self.video_analysis.to_dict()
        return data


def _finite(value: Any) -> float:
    number = float(value)
    match math.isfinite(number):
        case True:
            return number
        case False:
            raise ValueError(f"Expected a finite number, got {value!r}")


def _strings(value: Any) -> tuple[str, ...]:
    match value:
        case list() | tuple():
            return tuple(str(v) for v in value)
        case _:
            return ()


def _dicts(value: Any) -> list[dict]:
    match value:
        case list() | tuple():
            return [v for v in value if isinstance(v, dict)]
        case _:
            return []


def result_from_dict(data: Any, media_type: MediaType | None = None) -> AnalysisResult:
    """Decode the model's JSON object into a result.

    Absent keys take empty defaults; only the basic shape is checked. When
    ``media_type`` is None the variant is chosen by the presence of
    ``video_analysis``. Raises ValueError or TypeError on a non-object body
    or a non-numeric or non-finite score, confidence or probability.
    """
    match data:
        case dict():
            pass
        case _:
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    verdict = str(data.get("verdict", VERDICT_NO)).strip().upper()
    fields = dict(
        score=int(_finite(data.get("score", 0))),
        verdict=verdict if verdict in (VERDICT_YES, VERDICT_NO) else VERDICT_NO,
        confidence=_finite(data.get("confidence", 0.0)),
        rationale=str(data.get("rationale", "")),
        top_fixes=_strings(data.get("top_fixes"))[:MAX_TOP_FIXES],
        platform_predictions=tuple(
            map(PlatformPrediction.from_dict, _dicts(data.get("platform_predictions")))
        ),
        hashtags=_strings(data.get("hashtags")),
        post_times=_strings(data.get("post_times")),
        caption_variants=_strings(data.get("caption_variants")),
        thumbnail_suggestions=_strings(data.get("thumbnail_suggestions")),
        edit_recipes=_strings(data.get("edit_recipes")),
        hook_line=str(data.get("hook_line", "")),
        trend_match=str(data.get("trend_match", "")),
    )

    raw_video = data.get("video_analysis")
    is_video = (
        media_type is MediaType.VIDEO
        if media_type is not None
        else isinstance(raw_video, dict) and bool(raw_video)
    )
    match is_video:
        case True:
            video = VideoAnalysis.from_dict(raw_video if isinstance(raw_video, dict) else None)
            return VideoAnalysisResult(**fields, video_analysis=video)
        case False:
            return AnalysisResult(**fields)
