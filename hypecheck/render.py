"""Plain-text dashboard for analysis results."""
import json
from datetime import datetime

from hypecheck.constants import (
    BADGE_FLOP,
    BADGE_VIRAL,
    BAND_HIGH,
    BAND_LOW,
    BAND_MID,
    DATE_FORMAT,
    GAUGE_EMPTY,
    GAUGE_FILLED,
    GAUGE_WIDTH,
    HISTORY_CAPTION_PREVIEW,
    LABEL_FLOP_RISK,
    LABEL_VIRAL_POTENTIAL,
    MSG_HISTORY_EMPTY,
    MSG_HISTORY_HEADER,
    MSG_NO_CAPTION,
    PROBABILITY_HIGHLIGHT,
    SCORE_HIGH,
    SCORE_MID,
)
from hypecheck.history import HistoryEntry
from hypecheck.models import AnalysisResult, VideoAnalysisResult


def score_band(score: int) -> str:
    match score:
        case s if s >= SCORE_HIGH:
            return BAND_HIGH
        case s if s >= SCORE_MID:
            return BAND_MID
        case _:
            return BAND_LOW


def gauge(score: int, width: int = GAUGE_WIDTH) -> str:
    clamped = max(0, min(100, score))
    filled = round(clamped / 100 * width)
    return f"{score_band(clamped)} {GAUGE_FILLED * filled}{GAUGE_EMPTY * (width - filled)} {clamped}/100"


def _section(title: str, items: list[str]) -> list[str]:
    match items:
        case []:
            return []
        case _:
            return ["", title, *items]


def _bullets(values: tuple[str, ...], marker: str = "•") -> list[str]:
    return [f"  {marker} {v}" for v in values]


def _numbered(values: tuple[str, ...]) -> list[str]:
    return [f"  {i}. {v}" for i, v in enumerate(values, start=1)]


def render_result(result: AnalysisResult) -> str:
    verdict = LABEL_VIRAL_POTENTIAL if result.is_viral else LABEL_FLOP_RISK
    lines = [
        "Viral Score",
        gauge(result.score),
        "",
        f"Verdict: {verdict}",
        f"Confidence: {result.confidence * 100:.0f}%   Hook: {result.hook_line}",
        "",
        result.rationale,
    ]
    lines += _section(
        "📈 Viral Forecast",
        [
            f"  {p.platform_name}: {p.probability}%{' 🔥' if p.probability > PROBABILITY_HIGHLIGHT else ''}"
            for p in result.platform_predictions
        ],
    )
    lines += _section("🛠 Top Fixes", _numbered(result.top_fixes))
    lines += _section("#️⃣ Hashtags", ["  " + " ".join(result.hashtags)] if result.hashtags else [])
    lines += _section("🕒 Best Post Times", _bullets(result.post_times))
    lines += _section("✍️ Caption Variants", _bullets(result.caption_variants))
    lines += _section("🖼 Thumbnail Ideas", _bullets(result.thumbnail_suggestions))
    lines += _section("🎬 Edit Recipes", _bullets(result.edit_recipes))
    lines += _section("🎯 Trend Match", [f"  {result.trend_match}"] if result.trend_match else [])

    match result:
        case VideoAnalysisResult(video_analysis=video):
            lines += _section(
                "⚠️ Attention Drops",
                [f"  {d.timestamp} — {d.reason} → {d.fix}" for d in video.attention_drops],
            )
            lines += _section(
                "🪝 Rewritten Hook", [f"  {video.rewritten_hook}"] if video.rewritten_hook else []
            )
        case _:
            pass

    return "\n".join(lines)


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def _preview(caption: str) -> str:
    match caption.strip():
        case "":
            return MSG_NO_CAPTION
        case text if len(text) > HISTORY_CAPTION_PREVIEW:
            return text[: HISTORY_CAPTION_PREVIEW - 1] + "…"
        case text:
            return text


def render_history(entries: list[HistoryEntry]) -> str:
    match entries:
        case []:
            return MSG_HISTORY_EMPTY
        case _:
            pass
    lines = [MSG_HISTORY_HEADER % len(entries)]
    for position, entry in enumerate(entries, start=1):
        badge = BADGE_VIRAL if entry.result.is_viral else BADGE_FLOP
        date = datetime.fromtimestamp(entry.created_at).strftime(DATE_FORMAT)
        lines.append(
            f"{position}. {score_band(entry.result.score)} {entry.result.score}/100 {badge} "
            f"[{entry.media_type.value.upper()}] {date}\n   {_preview(entry.caption)}"
        )
    return "\n".join(lines)
