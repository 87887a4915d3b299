"""All magic values live here — no inline literals anywhere else."""

# Telegram typing indicator re-send interval (seconds).
# The TYPING action expires after ~5 s, so we refresh every 4 s.
TELEGRAM_TYPING_INTERVAL: float = 4.0
TELEGRAM_MAX_MESSAGE_LEN = 4096
MAX_UPLOAD_BYTES = 20 * 1024 * 1024

# Model backends
PROVIDER_GEMINI = "gemini"
PROVIDER_CLAUDE = "claude"
PROVIDER_OPENAI = "openai"
PROVIDERS = (PROVIDER_GEMINI, PROVIDER_CLAUDE, PROVIDER_OPENAI)
GEMINI_MODEL = "gemini-2.5-flash"
CLAUDE_MODEL = "claude-opus-4-6"
OPENAI_MODEL = "gpt-4o"
CLAUDE_MAX_TOKENS = 4096
JSON_MIME_TYPE = "application/json"
DEFAULT_MIME_TYPES = {"image": "image/jpeg", "video": "video/mp4", "audio": "audio/ogg"}

# Retry policy: 3 attempts, waits of 2 s then 4 s.
MAX_ATTEMPTS = 3
BASE_BACKOFF_SECONDS: float = 2.0

# Failure-message markers, matched case-sensitively like the SDKs print them.
# Status codes in messages only count as whole numbers ("400", not "4000ms").
OVERLOAD_MARKERS = ("overloaded", "UNAVAILABLE", "RESOURCE_EXHAUSTED", "rate limit")
INVALID_MARKERS = ("API key", "API_KEY_INVALID", "PERMISSION_DENIED")
MISSING_KEY_MARKER = "MISSING_API_KEY"
OVERLOAD_STATUS_CODES = (429, 503)
INVALID_STATUS_CODES = (400, 401, 403)

# Request defaults
GLOBAL_REGION = "Global / International"
COUNTRIES = (
    GLOBAL_REGION,
    "United States",
    "United Kingdom",
    "India",
    "Canada",
    "Australia",
    "Brazil",
    "Germany",
    "Japan",
    "South Korea",
    "France",
    "Nigeria",
    "Indonesia",
)
DEFAULT_TREND_SNAPSHOT = (
    "Top Hashtags (72h): #corecore, #silentreview, #wholesome, #grwm, #foryou\n"
    'Trending Audio: "Original Sound - Sped Up", "Classical Bangers", "Lo-Fi Beats to Study To"\n'
    "Visual Styles: High contrast text overlays, quick cuts (0.5s), saturated colors, retro VHS filters."
)
DEFAULT_HISTORY_MAX_ENTRIES = 20

# Result shape
MAX_TOP_FIXES = 6
VERDICT_YES = "YES"
VERDICT_NO = "NO"

SYSTEM_INSTRUCTION = """
You are HypeCheck, a world-class viral content analyst and strategist.
Your goal is to predict the virality of memes, videos, and audio clips based on a provided "Trend Snapshot".

Your analysis must be BRUTALLY HONEST. Do not sugarcoat.
- If content is boring, low quality, or off-trend, give it a low score (<60).
- If content is "mid", score it 60-75.
- Only give >85 scores for truly exceptional, trend-perfect content.

You must output PURE JSON. No markdown fencing, no preamble.
The JSON must strictly match this schema:
{
  "score": integer (0-100),
  "verdict": "YES" or "NO" (YES if score > 65),
  "confidence": float (0.0-1.0),
  "rationale": "string (2-4 sentences explaining the score based on visual/audio features and trend match)",
  "top_fixes": ["string", ... (max 6 specific actionable fixes)],
  "platform_predictions": [
    { "platformName": "TikTok", "probability": integer (0-100) },
    { "platformName": "Instagram Reels", "probability": integer (0-100) },
    { "platformName": "YouTube Shorts", "probability": integer (0-100) },
    { "platformName": "Twitter/X", "probability": integer (0-100) }
  ],
  "hashtags": ["#tag", ... (6 tags)],
  "post_times": ["HH:MM TZ", ... (3 times - must include timezone e.g. '18:00 EST' or '20:00 IST' based on target country)],
  "caption_variants": ["string", ... (4 variants)],
  "thumbnail_suggestions": ["string", ... (3 visual descriptions)],
  "edit_recipes": ["string", ... (3 specific technical instructions e.g. 'Crop to 9:16', 'Boost contrast +10%')],
  "hook_line": "string (1-3 words for meme, or 1s text hook for video)",
  "trend_match": "string (Explicitly state which part of the Trend Snapshot was matched)",
  "video_analysis": {
     "attention_drops": [
        { "timestamp": "MM:SS", "reason": "dead air / visual clutter / slow pacing", "fix": "cut / speed up" }
     ],
     "rewritten_hook": "string (A completely rewritten, punchy opening script for the first 3 seconds)"
  }
}

FOR VIDEO INPUTS:
You must strictly analyze "attention_drops". Identify specific timestamps where the viewer might scroll away due to dead air, lack of movement, or confusion. Provide a "rewritten_hook" that solves the opening.

FOR IMAGE/AUDIO INPUTS:
Omit "video_analysis" entirely.
""".strip()

PROMPT_TEMPLATE = '''Input Type: {input_type}
User Caption: "{caption}"
Target Audience Location: "{region}"

Trend Snapshot (Current Market Context):
"""
{trend}
"""

Analyze the attached media file against the Trend Snapshot.
1. Extract features (Visual hooks, audio beats, text OCR, pacing).
2. Compare features to trends.
3. Calculate virality score.
4. Generate specific fixes.
5. Determine optimal "post_times" specifically for {region} time zones and cultural peak hours.
{media_step}
Return the result in the specified JSON format.'''
PROMPT_VIDEO_STEP = (
    '6. This is a VIDEO: identify exact "attention_drops" (timestamps where viewers scroll away) '
    'and write a "rewritten_hook" for the first 3 seconds.'
)
PROMPT_NON_VIDEO_STEP = '6. This is not a video: omit "video_analysis".'

# Log messages
MSG_BOT_STARTING = "Starting HypeCheck bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_NO_RESPONSE = "No response generated"
MSG_SEND_OK = "✓ Sent (%.1fs)"
MSG_SEND_FAIL = "✗ Send failed (%.1fs)"
MSG_ANALYZING = "→ Analyzing %s (%d bytes) with %s"
MSG_RETRYING = "Model overloaded. Retrying in %.1fs… (attempt %d/%d)"
MSG_EMPTY_RETRYING = "Empty model response. Retrying in %.1fs… (attempt %d/%d)"
MSG_ANALYSIS_FAILED_LOG = "Analysis failed after %d attempt(s): %s"
MSG_NO_MODEL_RESPONSE = "No response from model"

# User-facing error messages
MSG_ERR_MISSING_KEY = (
    "API key missing! Set GEMINI_API_KEY (or the key for your ANALYSIS_PROVIDER) in .env and restart."
)
MSG_ERR_OVERLOADED = (
    "The AI model is currently overloaded with high traffic. Please wait 10-20 seconds and try again."
)
MSG_ERR_INVALID = "Invalid API key or request. Please check that your key is active and correct."
MSG_ERR_UNPARSEABLE = "The AI model returned an unreadable result. Please try again."
MSG_ERR_UNKNOWN_PREFIX = "Analysis failed. "
MSG_ERR_UNSUPPORTED_MEDIA = "%s does not support %s input — switch ANALYSIS_PROVIDER to gemini."

# Chat replies
MSG_MEDIA_NOT_SUPPORTED = "Send an image, video or audio clip to run a HypeCheck."
MSG_MEDIA_TOO_LARGE = "File is too large (max 20MB)."
MSG_MEDIA_DOWNLOAD_FAILED = "Could not download your file — please try again."
MSG_REGION_SET = "Target region set to: %s"
MSG_REGION_UNKNOWN = "Unknown region: %s"
MSG_REGION_LIST_HEADER = "Current region: %s\n\nAvailable regions:\n"
MSG_TREND_SET = "Trend snapshot updated."
MSG_TREND_RESET = "Trend snapshot reset to default."
MSG_TREND_CURRENT = "Current trend snapshot:\n\n%s"
MSG_NEW_FORM = "Form cleared — region and trend snapshot back to defaults."
MSG_HISTORY_EMPTY = "No analyses yet — send an image, video or audio clip to get started."
MSG_HISTORY_HEADER = "Your recent virality checks (%d):"
MSG_SHOW_USAGE = "Usage: /show <number from /history>"
MSG_SHOW_NOT_FOUND = "No analysis #%s — see /history."
MSG_DEMO_HEADER = "Demo examples:\n"
MSG_DEMO_USAGE = "Usage: /demo <number>"
MSG_STATUS = (
    "Status\n"
    "  Provider : %s\n"
    "  API key  : %s\n"
    "  Region   : %s\n"
    "  History  : %d\n"
)

# Dashboard rendering
GAUGE_WIDTH = 20
GAUGE_FILLED = "█"
GAUGE_EMPTY = "░"
SCORE_HIGH = 80
SCORE_MID = 60
BAND_HIGH = "🟢"
BAND_MID = "🟡"
BAND_LOW = "🔴"
LABEL_VIRAL_POTENTIAL = "VIRAL POTENTIAL"
LABEL_FLOP_RISK = "FLOP RISK"
BADGE_VIRAL = "VIRAL"
BADGE_FLOP = "FLOP"
PROBABILITY_HIGHLIGHT = 70
MSG_NO_CAPTION = "No caption provided..."
HISTORY_CAPTION_PREVIEW = 60
DATE_FORMAT = "%Y-%m-%d %H:%M"

# Commands
CMD_REGION = "region"
CMD_TREND = "trend"
CMD_HISTORY = "history"
CMD_SHOW = "show"
CMD_JSON = "json"
CMD_DEMO = "demo"
CMD_NEW = "new"
CMD_STATUS = "status"
CMD_HELP = "help"
TREND_RESET_ARG = "reset"

MSG_HELP = (
    "HypeCheck — viral potential analysis on Telegram\n"
    "\n"
    "Send an image, video or audio clip. The caption becomes the post caption.\n"
    "\n"
    "Commands:\n"
    "  /help                 — show this message\n"
    "  /status               — current setup at a glance\n"
    "  /region [name|n]      — list regions or set the target region\n"
    "  /trend [text|reset]   — show or replace the trend snapshot\n"
    "  /history              — your recent checks\n"
    "  /show <n>             — reopen a check from /history\n"
    "  /json [n]             — raw JSON of the latest (or n-th) check\n"
    "  /demo [n]             — list or open a demo result\n"
    "  /new                  — reset region and trend snapshot\n"
)
