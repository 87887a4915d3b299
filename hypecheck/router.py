"""AnalysisRouter — turns chat input into analyses and replies, transport-agnostic."""
import logging
from dataclasses import dataclass, replace
from typing import Optional

from hypecheck.config import Config
from hypecheck.constants import (
    COUNTRIES,
    DEFAULT_TREND_SNAPSHOT,
    MSG_DEMO_HEADER,
    MSG_DEMO_USAGE,
    MSG_NEW_FORM,
    MSG_REGION_LIST_HEADER,
    MSG_REGION_SET,
    MSG_REGION_UNKNOWN,
    MSG_SHOW_NOT_FOUND,
    MSG_SHOW_USAGE,
    MSG_STATUS,
    MSG_TREND_CURRENT,
    MSG_TREND_RESET,
    MSG_TREND_SET,
    TREND_RESET_ARG,
)
from hypecheck.demos import DEMO_EXAMPLES
from hypecheck.errors import AnalysisError, user_message
from hypecheck.history import SessionHistory
from hypecheck.invoker import ResilientInvoker, analyze_content
from hypecheck.message_handler import MediaMessage, normalize_chat_id
from hypecheck.render import render_history, render_json, render_result

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


@dataclass(frozen=True)
class FormState:
    region: str
    trend_snapshot: str = DEFAULT_TREND_SNAPSHOT


def resolve_region(raw: str) -> Optional[str]:
    """Match a region by 1-based index or case-insensitive name."""
    text = raw.strip()
    match text:
        case t if t.isdigit() and 1 <= int(t) <= len(COUNTRIES):
            return COUNTRIES[int(t) - 1]
        case t:
            return next((c for c in COUNTRIES if c.lower() == t.lower()), None)


def parse_position(raw: str) -> Optional[int]:
    match raw.strip():
        case t if t.isdigit():
            return int(t)
        case _:
            return None


# ── router ────────────────────────────────────────────────────────────────────


class AnalysisRouter:
    """Runs HypeCheck analyses for incoming media and answers the chat commands."""

    def __init__(
        self,
        config: Config,
        invoker: ResilientInvoker,
        history: Optional[SessionHistory] = None,
    ) -> None:
        self._config = config
        self._invoker = invoker
        self._history = history if history is not None else SessionHistory(config.history_max_entries)
        self._forms: dict[str, FormState] = {}

    @property
    def history(self) -> SessionHistory:
        return self._history

    # ── form state ────────────────────────────────────────────────────────────

    def get_form(self, sender: str) -> FormState:
        key = normalize_chat_id(sender)
        return self._forms.get(key, FormState(region=self._config.default_region))

    def _set_form(self, sender: str, form: FormState) -> None:
        self._forms[normalize_chat_id(sender)] = form

    def handle_region_command(self, sender: str, args: str) -> str:
        form = self.get_form(sender)
        match args.strip():
            case "":
                listing = "\n".join(f"  {i}. {c}" for i, c in enumerate(COUNTRIES, start=1))
                return MSG_REGION_LIST_HEADER % form.region + listing
            case raw:
                pass
        match resolve_region(raw):
            case None:
                return MSG_REGION_UNKNOWN % raw
            case region:
                self._set_form(sender, replace(form, region=region))
                return MSG_REGION_SET % region

    def handle_trend_command(self, sender: str, args: str) -> str:
        form = self.get_form(sender)
        match args.strip():
            case "":
                return MSG_TREND_CURRENT % form.trend_snapshot
            case arg if arg.lower() == TREND_RESET_ARG:
                self._set_form(sender, replace(form, trend_snapshot=DEFAULT_TREND_SNAPSHOT))
                return MSG_TREND_RESET
            case _:
                self._set_form(sender, replace(form, trend_snapshot=args.strip()))
                return MSG_TREND_SET

    def handle_new_command(self, sender: str) -> str:
        self._forms.pop(normalize_chat_id(sender), None)
        return MSG_NEW_FORM

    # ── history views ─────────────────────────────────────────────────────────

    def handle_history_command(self) -> str:
        return render_history(self._history.entries())

    def handle_show_command(self, args: str) -> str:
        match parse_position(args):
            case None:
                return MSG_SHOW_USAGE
            case position:
                pass
        match self._history.at(position):
            case None:
                return MSG_SHOW_NOT_FOUND % position
            case entry:
                return render_result(entry.result)

    def handle_json_command(self, args: str) -> str:
        match parse_position(args):
            case None:
                position = 1
            case n:
                position = n
        match self._history.at(position):
            case None:
                return MSG_SHOW_NOT_FOUND % position
            case entry:
                return render_json(entry.result)

    def handle_demo_command(self, args: str) -> str:
        match parse_position(args):
            case n if n is not None and 1 <= n <= len(DEMO_EXAMPLES):
                demo = DEMO_EXAMPLES[n - 1]
            case _:
                listing = "\n".join(
                    f"  {i}. {d.title} [{d.media_type.value}]"
                    for i, d in enumerate(DEMO_EXAMPLES, start=1)
                )
                return MSG_DEMO_HEADER + listing + "\n\n" + MSG_DEMO_USAGE
        entry = self._history.add(
            demo.media_type, demo.caption, demo.result, entry_id=demo.id, title=demo.title
        )
        return f"{demo.title}\n\n" + render_result(entry.result)

    def handle_status_command(self) -> str:
        backend = self._invoker.backend
        provider = backend.name if backend is not None else self._config.analysis_provider
        key = "configured" if self._invoker.has_credential() else "missing"
        return MSG_STATUS % (provider, key, self._config.default_region, len(self._history))

    # ── analysis ──────────────────────────────────────────────────────────────

    async def handle_media(self, message: MediaMessage) -> str:
        form = self.get_form(message.sender)
        try:
            result = await analyze_content(
                self._invoker,
                message.payload,
                message.mime_type,
                message.caption,
                form.trend_snapshot,
                message.media_type,
                form.region,
            )
        except AnalysisError as exc:
            logger.error("Analysis failed (%s): %s", exc.kind.value, exc)
            return user_message(exc)

        self._history.add(message.media_type, message.caption, result)
        return render_result(result)
