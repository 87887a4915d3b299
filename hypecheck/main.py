"""Entry point — wires Config → backend → ResilientInvoker → AnalysisRouter → TelegramClient."""
import logging

from rich.logging import RichHandler

from hypecheck.backends.factory import make_backend
from hypecheck.config import Config
from hypecheck.constants import (
    CMD_DEMO,
    CMD_HISTORY,
    CMD_JSON,
    CMD_NEW,
    CMD_REGION,
    CMD_SHOW,
    CMD_STATUS,
    CMD_TREND,
    MSG_BOT_STARTING,
)
from hypecheck.history import SessionHistory
from hypecheck.invoker import ResilientInvoker
from hypecheck.router import AnalysisRouter
from hypecheck.telegram.client import TelegramClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_router(config: Config) -> AnalysisRouter:
    invoker = ResilientInvoker(make_backend(config))
    return AnalysisRouter(config, invoker, SessionHistory(config.history_max_entries))


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    router = build_router(config)
    client = TelegramClient(config)
    client.run(
        router.handle_media,
        commands={
            CMD_REGION: router.handle_region_command,
            CMD_TREND: router.handle_trend_command,
            CMD_NEW: lambda sender, _args: router.handle_new_command(sender),
            CMD_HISTORY: lambda _sender, _args: router.handle_history_command(),
            CMD_SHOW: lambda _sender, args: router.handle_show_command(args),
            CMD_JSON: lambda _sender, args: router.handle_json_command(args),
            CMD_DEMO: lambda _sender, args: router.handle_demo_command(args),
            CMD_STATUS: lambda _sender, _args: router.handle_status_command(),
        },
    )


if __name__ == "__main__":
    main()
