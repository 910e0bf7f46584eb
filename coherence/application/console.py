"""Run a breathing session in the terminal."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from ..domain.entities.phase import SessionStatus
from ..infrastructure.console_renderer import ConsoleRenderer
from .config import Settings
from .controller import create_controller

logger = logging.getLogger(__name__)

POLL_INTERVAL_SEC = 0.1


async def run_console_session(
    app_settings: Settings,
    duration_min: Optional[int] = None,
    inhale_sec: Optional[int] = None,
    hold_sec: Optional[int] = None,
    exhale_sec: Optional[int] = None,
    renderer: Optional[ConsoleRenderer] = None,
) -> SessionStatus:
    """
    Run one session to completion on the current event loop.

    Overrides are clamped into their ranges. Cancelling the task (Ctrl+C)
    quits the session before re-raising.

    Returns:
        The final session status
    """
    controller = create_controller(app_settings, renderer or ConsoleRenderer())
    controller.settings_provider.update(
        duration_min=duration_min,
        inhale_sec=inhale_sec,
        hold_sec=hold_sec,
        exhale_sec=exhale_sec,
    )

    controller.start_session()
    session = controller.session_controller
    try:
        while session.status.is_active:
            await asyncio.sleep(POLL_INTERVAL_SEC)
    except asyncio.CancelledError:
        controller.quit_session()
        raise

    return session.status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Guided coherence breathing session")
    parser.add_argument("--duration", type=int, help="Session length in minutes (1-30)")
    parser.add_argument("--inhale", type=int, help="Inhale seconds (3-10)")
    parser.add_argument("--hold", type=int, help="Hold seconds (0-5)")
    parser.add_argument("--exhale", type=int, help="Exhale seconds (3-10)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    app_settings = Settings()

    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        status = asyncio.run(
            run_console_session(
                app_settings,
                duration_min=args.duration,
                inhale_sec=args.inhale,
                hold_sec=args.hold,
                exhale_sec=args.exhale,
            )
        )
    except KeyboardInterrupt:
        logger.info("Session interrupted")
        return 130

    return 0 if status == SessionStatus.COMPLETED else 1


if __name__ == "__main__":
    sys.exit(main())
