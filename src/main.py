import logging
import signal
import threading
from typing import Optional

from app_config import AppConfigurationError, load_app_config, resolve_config_path
from pomodorino import InvalidDurationError, SessionTimer
from view import BUTTON_FINISHED, HarvestTally, TimerViewModel, TimerViewState


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomodorini_app")


def setup_signal_handlers(stop_event: threading.Event) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        signal_name = signal.Signals(signum).name
        print(f"\n👋 {signal_name} received, stopping...\n")
        stop_event.set()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def describe_state(state: TimerViewState) -> str:
    return (
        f"{state.count_text} | {state.time_text} ({state.goal_text}) | "
        f"ripeness={state.ripeness:.2f} color={state.color.hex} phase={state.phase}"
    )


def run_timer_loop(
    view_model: TimerViewModel,
    *,
    tick_interval_seconds: float,
    stop_event: threading.Event,
    harvest_limit: int = 0,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Poll the timer screen until stopped or the harvest limit is reached.

    Without overtime a ripe pomodorino is harvested right away and the next
    one starts; with overtime it keeps ripening until the loop is stopped.
    """
    logger = logger or logging.getLogger("pomodorini_app")
    try:
        while not stop_event.is_set():
            state = view_model.tick()
            if state is not None:
                logger.info(describe_state(state))
                if (
                    state.button_state == BUTTON_FINISHED
                    and not view_model.timer.allows_overtime
                ):
                    view_model.press_button()
                    if harvest_limit and view_model.tally.count >= harvest_limit:
                        logger.info(
                            "Harvest limit reached: %s pomodorini",
                            view_model.tally.count,
                        )
                        break
            stop_event.wait(tick_interval_seconds)
    finally:
        view_model.close()
    return 0


def main() -> int:
    """Run the pomodorino timer in the terminal."""
    logger = setup_logging(level=logging.INFO)

    try:
        config_path = resolve_config_path()
        app_config = load_app_config(str(config_path))
        logger.info("Loaded runtime config: %s", config_path)
    except AppConfigurationError as error:
        logger.error(f"App configuration error: {error}")
        return 1

    try:
        timer = SessionTimer.from_settings(
            app_config.timer,
            logger=logging.getLogger("pomodorino"),
        )
    except InvalidDurationError as error:
        logger.error(f"Timer configuration error: {error}")
        return 1

    view_model = TimerViewModel.from_settings(
        timer,
        app_config.view,
        tally=HarvestTally(),
        logger=logging.getLogger("view"),
    )

    stop_event = threading.Event()
    setup_signal_handlers(stop_event)

    logger.info(describe_state(view_model.render()))
    view_model.press_button()

    exit_code = run_timer_loop(
        view_model,
        tick_interval_seconds=app_config.view.tick_interval_seconds,
        stop_event=stop_event,
        harvest_limit=app_config.view.harvest_limit,
        logger=logger,
    )
    logger.info("Harvested %s pomodorini this session", view_model.tally.count)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
