"""
Main entry point for the holiday lights player.

Builds the platform context once, discovers scenes, and plays them on
either the preview window or a headless in-memory display.
"""

import asyncio
import logging
import sys
from typing import Optional

from holidaylights.animation import AnimationController, SceneCycler
from holidaylights.display import BufferDisplay, Display
from holidaylights.platform import create_platform
from holidaylights.scenes import AllScenesLoader, build_registry, select_scenes
from holidaylights.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Preview window event polling
EVENT_POLL_INTERVAL = 1 / 30


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_display(settings: Settings) -> Display:
    display = settings.display
    if settings.is_simulator:
        from holidaylights.display.simulator import PygameDisplay

        return PygameDisplay(display.width, display.height, display.scale, display.brightness)
    return BufferDisplay(display.width, display.height, display.brightness)


async def run(settings: Settings, frame_limit: Optional[int] = None) -> None:
    """
    Play scenes until interrupted, the window closes, or `frame_limit` frames ran.

    Args:
        settings: Application settings
        frame_limit: Stop after this many frames (None = run forever)
    """
    platform = create_platform(settings.backend, settings.assets_path, settings.font_path)

    loader = AllScenesLoader(build_registry(platform))
    scenes = select_scenes(loader.get_imagers(), settings.scenes)

    display = build_display(settings)
    controller = AnimationController()
    cycler = SceneCycler(scenes, controller, cycling=settings.display.cycling)
    cycler.on_matrix(display.show)

    done = asyncio.Event()
    frames = 0

    def count_frame(frame: int) -> None:
        nonlocal frames
        frames += 1
        if frame_limit is not None and frames >= frame_limit:
            done.set()

    controller.subscribe(count_frame)

    # First frame right away, then on the timer
    cycler.render(controller.frame)
    controller.start(settings.display.interval_ms, settings.display.max_frames)

    try:
        if hasattr(display, "pump_events"):
            while not done.is_set() and display.pump_events():
                await asyncio.sleep(EVENT_POLL_INTERVAL)
        else:
            await done.wait()
    finally:
        controller.destroy()
        cycler.close()
        display.close()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Holiday lights starting...")
    logger.info(f"Running in {settings.env} mode with {settings.backend} backend")

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Holiday lights stopped")


if __name__ == "__main__":
    main()
