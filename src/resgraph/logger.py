"""Pre-configured Loguru logger with Rich output."""

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

# beautify tracebacks with Rich
install()

console = Console()

_handler_id: int | None = None


def set_level(level: str = "INFO") -> None:
    """Route loguru records at ``level`` and above to the Rich console."""
    global _handler_id
    if _handler_id is None:
        # remove default handler
        logger.remove()
    else:
        logger.remove(_handler_id)
    _handler_id = logger.add(
        RichHandler(
            console=console,
            markup=True,
            show_time=True,
            show_level=True,
            show_path=True,
        ),
        level=level,
        format="{message}",
    )


set_level("INFO")

__all__ = ["logger", "console", "set_level"]
