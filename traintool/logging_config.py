import logging
from rich.logging import RichHandler

def configure(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=rich_tracebacks, show_time=False, show_path=False)],
        force=True,
    )
