import sys

from loguru import logger

PALETTE = {
    "generator": "green",
    "scramble": "blue",
    "terrain": "cyan",
    "level_set": "magenta",
}

LEVEL_PER_COMPONENT = {
    "terrain": "INFO",
    "scramble": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The colour tag has to be in the template handed back to the sink so
    # loguru can turn it into ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<10}</> | "
        "<level>{message}</level>\n"
    )


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with the component-aware stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr, level=level, format=formatter, filter=component_filter, colorize=True
    )
