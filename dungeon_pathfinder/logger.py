import sys

from loguru import logger

PALETTE = {
    "bfs_solver": "green",
    "dungeon_builder": "blue",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "bfs_solver": "INFO",
    "dungeon_builder": "INFO",
}


def set_component_level(component: str, level: str) -> None:
    """Change the minimum level emitted for one component."""
    logger.level(level)  # raises ValueError for unknown level names
    LEVEL_PER_COMPONENT[component] = level


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    id = record["extra"].get("id", "")
    colour = PALETTE.get(comp, "white")

    if id:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<15} | {id:<15}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<15}</> | "
            "<level>{message}</level>\n"
        )


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
