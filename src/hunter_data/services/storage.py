from typing import Any, Dict

from prefect import get_run_logger, task
from prefect.cache_policies import NO_CACHE

from hunter_data.services.storage_backends import get_writer


@task(name="save_hunter_data", retries=0, cache_policy=NO_CACHE)
def save_hunter_data(table: Dict[str, Any], path: str, format: str = "lua") -> str:
    """
    Generic load task.

    Writes the `{"Pets": ..., "Spells": ...}` table to `path` in the requested
    format ("lua" for the addon runtime, "json" for Python consumers).
    """
    logger = get_run_logger()
    writer = get_writer(format)
    out = writer.write(table, path)
    logger.info(
        "💾 [Storage Service] Saved %d pets / %d spells to %s",
        len(table["Pets"]),
        len(table["Spells"]),
        out,
    )
    return out
