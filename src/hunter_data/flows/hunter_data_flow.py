"""
Hunter pet data flow

Prefect flow that builds the HunterData artifact:

1. Validates the job configuration (listing URLs, cache folder, output path).
2. Fetches every hunter-pet-abilities listing page (cache first) and merges
   the ability summaries.
3. Fetches each ability's spell page (cache first, paced when it has to hit
   the network), parses the spell details table and the used-by-pet list.
4. Writes `{Pets, Spells}` as a Lua `getHunterDataTable()` function (or JSON).

Site-specific parsing stays in the scraper plugin; this module only
sequences the steps.
"""

from __future__ import annotations

from prefect import flow, get_run_logger

from hunter_data.core.config import ScrapeConfig
from hunter_data.core.scraping.prefect_tasks import (
    build_assembler,
    collect_details_task,
    collect_summaries_task,
)
from hunter_data.services.storage import save_hunter_data


@flow(name="Hunter Pet Data Scrape", log_prints=True)
def hunter_data_flow(config_dict: dict | None = None) -> str:
    """
    Master flow.
    Receives a dict (JSON), validates the contract and runs the pipeline.
    Returns the path of the written artifact.
    """
    logger = get_run_logger()

    # 1. Contract validation (Pydantic); fails the flow immediately.
    config = ScrapeConfig(**(config_dict or {}))
    logger.info("Configuration valid for: %s", config.job_name)

    # 2. Extraction
    assembler = build_assembler(config)
    summaries = collect_summaries_task(assembler, config.listing_urls)
    data = collect_details_task(assembler, summaries)

    # 3. Load
    return save_hunter_data(data.to_table(), config.output_path, config.output_format)


# ==========================================
# LOCAL EXECUTION
# ==========================================
if __name__ == "__main__":
    hunter_data_flow(
        {
            "job_name": "hunter_pet_data",
            "environment": "dev",
            "cache_dir": "cache",
            "output_path": "HunterDataTable.lua",
            "output_format": "lua",
        }
    )
