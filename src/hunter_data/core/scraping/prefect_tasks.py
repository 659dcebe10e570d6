"""Tarefas Prefect que usam os componentes de scraping.

Este arquivo adapta as peças "baixas" (downloader com cache, scraper do
Wowhead, assembler) para o modelo de execução do Prefect. Cada task aqui é
uma unidade de trabalho com logs.

Para quem não conhece Prefect:
- Um "task" é uma função executada por Prefect; ela tem logs/estado.
  Um "flow" compõe várias tasks em sequência.

Nenhuma task aqui tem retries: se uma página falhar, o run inteiro para e o
log mostra qual URL/habilidade causou o erro.
"""

from __future__ import annotations

from typing import Dict, List

from prefect import get_run_logger, task
from prefect.cache_policies import NO_CACHE

from hunter_data.core.assembler import HunterDataAssembler
from hunter_data.core.config import ScrapeConfig
from hunter_data.core.models import AbilitySummary, EntityId, HunterData
from hunter_data.core.scraping.cache import CacheStore
from hunter_data.core.scraping.downloader import CachedDownloader
from hunter_data.core.scraping.fetcher import Fetcher
from hunter_data.scrapers import get_scraper_for_url


def build_assembler(config: ScrapeConfig) -> HunterDataAssembler:
    """Wire cache, fetcher, downloader and the site scraper from `config`."""
    cache = CacheStore(config.cache_path, config.cache_extension)
    fetcher = Fetcher(timeout=config.timeout, retries=config.retries)
    downloader = CachedDownloader(
        cache, fetcher, request_delay=config.request_delay_seconds
    )
    scraper_class = get_scraper_for_url(config.listing_urls[0])
    scraper = scraper_class(config.spell_url_prefix)
    return HunterDataAssembler(
        downloader, scraper, skip_missing_details=config.skip_missing_details
    )


@task(name="collect_ability_summaries", retries=0, cache_policy=NO_CACHE)
def collect_summaries_task(
    assembler: HunterDataAssembler, listing_urls: List[str]
) -> Dict[EntityId, AbilitySummary]:
    logger = get_run_logger()
    summaries = assembler.collect_summaries(listing_urls)
    logger.info("Found %d hunter pet abilities", len(summaries))
    return summaries


@task(name="collect_ability_details", retries=0, cache_policy=NO_CACHE)
def collect_details_task(
    assembler: HunterDataAssembler, summaries: Dict[EntityId, AbilitySummary]
) -> HunterData:
    logger = get_run_logger()
    spells, pets = assembler.collect_spells(summaries)
    logger.info(
        "Parsed %d spells, %d pets (cache hits=%d, downloads=%d)",
        len(spells),
        len(pets),
        assembler.downloader.cache_hits,
        assembler.downloader.network_fetches,
    )
    return HunterData(pets=pets, spells=spells)
