from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_LISTING_URLS = [
    "http://www.wowhead.com/hunter-pet-abilities/live-only:on",
    "http://www.wowhead.com/hunter-pet-abilities/live-only:on#50+1+17+2",
]


class ScrapeConfig(BaseModel):
    """
    Configuration contract for one scrape run.
    Defines everything needed to build the hunter pet data artifact.
    """

    job_name: str = "hunter_pet_data"
    environment: str = Field(default="dev", pattern="^(dev|staging|prod)$")

    # Source
    listing_urls: List[str] = Field(default_factory=lambda: list(DEFAULT_LISTING_URLS))
    spell_url_prefix: str = "http://www.wowhead.com/spell="

    # Cache and network
    cache_dir: str = "cache"
    cache_extension: str = ".html"
    request_delay_seconds: float = Field(default=1.0, ge=0)
    timeout: int = Field(default=15, gt=0)
    retries: int = Field(default=0, ge=0)

    # Destination
    output_path: str = "HunterDataTable.lua"
    output_format: Literal["lua", "json"] = "lua"

    # Missing spell details table: fail the run (default) or skip the ability
    skip_missing_details: bool = False

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir)

    @field_validator("job_name")
    def job_name_must_be_slug(cls, v):
        if " " in v:
            raise ValueError("job_name must not contain spaces")
        return v.lower()

    @field_validator("listing_urls")
    def listing_urls_not_empty(cls, v):
        if not v:
            raise ValueError("at least one listing URL is required")
        return v
