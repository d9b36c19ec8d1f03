import logging
from typing import Dict, Optional

import requests
from pydantic import BaseModel, Field, ValidationError, field_validator

from . import config
from .errors import CatalogDecodeError, CatalogFetchError
from .models import Catalog

logger = logging.getLogger("NJLotteryProvider")


class FetchConfig(BaseModel):
    """Everything needed to build the catalog request."""
    url: str = Field(default=config.BASE_URL, description="Listing endpoint")
    page_size: int = Field(default=config.PAGE_SIZE, gt=0, description="Value of the `size` query parameter")
    headers: Dict[str, str] = Field(default_factory=lambda: dict(config.DEFAULT_HEADERS))
    timeout: Optional[float] = Field(default=config.REQUEST_TIMEOUT, gt=0, description="Seconds, None waits forever")

    @field_validator("headers")
    @classmethod
    def _merge_default_headers(cls, v: Dict[str, str]) -> Dict[str, str]:
        # Given headers override the defaults by name, case-insensitively
        merged = dict(config.DEFAULT_HEADERS)
        merged.update({name.lower(): value for name, value in v.items()})
        return merged


class NJLotteryProvider:
    """
    Provider for the New Jersey Lottery instant-game catalog.
    Issues a single GET against the public listing API and decodes it into a Catalog.

    A `session` can be injected (anything with a requests-compatible `get`),
    otherwise a fresh requests.Session is opened for each fetch.
    """

    def __init__(self, fetch_config: Optional[FetchConfig] = None, session=None):
        self.fetch_config = fetch_config or FetchConfig()
        self.session = session

    def fetch_catalog(self) -> Catalog:
        """
        Download and decode the catalog.

        Raises:
            CatalogFetchError: transport failure or non-2xx status.
            CatalogDecodeError: body is not a valid catalog payload.
        """
        if self.session is not None:
            return self._fetch(self.session)

        with requests.Session() as session:
            return self._fetch(session)

    def _fetch(self, session) -> Catalog:
        cfg = self.fetch_config
        logger.info(f"Fetching instant games from {cfg.url} (size={cfg.page_size})")

        try:
            with session.get(
                cfg.url,
                params={"size": cfg.page_size},
                headers=cfg.headers,
                timeout=cfg.timeout,
            ) as response:
                response.raise_for_status()
                try:
                    payload = response.json()
                except ValueError as e:
                    raise CatalogDecodeError(f"Response is not valid JSON: {e}") from e
        except requests.RequestException as e:
            raise CatalogFetchError(f"Failed to fetch catalog from {cfg.url}: {e}") from e

        catalog = parse_catalog(payload)
        logger.info(f"Decoded {len(catalog.games)} games")
        if catalog.next_page_url:
            logger.warning(f"Catalog has more pages than fetched (next: {catalog.next_page_url})")
        return catalog


def parse_catalog(payload) -> Catalog:
    """Validate a decoded JSON payload into a Catalog."""
    if not isinstance(payload, dict):
        raise CatalogDecodeError(f"Expected a JSON object, got {type(payload).__name__}")
    if "games" not in payload:
        raise CatalogDecodeError("Payload has no 'games' field")

    try:
        return Catalog.model_validate(payload)
    except ValidationError as e:
        raise CatalogDecodeError(f"Catalog failed validation: {e.error_count()} error(s)\n{e}") from e
