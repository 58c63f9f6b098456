"""Daum dictionary search client."""

from __future__ import annotations

import httpx
from loguru import logger

from daumdic.config.loader import load_config
from daumdic.config.schema import DictionaryConfig
from daumdic.errors import EmptyWordError, FetchError
from daumdic.models import Search
from daumdic.parser import parse_document


class DictionaryClient:
    """
    Look up words on the Daum dictionary search page.

    Without a config the built-in defaults are used; the module-level
    search functions load the config file and environment instead.
    """

    def __init__(self, config: DictionaryConfig | None = None):
        self.config = config or DictionaryConfig()

    async def search(self, query: str) -> Search:
        """Fetch and parse the result page for query."""
        term = self._validate(query)
        logger.debug("Searching {} for {!r}", self.config.base_url, term)
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.config.base_url, **self._request_kwargs(term))
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._fetch_error(term, e) from e
        return parse_document(response.text)

    def search_sync(self, query: str) -> Search:
        """Blocking variant of :meth:`search`."""
        term = self._validate(query)
        logger.debug("Searching {} for {!r}", self.config.base_url, term)
        try:
            with httpx.Client() as client:
                response = client.get(self.config.base_url, **self._request_kwargs(term))
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._fetch_error(term, e) from e
        return parse_document(response.text)

    @staticmethod
    def _validate(query: str) -> str:
        term = (query or "").strip()
        if not term:
            raise EmptyWordError()
        return term

    def _request_kwargs(self, term: str) -> dict:
        return {
            "params": {"q": term},
            "headers": {
                "User-Agent": self.config.user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
            "timeout": self.config.timeout,
            "follow_redirects": self.config.follow_redirects,
        }

    @staticmethod
    def _fetch_error(term: str, error: Exception) -> FetchError:
        if isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
            return FetchError(f"search for {term!r} failed: HTTP {status}", status_code=status)
        return FetchError(f"search for {term!r} failed: {error}")


async def search(query: str, config: DictionaryConfig | None = None) -> Search:
    """Look up query and return the parsed result page.

    Falls back to :func:`load_config` when no config is given.
    """
    return await DictionaryClient(config or load_config()).search(query)


def search_sync(query: str, config: DictionaryConfig | None = None) -> Search:
    """Blocking variant of :func:`search`."""
    return DictionaryClient(config or load_config()).search_sync(query)
