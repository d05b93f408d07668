"""
Remote dictionary lookup oracle.

Asks a dictionary HTTP API whether a word exists:
  - 200           -> recognized
  - 404           -> not recognized
  - anything else -> OracleUnavailable (so is a timeout or connection error)

Answers are cached per (language, word) for the life of the oracle; failures
are not cached.

Default endpoint is the free dictionaryapi.dev service:
    https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple
from urllib.parse import quote

import requests

from .base import OracleUnavailable, SpellingOracle, register

logger = logging.getLogger(__name__)

URL_TEMPLATE = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"


@register
class RemoteLookup(SpellingOracle):
    id = "remote"
    name = "Remote Lookup"

    def __init__(self, *, url_template: str = URL_TEMPLATE, timeout: float = 5.0,
                 session: requests.Session | None = None):
        self.url_template = url_template
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def is_recognized(self, word: str, language: str) -> bool:
        key = (language, word)
        if key in self._cache:
            return self._cache[key]

        url = self.url_template.format(language=quote(language), word=quote(word))
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            # Timeouts included; the caller decides whether to retry.
            raise OracleUnavailable(f"lookup failed for {word!r}: {e}") from e

        if r.status_code == 200:
            found = True
        elif r.status_code == 404:
            found = False
        else:
            raise OracleUnavailable(f"unexpected status {r.status_code} for {word!r}")

        logger.debug("Remote lookup %s/%s -> %s", language, word, found)
        self._cache[key] = found
        return found
