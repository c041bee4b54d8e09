import logging
from typing import Any, Dict

import requests

from ..exceptions import MovieLookupError, MovieNotFoundError

logger = logging.getLogger(__name__)

OMDB_URL = "http://www.omdbapi.com/"


class OmdbClient:
    """
    Thin wrapper around the OMDb title lookup.

    One GET per call, no caching and no retries.
    """

    def __init__(self, api_key: str, base_url: str = OMDB_URL, timeout: float = 10.0):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def get_by_title(self, title: str) -> Dict[str, Any]:
        """
        Fetch the full OMDb record for a title.

        :raises MovieNotFoundError: OMDb answered but has no match
        :raises MovieLookupError: network failure or a body that isn't JSON
        """
        if not title or not title.strip():
            raise MovieLookupError("No movie title provided")

        params = {"t": title.strip(), "apikey": self.api_key, "plot": "full"}
        logger.debug(f"OMDb lookup: t={params['t']!r}")

        try:
            resp = requests.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise MovieLookupError(f"OMDb request failed: {e}") from e
        except ValueError as e:
            raise MovieLookupError(f"OMDb returned a malformed response: {e}") from e

        if not isinstance(data, dict):
            raise MovieLookupError("OMDb returned a malformed response")

        if data.get("Response") != "True":
            raise MovieNotFoundError(data.get("Error") or f"No OMDb match for '{title}'")

        return data
