import requests
from typing import Dict, Any, List, Optional
from pydantic import ValidationError

from ..core.errors import TMDBRequestError
from ..core.schema import DetailResult, SearchHit, SearchResponse

DETAIL_MEDIA_TYPES = ("movie", "tv")


class TMDBAdapter:
    def __init__(self, token: str, base_url: str = "https://api.themoviedb.org/3", language: str = "en-US",
                 timeout: float = 30, proxy: Optional[Dict[str, str]] = None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.language = language
        self.timeout = timeout
        self.proxy = proxy
        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Authorization": f"Bearer {token}"
        })
        if proxy:
            self.session.proxies.update(proxy)

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a single API request; any failure is raised as TMDBRequestError."""
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise TMDBRequestError(f"Request to {endpoint} failed: {e}", endpoint) from e
        except ValueError as e:
            raise TMDBRequestError(f"Response from {endpoint} is not valid JSON: {e}", endpoint) from e

        if not isinstance(data, dict):
            raise TMDBRequestError(f"Unexpected response from {endpoint}: {type(data).__name__}", endpoint)
        return data

    def search_multi(self, term: str) -> List[SearchHit]:
        """Search movies, TV shows and people in one request (first page only)."""
        params = {
            "page": 1,
            "include_adult": "false",
            "language": self.language,
            "query": term
        }
        data = self._make_request("/search/multi", params)
        try:
            return SearchResponse.model_validate(data).results
        except ValidationError as e:
            raise TMDBRequestError(f"Malformed search response: {e}", "/search/multi") from e

    def get_details(self, tmdb_id: int, media_type: str) -> DetailResult:
        """Get the type-specific details of a movie or TV show."""
        if media_type not in DETAIL_MEDIA_TYPES:
            raise ValueError(f"Details are only available for {', '.join(DETAIL_MEDIA_TYPES)}, not {media_type!r}")

        endpoint = f"/{media_type}/{tmdb_id}"
        data = self._make_request(endpoint, {"language": self.language})
        try:
            return DetailResult.model_validate(data)
        except ValidationError as e:
            raise TMDBRequestError(f"Malformed detail response: {e}", endpoint) from e

    def close(self) -> None:
        self.session.close()
