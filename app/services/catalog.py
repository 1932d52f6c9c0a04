"""Catalog proxy: query TMDB and reshape results into the API's movie schema."""

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import UpstreamError
from app.schemas.movies import MovieDetails, MovieSummary

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

SEARCH_FAILED = "movies search failed"
TRENDING_FAILED = "trending fetch failed"
DETAILS_FAILED = "movie details failed"


def _year_from_release_date(release_date: Any) -> str | None:
    """'1999-03-31' -> '1999'; missing or empty dates give None."""
    if not release_date or not isinstance(release_date, str):
        return None
    return release_date.split("-")[0] or None


def _poster_url(image_base_url: str, poster_path: Any) -> str | None:
    if not poster_path or not isinstance(poster_path, str):
        return None
    return f"{image_base_url.rstrip('/')}/{poster_path.lstrip('/')}"


def to_movie_summary(item: dict[str, Any], image_base_url: str) -> MovieSummary:
    """Reshape one TMDB movie object to {id, title, overview, year, poster}."""
    return MovieSummary(
        id=item.get("id"),
        title=item.get("title"),
        overview=item.get("overview"),
        year=_year_from_release_date(item.get("release_date")),
        poster=_poster_url(image_base_url, item.get("poster_path")),
    )


def to_movie_details(item: dict[str, Any], image_base_url: str) -> MovieDetails:
    """Reshape a TMDB movie details object; adds genre names."""
    summary = to_movie_summary(item, image_base_url)
    raw_genres = item.get("genres")
    genres = [
        g["name"]
        for g in (raw_genres if isinstance(raw_genres, list) else [])
        if isinstance(g, dict) and isinstance(g.get("name"), str)
    ]
    return MovieDetails(**summary.model_dump(), genres=genres)


class CatalogClient:
    """
    Read-only TMDB client sharing one httpx.AsyncClient for the whole process.

    Every failure (connection, timeout, non-2xx, bad body) is logged with the
    upstream detail and re-raised as UpstreamError with a generic message.
    """

    def __init__(self, http: httpx.AsyncClient, settings: "Settings") -> None:
        self._http = http
        self._base_url = settings.TMDB_BASE_URL.rstrip("/")
        self._image_base_url = settings.TMDB_IMAGE_BASE_URL
        self._api_key = settings.TMDB_API_KEY.get_secret_value()
        self._language = settings.TMDB_LANGUAGE

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CatalogClient":
        http = httpx.AsyncClient(timeout=httpx.Timeout(settings.TMDB_REQUEST_TIMEOUT_SEC))
        return cls(http, settings)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get(
        self,
        path: str,
        operation: str,
        failure_message: str,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        query = {"api_key": self._api_key, "language": self._language}
        if params:
            query.update(params)
        start = time.perf_counter()

        try:
            response = await self._http.get(url, params=query)
        except httpx.TimeoutException as e:
            elapsed = time.perf_counter() - start
            logger.error(
                "TMDB %s request timed out after %.2fs: %s",
                operation,
                elapsed,
                str(e)[:500],
                extra={"operation": operation, "latency_seconds": elapsed},
            )
            raise UpstreamError(failure_message) from e
        except httpx.HTTPError as e:
            elapsed = time.perf_counter() - start
            logger.error(
                "TMDB %s request failed after %.2fs: %s: %s",
                operation,
                elapsed,
                type(e).__name__,
                str(e)[:500],
                extra={"operation": operation, "latency_seconds": elapsed},
            )
            raise UpstreamError(failure_message) from e

        if response.status_code < 200 or response.status_code >= 300:
            upstream_body = (response.text or "")[:500]
            logger.error(
                "TMDB %s returned %s: %s",
                operation,
                response.status_code,
                upstream_body,
                extra={
                    "operation": operation,
                    "upstream_status": response.status_code,
                    "upstream_body": upstream_body,
                },
            )
            raise UpstreamError(failure_message)

        try:
            body = response.json()
        except ValueError as e:
            # JSONDecodeError, or UnicodeDecodeError for bodies that are not valid text.
            logger.error(
                "TMDB %s response body is not valid JSON (%s): %s",
                operation,
                type(e).__name__,
                (response.text or "")[:500],
                extra={"operation": operation},
            )
            raise UpstreamError(failure_message) from e
        if not isinstance(body, dict):
            logger.error(
                "TMDB %s response is not a JSON object: %s",
                operation,
                type(body).__name__,
                extra={"operation": operation},
            )
            raise UpstreamError(failure_message)

        logger.debug(
            "TMDB %s request completed in %.2fs",
            operation,
            time.perf_counter() - start,
            extra={"operation": operation},
        )
        return body

    def _reshape_results(
        self,
        body: dict[str, Any],
        operation: str,
        failure_message: str,
    ) -> list[MovieSummary]:
        results = body.get("results")
        if not isinstance(results, list):
            logger.error(
                "TMDB %s response missing 'results' list; keys: %s",
                operation,
                sorted(body)[:20],
                extra={"operation": operation},
            )
            raise UpstreamError(failure_message)
        try:
            return [to_movie_summary(item, self._image_base_url) for item in results]
        except (AttributeError, TypeError, PydanticValidationError) as e:
            logger.error(
                "TMDB %s result item does not match expected shape: %s",
                operation,
                str(e)[:500],
                extra={"operation": operation},
            )
            raise UpstreamError(failure_message) from e

    async def search(self, query: str) -> list[MovieSummary]:
        """Movies matching a free-text title query."""
        body = await self._get("/search/movie", "search", SEARCH_FAILED, {"query": query})
        return self._reshape_results(body, "search", SEARCH_FAILED)

    async def trending(self) -> list[MovieSummary]:
        """This week's trending movies."""
        body = await self._get("/trending/movie/week", "trending", TRENDING_FAILED)
        return self._reshape_results(body, "trending", TRENDING_FAILED)

    async def details(self, movie_id: int) -> MovieDetails:
        """Full record for one movie id."""
        body = await self._get(f"/movie/{movie_id}", "details", DETAILS_FAILED)
        try:
            return to_movie_details(body, self._image_base_url)
        except (AttributeError, TypeError, PydanticValidationError) as e:
            logger.error(
                "TMDB details payload does not match expected shape: %s",
                str(e)[:500],
                extra={"operation": "details"},
            )
            raise UpstreamError(DETAILS_FAILED) from e
