"""Catalog proxy endpoints: search, trending and details from TMDB."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_catalog_client
from app.core.errors import ValidationError
from app.schemas.movies import ErrorResponse, MovieDetails, MovieListResponse
from app.services.catalog import CatalogClient

router = APIRouter()


@router.get(
    "/search",
    response_model=MovieListResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_movies(
    catalog: Annotated[CatalogClient, Depends(get_catalog_client)],
    query: str | None = None,
) -> MovieListResponse:
    """Search TMDB by title."""
    if not query or not query.strip():
        raise ValidationError(
            "query is required",
            errors=[{"field": "query", "message": "query is required"}],
        )
    return MovieListResponse(results=await catalog.search(query.strip()))


@router.get("/trending", response_model=MovieListResponse, responses={500: {"model": ErrorResponse}})
async def trending_movies(
    catalog: Annotated[CatalogClient, Depends(get_catalog_client)],
) -> MovieListResponse:
    """This week's trending movies on TMDB."""
    return MovieListResponse(results=await catalog.trending())


@router.get(
    "/details/{movie_id}",
    response_model=MovieDetails,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def movie_details(
    movie_id: int,
    catalog: Annotated[CatalogClient, Depends(get_catalog_client)],
) -> MovieDetails:
    return await catalog.details(movie_id)
