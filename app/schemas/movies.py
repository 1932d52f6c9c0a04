"""Schemas for catalog proxy responses and the saved-movie list."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class MovieSummary(BaseModel):
    """One catalog movie reshaped from the TMDB payload."""

    id: int
    title: str | None = None
    overview: str | None = None
    year: str | None = Field(default=None, description="Year part of release_date")
    poster: str | None = Field(default=None, description="Absolute poster image URL")


class MovieDetails(MovieSummary):
    """Single movie with genre names."""

    genres: list[str] = Field(default_factory=list)


class MovieListResponse(BaseModel):
    """Response for search and trending."""

    results: list[MovieSummary]


class SaveMovieRequest(BaseModel):
    """Body for POST /movies/save. movie_id and title are checked by the service."""

    movie_id: int | None = None
    title: str | None = None
    year: str | None = None
    poster: str | None = None

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v: object) -> object:
        # Clients send the year as either "1999" or 1999.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class SavedMovieOut(BaseModel):
    """Persisted saved-movie row."""

    id: int
    user_id: int
    movie_id: int
    title: str
    year: str | None = None
    poster: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class SaveMovieResponse(BaseModel):
    movie: SavedMovieOut


class SavedMoviesResponse(BaseModel):
    movies: list[SavedMovieOut]


class MessageResponse(BaseModel):
    """Plain acknowledgement or error message."""

    message: str


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""

    message: str
    errors: list[FieldErrorOut] | None = None
