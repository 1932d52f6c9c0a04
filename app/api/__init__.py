"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from app.api import auth, health, movies, saved_movies

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(saved_movies.router, tags=["saved movies"])
