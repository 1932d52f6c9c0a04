"""Marquee API: TMDB search and personal saved-movie lists behind JWT auth."""
