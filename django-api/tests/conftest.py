"""Pytest configuration and shared fixtures."""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from cinema.domain import Movie
from cinema.services.context import CinemaContext


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def context() -> CinemaContext:
    """A freshly seeded cinema, independent of the one the app serves."""
    return CinemaContext.create()


@pytest.fixture
def inception() -> Movie:
    return Movie("Inception", "Sci-Fi", 148, "PG-13", "A mind-bending thriller.")


@pytest.fixture(autouse=True)
def reset_app_context():
    context = apps.get_app_config("cinema").context
    context.reset()
    yield
    context.reset()
