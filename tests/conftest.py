import pytest

from cardcheck.config import Settings


@pytest.fixture
def config() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def not_found_response() -> dict:
    """Scryfall's error object for a search with no results."""
    return {
        "object": "error",
        "code": "not_found",
        "status": 404,
        "details": "Your query didn't match any cards. Adjust your search terms or refer to the syntax guide at https://scryfall.com/docs/reference",
    }
