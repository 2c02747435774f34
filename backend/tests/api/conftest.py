"""Routing test fixtures - app built around in-memory fake repositories.

Invariants:
    - Every test gets fresh fakes and a fresh app from create_app()
    - No database is touched; repositories are injected as providers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from shelter_api.main import create_app
from tests.api.fake_repositories import FakeRepository


@pytest.fixture
def adopter_repo():
    return FakeRepository(
        records=[
            {"id": 1, "name": "Ada Lovelace", "email": "ada@example.com"},
            {"id": 2, "name": "Bo Peep", "email": None},
        ],
        related={
            "1": [{"id": 10, "name": "Rex", "breed": "Beagle", "adopter_id": 1}],
        },
    )


@pytest.fixture
def dog_repo():
    return FakeRepository(
        records=[
            {"id": 10, "name": "Rex", "breed": "Beagle", "adopter_id": 1},
            {"id": 11, "name": "Fido", "breed": "Mutt", "adopter_id": None},
        ],
    )


@pytest.fixture
def shelter_app(adopter_repo, dog_repo):
    return create_app(
        adopter_repository=lambda: adopter_repo,
        dog_repository=lambda: dog_repo,
    )


@pytest.fixture
async def client(shelter_app):
    async with AsyncClient(
        transport=ASGITransport(app=shelter_app), base_url="http://test",
    ) as c:
        yield c
