from typing import Generator

import pytest
from fastapi.testclient import TestClient

from novasearch.main import app


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """One TestClient for the whole session; the lifespan runs once."""
    with TestClient(app) as c:
        yield c
