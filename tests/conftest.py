import pytest

from config import ApplicationConfig


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Lowest bcrypt cost so hashing does not dominate the suite"""
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)
