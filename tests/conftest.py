"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import Settings
from src.catalog.models import Catalog, Section, Topic
from src.engagement import InteractionStore, MemoryBackend


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


def make_topic(topic_id: str, category: str, view_count: int = 0, n_sections: int = 2) -> Topic:
    """Build a topic with placeholder sections."""
    return Topic(
        id=topic_id,
        title=f"Topic {topic_id}",
        category=category,
        sections=tuple(
            Section(title=f"Part {i + 1}", text=f"{topic_id} body {i + 1}")
            for i in range(n_sections)
        ),
        view_count=view_count,
    )


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def topic_factory():
    """Provide make_topic to tests that need custom catalogs."""
    return make_topic


@pytest.fixture
def sample_topics():
    """
    Seven topics over five categories.

    Views include a three-way tie at 300 (hea-1, sci-2, hea-2) to exercise
    catalog-order tie-breaking.
    """
    return [
        make_topic("sci-1", "Science", 100),
        make_topic("hea-1", "Health", 300),
        make_topic("env-1", "Environment", 200),
        make_topic("sci-2", "Science", 300),
        make_topic("tec-1", "Technology", 50),
        make_topic("hea-2", "Health", 300, n_sections=3),
        make_topic("soc-1", "Society", 10),
    ]


@pytest.fixture
def catalog(sample_topics):
    """Provide the sample catalog."""
    return Catalog(sample_topics)


@pytest.fixture
def store():
    """Provide an interaction store backed by memory."""
    return InteractionStore(MemoryBackend())


@pytest.fixture
def settings(tmp_path):
    """Default tuning with user data redirected to a temp dir."""
    return Settings(user_data_path=tmp_path / "user_data.json")
