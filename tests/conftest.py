"""
Shared pytest fixtures.

Provides:
- Settings isolation between tests
- Sample Size values
- In-memory SQLite engine
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from image_sizes.core.config import configure
from image_sizes.domain import MAX_DIMENSION, Orientation, Scale, Size


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore default library settings after each test."""
    yield
    configure(None)


@pytest.fixture
def thumbnail_size() -> Size:
    return Size.new_thumbnail(64, Scale.SM)


@pytest.fixture
def landscape_size() -> Size:
    return Size.new_landscape(1920, 1080, Scale.LG)


@pytest.fixture
def portrait_size() -> Size:
    return Size.new_portrait(800, 1200, Scale.MD)


@pytest.fixture
def sample_sizes(thumbnail_size, landscape_size, portrait_size) -> list[Size]:
    """Constructed sizes covering every orientation plus edge values."""
    return [
        thumbnail_size,
        landscape_size,
        portrait_size,
        Size.default(),
        Size.new_thumbnail(0, Scale.XXSM),
        Size.new_landscape(100, 400, Scale.XXLG),
        Size(Orientation.UNKNOWN, Scale.UNKNOWN, 320, 0),
        Size(Orientation.PORTRAIT, Scale.UNKNOWN, 2**40, 7),
        Size.new_thumbnail(MAX_DIMENSION, Scale.XLG),
    ]


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()
