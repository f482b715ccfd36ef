"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from seasonboard.models import Competitor
from tests.conftest import SAMPLE_DRIVER_ROOKIE, SAMPLE_DRIVER_VER

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


@pytest.fixture
def verstappen() -> Competitor:
    return Competitor.model_validate(SAMPLE_DRIVER_VER)


@pytest.fixture
def rookie() -> Competitor:
    """Competitor with no averages, no team and no round data."""
    return Competitor.model_validate(SAMPLE_DRIVER_ROOKIE)
