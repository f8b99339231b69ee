"""
Pytest configuration and shared fixtures for the perfrouter test suite.

This module provides a throwaway monitoring host layout (live perfdata
directory plus optional spool directories) and helpers to inspect it.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import List

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from perfrouter.models import RouterConfig  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def monitor_var(temp_dir):
    """Stand-in for /opt/monitor/var."""
    var_dir = temp_dir / "var"
    var_dir.mkdir()
    return var_dir


@pytest.fixture
def make_config(monitor_var):
    """
    Factory for a RouterConfig rooted in the temporary layout.

    Spool directories are created only when requested, since their existence
    is what switches routing on.
    """

    def _make(spool_a: bool = True, spool_b: bool = True) -> RouterConfig:
        config = RouterConfig(
            live_base_dir=monitor_var,
            spool_a_dir=monitor_var / "nagfluxspool" / "perfdata",
            spool_b_dir=monitor_var / "spool" / "perfdata",
        )
        if spool_a:
            config.spool_a_dir.mkdir(parents=True)
        if spool_b:
            config.spool_b_dir.mkdir(parents=True)
        return config

    return _make


@pytest.fixture
def write_live_file(monitor_var):
    """Factory writing the live perfdata file for a category."""

    def _write(category: str = "host", content: bytes = b"") -> Path:
        live_file = monitor_var / f"{category}-perfdata"
        live_file.write_bytes(content)
        return live_file

    return _write


@pytest.fixture
def host_perfdata():
    """A few lines in the shape Naemon writes host perfdata."""
    return (
        b"DATATYPE::HOSTPERFDATA\tTIMET::1543412003\tHOSTNAME::web01\t"
        b"HOSTPERFDATA::rta=0.052ms;3000.000;5000.000;0; pl=0%;80;100;;\t"
        b"HOSTCHECKCOMMAND::check-host-alive\tHOSTSTATE::UP\tHOSTSTATETYPE::HARD\n"
        b"DATATYPE::HOSTPERFDATA\tTIMET::1543412003\tHOSTNAME::db01\t"
        b"HOSTPERFDATA::rta=0.113ms;3000.000;5000.000;0; pl=0%;80;100;;\t"
        b"HOSTCHECKCOMMAND::check-host-alive\tHOSTSTATE::UP\tHOSTSTATETYPE::HARD\n"
    )


class LayoutInspector:
    """Helpers for asserting on the temporary layout."""

    @staticmethod
    def snapshots(var_dir: Path, category: str = "host") -> List[Path]:
        return sorted(var_dir.glob(f"{category}-perfdata-*"))

    @staticmethod
    def files_in(directory: Path) -> List[str]:
        if not directory.is_dir():
            return []
        return sorted(p.name for p in directory.iterdir())


@pytest.fixture
def layout():
    """Provide layout inspection helpers."""
    return LayoutInspector


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    yield

    from perfrouter.config import clear_config_cache

    clear_config_cache()
