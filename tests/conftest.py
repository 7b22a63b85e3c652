"""Pytest fixtures for boxtable tests."""

import pytest

from boxtable import Table
from boxtable.config import ENV_PREFIX

_ENV_VARS = (
    "PADDING",
    "HEADER_ALIGN_RIGHT",
    "ROW_ALIGN_RIGHT",
    "FOOTER_ALIGN_RIGHT",
    "CACHING_ENABLED",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Unset BOXTABLE_* variables so the host environment cannot leak into tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)


@pytest.fixture
def table() -> Table:
    """Create an empty table with default settings."""
    return Table()


@pytest.fixture
def people_table() -> Table:
    """Create a two-column table with a header and two matching rows."""
    return Table().set_headers("Name", "Age").add_row("John", "30").add_row("Jane", "25")
