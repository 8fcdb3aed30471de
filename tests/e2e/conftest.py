"""
Shared fixtures for end-to-end tests.
"""

from pathlib import Path

import pytest

SCHEMAS_DIR = Path(__file__).parent.parent / "fixtures" / "schemas"


@pytest.fixture
def load_schema_text():
    """Return a loader for schema fixture files by name."""
    def _load(name: str) -> str:
        return (SCHEMAS_DIR / f"{name}.schema").read_text()
    return _load
