"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    │   ├── domain/            # Aggregates, entities, ownership validation
    │   ├── application/       # Commands, queries, merge service (mocked repos)
    │   ├── infrastructure/    # SQLAlchemy repositories on in-memory SQLite
    │   └── config/
    ├── integration/
    │   └── cli/               # Typer commands against a temporary SQLite file
    ├── cross_domain/
    │   └── e2e/               # Full workflows: commands + real repositories
    └── shared/                # Shared fixtures and factories
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from makemeacube_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Every test sees settings built from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
