"""Alembic config — the shipped alembic.ini resolves the migration scripts.

Tests cover:
    - script_location points at backend/alembic
    - the revision chain has a single head, the initial schema
"""

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory

BACKEND_DIR = Path(__file__).resolve().parents[1]


def _config() -> Config:
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    return config


def test_ini_names_script_location():
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    assert config.get_main_option("script_location") == "alembic"


def test_single_head_is_initial_schema():
    script = ScriptDirectory.from_config(_config())
    assert list(script.get_heads()) == ["001_initial"]
