"""Shared fixtures: a small basic palette and an isolated environment."""

import json
from pathlib import Path

import pytest
from colour_tool.core import env
from colour_tool.core.palette import Palette

BASIC = {
    'name': 'basic',
    'desc': 'Basic colours',
    'entries': [
        {'defn': '#000', 'name': 'black'},
        {'defn': '#fff', 'name': 'white'},
        {'defn': 'lab(50 75 65)', 'name': 'red'},
        {'defn': 'lab(50 -50 50)', 'name': 'green'},
        {'defn': 'lab(95 -15 90)', 'name': 'yellow'},
        {'defn': 'lab(50 15 -75)', 'name': 'blue'},
        {'defn': 'lab(35 35 35)', 'name': 'brown'},
        {'defn': 'lab(60 40 65)', 'name': 'orange'},
        {'defn': 'lab(30 50 -30)', 'name': 'purple'},
        {'defn': 'lab(80 20 5)', 'name': 'pink'},
        {'defn': '#999', 'name': 'grey'},
        {'defn': 'lab(60 -40 0)', 'name': 'teal'},
    ],
}


@pytest.fixture
def basic() -> Palette:
    return Palette.parse_json(BASIC)


@pytest.fixture
def basic_file(tmp_path: Path) -> Path:
    path = tmp_path / 'basic.palette'
    path.write_text(json.dumps(BASIC), encoding='utf-8')
    return path


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no .env above it, no default format and an empty palette path."""
    work = tmp_path / 'work'
    work.mkdir()
    (work / '.git').mkdir()
    # setenv first: delenv only records variables that already exist
    monkeypatch.setenv(env.FORMAT_VAR, '')
    monkeypatch.delenv(env.FORMAT_VAR)
    monkeypatch.setenv(env.PALETTE_PATH_VAR, str(work / 'palettes'))
    monkeypatch.chdir(work)
    return work
