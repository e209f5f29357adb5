import json
from pathlib import Path

import pytest

from shellcore.aliases import AliasTable
from shellcore.core import init_core


@pytest.fixture()
def table() -> AliasTable:
    return AliasTable()


@pytest.fixture()
def write_config(tmp_path: Path):
    def _write(cfg: dict) -> Path:
        path = tmp_path / "core.json"
        path.write_text(json.dumps(cfg), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def core(write_config):
    return init_core(write_config({"home_alias": False}))
