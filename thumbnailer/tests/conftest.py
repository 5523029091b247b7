from collections.abc import Callable
from pathlib import Path

import pytest

from thumbnailer.core.features import HEIF_ENV_VAR


@pytest.fixture(autouse=True)
def clear_heif_env(monkeypatch):
    """Keep the developer's environment from leaking into flag resolution."""
    monkeypatch.delenv(HEIF_ENV_VAR, raising=False)


@pytest.fixture(params=[False, True], ids=["heif-off", "heif-on"])
def heif(request) -> bool:
    return request.param


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Create a file of a given size (sparse, so large sizes are cheap)."""

    def _make_file(name: str, size: int = 16) -> Path:
        file_path: Path = tmp_path / name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "wb") as f:
            f.truncate(size)
        return file_path

    return _make_file


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[[str], Path]:
    def _config_file(content: str) -> Path:
        config_path: Path = tmp_path / "thumbnailer.yaml"
        config_path.write_text(content)
        return config_path

    return _config_file
