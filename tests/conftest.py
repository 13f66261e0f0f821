"""Shared pytest fixtures for ResFilter tests."""
import os
import tempfile
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Generator, List

import pytest
import yaml

from resfilter.infrastructure import config_manager, logger


class FakeResource:
    """Minimal resource that is not os.PathLike."""

    def __init__(self, name: str, path: str):
        self.name = name
        self._path = path

    def __str__(self) -> str:
        return self._path


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_dir(temp_dir: Path) -> Path:
    """Create a source directory with test files."""
    source = temp_dir / "source"
    source.mkdir()

    (source / "README.md").write_text("# Test README")
    (source / ".gitignore").write_text("build/")
    (source / "src").mkdir()
    (source / "src" / "Main.java").write_text("class Main {}")
    (source / "src" / "Util.kt").write_text("object Util")
    (source / "src" / "test").mkdir()
    (source / "src" / "test" / "MainTest.java").write_text("class MainTest {}")
    (source / ".hidden").mkdir()
    (source / ".hidden" / "secret.txt").write_text("Hidden file")

    return source


@pytest.fixture
def resources() -> List[PurePosixPath]:
    """Resources with a mix of hidden, mixed-case and nested names."""
    return [
        PurePosixPath("/project/.gitignore"),
        PurePosixPath("/project/README.md"),
        PurePosixPath("/project/src/Main.java"),
        PurePosixPath("/project/src/test/MainTest.java"),
        PurePosixPath("/project/src/backend_test"),
        PurePosixPath("/project/src/Config.XML"),
        PurePosixPath("/project/src/alpha"),
    ]


@pytest.fixture
def make_resource():
    """Factory for non-PathLike resources."""
    return FakeResource


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Provide a sample ResFilter configuration."""
    return {
        "resfilter": {
            "logging": {
                "level": "DEBUG",
                "file": None,
            },
            "filters": {
                "sources": {
                    "on": "paths",
                    "steps": [
                        {"ending": [".java", ".kt"]},
                        {"not_containing": "test"},
                    ],
                },
                "dotfiles": "hidden",
                "readme": {
                    "on": "case_sensitive_names",
                    "steps": [{"matching": "README.md"}],
                },
            },
        }
    }


@pytest.fixture
def config_file(temp_dir: Path, sample_config: Dict[str, Any]) -> Path:
    """Create a configuration file."""
    config_path = temp_dir / "resfilter.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset global instances and RESFILTER_* variables between tests."""
    for key in list(os.environ):
        if key.startswith("RESFILTER_"):
            monkeypatch.delenv(key)
    yield
    logger.set_global_logger(None)
    config_manager.set_global_config(None)
