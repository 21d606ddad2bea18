"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, temporary configurations and singleton
resets so tests are isolated and safe.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="utilkit_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Temp directories created under this config land in temp_dir/scratch.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    scratch_dir = temp_dir / "scratch"
    scratch_dir.mkdir()

    logs_dir = temp_dir / "logs"
    logs_dir.mkdir()

    config_data = {
        "paths": {
            "temp_directory": str(scratch_dir),
            "logs_directory": str(logs_dir)
        },
        "files": {
            "temp_dir_attempts": 5,
            "buffer_size": 4096
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from utilkit.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from utilkit.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False


@pytest.fixture
def scratch_config(temp_config, reset_config_singleton):
    """
    Load the temp config so file helpers write under temp_dir/scratch.

    Yields:
        Path of the scratch directory.
    """
    from utilkit.core.config_loader import get_config
    config = get_config(temp_config)
    yield config.paths.temp_directory
