"""
Pytest configuration for rustgate tests.

Every test starts from a clean process state: no rustgate environment
variables, no cached config or toolchain version, and a fresh logger.
"""

import os

import pytest

from rustgate.config.config import Config
from rustgate.selectors import MinVerGuard
from rustgate.toolchain import parse_version, reset_version_cache
from rustgate.utils.logger import setup_logger


ENV_VARS = ("RUSTC", "RUSTGATE_LOG_LEVEL", "RUSTGATE_LOG_DIR", "RUSTGATE_ATTR_NAMESPACE")


@pytest.fixture(autouse=True)
def clean_state(monkeypatch, tmp_path):
    """Isolate environment, working directory and process-wide caches."""
    # .env loading writes into os.environ; give each test its own copy
    monkeypatch.setattr(os, "environ", os.environ.copy())
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

    Config.reset()
    reset_version_cache()
    setup_logger("", "WARNING")
    yield
    Config.reset()
    reset_version_cache()


@pytest.fixture
def guard() -> MinVerGuard:
    """Fresh minimum-version holder for one simulated build run."""
    return MinVerGuard()


@pytest.fixture
def stable_133():
    """rustc 1.33.0 stable."""
    return parse_version("rustc 1.33.0 (2aa4c46cf 2019-02-28)")


@pytest.fixture
def beta_135():
    """rustc 1.35.0 beta."""
    return parse_version("rustc 1.35.0-beta.3 (c13114dc8 2019-04-27)")


@pytest.fixture
def nightly_136():
    """rustc 1.36.0 nightly of 2019-04-27."""
    return parse_version("rustc 1.36.0-nightly (938d4ffe1 2019-04-27)")


@pytest.fixture
def dev_136():
    """rustc 1.36.0 built from source (no date)."""
    return parse_version("rustc 1.36.0-dev")
