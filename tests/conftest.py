"""Shared pytest fixtures for the create-hana test suite.

Provides reusable fixtures for:
- Resolved configs for each project type
- Freshly built (not yet generated) project contexts
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from hana.config import (
    BlankProjectConfig,
    NodeProjectConfig,
    ReactProjectConfig,
    VueProjectConfig,
    resolve_config,
)
from hana.scaffolder.context import ProjectContext
from hana.scaffolder.generator import ProjectGenerator


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------


@pytest.fixture
def react_ts_config() -> ReactProjectConfig:
    """React + TypeScript + Vite, no optional features."""
    return ReactProjectConfig(target_dir="react-app", language="typescript", build_tool="vite")


@pytest.fixture
def react_js_config() -> ReactProjectConfig:
    return ReactProjectConfig(target_dir="react-app", language="javascript", build_tool="vite")


@pytest.fixture
def vue_ts_config() -> VueProjectConfig:
    return VueProjectConfig(target_dir="vue-app", language="typescript", build_tool="vite")


@pytest.fixture
def node_ts_config() -> NodeProjectConfig:
    return NodeProjectConfig(target_dir="node-app", language="typescript")


@pytest.fixture
def blank_config() -> BlankProjectConfig:
    return BlankProjectConfig(target_dir="blank-app")


# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def make_context(tmp_path: Path) -> Callable[..., ProjectContext]:
    """Factory: build a context (with editors) the way the orchestrator does.

    Accepts either a config model or raw answer keyword arguments.
    """

    def _make(config: Any = None, **answers: Any) -> ProjectContext:
        resolved = resolve_config(config if config is not None else answers)
        return ProjectGenerator(resolved, cwd=tmp_path)._build_context()

    return _make
