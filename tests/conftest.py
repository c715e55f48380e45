"""Shared pytest fixtures for the resgen test suite.

Provides reusable fixtures for:
- A clean environment (no ``RESGEN_*`` variables leaking in)
- Temporary project roots and matching configurations
- Pre-built generators, planners and catalogs
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from src.config import GeneratorConfig, LayoutMode
from src.scaffolder import PathPlanner, ResourceGenerator, TemplateCatalog


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip every ``RESGEN_*`` variable so tests see default configuration."""
    for key in list(os.environ):
        if key.startswith("RESGEN_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary project root that receives ``src/`` (auto-cleanup)."""
    project_dir = tmp_path / "api-project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def config(tmp_project_dir: Path) -> GeneratorConfig:
    """Default configuration pointed at the temporary project root."""
    return GeneratorConfig(output_root=tmp_project_dir)


@pytest.fixture
def planner(config: GeneratorConfig) -> PathPlanner:
    return PathPlanner(config)


@pytest.fixture
def catalog(config: GeneratorConfig) -> TemplateCatalog:
    return TemplateCatalog(config)


@pytest.fixture
def generator(config: GeneratorConfig) -> ResourceGenerator:
    return ResourceGenerator(config)


@pytest.fixture(params=list(LayoutMode), ids=lambda mode: mode.value)
def layout(request: pytest.FixtureRequest) -> LayoutMode:
    """Parametrizes a test over every layout mode."""
    return request.param
