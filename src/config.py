"""resgen configuration.

Centralised, typed configuration for the scaffolding engine. Settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import BaseModel, Field, field_validator


class LayoutMode(str, Enum):
    """Arrangement of generated artifacts and the cross-reference style between them.

    SPLIT_ROUTE_MODULE: routes live in their own ``routes/`` tree, every other
        artifact in ``modules/``; controllers hold inline placeholder logic.
    COLOCATED_WITHOUT_SERVICE: everything in one ``modules/`` folder, no
        service layer.
    COLOCATED_WITH_SERVICE: everything in one ``modules/`` folder, controllers
        delegate to a sibling service module.
    """
    SPLIT_ROUTE_MODULE = "split-route-module"
    COLOCATED_WITHOUT_SERVICE = "colocated"
    COLOCATED_WITH_SERVICE = "colocated-service"


class GeneratorConfig(BaseModel):
    """Where generated files land and how they reference each other.

    Instances are created once by the CLI entry point (or by tests) and passed
    explicitly to the generator; nothing in the engine reads the current
    working directory.
    """

    output_root: Path = Field(default=Path("."), description="Project root that receives the generated tree")
    source_dir: str = Field(default="src", description="Source root, holds helpers/, handlers/ and utils/")
    modules_dir: str = Field(default="modules", description="Module tree, relative to the source root")
    routes_dir: str = Field(default="routes", description="Route tree used by the split layout")
    api_prefix: str = Field(default="/api/v1", description="Mount prefix quoted in route doc comments")
    file_extension: str = Field(default=".ts")
    layout: LayoutMode = Field(default=LayoutMode.COLOCATED_WITH_SERVICE)

    model_config = {"frozen": True}

    @field_validator("source_dir", "modules_dir", "routes_dir")
    @classmethod
    def _relative_tree(cls, value: str) -> str:
        path = PurePosixPath(value.replace("\\", "/"))
        if not value.strip() or path.is_absolute() or ".." in path.parts:
            raise ValueError(f"must be a relative directory without '..': {value!r}")
        return path.as_posix()

    @field_validator("file_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must start with '.': {value!r}")
        return value

    @field_validator("api_prefix")
    @classmethod
    def _normalise_prefix(cls, value: str) -> str:
        return "/" + value.strip("/") if value.strip("/") else ""

    # ------------------------------------------------------------------
    # Derived paths (read-only properties), relative to ``output_root``
    # ------------------------------------------------------------------

    @property
    def source_root(self) -> PurePosixPath:
        """Directory holding the shared infrastructure folders."""
        return PurePosixPath(self.source_dir)

    @property
    def modules_root(self) -> PurePosixPath:
        """Root of the module tree (``src/modules`` by default)."""
        return self.source_root / self.modules_dir

    @property
    def routes_root(self) -> PurePosixPath:
        """Root of the route tree (``src/routes`` by default)."""
        return self.source_root / self.routes_dir

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            RESGEN_OUTPUT_ROOT, RESGEN_SOURCE_DIR, RESGEN_MODULES_DIR,
            RESGEN_ROUTES_DIR, RESGEN_API_PREFIX, RESGEN_LAYOUT.

        Keyword arguments whose value is not ``None`` take precedence over the
        environment.
        """
        env_map = {
            "output_root": "RESGEN_OUTPUT_ROOT",
            "source_dir": "RESGEN_SOURCE_DIR",
            "modules_dir": "RESGEN_MODULES_DIR",
            "routes_dir": "RESGEN_ROUTES_DIR",
            "api_prefix": "RESGEN_API_PREFIX",
            "layout": "RESGEN_LAYOUT",
        }
        kwargs: dict[str, Any] = {}
        for field_name, var in env_map.items():
            if os.environ.get(var):
                kwargs[field_name] = os.environ[var]
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
