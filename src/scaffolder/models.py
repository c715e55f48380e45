"""Pydantic v2 value objects shared by the scaffolding engine.

Every model here is frozen: instances are built once per invocation and never
mutated afterwards.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field

from src.config import LayoutMode


_FROZEN = {"frozen": True}


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """Category of generated file. Declaration order is report order."""
    ROUTE = "route"
    CONTROLLER = "controller"
    MODEL = "model"
    INTERFACE = "interface"
    VALIDATION = "validation"
    SERVICE = "service"


# ---------------------------------------------------------------------------
# Naming & planning
# ---------------------------------------------------------------------------

class NameVariants(BaseModel):
    """Identifier forms derived from a single resource name."""

    model_config = _FROZEN

    lower: str = Field(..., description="Case-folded name, e.g. 'order'")
    capitalized: str = Field(..., description="First letter upper-cased, e.g. 'Order'")
    plural: str = Field(..., description="Display plural for comments, e.g. 'orders'")


class ResourceDescriptor(BaseModel):
    """The resource being scaffolded, as parsed from the raw input."""

    model_config = _FROZEN

    raw_input: str
    segments: tuple[str, ...] = Field(default=(), description="Nesting folders in input order and case")
    resource_name: str = Field(..., min_length=1)
    name_variants: NameVariants


class NestingContext(BaseModel):
    """How deep the resource sits below its tree root."""

    model_config = _FROZEN

    depth: int = Field(..., ge=0)
    segments: tuple[str, ...] = ()


class ResourcePlan(BaseModel):
    """Everything the catalog needs to render one resource.

    ``directories`` are relative to the configured output root.  ``up_traversal``
    maps each kind to the number of ``../`` steps from its directory to the
    source root that holds the shared infrastructure folders.
    """

    model_config = _FROZEN

    descriptor: ResourceDescriptor
    layout: LayoutMode
    nesting: NestingContext
    directories: dict[ArtifactKind, PurePosixPath]
    up_traversal: dict[ArtifactKind, int]

    @property
    def kinds(self) -> list[ArtifactKind]:
        """Kinds produced by this plan, in declaration order."""
        return [kind for kind in ArtifactKind if kind in self.directories]


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

class GeneratedArtifact(BaseModel):
    """One rendered file, held in memory until the materializer writes it."""

    model_config = _FROZEN

    kind: ArtifactKind
    absolute_path: Path
    relative_path: str = Field(..., description="POSIX path relative to the output root")
    content: str

    @property
    def encoded(self) -> bytes:
        return self.content.encode("utf-8")

    @property
    def byte_size(self) -> int:
        """Encoded length in bytes (not code points)."""
        return len(self.encoded)


class ReportEntry(BaseModel):
    """A single written file."""

    model_config = _FROZEN

    relative_path: str
    byte_size: int = Field(..., ge=0)

    def line(self) -> str:
        return f"CREATE {self.relative_path} ({self.byte_size} bytes)"


class GenerationReport(BaseModel):
    """Ordered manifest of every materialized artifact."""

    model_config = _FROZEN

    entries: tuple[ReportEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def lines(self) -> list[str]:
        """Render ``CREATE <relative-path> (<N> bytes)`` per entry."""
        return [entry.line() for entry in self.entries]

    @property
    def total_bytes(self) -> int:
        return sum(entry.byte_size for entry in self.entries)
