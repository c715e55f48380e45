"""Main scaffolding orchestrator.

Takes a raw resource path (``"order"`` or ``"billing/invoices/order"``) and a
``LayoutMode`` and generates the route, controller, model, interface,
validation and (optionally) service files for an Express + Mongoose + Zod
module.
"""

from __future__ import annotations

from typing import Optional

from src.config import GeneratorConfig, LayoutMode

from .catalog import TemplateCatalog
from .materializer import FileMaterializer
from .models import GeneratedArtifact, GenerationReport, ResourcePlan
from .planner import PathPlanner
from .templates import TemplateRenderer


class ResourceGenerator:
    """Main scaffolding orchestrator.

    One instance serves any number of invocations; it holds configuration
    only, never per-resource state.  Each ``generate`` call runs
    plan -> render -> write strictly in sequence.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.planner = PathPlanner(self.config)
        self.catalog = TemplateCatalog(self.config, renderer)
        self.materializer = FileMaterializer(self.config.output_root)

    # -- Public API --------------------------------------------------------

    def plan(self, raw_input: str, layout: Optional[LayoutMode] = None) -> ResourcePlan:
        """Plan the resource without rendering or writing anything."""
        return self.planner.plan(raw_input, layout or self.config.layout)

    def build_artifacts(
        self, raw_input: str, layout: Optional[LayoutMode] = None
    ) -> list[GeneratedArtifact]:
        """Plan and render every artifact in memory (nothing is written)."""
        return self.catalog.build(self.plan(raw_input, layout))

    def generate(
        self, raw_input: str, layout: Optional[LayoutMode] = None
    ) -> GenerationReport:
        """Generate and write every artifact for ``raw_input``.

        Args:
            raw_input: Resource path; folders before the last ``/`` become
                nesting segments.
            layout: Layout mode; defaults to ``config.layout``.

        Returns:
            The report of written files, in artifact-kind order.

        Raises:
            InvalidPathError: propagated unchanged from the planner.
            InvalidNameError: propagated unchanged from the name transformer.
            FilesystemError: a directory or file could not be written.  This
                is a non-transactional multi-file write: files written before
                the failure stay on disk and are listed in the error's
                ``report``.
        """
        artifacts = self.build_artifacts(raw_input, layout)
        return self.materializer.materialize(artifacts)
