"""resgen scaffolder -- generates boilerplate files for a REST resource.

This module takes a resource path such as ``"user"`` or
``"billing/invoices/order"`` and renders the route, controller, model,
interface, validation and service files of an Express + Mongoose + Zod
module, in one of three layouts.

Quick usage::

    from src.config import GeneratorConfig, LayoutMode
    from src.scaffolder import ResourceGenerator

    generator = ResourceGenerator(GeneratorConfig(output_root="/tmp/api"))
    report = generator.generate("billing/invoices/order", LayoutMode.COLOCATED_WITH_SERVICE)
    for line in report.lines():
        print(line)
"""

from src.scaffolder.catalog import TemplateCatalog
from src.scaffolder.errors import (
    FilesystemError,
    InvalidNameError,
    InvalidPathError,
    MissingTemplateError,
    ScaffoldError,
)
from src.scaffolder.generator import ResourceGenerator
from src.scaffolder.materializer import FileMaterializer
from src.scaffolder.models import (
    ArtifactKind,
    GeneratedArtifact,
    GenerationReport,
    NameVariants,
    ReportEntry,
    ResourceDescriptor,
    ResourcePlan,
)
from src.scaffolder.naming import derive_variants
from src.scaffolder.planner import PathPlanner
from src.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactKind",
    "FileMaterializer",
    "FilesystemError",
    "GeneratedArtifact",
    "GenerationReport",
    "InvalidNameError",
    "InvalidPathError",
    "MissingTemplateError",
    "NameVariants",
    "PathPlanner",
    "ReportEntry",
    "ResourceDescriptor",
    "ResourceGenerator",
    "ResourcePlan",
    "ScaffoldError",
    "TemplateCatalog",
    "TemplateRenderer",
    "derive_variants",
]
