"""Target layout planning for a (possibly nested) resource path.

Given ``"billing/invoices/order"`` the planner produces the resource name
(``order``), the nesting segments (``billing``, ``invoices``), the directory
each artifact kind lands in, and the up-traversal count from each of those
directories back to the source root where the shared ``helpers/``,
``handlers/`` and ``utils/`` folders live.

The up-traversal count is ``depth + K``.  ``K`` is the number of path parts
between the source root and the resource folder's tree root, plus one for
the resource folder itself: with ``src/modules/<segments>/<name>`` that is
``len(("modules",)) + 1 == 2``.  The planner never checks that any of these
directories exist, so an off-by-one here yields generated imports that
silently point at the wrong place.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from src.config import GeneratorConfig, LayoutMode

from .errors import InvalidPathError
from .models import ArtifactKind, NestingContext, ResourceDescriptor, ResourcePlan
from .naming import derive_variants

SEPARATOR = "/"

# Kinds produced per layout, in report order.
LAYOUT_KINDS: dict[LayoutMode, tuple[ArtifactKind, ...]] = {
    LayoutMode.SPLIT_ROUTE_MODULE: (
        ArtifactKind.ROUTE,
        ArtifactKind.CONTROLLER,
        ArtifactKind.MODEL,
        ArtifactKind.INTERFACE,
        ArtifactKind.VALIDATION,
    ),
    LayoutMode.COLOCATED_WITHOUT_SERVICE: (
        ArtifactKind.ROUTE,
        ArtifactKind.CONTROLLER,
        ArtifactKind.MODEL,
        ArtifactKind.INTERFACE,
        ArtifactKind.VALIDATION,
    ),
    LayoutMode.COLOCATED_WITH_SERVICE: tuple(ArtifactKind),
}


def relative_prefix(count: int) -> str:
    """Render an up-traversal count as an import prefix.

    ``0`` gives ``"./"``, ``2`` gives ``"../../"``.
    """
    if count < 0:
        raise ValueError(f"up-traversal count must be >= 0, got {count}")
    if count == 0:
        return "./"
    return "../" * count


def split_resource_path(raw_input: str) -> tuple[tuple[str, ...], str]:
    """Split a raw resource path into ``(segments, leaf)``.

    Segments keep their input order and case; the leaf is returned untouched
    (name validation happens in :func:`derive_variants`).

    Raises:
        InvalidPathError: for empty input, input made only of separators, a
            trailing separator, or an empty / ``.`` / ``..`` segment.
    """
    text = raw_input.strip()
    if not text:
        raise InvalidPathError(raw_input, "resource path is empty")
    if not text.strip(SEPARATOR):
        raise InvalidPathError(raw_input, "resource path contains only separators")

    parts = text.split(SEPARATOR)
    leaf = parts[-1].strip()
    if not leaf:
        raise InvalidPathError(raw_input, "resource name after the last '/' is empty")

    segments = tuple(part.strip() for part in parts[:-1])
    for segment in segments:
        if not segment:
            raise InvalidPathError(raw_input, "empty folder segment")
        if segment in (".", ".."):
            raise InvalidPathError(raw_input, f"relative segment {segment!r} is not allowed")
    return segments, leaf


class PathPlanner:
    """Computes descriptors, target directories and up-traversal counts."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    def tree_offset(self, tree_root: PurePosixPath) -> int:
        """``K`` for a tree: parts between the source root and ``tree_root``, plus one."""
        relative = tree_root.relative_to(self.config.source_root)
        return len(relative.parts) + 1

    def up_traversal_count(self, depth: int, tree_root: PurePosixPath) -> int:
        """Number of ``../`` steps from ``<tree_root>/<segments>/<name>`` to the source root."""
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        return depth + self.tree_offset(tree_root)

    def plan(self, raw_input: str, layout: LayoutMode) -> ResourcePlan:
        """Plan the generated layout for ``raw_input`` under ``layout``.

        Raises:
            InvalidPathError: the raw input or its segment list is malformed.
            InvalidNameError: the leaf is not a valid resource name.
        """
        layout = LayoutMode(layout)
        segments, leaf = split_resource_path(raw_input)
        variants = derive_variants(leaf)
        descriptor = ResourceDescriptor(
            raw_input=raw_input,
            segments=segments,
            resource_name=variants.lower,
            name_variants=variants,
        )
        nesting = NestingContext(depth=len(segments), segments=segments)

        module_dir = self.config.modules_root.joinpath(*segments, descriptor.resource_name)
        module_ups = self.up_traversal_count(nesting.depth, self.config.modules_root)

        directories: dict[ArtifactKind, PurePosixPath] = {}
        up_traversal: dict[ArtifactKind, int] = {}
        for kind in LAYOUT_KINDS[layout]:
            if kind is ArtifactKind.ROUTE and layout is LayoutMode.SPLIT_ROUTE_MODULE:
                routes_root = self.config.routes_root
                directories[kind] = routes_root.joinpath(*segments, descriptor.resource_name)
                up_traversal[kind] = self.up_traversal_count(nesting.depth, routes_root)
            else:
                directories[kind] = module_dir
                up_traversal[kind] = module_ups

        return ResourcePlan(
            descriptor=descriptor,
            layout=layout,
            nesting=nesting,
            directories=directories,
            up_traversal=up_traversal,
        )
