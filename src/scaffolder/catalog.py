"""Artifact catalog: which files a resource gets and how each is rendered.

The catalog is configuration plus one generic renderer:

- ``CRUD_OPERATIONS`` describes the eight CRUD shapes once.  Route,
  controller and service templates loop over it instead of repeating the
  same block eight times.
- ``ROUTE_ORDER`` fixes the order routes are registered in.  Express matches
  routes in declaration order, so every literal ``/many`` route must come
  before the ``/:id`` route of the same verb or ``"many"`` is captured as an
  id.
- ``ARTIFACT_SPECS`` maps each kind to its file-name rule and the template
  used for each layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from src.config import GeneratorConfig, LayoutMode

from .errors import MissingTemplateError
from .models import (
    ArtifactKind,
    GeneratedArtifact,
    NameVariants,
    ResourceDescriptor,
    ResourcePlan,
)
from .planner import relative_prefix
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# CRUD operation table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CrudOperation:
    """One CRUD shape shared by the route, controller and service artifacts.

    Text fields are ``str.format`` patterns over ``name``, ``Name`` and
    ``plural``.
    """

    key: str
    method: str
    verb: str
    handler: str
    status: int
    description: str
    todo: str
    request_doc: str
    message: str
    many: bool = False
    by_id: bool = False
    service_args: str = ""
    returns_result: bool = True

    def url(self, name: str) -> str:
        suffix = "/many" if self.many else "/:id" if self.by_id else ""
        return f"/{self.verb}-{name}{suffix}"


CRUD_OPERATIONS: tuple[CrudOperation, ...] = (
    CrudOperation(
        key="create",
        method="post",
        verb="create",
        handler="create{Name}",
        status=201,
        description="Create a new {name}",
        todo="create a new {name}",
        request_doc="The request object containing {name} data in the body.",
        message="{Name} created successfully",
        service_args="req.body",
    ),
    CrudOperation(
        key="create_many",
        method="post",
        verb="create",
        handler="createMany{Name}",
        status=201,
        description="Create multiple {plural}",
        todo="create multiple {plural}",
        request_doc="The request object containing an array of {name} data in the body.",
        message="Resources created successfully",
        many=True,
        service_args="req.body",
    ),
    CrudOperation(
        key="update",
        method="put",
        verb="update",
        handler="update{Name}",
        status=200,
        description="Update {name} information",
        todo="update a single {name} by ID",
        request_doc="The request object containing the ID of the {name} to update in URL parameters and the updated data in the body.",
        message="{Name} updated successfully",
        by_id=True,
        service_args="id, req.body",
    ),
    CrudOperation(
        key="update_many",
        method="put",
        verb="update",
        handler="updateMany{Name}",
        status=200,
        description="Update multiple {plural}",
        todo="update multiple {plural}",
        request_doc="The request object containing an array of {name} data in the body.",
        message="Resources updated successfully",
        many=True,
        service_args="req.body",
    ),
    CrudOperation(
        key="delete",
        method="delete",
        verb="delete",
        handler="delete{Name}",
        status=200,
        description="Delete a {name}",
        todo="delete a single {name} by ID",
        request_doc="The request object containing the ID of the {name} to delete in URL parameters.",
        message="{Name} deleted successfully",
        by_id=True,
        service_args="id",
        returns_result=False,
    ),
    CrudOperation(
        key="delete_many",
        method="delete",
        verb="delete",
        handler="deleteMany{Name}",
        status=200,
        description="Delete multiple {plural}",
        todo="delete multiple {plural}",
        request_doc="The request object containing an array of IDs of {plural} to delete in the body.",
        message="Resources deleted successfully",
        many=True,
        service_args="req.body",
        returns_result=False,
    ),
    CrudOperation(
        key="get_by_id",
        method="get",
        verb="get",
        handler="get{Name}ById",
        status=200,
        description="Get a {name} by ID",
        todo="get a single {name} by ID",
        request_doc="The request object containing the ID of the {name} to retrieve in URL parameters.",
        message="{Name} retrieved successfully",
        by_id=True,
        service_args="id",
    ),
    CrudOperation(
        key="get_many",
        method="get",
        verb="get",
        handler="getMany{Name}",
        status=200,
        description="Get multiple {plural}",
        todo="get multiple {plural}",
        request_doc="The request object containing query parameters for filtering.",
        message="Resources retrieved successfully",
        many=True,
        service_args="req.query",
    ),
)

ROUTE_ORDER: tuple[str, ...] = (
    "create",
    "create_many",
    "update_many",
    "update",
    "delete_many",
    "delete",
    "get_many",
    "get_by_id",
)


# ---------------------------------------------------------------------------
# Artifact table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ArtifactSpec:
    """File-name rule and per-layout template for one artifact kind."""

    file_name: str
    template: str
    layout_templates: dict[LayoutMode, str] = field(default_factory=dict)
    layout_file_names: dict[LayoutMode, str] = field(default_factory=dict)

    def template_for(self, layout: LayoutMode) -> str:
        return self.layout_templates.get(layout, self.template)

    def templates(self) -> set[str]:
        return {self.template, *self.layout_templates.values()}

    def file_name_for(self, layout: LayoutMode, name: str, extension: str) -> str:
        pattern = self.layout_file_names.get(layout, self.file_name)
        return pattern.format(name=name, ext=extension)


ARTIFACT_SPECS: dict[ArtifactKind, ArtifactSpec] = {
    ArtifactKind.ROUTE: ArtifactSpec(
        file_name="{name}.route{ext}",
        template="express/route.ts.j2",
        layout_file_names={LayoutMode.SPLIT_ROUTE_MODULE: "index{ext}"},
    ),
    ArtifactKind.CONTROLLER: ArtifactSpec(
        file_name="{name}.controller{ext}",
        template="express/controller_inline.ts.j2",
        layout_templates={LayoutMode.COLOCATED_WITH_SERVICE: "express/controller_service.ts.j2"},
    ),
    ArtifactKind.MODEL: ArtifactSpec(
        file_name="{name}.model{ext}",
        template="express/model.ts.j2",
    ),
    ArtifactKind.INTERFACE: ArtifactSpec(
        file_name="{name}.interface{ext}",
        template="express/interface.ts.j2",
    ),
    ArtifactKind.VALIDATION: ArtifactSpec(
        file_name="{name}.validation{ext}",
        template="express/validation.ts.j2",
    ),
    ArtifactKind.SERVICE: ArtifactSpec(
        file_name="{name}.service{ext}",
        template="express/service.ts.j2",
    ),
}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Turns a planned resource into rendered artifacts.

    ``render`` is total: every input it can receive has already been
    validated by the planner and the name transformer.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self._check_templates()

    # -- Public API --------------------------------------------------------

    def file_name(self, kind: ArtifactKind, descriptor: ResourceDescriptor, layout: LayoutMode) -> str:
        return ARTIFACT_SPECS[kind].file_name_for(
            layout, descriptor.resource_name, self.config.file_extension
        )

    def render(
        self,
        kind: ArtifactKind,
        descriptor: ResourceDescriptor,
        name_variants: NameVariants,
        up_traversal: int,
        layout: LayoutMode,
    ) -> str:
        """Render the content of one artifact."""
        layout = LayoutMode(layout)
        context = self._build_context(descriptor, name_variants, up_traversal, layout)
        return self.renderer.render(ARTIFACT_SPECS[kind].template_for(layout), context)

    def build(self, plan: ResourcePlan) -> list[GeneratedArtifact]:
        """Render every artifact of ``plan`` in declaration order."""
        descriptor = plan.descriptor
        artifacts: list[GeneratedArtifact] = []
        for kind in plan.kinds:
            relative = plan.directories[kind] / self.file_name(kind, descriptor, plan.layout)
            content = self.render(
                kind,
                descriptor,
                descriptor.name_variants,
                plan.up_traversal[kind],
                plan.layout,
            )
            artifacts.append(
                GeneratedArtifact(
                    kind=kind,
                    absolute_path=Path(self.config.output_root).joinpath(*relative.parts).absolute(),
                    relative_path=relative.as_posix(),
                    content=content,
                )
            )
        return artifacts

    def _check_templates(self) -> None:
        """Fail at construction, not mid-write, when a template file is absent."""
        required = set().union(*(spec.templates() for spec in ARTIFACT_SPECS.values()))
        missing = sorted(required - set(self.renderer.list_templates()))
        if missing:
            raise MissingTemplateError(self.renderer.template_dir, missing)

    # -- Context building --------------------------------------------------

    def _build_context(
        self,
        descriptor: ResourceDescriptor,
        variants: NameVariants,
        up_traversal: int,
        layout: LayoutMode,
    ) -> dict[str, Any]:
        """Build the Jinja2 context for one artifact."""
        infra = relative_prefix(up_traversal)
        if layout is LayoutMode.SPLIT_ROUTE_MODULE:
            module_parts = [self.config.modules_dir, *descriptor.segments, descriptor.resource_name]
            module_prefix = infra + "/".join(module_parts) + "/"
        else:
            module_prefix = "./"

        operations = [_bind_operation(op, variants) for op in CRUD_OPERATIONS]
        by_key = {op["key"]: op for op in operations}
        return {
            "name": variants.lower,
            "Name": variants.capitalized,
            "plural": variants.plural,
            "infra": infra,
            "module_prefix": module_prefix,
            "api_path": self._api_path(descriptor),
            "operations": operations,
            "routes": [by_key[key] for key in ROUTE_ORDER],
        }

    def _api_path(self, descriptor: ResourceDescriptor) -> str:
        parts = [self.config.api_prefix.strip("/"), *descriptor.segments, descriptor.resource_name]
        return "/" + "/".join(part for part in parts if part)


_PAST_TENSE = {"create": "created", "update": "updated", "delete": "deleted", "get": "retrieved"}


def _bind_operation(op: CrudOperation, variants: NameVariants) -> dict[str, Any]:
    """Substitute the name variants into one ``CrudOperation``."""
    names = {
        "name": variants.lower,
        "Name": variants.capitalized,
        "plural": variants.plural,
    }
    return {
        "key": op.key,
        "method": op.method,
        "http_method": op.method.upper(),
        "url": op.url(variants.lower),
        "handler": op.handler.format(**names),
        "status": op.status,
        "description": op.description.format(**names),
        "todo": op.todo.format(**names),
        "request_doc": op.request_doc.format(**names),
        "message": op.message.format(**names),
        "inline_message": f"{'Resources' if op.many else 'Resource'} {_PAST_TENSE[op.verb]} successfully",
        "many": op.many,
        "by_id": op.by_id,
        "service_args": op.service_args,
        "returns_result": op.returns_result,
    }
