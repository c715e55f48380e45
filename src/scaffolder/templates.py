"""Jinja2 environment used to render generated source files.

Templates live in ``src/scaffolder/templates/<stack>/`` (only ``express`` is
bundled).  Output is source code, never HTML, so autoescaping is off, and
``StrictUndefined`` turns a missing context key into an error instead of a
silently broken import path.  Rendering reads no clock and no randomness:
identical contexts give byte-identical text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".j2"


class TemplateRenderer:
    """Loads ``.j2`` files from ``template_dir`` and renders them to text."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir is not None else BUNDLED_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render ``template_path`` (e.g. ``"express/route.ts.j2"``) with ``context``.

        Raises:
            jinja2.TemplateNotFound: no such file under ``template_dir``.
            jinja2.UndefinedError: the template used a key ``context`` lacks.
        """
        return self.env.get_template(template_path).render(**context)

    def list_templates(self, stack: str = "") -> list[str]:
        """Sorted POSIX paths of every template, optionally limited to one stack folder."""
        root = self.template_dir / stack if stack else self.template_dir
        if not root.is_dir():
            return []
        return sorted(
            path.relative_to(self.template_dir).as_posix()
            for path in root.rglob(f"*{TEMPLATE_SUFFIX}")
        )
