"""Tests for the Jinja2 renderer (src.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import jinja2
import pytest

from src.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


def _renderer_with(template_dir: Path, source: str) -> TemplateRenderer:
    (template_dir / "one.ts.j2").write_text(source, encoding="utf-8")
    return TemplateRenderer(template_dir)


class TestTemplateRenderer:
    def test_bundled_templates(self):
        renderer = TemplateRenderer()
        assert renderer.list_templates("express") == [
            "express/controller_inline.ts.j2",
            "express/controller_service.ts.j2",
            "express/interface.ts.j2",
            "express/model.ts.j2",
            "express/route.ts.j2",
            "express/service.ts.j2",
            "express/validation.ts.j2",
        ]

    def test_missing_prefix_lists_nothing(self):
        assert TemplateRenderer().list_templates("fastapi") == []

    def test_render_bundled_template(self):
        rendered = TemplateRenderer().render("express/interface.ts.j2", {"Name": "Order"})
        assert rendered.startswith("export interface TOrder {")

    def test_undefined_variable_raises(self, tmp_path: Path):
        renderer = _renderer_with(tmp_path, "import x from '{{ infra }}utils';")
        with pytest.raises(jinja2.UndefinedError):
            renderer.render("one.ts.j2", {})

    def test_no_html_escaping(self, tmp_path: Path):
        renderer = _renderer_with(tmp_path, "{{ value }}")
        rendered = renderer.render("one.ts.j2", {"value": "Schema<IOrder> & 'x'"})
        assert rendered == "Schema<IOrder> & 'x'"

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "custom").mkdir()
        (tmp_path / "custom" / "hello.txt.j2").write_text(
            "{% for n in names %}\nhello {{ n }}\n{% endfor %}\n", encoding="utf-8"
        )
        renderer = TemplateRenderer(tmp_path)
        assert renderer.list_templates() == ["custom/hello.txt.j2"]
        assert renderer.render("custom/hello.txt.j2", {"names": ["a", "b"]}) == "hello a\nhello b\n"
