"""Tests for the Jinja2 template renderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from create_new_ui.scaffolder.models import Foundation
from create_new_ui.scaffolder.templates import TemplateRenderer, project_context


pytestmark = pytest.mark.unit


def _renderer_with(tmp_path: Path, **templates: str) -> TemplateRenderer:
    """A renderer over *tmp_path* holding ``<key>.j2`` files."""
    for name, body in templates.items():
        (tmp_path / f"{name}.j2").write_text(body, encoding="utf-8")
    return TemplateRenderer(tmp_path)


class TestTemplateRenderer:
    def test_renders_bundled_template(self, vanilla_config):
        out = TemplateRenderer().render("vanilla/styles.css.j2", project_context(vanilla_config))
        assert ".container {" in out

    def test_package_filter(self, tmp_path: Path):
        renderer = _renderer_with(tmp_path, pkg="{{ f | package }}")
        assert renderer.render("pkg.j2", {"f": Foundation.SPACINGS}) == "@new-ui/spacings"

    def test_no_autoescape_in_file_templates(self, tmp_path: Path):
        renderer = _renderer_with(tmp_path, page="<title>{{ v }}</title>\n")
        out = renderer.render("page.j2", {"v": "<b>&</b>"})
        assert out == "<title><b>&</b></title>\n"

    def test_no_autoescape_for_html_named_templates(self, tmp_path: Path):
        (tmp_path / "index.html").write_text("{{ v }}", encoding="utf-8")
        out = TemplateRenderer(tmp_path).render("index.html", {"v": "a & b"})
        assert out == "a & b"

    def test_autoescape_disabled_on_environment(self):
        env = TemplateRenderer().env
        assert env.autoescape is False
        assert env.from_string("{{ v }}").render(v="<i>") == "<i>"

    def test_strict_undefined(self, tmp_path: Path):
        renderer = _renderer_with(tmp_path, missing="{{ missing }}")
        with pytest.raises(UndefinedError):
            renderer.render("missing.j2", {})

    def test_missing_template(self):
        with pytest.raises(TemplateNotFound):
            TemplateRenderer().render("does/not/exist.j2", {})

    def test_custom_template_dir(self, tmp_path: Path):
        renderer = _renderer_with(tmp_path, hello="Hello {{ name }}\n")
        assert renderer.render("hello.j2", {"name": "demo-app"}) == "Hello demo-app\n"


class TestProjectContext:
    def test_keys(self, react_vite_config):
        ctx = project_context(react_vite_config)
        assert ctx["name"] == "my-app"
        assert ctx["dependencies"] == [Foundation.RESET, Foundation.COLORS]
        assert ctx["framework"] == "React"
        assert ctx["bundler"] == "vite"
        assert ctx["bundler_label"] == "Vite"
        assert ctx["entry_path"] == "src/main.tsx"
        assert ctx["has_reset"] is True
        assert ctx["scss"] is False

    def test_extra_values(self, vanilla_config):
        ctx = project_context(vanilla_config, package_manager="yarn")
        assert ctx["package_manager"] == "yarn"
        assert ctx["has_reset"] is False
