"""Tests for index.html and README.md generation."""

from __future__ import annotations

import pytest

from create_new_ui.scaffolder.markup_gen import render_markup, render_readme
from create_new_ui.scaffolder.models import Bundler, Foundation, Framework, ProjectConfig


pytestmark = pytest.mark.unit


class TestRenderMarkup:
    def test_single_file(self, vanilla_config):
        assert list(render_markup(vanilla_config)) == ["index.html"]

    def test_vanilla_entry(self, vanilla_config):
        html = render_markup(vanilla_config)["index.html"]
        assert html.startswith("<!DOCTYPE html>\n")
        assert '<script type="module" src="/src/main.ts"></script>' in html
        assert "<title>demo-app</title>" in html
        assert "<h1>demo-app</h1>" in html
        assert 'data-new-ui-theme="light"' in html

    def test_react_entry(self, react_vite_config):
        html = render_markup(react_vite_config)["index.html"]
        assert 'src="/src/main.tsx"' in html

    def test_reset_adds_meta(self, react_vite_config):
        html = render_markup(react_vite_config)["index.html"]
        assert '<meta name="description" content="New UI">' in html

    def test_no_reset_no_meta(self):
        config = ProjectConfig(name="demo-app", dependencies=[Foundation.COLORS])
        html = render_markup(config)["index.html"]
        assert 'name="description"' not in html

    def test_scss_stylesheet_link(self, scss_config):
        html = render_markup(scss_config)["index.html"]
        assert '<link rel="stylesheet" href="/src/scss/main.scss">' in html

    def test_no_blank_lines_for_absent_options(self, vanilla_config):
        html = render_markup(vanilla_config)["index.html"]
        assert "\n\n" not in html


class TestRenderReadme:
    def test_contents(self, react_vite_config):
        readme = render_readme(react_vite_config)["README.md"]
        assert readme.startswith("# my-app\n")
        assert "- Framework: React" in readme
        assert "- Bundler: Vite" in readme
        assert "- @new-ui/reset\n- @new-ui/colors\n" in readme
        assert "npm run dev" in readme

    def test_no_dependencies(self, vanilla_config):
        readme = render_readme(vanilla_config)["README.md"]
        assert "## Dependencies\n- None\n" in readme
        assert "- Bundler: None" in readme

    def test_package_manager(self):
        config = ProjectConfig(name="demo-app", framework=Framework.VUE, bundler=Bundler.RSPACK)
        readme = render_readme(config, package_manager="pnpm")["README.md"]
        assert "pnpm install" in readme
        assert "pnpm run build" in readme
        assert "npm install" not in readme.replace("pnpm install", "")
