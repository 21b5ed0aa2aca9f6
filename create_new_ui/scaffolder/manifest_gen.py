"""``package.json`` generation.

Builds the npm manifest for a generated project from its ``ProjectConfig``:
one scoped dependency per selected foundation, the framework runtime, the
bundler toolchain and its framework integration, and scripts resolved by
bundler choice.
"""

from __future__ import annotations

import json
from typing import Any

from .models import Bundler, Framework, ProjectConfig, foundation_version


NO_BUNDLER_SCRIPT = 'echo "No bundler configured"'

TYPESCRIPT_VERSION = "^5.3.0"
SASS_VERSION = "^1.70.0"
SASS_LOADER_VERSION = "^14.1.0"

# Framework -> (dependencies, devDependencies)
FRAMEWORK_PACKAGES: dict[Framework, tuple[dict[str, str], dict[str, str]]] = {
    Framework.REACT: (
        {"react": "^18.2.0", "react-dom": "^18.2.0"},
        {"@types/react": "^18.2.0", "@types/react-dom": "^18.2.0"},
    ),
    Framework.VUE: ({"vue": "^3.4.0"}, {}),
    Framework.SVELTE: ({"svelte": "^4.2.0"}, {"@tsconfig/svelte": "^5.0.0"}),
    Framework.NONE: ({}, {}),
}

BUNDLER_PACKAGES: dict[Bundler, dict[str, str]] = {
    Bundler.VITE: {"vite": "^5.0.0"},
    Bundler.RSPACK: {"@rspack/cli": "^0.5.0", "@rspack/core": "^0.5.0"},
    Bundler.NONE: {},
}

# (bundler, framework) -> integration devDependencies
BUNDLER_INTEGRATIONS: dict[tuple[Bundler, Framework], dict[str, str]] = {
    (Bundler.VITE, Framework.REACT): {"@vitejs/plugin-react": "^4.2.0"},
    (Bundler.VITE, Framework.VUE): {"@vitejs/plugin-vue": "^5.0.0"},
    (Bundler.VITE, Framework.SVELTE): {"@sveltejs/vite-plugin-svelte": "^3.0.0"},
    (Bundler.RSPACK, Framework.REACT): {"@rspack/plugin-react-refresh": "^0.5.0"},
}

BUNDLER_SCRIPTS: dict[Bundler, dict[str, str]] = {
    Bundler.VITE: {"dev": "vite", "build": "vite build"},
    Bundler.RSPACK: {"dev": "rspack serve", "build": "rspack build"},
    Bundler.NONE: {"dev": NO_BUNDLER_SCRIPT, "build": NO_BUNDLER_SCRIPT},
}


def build_package_json(config: ProjectConfig) -> dict[str, Any]:
    """Return the manifest for *config* as a plain dict."""
    dependencies: dict[str, str] = {}
    dev_dependencies: dict[str, str] = {}

    for foundation in config.dependencies:
        dependencies[foundation.package] = foundation_version(foundation)

    framework_deps, framework_dev_deps = FRAMEWORK_PACKAGES[config.framework]
    dependencies.update(framework_deps)
    dev_dependencies.update(framework_dev_deps)

    dev_dependencies.update(BUNDLER_PACKAGES[config.bundler])
    dev_dependencies.update(
        BUNDLER_INTEGRATIONS.get((config.bundler, config.framework), {})
    )

    if config.scss:
        dev_dependencies["sass-embedded"] = SASS_VERSION
        if config.bundler is Bundler.RSPACK:
            dev_dependencies["sass-loader"] = SASS_LOADER_VERSION

    dev_dependencies["typescript"] = TYPESCRIPT_VERSION

    return {
        "name": config.name,
        "version": "0.1.0",
        "private": True,
        "scripts": dict(BUNDLER_SCRIPTS[config.bundler]),
        "dependencies": dependencies,
        "devDependencies": dev_dependencies,
    }


def render_manifest(config: ProjectConfig) -> dict[str, str]:
    """Render ``package.json`` for *config*.

    Returns:
        ``{"package.json": <content>}``.
    """
    return {"package.json": to_json(build_package_json(config))}


def to_json(data: dict[str, Any]) -> str:
    """Serialise *data* the way npm writes manifests (2-space indent, final newline)."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
