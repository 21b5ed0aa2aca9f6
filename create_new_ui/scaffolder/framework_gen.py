"""Framework-specific source scaffolding.

Dispatches on ``ProjectConfig.framework`` into one of four mutually
exclusive file sets:

- React: ``src/main.tsx``, ``src/App.tsx``, ``tsconfig.json``, ``tsconfig.node.json``
- Vue: ``src/main.ts``, ``src/App.vue``, ``tsconfig.json``
- Svelte: ``src/main.ts``, ``src/App.svelte``, ``tsconfig.json`` (+ ``svelte.config.js`` with Vite)
- None: ``src/main.ts``, ``src/styles.css``, ``tsconfig.json``

Plus the bundler config (``vite.config.ts`` or ``rspack.config.js``) when a
bundler is selected.  Every entry script starts with one side-effect import
per selected foundation, in selection order.
"""

from __future__ import annotations

from typing import Any

from .manifest_gen import to_json
from .models import Bundler, Framework, ProjectConfig
from .style_gen import scss_injection
from .templates import TemplateRenderer, project_context


# ---------------------------------------------------------------------------
# tsconfig variants
# ---------------------------------------------------------------------------

REACT_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
    "references": [{"path": "./tsconfig.node.json"}],
}

REACT_TSCONFIG_NODE: dict[str, Any] = {
    "compilerOptions": {
        "composite": True,
        "skipLibCheck": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "allowSyntheticDefaultImports": True,
    },
    "include": ["vite.config.ts"],
}

VUE_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ESNext",
        "useDefineForClassFields": True,
        "module": "ESNext",
        "moduleResolution": "node",
        "strict": True,
        "jsx": "preserve",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "esModuleInterop": True,
        "lib": ["ESNext", "DOM"],
        "skipLibCheck": True,
        "noEmit": True,
    },
    "include": ["src/**/*.ts", "src/**/*.d.ts", "src/**/*.tsx", "src/**/*.vue"],
}

SVELTE_TSCONFIG: dict[str, Any] = {
    "extends": "@tsconfig/svelte/tsconfig.json",
    "compilerOptions": {
        "target": "ESNext",
        "useDefineForClassFields": True,
        "module": "ESNext",
        "resolveJsonModule": True,
        "allowJs": True,
        "checkJs": True,
        "isolatedModules": True,
        "strict": True,
    },
    "include": ["src/**/*.d.ts", "src/**/*.ts", "src/**/*.js", "src/**/*.svelte"],
}

VANILLA_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "module": "ESNext",
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
}

# Framework -> Vite plugin import/invocation
VITE_PLUGINS: dict[Framework, dict[str, str]] = {
    Framework.REACT: {
        "binding": "react",
        "package": "@vitejs/plugin-react",
        "call": "react()",
    },
    Framework.VUE: {
        "binding": "vue",
        "package": "@vitejs/plugin-vue",
        "call": "vue()",
    },
    Framework.SVELTE: {
        "binding": "{ svelte }",
        "package": "@sveltejs/vite-plugin-svelte",
        "call": "svelte()",
    },
}


class FrameworkGenerator:
    """Renders entry scripts, components, tsconfig files and bundler config."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, config: ProjectConfig) -> dict[str, str]:
        """Return ``{relative_path: content}`` for every framework file."""
        ctx = project_context(config)

        if config.framework is Framework.REACT:
            files = self._render_react(ctx)
        elif config.framework is Framework.VUE:
            files = self._render_vue(ctx)
        elif config.framework is Framework.SVELTE:
            files = self._render_svelte(ctx, config.bundler)
        else:
            files = self._render_vanilla(ctx)

        files.update(self.render_bundler_config(config))
        return files

    # -- Per-framework file sets -------------------------------------------

    def _render_react(self, ctx: dict[str, Any]) -> dict[str, str]:
        return {
            "src/main.tsx": self.renderer.render("react/main.tsx.j2", ctx),
            "src/App.tsx": self.renderer.render("react/App.tsx.j2", ctx),
            "tsconfig.json": to_json(REACT_TSCONFIG),
            "tsconfig.node.json": to_json(REACT_TSCONFIG_NODE),
        }

    def _render_vue(self, ctx: dict[str, Any]) -> dict[str, str]:
        return {
            "src/main.ts": self.renderer.render("vue/main.ts.j2", ctx),
            "src/App.vue": self.renderer.render("vue/App.vue.j2", ctx),
            "tsconfig.json": to_json(VUE_TSCONFIG),
        }

    def _render_svelte(self, ctx: dict[str, Any], bundler: Bundler) -> dict[str, str]:
        files = {
            "src/main.ts": self.renderer.render("svelte/main.ts.j2", ctx),
            "src/App.svelte": self.renderer.render("svelte/App.svelte.j2", ctx),
            "tsconfig.json": to_json(SVELTE_TSCONFIG),
        }
        # The preprocessor config imports from the Vite plugin.
        if bundler is Bundler.VITE:
            files["svelte.config.js"] = self.renderer.render(
                "svelte/svelte.config.js.j2", ctx
            )
        return files

    def _render_vanilla(self, ctx: dict[str, Any]) -> dict[str, str]:
        return {
            "src/main.ts": self.renderer.render("vanilla/main.ts.j2", ctx),
            "src/styles.css": self.renderer.render("vanilla/styles.css.j2", ctx),
            "tsconfig.json": to_json(VANILLA_TSCONFIG),
        }

    # -- Bundler config ----------------------------------------------------

    def render_bundler_config(self, config: ProjectConfig) -> dict[str, str]:
        """Render ``vite.config.ts`` / ``rspack.config.js``; empty without a bundler."""
        if config.bundler is Bundler.VITE:
            ctx = project_context(
                config,
                plugin=VITE_PLUGINS.get(config.framework),
                scss_injection=scss_injection(config) if config.scss else "",
            )
            return {
                "vite.config.ts": self.renderer.render("bundlers/vite.config.ts.j2", ctx)
            }
        if config.bundler is Bundler.RSPACK:
            ctx = project_context(config, react=config.framework is Framework.REACT)
            return {
                "rspack.config.js": self.renderer.render(
                    "bundlers/rspack.config.js.j2", ctx
                )
            }
        return {}
