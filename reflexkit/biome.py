"""Default Biome configuration for new projects."""

from __future__ import annotations

from typing import Any

SCHEMA = "./node_modules/@biomejs/biome/configuration_schema.json"


def _linter_rules() -> dict[str, Any]:
    # Keys are kept in sorted order, as they are written to disk.
    return {
        "a11y": {"all": True},
        "complexity": {"all": True},
        "correctness": {"all": True},
        "nursery": {
            "noCommonJs": "error",
            "noDuplicateElseIf": "warn",
            "noDuplicateProperties": "error",
            "noDuplicatedFields": "error",
            "noDynamicNamespaceImportAccess": "warn",
            "useSortedClasses": "error",
        },
        "performance": {"all": True},
        "recommended": True,
        "security": {"all": True},
        "style": {"all": True, "noDefaultExport": "off"},
        "suspicious": {"all": True, "noReactSpecificProps": "off"},
    }


def default_configuration(out: str) -> dict[str, Any]:
    """Return the Biome configuration that ignores the output directory *out*."""
    return {
        "$schema": SCHEMA,
        "css": {
            "formatter": {"enabled": True, "quoteStyle": "double"},
            "linter": {"enabled": True},
            "parser": {"allowWrongLineComments": False},
        },
        "files": {"ignore": ["node_modules", out]},
        "formatter": {
            "enabled": True,
            "indentStyle": "tab",
            "lineEnding": "lf",
            "lineWidth": 120,
        },
        "graphql": {
            "formatter": {"enabled": True, "quoteStyle": "double"},
            "linter": {"enabled": True},
        },
        "javascript": {
            "formatter": {
                "arrowParentheses": "always",
                "jsxQuoteStyle": "double",
                "quoteProperties": "asNeeded",
                "quoteStyle": "double",
                "semicolons": "asNeeded",
                "trailingCommas": "all",
            },
            "jsxRuntime": "transparent",
            "linter": {"enabled": True},
            "parser": {"unsafeParameterDecoratorsEnabled": False},
        },
        "json": {
            "formatter": {"enabled": True, "trailingCommas": "none"},
            "parser": {"allowComments": False, "allowTrailingCommas": False},
        },
        "linter": {"enabled": True, "rules": _linter_rules()},
        "organizeImports": {"enabled": True},
        "vcs": {"clientKind": "git", "enabled": True},
    }