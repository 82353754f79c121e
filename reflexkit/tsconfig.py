"""Default TypeScript configuration for new projects."""

from __future__ import annotations

from typing import Any


def default_tsconfig(out: str) -> dict[str, Any]:
    """Return the tsconfig that excludes the output directory *out*."""
    return {
        "compilerOptions": {
            "allowJs": True,
            "esModuleInterop": True,
            "incremental": True,
            "isolatedModules": True,
            "jsx": "preserve",
            "jsxImportSource": "react",
            "lib": ["DOM", "DOM.Iterable", "ES2020"],
            "module": "esnext",
            "moduleResolution": "bundler",
            "noEmit": True,
            "resolveJsonModule": True,
            "skipLibCheck": True,
            "strict": True,
            "strictNullChecks": True,
            "target": "ES2020",
        },
        "exclude": ["node_modules", out],
        "include": ["**/*.ts", "**/*.tsx"],
    }