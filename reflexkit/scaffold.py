"""Creation of a new project: configuration, manifests and backend entry point."""

from __future__ import annotations

import json
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Any

import yaml

from reflexkit.biome import default_configuration
from reflexkit.config import CONFIG_FILE_NAME, Config
from reflexkit.pacman import NodePackageManager, PackageManagerError
from reflexkit.tsconfig import default_tsconfig

_PACKAGE_NAME = re.compile(r"[a-z][a-z0-9]*")
FORBIDDEN_PROJECT_NAMES = ("reflex", "main", "init")

_MAIN_GO = Template(
    r'''package main

import (
    "fmt"
    "log"
    "net"
    "net/http"
    "os"
    "os/signal"
    "syscall"

    "${title}/${out_dir}/frontend"
    "${title}/${backend_dir}/config"
    "${title}/${public_dir}"
)

func main() {
    sigs := make(chan os.Signal, 1)
    signal.Notify(sigs, syscall.SIGINT, syscall.SIGTERM, syscall.SIGHUP)

    sock, err := net.Listen("tcp", config.Addr)
    if err != nil {
        log.Fatal(err)
    }

    defer fmt.Println("reflex exit")
    defer sock.Close()

    fmt.Printf("Listening on %s\n", sock.Addr())

    mux := http.NewServeMux()
    mux.HandleFunc("/", router)
    go http.Serve(sock, mux)

    <-sigs
}

func router(w http.ResponseWriter, r *http.Request) {
    if public.Handler(w, r) {
        return
    }
    if frontend.Handler(w, r) {
        return
    }

    fmt.Fprintf(w, "Hello, World!")
}
'''.replace("    ", "\t")
)

_IGNORED_LOCK_FILES = {
    NodePackageManager.NPM: (
        "pnpm-lock.yaml",
        "pnpm-workspace.yaml",
        "yarn.lock",
        "bun.lockb",
    ),
    NodePackageManager.YARN: (
        "pnpm-lock.yaml",
        "pnpm-workspace.yaml",
        "package-lock.json",
        "bun.lockb",
    ),
    NodePackageManager.PNPM: ("yarn.lock", "package-lock.json", "bun.lockb"),
    NodePackageManager.BUN: (
        "pnpm-lock.yaml",
        "pnpm-workspace.yaml",
        "package-lock.json",
        "yarn.lock",
    ),
}


class ScaffoldError(Exception):
    """Raised when a project cannot be created."""


@dataclass
class ProjectOptions:
    """Choices made when creating a project."""

    title: str = "example"
    npm: NodePackageManager = NodePackageManager.NPM
    src_dir: bool = True


def validate_project_name(name: str) -> str:
    """Return *name* if it is usable as a project name, else raise ScaffoldError."""
    if not _PACKAGE_NAME.fullmatch(name):
        raise ScaffoldError(
            "invalid package name, must start with a lowercase letter and "
            "contain only lowercase letters and numbers"
        )
    if name in FORBIDDEN_PROJECT_NAMES:
        raise ScaffoldError(f"invalid package name, {name} is forbidden")
    return name


def render_main_go(title: str, backend_dir: str, public_dir: str, out_dir: str) -> str:
    """Return the Go entry point of the backend server."""
    return _MAIN_GO.substitute(
        title=title,
        backend_dir=backend_dir,
        public_dir=public_dir,
        out_dir=out_dir,
    )


def project_config(src_dir: bool) -> Config:
    """Return the directory layout, nested under ``src`` when *src_dir*."""
    prefix = "src/" if src_dir else ""
    return Config(
        frontend_dir=f"{prefix}frontend",
        backend_dir=f"{prefix}backend",
        public_dir=f"{prefix}public",
        output_dir="out",
    )


def readme_text(title: str, npm: NodePackageManager) -> str:
    """Return the README of a new project."""
    return (
        f"# {title}\n\n"
        "## Install dependencies\n\n"
        "```shell\n"
        f"{npm.value} install\n"
        "```\n"
    )


def gitignore_text(output_dir: str, npm: NodePackageManager) -> str:
    """Return the .gitignore, which ignores lock files of other package managers."""
    lines = [
        ".DS_Store",
        ".idea/",
        ".vscode/",
        "node_modules/",
        f"{output_dir}/",
        *_IGNORED_LOCK_FILES[npm],
    ]
    return "".join(f"{line}\n" for line in lines)


def package_json() -> dict[str, Any]:
    """Return the contents of ``package.json`` for a new project."""
    return {
        "name": "reflex",
        "scripts": {
            "build": "reflex build",
            "dev": "reflex dev",
            "lint": "reflex lint",
        },
        "dependencies": {
            "@tailwindcss/cli": "^4.1.4",
            "react": "^19.1.0",
            "react-dom": "^19.1.0",
            "tailwindcss": "^4.1.4",
        },
        "devDependencies": {
            "@biomejs/biome": "1.9.4",
            "@types/react": "^19.1.2",
            "@types/react-dom": "^19.1.2",
        },
    }


def _dump_json(data: Any, indent: str) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def _write(path: Path, text: str, what: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
    except OSError as exc:
        raise ScaffoldError(f"failed to write {what}: {exc}") from exc


def write_project_files(location, options: ProjectOptions) -> Config:
    """Write the files of a new project into *location* and return its layout."""
    validate_project_name(options.title)
    base = Path(location)
    if not base.is_dir():
        raise ScaffoldError(f"failed to change directory: {base} is not a directory")

    conf = project_config(options.src_dir)

    _write(
        base / CONFIG_FILE_NAME,
        yaml.safe_dump(conf.to_mapping(), sort_keys=False, default_flow_style=False),
        "reflex config",
    )
    _write(base / "package.json", _dump_json(package_json(), "  "), "package.json")
    _write(base / "README.md", readme_text(options.title, options.npm), "README.md")
    _write(
        base / ".gitignore",
        gitignore_text(conf.output_dir, options.npm),
        ".gitignore",
    )
    _write(
        base / "biome.jsonc",
        _dump_json(default_configuration(conf.output_dir), "\t"),
        "biome.jsonc",
    )
    _write(
        base / "tsconfig.json",
        _dump_json(default_tsconfig(conf.output_dir), "\t"),
        "tsconfig.json",
    )
    _write(
        base / conf.backend_dir / "main.go",
        render_main_go(
            options.title, conf.backend_dir, conf.public_dir, conf.output_dir
        ),
        "main.go to backend",
    )
    return conf


def _go(args: list[str], cwd: Path, what: str) -> None:
    try:
        subprocess.run(
            ["go", *args],
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ScaffoldError(f"failed to {what}: {exc}") from exc


def create_project(location, options: ProjectOptions) -> Config:
    """Write a new project, install its dependencies and set up its Go module."""
    base = Path(location)
    conf = write_project_files(base, options)

    try:
        options.npm.install_dependencies(cwd=base)
    except PackageManagerError as exc:
        raise ScaffoldError(f"failed to install dependencies: {exc}") from exc

    _go(["mod", "init", options.title], base, "initialize go module")
    _go(["mod", "tidy"], base, "tidy go module")
    return conf