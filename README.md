# reflexkit

A Python library for web applications that pair a Go backend with a React
and Tailwind frontend. It reads the project configuration, writes the files
of a new project, compiles the backend and runs the configured linters.

## Installation

```shell
pip install reflexkit
```

Several functions start other programs: `go` must be on your `PATH` for
building and for creating a project, and a Node package manager (npm, pnpm,
yarn or bun) is needed for installing dependencies and for linting.

## Project configuration

Every project has a `reflex.yaml` in its root:

```yaml
frontend: src/frontend
backend: src/backend
public: src/public
output: out
```

`reflexkit.config.load_config(directory)` reads it (from the working
directory when `directory` is `None`) and returns a `Config` with the fields
`frontend_dir`, `backend_dir`, `public_dir` and `output_dir`.
`Config.to_mapping()` gives the same values keyed as in the file. A missing,
empty or malformed file raises `ConfigError`.

## Creating a project

```python
from reflexkit.pacman import NodePackageManager
from reflexkit.scaffold import ProjectOptions, create_project

options = ProjectOptions(title="shop", npm=NodePackageManager.PNPM, src_dir=True)
config = create_project("path/to/empty/dir", options)
```

`write_project_files(location, options)` writes `reflex.yaml`,
`package.json`, `README.md`, `.gitignore`, `biome.jsonc`, `tsconfig.json` and
the backend's `main.go`. `create_project` does the same, then installs the
Node dependencies and runs `go mod init <title>` and `go mod tidy`. Failures
raise `ScaffoldError`.

Project names must start with a lowercase letter and hold only lowercase
letters and digits; `reflex`, `main` and `init` are refused
(`validate_project_name`). With `src_dir=True` the directories are nested
under `src/`; the output directory is always `out`.

The pieces are available on their own: `project_config`, `readme_text`,
`gitignore_text`, `package_json` and `render_main_go` in
`reflexkit.scaffold`, `default_configuration(out)` in `reflexkit.biome` and
`default_tsconfig(out)` in `reflexkit.tsconfig`.

## Building

```python
from reflexkit.build import full_build

binary = full_build(".", track_time=True)
```

`full_build` reads `reflex.yaml` and runs `go build`, writing the binary to
`<output>/backend/reflex` (`reflex.exe` on Windows, see
`backend_binary_name()`). It returns the path of the binary and, with
`track_time`, prints how long the build took. Concurrent calls wait for each
other. Failures raise `BuildError`.

## Package managers and linting

`reflexkit.pacman.detect_node_package_manager(directory)` picks the package
manager from the first lock file it finds, in the order `pnpm-lock.yaml`,
`yarn.lock`, `bun.lockb`, `package-lock.json`, and raises
`PackageManagerError` when there is none. A `NodePackageManager` can
`install_dependencies`, `run_script`, and run a binary from
`node_modules/.bin` with `exec` (output shown) or `exec_silent` (output
discarded).

`reflexkit.lint.run_lint(fix, directory)` runs Biome when `biome.json` or
`biome.jsonc` is present and ESLint when an `eslint.config.*` file is present,
letting them fix what they can when `fix` is true; a failing linter raises
`LintError`. `format_project(directory)` runs `biome check --write` and
`go fmt ./...`, ignoring their failures.

## What it does not do

- There is no command-line program; everything is used from Python.
- There is no development server and no watching of files for rebuilds.
- `full_build` compiles only the Go backend; it does not bundle the frontend.
- New projects get only the files listed above: no starting frontend
  sources, public assets or backend packages besides `main.go`.