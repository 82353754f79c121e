"""Configuration, scaffolding, backend builds and linting for Go and React web applications."""

__version__ = "0.1.0"