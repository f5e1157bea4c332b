"""Core infrastructure: path primitives, settings and theming."""
