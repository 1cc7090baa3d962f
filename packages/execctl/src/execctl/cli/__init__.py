"""Execctl CLI package; the entry point is `execctl.cli.main:main`."""
