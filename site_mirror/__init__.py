# site_mirror/__init__.py
"""
SiteMirror package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

from .cli import main  # noqa: E402
