"""
Top-level package for the tools gallery.

This package exposes the catalog engine (parsing, filtering), the services
that load it, and the Dash UI adapter.
Most code should import from submodules such as:
    tools_gallery.core
    tools_gallery.services
    tools_gallery.ui
"""

__all__: list[str] = []
