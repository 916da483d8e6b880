"""Mapping source layer.

This module loads ordered mappings from JSON and YAML files so the CLI
can search data that does not come from Python callers.
"""
