"""Adapters binding the renderers to concrete libraries."""
