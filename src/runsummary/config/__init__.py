"""Configuration discovery, loading and derived settings."""
