"""Bundled audit files."""
