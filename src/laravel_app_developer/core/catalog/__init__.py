"""Curated static data read by the core modules."""
