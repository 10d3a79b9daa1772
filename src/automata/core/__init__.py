"""Addressing, errors, configuration and the shared step engine."""
