"""Hexagonal tile automaton."""
