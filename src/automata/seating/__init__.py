"""Rectangular seating automaton."""
