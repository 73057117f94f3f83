"""Screens for the notefloat TUI."""
