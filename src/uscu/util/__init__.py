"""Utilities for host applications embedding uscu."""
