"""
Core domain models, integer math primitives, contracts and errors.

This module contains the building blocks that do not depend on the
expression engine.
"""
