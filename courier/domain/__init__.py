"""Domain layer - Ports for command dispatch.

This layer defines the protocols (ports) the rest of the package codes
against: the command registry, the dependency resolver and the structured
logger. It is pure Python with no framework dependencies.

Structure:
- protocols/: Registry, resolver and logger interfaces plus handler aliases
"""
