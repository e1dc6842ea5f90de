"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- registry/: In-memory command and dependency registries
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
