"""Memory-resident console kanban board."""

__version__ = "0.1.0"
