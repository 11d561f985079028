"""
Ports - interface definitions for external dependencies.

Follows hexagonal architecture pattern (ports & adapters).
Ports define interfaces, adapters provide concrete implementations.
"""
from chefs.ports.repositories import FormsRepo, SubmissionsRepo, PermissionsRepo

__all__ = ["FormsRepo", "SubmissionsRepo", "PermissionsRepo"]
