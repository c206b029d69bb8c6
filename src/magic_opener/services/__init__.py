"""Service layer for magic-opener."""

from magic_opener.services.resolution import ResolutionService, resolve_destination

__all__ = ["ResolutionService", "resolve_destination"]
