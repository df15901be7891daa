"""Application services."""

from .scan_service import LibraryScanService, ScanRequest

__all__ = ["LibraryScanService", "ScanRequest"]
