"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from csvloader.core.protocols import RecordStore

__all__ = ["RecordStore"]
