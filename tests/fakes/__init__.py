"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from csvloader.persistence.memory_backend import MemoryRecordStore

__all__ = ["MemoryRecordStore"]
