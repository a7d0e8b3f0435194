"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The inventory is built
once per process and passed explicitly to whatever needs it.
"""

from __future__ import annotations

from pathlib import Path

from ims.infrastructure.config import Settings
from ims.infrastructure.persistence.in_memory_inventory import InMemoryInventory
from ims.infrastructure.seed import load_inventory


def inventory_repository(settings: Settings, seed_file: Path | None = None) -> InMemoryInventory:
    return load_inventory(seed_file or settings.seed_file, currency=settings.currency)
