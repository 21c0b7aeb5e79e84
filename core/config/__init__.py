"""
Shopfloor Core Config — Public API
====================================
Admin-configurable rules (GST slabs, pick-lists, numbering prefix).
"""

from core.config.rules import (
    DEFAULT_GST_SLABS,
    ConfigStore,
    DashboardConfig,
    InMemoryConfigStore,
    TaxRule,
)

__all__ = [
    "DEFAULT_GST_SLABS",
    "TaxRule",
    "DashboardConfig",
    "ConfigStore",
    "InMemoryConfigStore",
]
