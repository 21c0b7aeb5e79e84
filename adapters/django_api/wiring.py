"""
Shopfloor Django Adapter Wiring
===============================
Constructs HttpApiDependencies for local runs.

This module is adapter-only glue:
- one screen service per screen, sharing one clock and config store
- in-memory stores only; a restart starts from the demo data again
- settings are read once, when the dependencies are first built
"""

from __future__ import annotations

import logging
import threading

from django.conf import settings

from adapters.django_api.demo_data import seed_demo_data
from core.config.rules import DashboardConfig, InMemoryConfigStore
from core.http_api.dependencies import HttpApiDependencies
from core.time.clock import SystemClock
from engines.billing.services import BillingService
from engines.cash.services import ExpenseService
from engines.hr.services import WorkerService
from engines.inventory.services import StockService
from engines.procurement.services import RawMaterialService

logger = logging.getLogger("shopfloor.http")

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None


def _build_config() -> DashboardConfig:
    return DashboardConfig(
        default_gst_rate=getattr(settings, "SHOPFLOOR_DEFAULT_GST_RATE", 18),
        bill_number_prefix=getattr(settings, "SHOPFLOOR_BILL_NUMBER_PREFIX", "INV"),
    )


def _create_dependencies() -> HttpApiDependencies:
    clock = SystemClock()
    config_store = InMemoryConfigStore(_build_config())

    dependencies = HttpApiDependencies(
        stock=StockService(clock=clock, config_store=config_store),
        workers=WorkerService(),
        materials=RawMaterialService(config_store=config_store),
        expenses=ExpenseService(clock=clock, config_store=config_store),
        bills=BillingService(clock=clock, config_store=config_store),
        config_store=config_store,
        clock=clock,
    )

    if getattr(settings, "SHOPFLOOR_SEED_DEMO_DATA", True):
        seed_demo_data(dependencies)
        logger.info("demo data loaded into every screen")

    return dependencies


def build_dependencies() -> HttpApiDependencies:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES


def reset_dependencies() -> None:
    """Drop the singleton; the next request rebuilds it from settings."""
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
