"""
Shopfloor HTTP API - Dependencies
=================================
One screen service per dashboard screen, plus the shared clock and
configuration store they were built with.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config.rules import ConfigStore
from core.http_api.contracts import (
    SCREEN_BILLS,
    SCREEN_EXPENSES,
    SCREEN_MATERIALS,
    SCREEN_STOCK,
    SCREEN_WORKERS,
)
from core.time.clock import Clock
from engines.billing.services import BillingService
from engines.cash.services import ExpenseService
from engines.hr.services import WorkerService
from engines.inventory.services import StockService
from engines.procurement.services import RawMaterialService


@dataclass(frozen=True)
class HttpApiDependencies:
    stock: StockService
    workers: WorkerService
    materials: RawMaterialService
    expenses: ExpenseService
    bills: BillingService
    config_store: ConfigStore
    clock: Clock

    def service_for(self, screen: str):
        services = {
            SCREEN_STOCK: self.stock,
            SCREEN_WORKERS: self.workers,
            SCREEN_MATERIALS: self.materials,
            SCREEN_EXPENSES: self.expenses,
            SCREEN_BILLS: self.bills,
        }
        try:
            return services[screen]
        except KeyError:
            raise ValueError(f"unknown screen '{screen}'.") from None
