"""
Shopfloor Core Config — Admin-Configurable Rules
==================================================
Doctrine: No hardcoded tax slabs or pick-lists in engine logic.
GST slabs, category lists, units and the bill number prefix come
from admin-configurable data, not from source code.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from core.calculations.derived import tax_amount


# ══════════════════════════════════════════════════════════════
# TAX RULE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TaxRule:
    """
    One selectable GST slab.

    rate is a flat percentage (18 means 18%). There is no
    jurisdiction logic beyond the percentage itself.
    """

    rate: float
    label: str = ""
    tax_type: str = "GST"

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool) or not isinstance(self.rate, (int, float)):
            raise ValueError(f"Tax rate must be a number, got {self.rate!r}.")
        if not 0 <= self.rate <= 100:
            raise ValueError(f"Tax rate must be between 0 and 100, got {self.rate}.")

    @property
    def display_label(self) -> str:
        if self.label:
            return self.label
        if self.rate == 0:
            return "0% (Exempt)"
        return f"{self.rate}%"

    def compute_tax(self, subtotal):
        """Tax amount on a subtotal, no intermediate rounding."""
        return tax_amount(subtotal, self.rate)

    def to_dict(self) -> dict:
        return {
            "rate": self.rate,
            "label": self.display_label,
            "tax_type": self.tax_type,
        }


DEFAULT_GST_SLABS: Tuple[TaxRule, ...] = (
    TaxRule(rate=0),
    TaxRule(rate=5),
    TaxRule(rate=12),
    TaxRule(rate=18),
    TaxRule(rate=28),
)

DEFAULT_STOCK_CATEGORIES = ("Materials", "Products", "Accessories", "Tools", "Others")
DEFAULT_STOCK_UNITS = ("pieces", "kg", "meters", "liters", "boxes")
DEFAULT_MATERIAL_CATEGORIES = (
    "Fabric", "Thread", "Buttons", "Zippers", "Accessories", "Chemicals", "Others",
)
DEFAULT_MATERIAL_UNITS = ("meters", "kg", "pieces", "liters", "boxes", "rolls", "spools")
DEFAULT_EXPENSE_CATEGORIES = (
    "Utilities", "Transportation", "Maintenance", "Office Supplies", "Marketing", "Others",
)
DEFAULT_PAYMENT_METHODS = ("Cash", "Bank Transfer", "UPI", "Credit Card", "Cheque")
DEFAULT_BILL_UNITS = ("pieces", "kg", "meters", "liters", "boxes")


# ══════════════════════════════════════════════════════════════
# DASHBOARD CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DashboardConfig:
    """
    Everything a screen needs to know that is not part of a record.

    Fields:
        tax_rules:            Selectable GST slabs for bills.
        default_gst_rate:     Slab preselected on a new bill draft.
        bill_number_prefix:   Prefix of generated bill numbers ("INV").
        default_bill_unit:    Unit of a freshly added line item.
        *_categories/*_units: Pick-lists per screen.
        payment_methods:      Pick-list for expenses.
    """

    tax_rules: Tuple[TaxRule, ...] = DEFAULT_GST_SLABS
    default_gst_rate: float = 18
    bill_number_prefix: str = "INV"
    default_bill_unit: str = "pieces"
    stock_categories: Tuple[str, ...] = DEFAULT_STOCK_CATEGORIES
    stock_units: Tuple[str, ...] = DEFAULT_STOCK_UNITS
    material_categories: Tuple[str, ...] = DEFAULT_MATERIAL_CATEGORIES
    material_units: Tuple[str, ...] = DEFAULT_MATERIAL_UNITS
    expense_categories: Tuple[str, ...] = DEFAULT_EXPENSE_CATEGORIES
    payment_methods: Tuple[str, ...] = DEFAULT_PAYMENT_METHODS
    bill_units: Tuple[str, ...] = DEFAULT_BILL_UNITS

    def __post_init__(self) -> None:
        if not self.tax_rules:
            raise ValueError("tax_rules must contain at least one slab.")
        if self.default_gst_rate not in self.gst_rates:
            raise ValueError(
                f"default_gst_rate {self.default_gst_rate} is not one of "
                f"the configured slabs {self.gst_rates}."
            )
        if not self.bill_number_prefix or not isinstance(self.bill_number_prefix, str):
            raise ValueError("bill_number_prefix must be a non-empty string.")
        if self.default_bill_unit not in self.bill_units:
            raise ValueError(
                f"default_bill_unit '{self.default_bill_unit}' is not a bill unit."
            )

    @property
    def gst_rates(self) -> Tuple[float, ...]:
        return tuple(rule.rate for rule in self.tax_rules)

    def tax_rule_for(self, rate) -> Optional[TaxRule]:
        for rule in self.tax_rules:
            if rule.rate == rate:
                return rule
        return None

    def choices(self) -> dict:
        """Pick-lists for the presentation layer."""
        return {
            "gst_slabs": [rule.to_dict() for rule in self.tax_rules],
            "stock_categories": list(self.stock_categories),
            "stock_units": list(self.stock_units),
            "material_categories": list(self.material_categories),
            "material_units": list(self.material_units),
            "expense_categories": list(self.expense_categories),
            "payment_methods": list(self.payment_methods),
            "bill_units": list(self.bill_units),
        }


# ══════════════════════════════════════════════════════════════
# CONFIG STORE PROTOCOL
# ══════════════════════════════════════════════════════════════

class ConfigStore(Protocol):
    """
    Protocol for admin-configured rule storage.

    Implementations may back this with a database, file, or in-memory store.
    """

    def get_config(self) -> DashboardConfig:
        """Fetch the active dashboard configuration."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IN-MEMORY CONFIG STORE (for testing / bootstrap)
# ══════════════════════════════════════════════════════════════

class InMemoryConfigStore:
    """Simple in-memory config store for testing and bootstrap."""

    def __init__(self, config: Optional[DashboardConfig] = None) -> None:
        self._config = config or DashboardConfig()

    def get_config(self) -> DashboardConfig:
        return self._config

    def set_config(self, config: DashboardConfig) -> None:
        if not isinstance(config, DashboardConfig):
            raise TypeError("config must be DashboardConfig.")
        self._config = config

    def add_tax_rule(self, rule: TaxRule) -> None:
        if self._config.tax_rule_for(rule.rate) is not None:
            raise ValueError(f"A {rule.rate}% slab is already configured.")
        rules = tuple(sorted(self._config.tax_rules + (rule,), key=lambda r: r.rate))
        self._config = dataclasses.replace(self._config, tax_rules=rules)
