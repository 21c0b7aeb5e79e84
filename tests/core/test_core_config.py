"""
Tests for core.config — Admin-configurable rules.
"""

import pytest

from core.config.rules import (
    DEFAULT_GST_SLABS,
    DashboardConfig,
    InMemoryConfigStore,
    TaxRule,
)


# ── TaxRule Tests ────────────────────────────────────────────

class TestTaxRule:
    def test_compute_tax(self):
        rule = TaxRule(rate=18)
        assert rule.compute_tax(45000) == 8100

    def test_zero_rate(self):
        rule = TaxRule(rate=0)
        assert rule.compute_tax(1000) == 0
        assert rule.display_label == "0% (Exempt)"

    def test_display_label(self):
        assert TaxRule(rate=12).display_label == "12%"
        assert TaxRule(rate=12, label="Twelve").display_label == "Twelve"

    def test_invalid_rate_too_high(self):
        with pytest.raises(ValueError, match="between 0 and 100"):
            TaxRule(rate=150)

    def test_invalid_rate_negative(self):
        with pytest.raises(ValueError, match="between 0 and 100"):
            TaxRule(rate=-1)

    def test_rate_must_be_number(self):
        with pytest.raises(ValueError, match="must be a number"):
            TaxRule(rate="18")

    def test_frozen_immutability(self):
        rule = TaxRule(rate=18)
        with pytest.raises(AttributeError):
            rule.rate = 28


# ── DashboardConfig Tests ────────────────────────────────────

class TestDashboardConfig:
    def test_defaults(self):
        config = DashboardConfig()
        assert config.gst_rates == (0, 5, 12, 18, 28)
        assert config.default_gst_rate == 18
        assert config.bill_number_prefix == "INV"
        assert config.default_bill_unit == "pieces"
        assert "Cash" in config.payment_methods

    def test_default_rate_must_be_a_slab(self):
        with pytest.raises(ValueError, match="not one of"):
            DashboardConfig(default_gst_rate=7)

    def test_prefix_required(self):
        with pytest.raises(ValueError, match="bill_number_prefix"):
            DashboardConfig(bill_number_prefix="")

    def test_default_unit_must_be_bill_unit(self):
        with pytest.raises(ValueError, match="default_bill_unit"):
            DashboardConfig(default_bill_unit="barrels")

    def test_tax_rule_for(self):
        config = DashboardConfig()
        assert config.tax_rule_for(5).rate == 5
        assert config.tax_rule_for(7) is None

    def test_choices_shape(self):
        choices = DashboardConfig().choices()
        assert [slab["rate"] for slab in choices["gst_slabs"]] == [0, 5, 12, 18, 28]
        assert "Materials" in choices["stock_categories"]
        assert "spools" in choices["material_units"]


# ── InMemoryConfigStore Tests ────────────────────────────────

class TestInMemoryConfigStore:
    def test_default_config(self):
        store = InMemoryConfigStore()
        assert store.get_config().tax_rules == DEFAULT_GST_SLABS

    def test_set_config(self):
        store = InMemoryConfigStore()
        store.set_config(DashboardConfig(bill_number_prefix="BILL"))
        assert store.get_config().bill_number_prefix == "BILL"

    def test_set_config_type_checked(self):
        store = InMemoryConfigStore()
        with pytest.raises(TypeError):
            store.set_config({"bill_number_prefix": "BILL"})

    def test_add_tax_rule_keeps_order(self):
        store = InMemoryConfigStore()
        store.add_tax_rule(TaxRule(rate=3))
        assert store.get_config().gst_rates == (0, 3, 5, 12, 18, 28)

    def test_duplicate_tax_rule_rejected(self):
        store = InMemoryConfigStore()
        with pytest.raises(ValueError, match="already configured"):
            store.add_tax_rule(TaxRule(rate=18))
