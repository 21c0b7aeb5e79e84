"""
Shopfloor Django Adapter - Demo Data
====================================
Sample records a fresh dashboard starts with, so every screen has
something to show. Loaded by wiring when SHOPFLOOR_SEED_DEMO_DATA is on.
"""

from __future__ import annotations

from datetime import date

from engines.billing.models import Bill, BillLineItem, BillStatus
from engines.cash.models import Expense
from engines.hr.models import Worker
from engines.inventory.models import StockItem
from engines.procurement.models import RawMaterial


def demo_stock_items() -> tuple[StockItem, ...]:
    return (
        StockItem(
            name="Raw Cotton",
            category="Materials",
            quantity=500,
            unit="kg",
            price=120,
            min_stock=100,
            last_updated=date(2024, 12, 26),
        ),
        StockItem(
            name="Finished Shirts",
            category="Products",
            quantity=200,
            unit="pieces",
            price=450,
            min_stock=50,
            last_updated=date(2024, 12, 25),
        ),
    )


def demo_workers() -> tuple[Worker, ...]:
    return (
        Worker(
            name="Rajesh Kumar",
            position="Machine Operator",
            daily_wage=500,
            phone_number="9876543210",
            join_date=date(2024, 1, 15),
            total_days_worked=22,
            salary_paid=8000,
            advance=2000,
        ),
        Worker(
            name="Priya Sharma",
            position="Quality Inspector",
            daily_wage=600,
            phone_number="9876543211",
            join_date=date(2024, 2, 1),
            total_days_worked=20,
            salary_paid=12000,
            advance=1500,
        ),
    )


def demo_raw_materials() -> tuple[RawMaterial, ...]:
    return (
        RawMaterial(
            name="Cotton Fabric",
            supplier="ABC Textiles",
            purchase_date=date(2024, 12, 20),
            quantity=1000,
            unit="meters",
            total_amount=50000,
            amount_paid=30000,
            category="Fabric",
        ),
        RawMaterial(
            name="Polyester Thread",
            supplier="XYZ Suppliers",
            purchase_date=date(2024, 12, 22),
            quantity=500,
            unit="spools",
            total_amount=15000,
            amount_paid=15000,
            category="Thread",
        ),
    )


def demo_expenses() -> tuple[Expense, ...]:
    return (
        Expense(
            date=date(2024, 12, 26),
            category="Utilities",
            description="Electricity Bill",
            amount=5500,
            payment_method="Bank Transfer",
            bill_number="EB12345",
        ),
        Expense(
            date=date(2024, 12, 25),
            category="Transportation",
            description="Material Transportation",
            amount=2500,
            payment_method="Cash",
            bill_number="TR001",
        ),
        Expense(
            date=date(2024, 12, 24),
            category="Maintenance",
            description="Machine Repair",
            amount=8000,
            payment_method="UPI",
            bill_number="MR456",
        ),
    )


def demo_bills() -> tuple[Bill, ...]:
    return (
        Bill(
            bill_number="INV-001",
            customer_name="ABC Garments Ltd",
            customer_address="123 Market Street, Mumbai, Maharashtra 400001",
            customer_gstn="27ABCDE1234F1Z5",
            date=date(2024, 12, 26),
            due_date=date(2025, 1, 25),
            items=(
                BillLineItem(
                    item_id="demo-1",
                    name="Cotton Shirts",
                    quantity=100,
                    unit="pieces",
                    rate=450,
                ),
                BillLineItem(
                    item_id="demo-2",
                    name="Polyester Fabric",
                    quantity=50,
                    unit="meters",
                    rate=200,
                ),
            ),
            gst_rate=18,
            status=BillStatus.SENT,
        ),
    )


def seed_demo_data(dependencies) -> None:
    dependencies.stock.seed(demo_stock_items())
    dependencies.workers.seed(demo_workers())
    dependencies.materials.seed(demo_raw_materials())
    dependencies.expenses.seed(demo_expenses())
    dependencies.bills.seed(demo_bills())
