"""Unit tests for monthly invoice generation."""

import asyncio
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.core.exceptions import NoCustomersError
from app.models.enums import InvoiceStatus, PaymentMethod, PlanType
from app.services.invoice_generator import InvoiceGenerator
from app.services.invoice_ledger import InvoiceLedger

PERIOD = "2024-01"
DUE = date(2024, 1, 31)


async def test_empty_roster_raises(generator: InvoiceGenerator):
    with pytest.raises(NoCustomersError) as exc_info:
        await generator.generate(PERIOD, DUE)
    assert exc_info.value.message == "No customers found"


async def test_invoices_every_customer(generator: InvoiceGenerator, new_customer):
    basic = await new_customer("Basic Customer", PlanType.BASIC)
    standard = await new_customer("Standard Customer", PlanType.STANDARD)

    result = await generator.generate(PERIOD, DUE)

    assert result["message"] == "Successfully created 2 invoices"
    assert result["created"] == 2
    assert result["skipped"] == 0
    assert result["failed"] == 0
    amounts = {inv.customer_id: inv.amount for inv in result["invoices"]}
    assert amounts == {basic.id: Decimal("800.00"), standard.id: Decimal("1100.00")}
    for invoice in result["invoices"]:
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.billing_period == PERIOD
        assert invoice.due_date == DUE
        assert invoice.invoice_number.startswith("INV-")
        assert invoice.customer.id == invoice.customer_id


async def test_skips_customer_with_pending_invoice(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    covered = await new_customer("Covered Customer", PlanType.BASIC)
    uncovered = await new_customer("Uncovered Customer", PlanType.STANDARD)
    await ledger.create(
        customer_id=covered.id,
        invoice_number="INV-202401-0001",
        amount=Decimal("800.00"),
        billing_period=PERIOD,
        due_date=DUE,
    )

    result = await generator.generate(PERIOD, DUE)

    assert result["created"] == 1
    assert result["skipped"] == 1
    assert [inv.customer_id for inv in result["invoices"]] == [uncovered.id]


async def test_second_run_is_a_no_op(generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer):
    await new_customer("One")
    await new_customer("Two")
    await generator.generate(PERIOD, DUE)

    result = await generator.generate(PERIOD, DUE)

    assert result["message"] == "All customers already have invoices for this billing period"
    assert result["created"] == 0
    assert result["skipped"] == 2
    assert result["invoices"] == []
    assert len(await ledger.list()) == 2


async def test_paid_invoice_does_not_block_reissue(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    paid_customer = await new_customer("Paid Up")
    await new_customer("Still Pending")
    first = await generator.generate(PERIOD, DUE)
    paid_invoice = next(inv for inv in first["invoices"] if inv.customer_id == paid_customer.id)
    await ledger.record_payment(paid_invoice.id, PaymentMethod.CASH)

    result = await generator.generate(PERIOD, DUE)

    assert result["created"] == 1
    assert result["skipped"] == 1
    assert result["invoices"][0].customer_id == paid_customer.id


async def test_other_period_does_not_block(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    customer = await new_customer()
    await ledger.create(
        customer_id=customer.id,
        invoice_number="INV-202312-0001",
        amount=Decimal("800.00"),
        billing_period="2023-12",
        due_date=date(2023, 12, 31),
    )

    result = await generator.generate(PERIOD, DUE)
    assert result["created"] == 1


async def test_fee_snapshot_taken_at_issuance(generator: InvoiceGenerator, new_customer):
    await new_customer("Premium Customer", PlanType.PREMIUM)
    result = await generator.generate(PERIOD, DUE)
    assert result["invoices"][0].amount == Decimal("1400.00")


async def test_number_collisions_do_not_stop_the_run(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    for name in ("Alpha", "Bravo", "Charlie"):
        await new_customer(name)

    with patch(
        "app.services.invoice_generator.generate_invoice_number",
        return_value="INV-202401-0001",
    ):
        result = await generator.generate(PERIOD, DUE)

    assert result["created"] == 1
    assert result["failed"] == 2
    # skipped is roster minus created, so it includes the failures
    assert result["skipped"] == 2
    assert len(await ledger.list()) == 1


async def test_store_error_on_one_customer(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    await new_customer("Alpha")
    await new_customer("Bravo")

    real_issue = ledger.issue
    calls = []

    async def flaky_issue(**kwargs):
        calls.append(kwargs["customer_id"])
        if len(calls) == 1:
            raise SQLAlchemyError("connection reset")
        return await real_issue(**kwargs)

    ledger.issue = flaky_issue
    result = await generator.generate(PERIOD, DUE)

    assert len(calls) == 2
    assert result["created"] == 1
    assert result["failed"] == 1
    assert result["invoices"][0].customer_id == calls[1]


async def test_driver_timeout_on_one_customer(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    await new_customer("Alpha")
    await new_customer("Bravo")

    real_issue = ledger.issue
    calls = []

    async def timing_out_issue(**kwargs):
        calls.append(kwargs["customer_id"])
        if len(calls) == 1:
            raise asyncio.TimeoutError()
        return await real_issue(**kwargs)

    ledger.issue = timing_out_issue
    result = await generator.generate(PERIOD, DUE)

    assert result["created"] == 1
    assert result["failed"] == 1
    assert result["skipped"] == 1
    assert await ledger.find_customer_ids_by_period_and_status(
        PERIOD, InvoiceStatus.PENDING
    ) == {calls[1]}


async def test_customer_lookup_failure_keeps_counts(
    generator: InvoiceGenerator, ledger: InvoiceLedger, customers, new_customer
):
    customer = await new_customer("Alpha")

    with patch.object(
        customers,
        "get_many",
        side_effect=OperationalError("SELECT", {}, Exception("database went away")),
    ):
        result = await generator.generate(PERIOD, DUE)

    assert result["created"] == 1
    assert result["failed"] == 0
    assert result["skipped"] == 0
    assert result["invoices"][0].customer_id == customer.id
    assert result["invoices"][0].customer is None
    assert await ledger.find_customer_ids_by_period_and_status(
        PERIOD, InvoiceStatus.PENDING
    ) == {customer.id}


async def test_failed_customers_are_retried_next_run(
    generator: InvoiceGenerator, ledger: InvoiceLedger, new_customer
):
    await new_customer("Alpha")
    await new_customer("Bravo")
    with patch(
        "app.services.invoice_generator.generate_invoice_number",
        return_value="INV-202401-0001",
    ):
        await generator.generate(PERIOD, DUE)

    result = await generator.generate(PERIOD, DUE)

    assert result["created"] == 1
    assert result["skipped"] == 1
    assert len(await ledger.list()) == 2
