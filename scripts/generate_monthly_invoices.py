#!/usr/bin/env python3
"""
Run monthly invoice generation outside the API (e.g. from cron).

Usage:
  python scripts/generate_monthly_invoices.py 2024-01 2024-01-31
  python scripts/generate_monthly_invoices.py            # current month, due on its last day
  # Requires DATABASE_URL and SECRET_KEY in .env (or export)
"""
import asyncio
import calendar
import os
import sys
from datetime import date

# Load .env from project root
try:
    from dotenv import load_dotenv
    _root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    load_dotenv(os.path.join(_root, ".env"))
except ImportError:
    pass

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.exceptions import NoCustomersError
from app.core.logging import setup_logging
from app.database import AsyncSessionLocal, close_db
from app.services.customer_directory import CustomerDirectory
from app.services.invoice_generator import InvoiceGenerator
from app.services.invoice_ledger import InvoiceLedger
from app.utils.time import get_utc_now


def default_period(today: date) -> tuple[str, date]:
    """Billing period label for today's month and the month's last day as due date"""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return f"{today.year:04d}-{today.month:02d}", date(today.year, today.month, last_day)


async def run(billing_period: str, due_date: date) -> int:
    try:
        async with AsyncSessionLocal() as session:
            customers = CustomerDirectory(session)
            generator = InvoiceGenerator(customers, InvoiceLedger(session, customers))
            result = await generator.generate(billing_period, due_date)
    except NoCustomersError as exc:
        print(f"ERROR: {exc.message}")
        return 1
    finally:
        await close_db()

    print(
        f"{result['message']} for {billing_period}: "
        f"created={result['created']} skipped={result['skipped']} failed={result['failed']}"
    )
    for invoice in result["invoices"]:
        print(f"  {invoice.invoice_number}  {invoice.amount:>10}  customer={invoice.customer_id}")
    return 0 if result["failed"] == 0 else 2


def main():
    setup_logging()
    if len(sys.argv) == 3:
        billing_period = sys.argv[1]
        try:
            due_date = date.fromisoformat(sys.argv[2])
        except ValueError:
            print("ERROR: due date must be YYYY-MM-DD")
            sys.exit(1)
    elif len(sys.argv) == 1:
        billing_period, due_date = default_period(get_utc_now().date())
    else:
        print(__doc__)
        sys.exit(1)

    sys.exit(asyncio.run(run(billing_period, due_date)))


if __name__ == "__main__":
    main()
