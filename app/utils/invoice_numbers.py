"""Human-readable invoice numbers"""

import secrets
from datetime import datetime
from typing import Optional

from app.utils.time import get_utc_now

INVOICE_NUMBER_PREFIX = "INV"


def generate_invoice_number(now: Optional[datetime] = None) -> str:
    """
    Build an invoice number of the form INV-YYYYMM-NNNN.

    The four-digit suffix is uniform over 0000-9999, so two numbers issued in
    the same month can collide. Uniqueness is enforced by the invoices table,
    not here.

    Args:
        now: Timestamp supplying year and month (defaults to current UTC time)

    Returns:
        Invoice number, e.g. "INV-202401-0427"
    """
    now = now or get_utc_now()
    suffix = secrets.randbelow(10000)
    return f"{INVOICE_NUMBER_PREFIX}-{now.year:04d}{now.month:02d}-{suffix:04d}"
