"""Shared FastAPI dependencies."""

from fastapi import Request

from receipt_points.services.receipt_store import ReceiptStore


def get_receipt_store(request: Request) -> ReceiptStore:
    """Return the store attached to the running application by ``create_app``."""
    return request.app.state.receipt_store
