"""API routes for receipt processing and points lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from receipt_points.api.dependencies import get_receipt_store
from receipt_points.core.observability import sentry_breadcrumb
from receipt_points.models.schemas import Receipt, ReceiptPointsResponse, ReceiptProcessResponse
from receipt_points.services.receipt_store import ReceiptNotFoundError, ReceiptStore
from receipt_points.services.rule_engine import compute_score

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


# Handlers are plain functions: FastAPI runs each request on a worker
# thread, and the store serialises access to its map.


@router.post("/process", response_model=ReceiptProcessResponse)
def process_receipt(
    receipt: Receipt,
    store: ReceiptStore = Depends(get_receipt_store),
) -> ReceiptProcessResponse:
    """Score a receipt and return the identifier its points are stored under."""
    points = compute_score(receipt)
    receipt_id = store.add(points)
    logger.info("Processed receipt %s from %r: %s points", receipt_id, receipt.retailer, points)
    sentry_breadcrumb("receipts", "receipt processed", data={"receipt_id": receipt_id, "points": points})
    return ReceiptProcessResponse(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=ReceiptPointsResponse)
def get_receipt_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
) -> ReceiptPointsResponse:
    """Return the points awarded to a processed receipt."""
    try:
        points = store.get(receipt_id)
    except ReceiptNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Receipt not found")
    return ReceiptPointsResponse(points=points)


@router.get("/{path:path}", include_in_schema=False)
def invalid_receipt_path(path: str):
    """Reject GETs under ``/receipts/`` that are not ``{id}/points``."""
    if path == "process":
        # /receipts/process only accepts POST
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method Not Allowed",
            headers={"Allow": "POST"},
        )
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid path")
