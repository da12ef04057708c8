"""Scan API endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from clearance_scout.api.deps import Services, get_services, get_user_id
from clearance_scout.db.storage import RESULT_SORTS
from clearance_scout.scan.errors import QuotaExceededError, ScanValidationError, UserNotFoundError
from clearance_scout.scan.orchestrator import ScanRequest

router = APIRouter(prefix="/api/scans", tags=["scans"])


# Request / response models
class CreateScanRequest(BaseModel):
    """Request model for a new scan."""
    retailer: str
    zip_code: Optional[str] = None
    product_selection: str = "all"
    specific_skus: List[str] = Field(default_factory=list)
    clearance_only: bool = False
    category: Optional[str] = None
    price_range: Optional[str] = None
    minimum_discount_percent: Optional[float] = Field(default=None, ge=0, le=100)
    minimum_dollars_off: Optional[Decimal] = Field(default=None, ge=0)
    sort_by: str = "discount-percent"


class ScanResponse(BaseModel):
    """Response model for a scan."""
    id: str
    retailer: str
    zip_code: str
    plan: str
    product_selection: str
    specific_skus: Optional[List[str]]
    clearance_only: bool
    category: Optional[str]
    price_range: Optional[str]
    minimum_discount_percent: Optional[float]
    minimum_dollars_off: Optional[Decimal]
    sort_by: str
    status: str
    store_count: int
    result_count: int
    clearance_count: int
    created_at: datetime
    started_at: Optional[datetime]
    completed_at: Optional[datetime]

    class Config:
        from_attributes = True


class UsageResponse(BaseModel):
    used: int
    limit: int
    remaining: int
    reset_date: date


class CreateScanResponse(BaseModel):
    scan: ScanResponse
    usage: UsageResponse


class ScanResultResponse(BaseModel):
    """Response model for one scan result row."""
    id: str
    store_id: str
    store_name: Optional[str]
    product_name: str
    sku: Optional[str]
    product_url: str
    clearance_price: Optional[Decimal]
    was_price: Optional[Decimal]
    save_percent: Optional[str]
    in_stock: Optional[str]
    delivery_available: Optional[bool]
    is_on_clearance: bool
    is_price_suppressed: bool
    purchase_in_store: bool
    category: Optional[str]
    source: str
    observed_at: datetime

    class Config:
        from_attributes = True


class ScanResultsPage(BaseModel):
    scan_id: str
    status: str
    total: int
    page: int
    limit: int
    results: List[ScanResultResponse]


@router.post("", response_model=CreateScanResponse, status_code=status.HTTP_201_CREATED)
async def create_scan(
    body: CreateScanRequest,
    user_id: str = Depends(get_user_id),
    services: Services = Depends(get_services),
):
    """
    Create a scan and start it in the background.

    Returns immediately with the pending scan; poll GET /api/scans/{id} for status.
    """
    request = ScanRequest(**body.model_dump())
    try:
        scan = await services.orchestrator.create_scan(user_id, request)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except ScanValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except QuotaExceededError as e:
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={
                "error": str(e),
                "limit": e.limit,
                "used": e.used,
                "remaining": e.remaining,
                "reset_date": e.reset_date.isoformat(),
                "upgrade_required": True,
            },
        )

    usage = await services.orchestrator.usage(user_id)
    return CreateScanResponse(scan=ScanResponse.model_validate(scan), usage=UsageResponse(**usage))


@router.get("", response_model=List[ScanResponse])
async def list_scans(
    limit: int = Query(50, ge=1, le=200),
    user_id: str = Depends(get_user_id),
    services: Services = Depends(get_services),
):
    """List the caller's scans, newest first."""
    return await services.storage.list_scans(user_id, limit=limit)


@router.get("/usage", response_model=UsageResponse)
async def get_usage(
    user_id: str = Depends(get_user_id),
    services: Services = Depends(get_services),
):
    """Scans used this month against the caller's plan."""
    try:
        return await services.orchestrator.usage(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/{scan_id}", response_model=ScanResponse)
async def get_scan(
    scan_id: str,
    user_id: str = Depends(get_user_id),
    services: Services = Depends(get_services),
):
    """Get a scan owned by the caller."""
    scan = await services.storage.get_scan_for_user(scan_id, user_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")
    return scan


@router.get("/{scan_id}/results", response_model=ScanResultsPage)
async def get_scan_results(
    scan_id: str,
    clearance_only: bool = False,
    category: Optional[str] = None,
    search: Optional[str] = None,
    store_id: Optional[str] = None,
    sort_by: str = "discount-percent",
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    user_id: str = Depends(get_user_id),
    services: Services = Depends(get_services),
):
    """Get a page of results for a scan owned by the caller."""
    scan = await services.storage.get_scan_for_user(scan_id, user_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")
    if sort_by not in RESULT_SORTS:
        raise HTTPException(status_code=400, detail=f"Unknown sort order: {sort_by}")

    results, total = await services.storage.get_scan_results(
        scan_id,
        clearance_only=clearance_only,
        category=category,
        search=search,
        store_id=store_id,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )
    return ScanResultsPage(
        scan_id=scan_id,
        status=scan.status,
        total=total,
        page=page,
        limit=limit,
        results=[ScanResultResponse.model_validate(row) for row in results],
    )
