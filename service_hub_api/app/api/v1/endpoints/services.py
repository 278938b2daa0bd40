"""
Service catalog endpoints for API v1.

Reads are open to everyone; creating a service requires a caller
identity, and updating or deleting one requires the caller to be the
service's provider.  The filter routes are declared before
``/{service_id}`` so their paths are not captured as ids.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from service_hub_api.app.api.deps import get_registry, unwrap
from service_hub_api.app.core.security import get_caller
from service_hub_api.app.registry import Registry
from service_hub_api.app.schemas.service import (
    ServiceCreate,
    ServiceDescriptionUpdate,
    ServiceLocationUpdate,
    ServiceRecord,
    ServiceUpdate,
)


router = APIRouter()


@router.post("/", response_model=ServiceRecord, status_code=status.HTTP_201_CREATED)
def add_service(
    payload: ServiceCreate,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ServiceRecord:
    """Create a new service.  Every text field must be non-empty."""
    return unwrap(registry.catalog.add_service(payload, caller))


@router.get("/", response_model=List[ServiceRecord])
def get_services(registry: Registry = Depends(get_registry)) -> List[ServiceRecord]:
    return unwrap(registry.catalog.get_services())


@router.get("/search", response_model=List[ServiceRecord])
def search_services_by_category(
    category: str = Query(..., description="Category, matched case-insensitively"),
    registry: Registry = Depends(get_registry),
) -> List[ServiceRecord]:
    return unwrap(registry.catalog.search_services_by_category(category))


@router.get("/by-provider", response_model=List[ServiceRecord])
def filter_services_by_provider(
    provider: str = Query(...),
    registry: Registry = Depends(get_registry),
) -> List[ServiceRecord]:
    return unwrap(registry.catalog.filter_services_by_provider(provider))


@router.get("/by-date", response_model=List[ServiceRecord])
def filter_services_by_date_range(
    start: str = Query(..., examples=["2024-01-01"]),
    end: str = Query(..., examples=["2024-01-31"]),
    registry: Registry = Depends(get_registry),
) -> List[ServiceRecord]:
    """Services dated within ``[start, end]``.

    Dates are compared as strings; use ISO 8601 (``YYYY-MM-DD``).
    """
    return unwrap(registry.catalog.filter_services_by_date_range(start, end))


@router.get("/{service_id}", response_model=ServiceRecord)
def get_service(service_id: str, registry: Registry = Depends(get_registry)) -> ServiceRecord:
    return unwrap(registry.catalog.get_service(service_id))


@router.put("/{service_id}", response_model=ServiceRecord)
def update_service(
    service_id: str,
    payload: ServiceUpdate,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ServiceRecord:
    """Merge the provided fields into the service.

    Omitted fields keep their values.  ``provider`` cannot be changed.
    """
    return unwrap(registry.catalog.update_service(service_id, payload, caller))


@router.patch("/{service_id}/location", response_model=ServiceRecord)
def update_service_location(
    service_id: str,
    payload: ServiceLocationUpdate,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ServiceRecord:
    return unwrap(registry.catalog.update_service_location(service_id, payload.location, caller))


@router.patch("/{service_id}/description", response_model=ServiceRecord)
def update_service_description(
    service_id: str,
    payload: ServiceDescriptionUpdate,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ServiceRecord:
    return unwrap(
        registry.catalog.update_service_description(service_id, payload.description, caller)
    )


@router.delete("/{service_id}", response_model=ServiceRecord)
def delete_service(
    service_id: str,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ServiceRecord:
    """Delete a service and return the removed record."""
    return unwrap(registry.catalog.delete_service(service_id, caller))
