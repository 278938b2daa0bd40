"""
Information endpoint for API v1.

Returns the project name, API version and the number of records in
each collection.  Publicly accessible.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from service_hub_api.app.api.deps import get_registry
from service_hub_api.app.registry import Registry

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
def get_info(request: Request, registry: Registry = Depends(get_registry)) -> Dict[str, Any]:
    app = request.app
    return {"name": app.title, "version": app.version, "counts": registry.counts()}
