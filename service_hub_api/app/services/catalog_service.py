"""
Business logic for the service catalog.

``CatalogService`` exposes the operations on service records: adding,
updating, deleting, fetching and the category/provider/date filters.
Each operation returns a ``Result``; expected failures (invalid input,
unknown id, wrong caller) come back as ``Err`` and leave the store
unchanged.  Only the provider recorded on a service may update or
delete it.
"""

import logging
from typing import Any, List, Mapping, Union

from ..core.result import Result, capture
from ..core.security import owner_check
from ..schemas.service import ServiceCreate, ServiceRecord, ServiceUpdate
from . import queries
from .repository import ServiceRepository
from .validation import SERVICE_INVALID, parse_payload, validate_service


logger = logging.getLogger(__name__)

Payload = Union[ServiceCreate, Mapping[str, Any]]
Patch = Union[ServiceUpdate, Mapping[str, Any]]


class CatalogService:
    """Operations on service records."""

    def __init__(self, services: ServiceRepository) -> None:
        self.services = services

    def add_service(self, payload: Payload, caller: str) -> Result[ServiceRecord]:
        """Validate ``payload`` and store it as a new service.

        The caller is recorded in the log only; any caller may create a
        service for any provider.
        """

        def run() -> ServiceRecord:
            data = parse_payload(ServiceCreate, payload, SERVICE_INVALID)
            validate_service(data)
            record = self.services.insert(data)
            logger.info("Caller %s added service %s (%s)", caller, record.id, record.name)
            return record

        return capture("add_service", run)

    def update_service(self, service_id: str, payload: Patch, caller: str) -> Result[ServiceRecord]:
        """Merge a partial payload into a service owned by ``caller``."""

        def run() -> ServiceRecord:
            patch = parse_payload(ServiceUpdate, payload, "Invalid service update")
            return self.services.update(
                service_id, patch, authorize=owner_check(caller, "update this service")
            )

        return capture("update_service", run)

    def update_service_location(self, service_id: str, location: str, caller: str) -> Result[ServiceRecord]:
        return self.update_service(service_id, ServiceUpdate(location=location), caller)

    def update_service_description(self, service_id: str, description: str, caller: str) -> Result[ServiceRecord]:
        return self.update_service(service_id, ServiceUpdate(description=description), caller)

    def delete_service(self, service_id: str, caller: str) -> Result[ServiceRecord]:
        """Delete a service owned by ``caller`` and return it.

        Reviews of the service are left in place.
        """
        return capture(
            "delete_service",
            lambda: self.services.remove(
                service_id, authorize=owner_check(caller, "delete this service")
            ),
        )

    def get_service(self, service_id: str) -> Result[ServiceRecord]:
        return capture("get_service", lambda: self.services.get(service_id))

    def get_services(self) -> Result[List[ServiceRecord]]:
        return capture("get_services", self.services.list)

    def search_services_by_category(self, category: str) -> Result[List[ServiceRecord]]:
        return capture(
            "search_services_by_category",
            lambda: queries.services_by_category(self.services, category),
        )

    def filter_services_by_provider(self, provider: str) -> Result[List[ServiceRecord]]:
        return capture(
            "filter_services_by_provider",
            lambda: queries.services_by_provider(self.services, provider),
        )

    def filter_services_by_date_range(self, start_date: str, end_date: str) -> Result[List[ServiceRecord]]:
        return capture(
            "filter_services_by_date_range",
            lambda: queries.services_by_date_range(self.services, start_date, end_date),
        )
