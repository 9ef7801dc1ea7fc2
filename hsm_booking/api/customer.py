"""Customer address and service lookups."""

import logging

from pydantic import TypeAdapter

from hsm_booking.api import endpoints
from hsm_booking.api.client import ApiClient, parse_response
from hsm_booking.schemas.customer_schema import Address, Service, normalize_service

logger = logging.getLogger(__name__)

_ADDRESS_LIST = TypeAdapter(list[Address])


def get_addresses(client: ApiClient) -> list[Address]:
    payload = client.get(endpoints.ADDRESSES) or {}
    raw = payload.get("addresses", []) if isinstance(payload, dict) else payload
    return parse_response(_ADDRESS_LIST.validate_python, raw, endpoints.ADDRESSES)


def get_service(client: ApiClient, service_id: int) -> Service:
    endpoint = endpoints.service_by_id(service_id)
    service = parse_response(normalize_service, client.get(endpoint), endpoint)
    logger.debug("Loaded service %d (%s)", service.id, service.name)
    return service
