"""Request handling for the country, port and goods endpoints."""

from __future__ import annotations

import logging
import re
from typing import Any

from pelabuhan_api.models import ApiResponse, ErrorResponse
from pelabuhan_api.service import ExternalService, ExternalServiceError

logger = logging.getLogger(__name__)

Reply = tuple[dict[str, Any], int]

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class _BadRequest(Exception):
    """A query parameter was missing or malformed."""


def _ok(message: str, data: Any) -> Reply:
    return ApiResponse(status="success", message=message, data=data).to_dict(), 200


def _error(code: int, message: str, detail: str = "") -> Reply:
    return ErrorResponse(status="error", message=message, error=detail).to_dict(), code


def _required(value: str | None, name: str) -> str:
    """Return the trimmed parameter, or raise _BadRequest if it is missing or blank."""
    if not value:
        raise _BadRequest(f"Parameter {name} is required")
    stripped = value.strip()
    if not stripped:
        raise _BadRequest(f"Parameter {name} cannot be empty")
    return stripped


def _parse_int(text: str) -> int | None:
    """Parse a signed decimal integer in the 64-bit range; None if it is not one."""
    if not _DECIMAL.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


class Controller:
    """Turns service results into JSON bodies and HTTP status codes."""

    def __init__(self, service: ExternalService) -> None:
        self.service = service

    def get_negaras(self) -> Reply:
        """List all valid countries."""
        try:
            negaras = self.service.get_negaras()
        except ExternalServiceError as exc:
            return _error(500, "Failed to fetch countries data", str(exc))
        logger.debug("negara: %s", negaras)
        if not negaras:
            return _ok("No countries found", [])
        return _ok("Countries data retrieved successfully", negaras)

    def get_pelabuhans(self, id_negara: str | None) -> Reply:
        """List the ports of the country given by the id_negara parameter."""
        try:
            id_negara = _required(id_negara, "id_negara")
        except _BadRequest as exc:
            return _error(400, str(exc))

        try:
            pelabuhans = self.service.get_pelabuhans(id_negara)
        except ExternalServiceError as exc:
            return _error(500, "Failed to fetch ports data", str(exc))

        if not pelabuhans:
            return _ok("No ports found for the specified country", [])
        return _ok("Ports data retrieved successfully", pelabuhans)

    def get_barangs(self, id_pelabuhan: str | None) -> Reply:
        """List the goods of the port given by the id_pelabuhan parameter."""
        try:
            id_pelabuhan = _required(id_pelabuhan, "id_pelabuhan")
        except _BadRequest as exc:
            return _error(400, str(exc))

        port_id = _parse_int(id_pelabuhan)
        if port_id is None:
            return _error(400, "Invalid id_pelabuhan parameter, must be a number")

        try:
            barangs = self.service.get_barangs(id_pelabuhan)
        except ExternalServiceError as exc:
            return _error(500, "Failed to fetch goods data", str(exc))

        matching = [barang for barang in barangs if barang.id_pelabuhan == port_id]
        if not matching:
            return _ok("No goods found for the specified port", [])
        return _ok("Goods data retrieved successfully", matching)