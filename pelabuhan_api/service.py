"""Client for the upstream API that supplies countries, ports and goods."""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, TypeVar

import requests

from pelabuhan_api.models import Barang, Negara, Pelabuhan

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080/api/v1"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "Pelabuhan-Service/1.0"

_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": USER_AGENT,
}

T = TypeVar("T")


class ExternalServiceError(Exception):
    """The upstream API could not be reached or gave an unusable answer."""


class ExternalService(ABC):
    """Source of country, port and goods records."""

    @abstractmethod
    def get_negaras(self) -> list[Negara]:
        """Return the valid countries."""

    @abstractmethod
    def get_pelabuhans(self, id_negara: str) -> list[Pelabuhan]:
        """Return the valid ports of a country."""

    @abstractmethod
    def get_barangs(self, id_pelabuhan: str) -> list[Barang]:
        """Return the valid goods of a port."""


def _clean(text: str) -> str:
    return text.replace("\r\n", "").strip()


def validate_negaras(negaras: list[Negara]) -> list[Negara]:
    """Keep countries with a positive id, a name and a code; tidy their text."""
    valid = [
        replace(n, nama_negara=_clean(n.nama_negara), kode_negara=_clean(n.kode_negara))
        for n in negaras
        if n.id_negara > 0 and n.nama_negara.strip() and n.kode_negara.strip()
    ]
    logger.info("Validated %d out of %d negaras", len(valid), len(negaras))
    return valid


def validate_pelabuhans(pelabuhans: list[Pelabuhan], id_negara: str) -> list[Pelabuhan]:
    """Keep ports with an id and a name that belong to the given country."""
    valid = [
        replace(p, nama_pelabuhan=_clean(p.nama_pelabuhan))
        for p in pelabuhans
        if p.id_pelabuhan.strip() and p.nama_pelabuhan.strip() and p.id_negara == id_negara
    ]
    logger.info(
        "Validated %d out of %d pelabuhans for id_negara=%s",
        len(valid),
        len(pelabuhans),
        id_negara,
    )
    return valid


def validate_barangs(barangs: list[Barang]) -> list[Barang]:
    """Keep goods with a positive id, a name and a positive price; tidy their text."""
    valid = [
        replace(b, nama_barang=_clean(b.nama_barang), description=_clean(b.description))
        for b in barangs
        if b.id_barang > 0 and b.nama_barang.strip() and b.harga > 0
    ]
    logger.info("Validated %d out of %d barangs", len(valid), len(barangs))
    return valid


def _parse_error(reason: Any, body: str) -> ExternalServiceError:
    return ExternalServiceError(f"failed to parse response: {reason}, response body: {body}")


def _unwrap(payload: dict[str, Any], decode: Callable[[Any], T]) -> list[T] | None:
    """Read a {status, message, data} envelope; None unless it is a success."""
    status = payload.get("status")
    message = payload.get("message")
    data = payload.get("data")
    if status is not None and not isinstance(status, str):
        return None
    if message is not None and not isinstance(message, str):
        return None
    if data is None:
        items: list[T] = []
    elif not isinstance(data, list):
        return None
    else:
        try:
            items = [decode(item) for item in data]
        except ValueError:
            return None
    return items if status == "success" else None


def _parse_records(body: str, decode: Callable[[Any], T]) -> list[T]:
    """Decode either a success envelope or a bare JSON array of records."""
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise _parse_error(exc, body) from exc

    if isinstance(payload, dict):
        records = _unwrap(payload, decode)
        if records is not None:
            return records
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise _parse_error(f"cannot decode {type(payload).__name__} into a list", body)
    try:
        return [decode(item) for item in payload]
    except ValueError as exc:
        raise _parse_error(exc, body) from exc


class HttpExternalService(ExternalService):
    """ExternalService backed by HTTP calls to the upstream API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_env(cls) -> HttpExternalService:
        """Build a client from EXTERNAL_API_URL, falling back to the default URL."""
        return cls(base_url=os.environ.get("EXTERNAL_API_URL") or DEFAULT_BASE_URL)

    def _fetch(self, url: str) -> str:
        logger.info("Fetching %s", url)
        try:
            response = self.session.get(url, headers=_HEADERS, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ExternalServiceError(f"failed to make request to {url}: {exc}") from exc
        body = response.content.decode("utf-8", errors="replace")
        if response.status_code != 200:
            raise ExternalServiceError(
                f"API returned status code: {response.status_code} for URL: {url}, response: {body}"
            )
        logger.debug("External API response from %s: %s", url, body)
        return body

    def get_negaras(self) -> list[Negara]:
        body = self._fetch(f"{self.base_url}/negaras")
        return validate_negaras(_parse_records(body, Negara.from_dict))

    def get_pelabuhans(self, id_negara: str) -> list[Pelabuhan]:
        body = self._fetch(f"{self.base_url}/pelabuhans?id_negara={id_negara}")
        return validate_pelabuhans(_parse_records(body, Pelabuhan.from_dict), id_negara)

    def get_barangs(self, id_pelabuhan: str) -> list[Barang]:
        body = self._fetch(f"{self.base_url}/barangs?id_pelabuhan={id_pelabuhan}")
        return validate_barangs(_parse_records(body, Barang.from_dict))