"""Records exchanged with the upstream port-information API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


def _as_mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"cannot decode {type(data).__name__} into {kind}")
    return data


def _int_field(data: Mapping[str, Any], key: str, kind: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {value!r} into {kind}.{key} of type int")
    return value


def _float_field(data: Mapping[str, Any], key: str, kind: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"cannot decode {value!r} into {kind}.{key} of type float")
    return float(value)


def _str_field(data: Mapping[str, Any], key: str, kind: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {value!r} into {kind}.{key} of type string")
    return value


def _plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass
class Negara:
    """A country."""

    id_negara: int = 0
    kode_negara: str = ""
    nama_negara: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Negara:
        """Decode a JSON object; missing or null fields take empty values."""
        mapping = _as_mapping(data, "Negara")
        return cls(
            id_negara=_int_field(mapping, "id_negara", "Negara"),
            kode_negara=_str_field(mapping, "kode_negara", "Negara"),
            nama_negara=_str_field(mapping, "nama_negara", "Negara"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Pelabuhan:
    """A port belonging to a country."""

    id_pelabuhan: str = ""
    nama_pelabuhan: str = ""
    id_negara: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Pelabuhan:
        """Decode a JSON object; missing or null fields take empty values."""
        mapping = _as_mapping(data, "Pelabuhan")
        return cls(
            id_pelabuhan=_str_field(mapping, "id_pelabuhan", "Pelabuhan"),
            nama_pelabuhan=_str_field(mapping, "nama_pelabuhan", "Pelabuhan"),
            id_negara=_str_field(mapping, "id_negara", "Pelabuhan"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Barang:
    """Goods handled at a port."""

    id_barang: int = 0
    nama_barang: str = ""
    id_pelabuhan: int = 0
    description: str = ""
    diskon: float = 0.0
    harga: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Barang:
        """Decode a JSON object; missing or null fields take empty values."""
        mapping = _as_mapping(data, "Barang")
        return cls(
            id_barang=_int_field(mapping, "id_barang", "Barang"),
            nama_barang=_str_field(mapping, "nama_barang", "Barang"),
            id_pelabuhan=_int_field(mapping, "id_pelabuhan", "Barang"),
            description=_str_field(mapping, "description", "Barang"),
            diskon=_float_field(mapping, "diskon", "Barang"),
            harga=_float_field(mapping, "harga", "Barang"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ApiResponse:
    """A successful API envelope."""

    status: str
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "message": self.message, "data": _plain(self.data)}


@dataclass
class ErrorResponse:
    """An error API envelope; the error detail is left out when empty."""

    status: str
    message: str
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.error:
            result["error"] = self.error
        return result