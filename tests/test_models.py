import pytest

from pelabuhan_api.models import ApiResponse, Barang, ErrorResponse, Negara, Pelabuhan


def test_negara_round_trip():
    data = {"id_negara": 7, "kode_negara": "ID", "nama_negara": "Indonesia"}
    negara = Negara.from_dict(data)
    assert negara == Negara(7, "ID", "Indonesia")
    assert negara.to_dict() == data


def test_missing_and_null_fields_take_empty_values():
    assert Negara.from_dict({"nama_negara": None}) == Negara(0, "", "")
    assert Pelabuhan.from_dict(None) == Pelabuhan("", "", "")


def test_extra_fields_are_ignored():
    pel = Pelabuhan.from_dict(
        {"id_pelabuhan": "3", "nama_pelabuhan": "Tanjung Priok", "id_negara": "1", "x": 5}
    )
    assert pel.to_dict() == {"id_pelabuhan": "3", "nama_pelabuhan": "Tanjung Priok", "id_negara": "1"}


def test_barang_accepts_integer_prices():
    barang = Barang.from_dict(
        {"id_barang": 2, "nama_barang": "Beras", "id_pelabuhan": 3, "harga": 100, "diskon": 5}
    )
    assert barang.harga == 100
    assert isinstance(barang.harga, float)
    assert barang.description == ""
    assert Barang.from_dict(barang.to_dict()) == barang


@pytest.mark.parametrize(
    "cls, data",
    [
        (Negara, {"id_negara": "1"}),
        (Negara, {"id_negara": 1.5}),
        (Negara, {"id_negara": True}),
        (Pelabuhan, {"id_pelabuhan": 3}),
        (Barang, {"harga": "mahal"}),
        (Barang, [1, 2]),
    ],
)
def test_type_mismatch_raises(cls, data):
    with pytest.raises(ValueError):
        cls.from_dict(data)


def test_api_response_serialises_nested_records():
    response = ApiResponse("success", "ok", [Negara(1, "ID", "Indonesia")])
    assert response.to_dict() == {
        "status": "success",
        "message": "ok",
        "data": [{"id_negara": 1, "kode_negara": "ID", "nama_negara": "Indonesia"}],
    }


def test_api_response_with_empty_list():
    assert ApiResponse("success", "none", []).to_dict()["data"] == []


def test_error_response_omits_empty_error():
    assert ErrorResponse("error", "bad").to_dict() == {"status": "error", "message": "bad"}
    assert ErrorResponse("error", "bad", "boom").to_dict()["error"] == "boom"