import pytest
from pydantic import BaseModel, ValidationError

from jurisdiction import Alpha2, Alpha3, Jurisdiction, parse


class Shipment(BaseModel):
    origin: Jurisdiction
    destination: Jurisdiction | None = None


def test_serializes_as_alpha2():
    shipment = Shipment(origin=parse("SWE"))
    assert shipment.model_dump_json() == '{"origin":"SE","destination":null}'


def test_json_round_trip():
    shipment = Shipment(origin=parse("SE"), destination=parse("NO"))
    restored = Shipment.model_validate_json(shipment.model_dump_json())
    assert restored.origin == parse("SE")
    assert restored.destination == Alpha3.NOR
    assert restored == shipment


def test_python_dump_keeps_the_handle():
    dumped = Shipment(origin=parse("SE")).model_dump()
    assert isinstance(dumped["origin"], Jurisdiction)
    assert dumped["origin"] == Alpha2.SE


def test_accepts_codes_in_either_form():
    assert Shipment.model_validate({"origin": "swe"}).origin == Alpha2.SE
    assert Shipment.model_validate({"origin": Alpha2.DK}).origin == Alpha3.DNK
    assert Shipment.model_validate_json('{"origin": "nor"}').origin == Alpha2.NO


def test_rejects_unknown_codes():
    with pytest.raises(ValidationError):
        Shipment.model_validate({"origin": "ZZ"})
    with pytest.raises(ValidationError):
        Shipment.model_validate_json('{"origin": "XYZ"}')
    with pytest.raises(ValidationError):
        Shipment.model_validate_json('{"origin": "\u00df"}')
    with pytest.raises(ValidationError):
        Shipment.model_validate({"origin": "\u017fE"})


def test_rejects_non_text():
    with pytest.raises(ValidationError):
        Shipment.model_validate({"origin": 752})
    with pytest.raises(ValidationError):
        Shipment.model_validate_json('{"origin": 752}')


def test_json_schema_is_a_string():
    schema = Shipment.model_json_schema()
    assert schema["properties"]["origin"]["type"] == "string"
