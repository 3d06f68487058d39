import pytest

from httpparts.errors import ErrorKind, InvalidUri
from httpparts.port import Port


def test_partialeq_port():
    port_a = Port.parse("8080")
    port_b = Port.parse("8080")
    assert port_a == port_b


def test_partialeq_port_different_reprs():
    port_a = Port(8081, "8081")
    port_b = Port.parse("08081")
    assert port_a == port_b
    assert port_b == port_a
    assert port_a.as_str() == "8081"
    assert port_b.as_str() == "08081"


def test_partialeq_u16():
    port = Port.parse("8080")
    assert port == 8080
    assert 8080 == port


def test_u16_from_port():
    port = Port.parse("8080")
    assert int(port) == 8080
    assert port.as_u16() == 8080


def test_as_str_and_str():
    port = Port.parse("80")
    assert port.as_str() == "80"
    assert str(port) == "80"
    assert repr(port) == "Port(80)"


def test_max_port():
    assert Port.parse("65535").as_u16() == 65535


@pytest.mark.parametrize("text", ["", "65536", "-1", "abc", "80a", " 80", "+"])
def test_invalid_port(text):
    with pytest.raises(InvalidUri) as info:
        Port.parse(text)
    assert info.value.kind is ErrorKind.INVALID_PORT


def test_hash_matches_equality():
    assert len({Port.parse("443"), Port.parse("0443"), Port.parse("80")}) == 2


def test_not_equal_to_other_types():
    assert (Port.parse("80") == "80") is False