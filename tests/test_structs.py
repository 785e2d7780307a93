import dataclasses

import pytest

from rustdrill.lessons.structs import (
    NamedColor,
    Package,
    UnitStruct,
    create_order_template,
)


def test_classic_structs():
    green = NamedColor(name="green", hex="#00FF00")
    assert green.name == "green"
    assert green.hex == "#00FF00"


def test_tuple_structs():
    green = NamedColor("green", "#00FF00")
    assert green[0] == "green"
    assert green[1] == "#00FF00"


def test_unit_structs():
    message = f"{UnitStruct()!r}s are fun!"
    assert message == "UnitStructs are fun!"


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="weight in grams must be greater than 0"):
        Package("Spain", "Austria", -2210)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    assert Package("Spain", "Spain", 1500).fees(3) == 4500