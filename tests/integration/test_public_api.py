"""Integration tests for the public API surface.

All imports are from the top-level ``json_composer`` package, never from
internal submodules.  Walks realistic documents end to end: typed graphs,
generic islands inside typed graphs, alias and import-path type ids, and the
error taxonomy.
"""

from __future__ import annotations

import json

import pytest

import json_composer
from json_composer import (
    ComposerError,
    ContractViolationError,
    DepthExceededError,
    InvalidInputError,
    compose,
    compose_object,
)
from models import Address, Bag, Employee


class Order:
    id: int | None = None
    customer: Employee | None = None
    shipping: Address | None = None
    extra: dict | None = None

    def set_id(self, id: int) -> None:
        self.id = id

    def set_customer(self, customer: Employee) -> None:
        self.customer = customer

    def set_shipping(self, shipping: Address) -> None:
        self.shipping = shipping

    def set_extra(self, extra: dict) -> None:
        self.extra = extra


ORDER = {
    "id": 7,
    "customer": {
        "name": "Ana",
        "employer": "ACME",
        "address": {"city": "Rome", "zip": "00100"},
        "tags": ["vip"],
    },
    "shipping": {"city": "Milan", "zip": "20100"},
    "extra": {"giftWrap": True, "notes": {"door-code": "1234"}},
}


class TestEndToEnd:
    def test_order_graph(self) -> None:
        order = compose_object(json.dumps(ORDER), Order)
        assert order.id == 7
        assert isinstance(order.customer, Employee)
        assert order.customer.get_name() == "Ana"
        assert order.customer.employer == "ACME"
        assert order.customer.get_address().get_city() == "Rome"
        assert order.customer.get_tags() == ["vip"]
        assert order.shipping.get_zip() == "20100"
        assert order.extra == {"giftWrap": True, "notes": {"door-code": "1234"}}

    def test_order_statistics(self) -> None:
        result = compose(json.dumps(ORDER), Order)
        # Order, Employee, customer Address, shipping Address
        assert result.objects_created == 4
        assert result.mappings_built == 2
        assert result.max_depth == 3

    def test_import_path_type_id(self) -> None:
        bag = compose_object('{"data": {}}', "models:Bag")
        assert isinstance(bag, Bag)
        assert bag.data == {}


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        ("doc", "target", "error"),
        [
            ("not json", Order, InvalidInputError),
            ("{}", "models:Nothing", InvalidInputError),
            ('{"unknown": 1}', Order, ContractViolationError),
            ('{"customer": {"nickname": "x"}}', Order, ContractViolationError),
        ],
    )
    def test_errors_share_base(
        self, doc: str, target: object, error: type[ComposerError]
    ) -> None:
        with pytest.raises(error):
            compose_object(doc, target)
        with pytest.raises(ComposerError):
            compose_object(doc, target)

    def test_depth_error(self) -> None:
        config = json_composer.ComposerConfig(max_depth=2)
        with pytest.raises(DepthExceededError):
            compose_object(json.dumps(ORDER), Order, config=config)


class TestPackageSurface:
    def test_version(self) -> None:
        assert json_composer.__version__ == "0.1.0"

    def test_all_exports(self) -> None:
        expected = {
            "ArrayPolicy",
            "Composer",
            "ComposerConfig",
            "ComposerError",
            "CompositionResult",
            "ContractViolationError",
            "DepthExceededError",
            "InvalidInputError",
            "NamingConvention",
            "SchemaRegistry",
            "TypeIntrospector",
            "compose",
            "compose_object",
        }
        assert set(json_composer.__all__) == expected
        for name in expected:
            assert hasattr(json_composer, name)
