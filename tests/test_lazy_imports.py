"""Tests for edgeroute.__init__ — lazy imports cover all public names."""

import pytest

import edgeroute


@pytest.mark.parametrize("name", edgeroute.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(edgeroute, name)
    assert obj is not None, f"edgeroute.{name} resolved to None"


def test_router_is_routing_router() -> None:
    from edgeroute.routing.router import Router

    assert edgeroute.Router is Router


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        edgeroute.__getattr__("ThisDoesNotExist")
