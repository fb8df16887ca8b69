from __future__ import annotations

import logging

import pytest
from pydantic import TypeAdapter, ValidationError

from topoid.report import ids
from topoid.report.components import (
    InvalidComponentError,
    NodeIDFactory,
    RawComponent,
    ensure_delimiter_free,
)


def test_ensure_delimiter_free_accepts_plain_components() -> None:
    ensure_delimiter_free("probe-42", "10.0.0.1", "80", "")


@pytest.mark.parametrize(("value", "character"), [("a;b", ";"), ("a|b", "|")])
def test_ensure_delimiter_free_rejects_reserved(value: str, character: str) -> None:
    with pytest.raises(InvalidComponentError) as exc:
        ensure_delimiter_free("ok", value)

    assert exc.value.value == value
    assert exc.value.character == character


def test_ensure_delimiter_free_with_custom_reserved_set() -> None:
    ensure_delimiter_free("a;b", reserved={","})
    with pytest.raises(InvalidComponentError):
        ensure_delimiter_free("a,b", reserved={","})


def test_raw_component_type() -> None:
    adapter = TypeAdapter(RawComponent)

    assert adapter.validate_python("host-a") == "host-a"
    with pytest.raises(ValidationError, match="reserved character"):
        adapter.validate_python("host;a")


def test_lax_factory_matches_plain_constructors() -> None:
    factory = NodeIDFactory(strict=False)

    assert factory.host("h") == ids.make_host_node_id("h")
    assert factory.process("h", "1") == ids.make_process_node_id("h", "1")
    assert factory.container("h", "c") == ids.make_container_node_id("h", "c")
    assert factory.address("h", "127.0.0.1") == ids.make_address_node_id("h", "127.0.0.1")
    assert factory.endpoint("h", "10.0.0.1", "80") == ids.make_endpoint_node_id("h", "10.0.0.1", "80")
    assert factory.pseudo("a", "b") == ids.make_pseudo_node_id("a", "b")
    assert factory.adjacency("h;1") == ids.make_adjacency_id("h;1")
    assert factory.edge("h;1", "h;2") == ids.make_edge_id("h;1", "h;2")
    # Lax mode passes corrupting input straight through.
    assert factory.process("h;x", "1") == "h;x;1"


def test_strict_factory_rejects_reserved_components(caplog: pytest.LogCaptureFixture) -> None:
    factory = NodeIDFactory(strict=True)
    caplog.set_level(logging.WARNING, logger="topoid.report.components")

    with pytest.raises(InvalidComponentError):
        factory.process("h;x", "1")
    with pytest.raises(InvalidComponentError):
        factory.endpoint("h", "10.0.0.1", "80|81")
    with pytest.raises(InvalidComponentError):
        factory.pseudo("the", "inter;net")

    assert len(caplog.records) == 3
    assert all(record.levelno == logging.WARNING for record in caplog.records)


def test_strict_factory_allows_scope_delimiter_in_node_ids() -> None:
    factory = NodeIDFactory(strict=True)

    assert factory.edge("h1;10.0.0.1", "h2;10.0.0.2") == "h1;10.0.0.1|h2;10.0.0.2"
    assert factory.adjacency("h1;<host>") == ">h1;<host>"
    with pytest.raises(InvalidComponentError):
        factory.edge("a|b", "c")


def test_factory_strictness_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOPOID_STRICT_COMPONENTS", "true")

    assert NodeIDFactory().strict is True
    assert NodeIDFactory(strict=False).strict is False


def test_factory_uses_extra_reserved_characters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOPOID_EXTRA_RESERVED_CHARACTERS", ",")
    factory = NodeIDFactory(strict=True)

    assert factory.reserved == frozenset({";", "|", ","})
    with pytest.raises(InvalidComponentError):
        factory.container("h", "a,b")


def test_raw_component_only_enforces_wire_delimiters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOPOID_EXTRA_RESERVED_CHARACTERS", ",")
    adapter = TypeAdapter(RawComponent)

    assert adapter.validate_python("a,b") == "a,b"
    with pytest.raises(InvalidComponentError):
        NodeIDFactory(strict=True).host("a,b")
