"""Property-based tests for CLI configuration overrides.

Uses hypothesis to generate arbitrary inputs and verify that
``parse_override`` and ``coerce_value`` satisfy their contracts
for all representable strings, not just hand-picked examples.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sorani_calendar.adapters.config.overrides import coerce_value, parse_override

ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)
identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    """Any text decodes to a JSON-compatible Python value."""
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_decodes_integers(value: int) -> None:
    """Integer text becomes an int."""
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(raw=identifiers)
def test_coerce_value_keeps_identifiers_as_text(raw: str) -> None:
    """Identifier-like text that is not a JSON keyword stays a string."""
    if raw in ("true", "false", "null"):
        return

    assert coerce_value(raw) == raw


@pytest.mark.os_agnostic
@given(section=identifiers, key=identifiers, value=st.text(max_size=50))
@settings(max_examples=200)
def test_parse_override_accepts_every_well_formed_entry(section: str, key: str, value: str) -> None:
    """SECTION.KEY=VALUE always parses with the parts intact."""
    override = parse_override(f"{section}.{key}={value}")

    assert override.section == section
    assert override.key_path == (key,)
    assert override.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
def test_parse_override_rejects_text_without_equals(raw: str) -> None:
    """No ``=`` means no override."""
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)
