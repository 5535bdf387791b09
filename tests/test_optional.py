"""Optional container behaviour for both variants."""

from unittest.mock import Mock

import pytest

from streamkit import NoSuchElementError, Optional
from streamkit.optional import empty, of, of_nullable


class TestFactories:
    def test_empty(self):
        assert empty().is_empty()
        assert Optional.empty() == Optional.Empty()

    def test_of_wraps_unconditionally(self):
        assert of(12).get() == 12
        assert Optional.of(None).is_present()

    def test_of_nullable(self):
        assert of_nullable(None).is_empty()
        assert of_nullable("x").get() == "x"

    def test_of_nullable_keeps_falsy_values(self):
        """Only None is absent."""
        assert of_nullable(0).get() == 0
        assert of_nullable("").get() == ""
        assert of_nullable(False).get() is False

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            Optional(kind="maybe")  # type: ignore[arg-type]

    def test_empty_cannot_hold_value(self):
        with pytest.raises(ValueError):
            Optional(kind="empty", value=1)


class TestPresent:
    """Present variant."""

    def test_filter_match_returns_self(self):
        optional = Optional.of(5)
        assert optional.filter(lambda v: v > 1) is optional

    def test_filter_mismatch_returns_empty(self):
        assert Optional.of(5).filter(lambda v: v > 10).is_empty()

    def test_flat_map_does_not_rewrap(self):
        result = Optional.of(2).flat_map(lambda v: Optional.of(str(v)))
        assert result == Optional.of("2")

    def test_get(self):
        assert Optional.of("value").get() == "value"

    def test_if_present_calls_action(self):
        action = Mock()
        Optional.of(3).if_present(action)
        action.assert_called_once_with(3)

    def test_if_present_or_else_calls_action_only(self):
        action, fallback = Mock(), Mock()
        Optional.of(3).if_present_or_else(action, fallback)
        action.assert_called_once_with(3)
        fallback.assert_not_called()

    def test_map(self):
        assert Optional.of(12).map(lambda x: x + 1).get() == 13

    def test_map_to_none_stays_present(self):
        assert Optional.of(12).map(lambda _: None).is_present()

    def test_or_returns_self(self):
        optional = Optional.of(1)
        supplier = Mock()
        assert optional.or_(supplier) is optional
        supplier.assert_not_called()

    def test_or_else_variants_return_value(self):
        supplier = Mock()
        optional = Optional.of(1)
        assert optional.or_else(2) == 1
        assert optional.or_else_get(supplier) == 1
        assert optional.or_else_throw() == 1
        assert optional.or_else_throw(supplier) == 1
        supplier.assert_not_called()

    def test_presence_is_idempotent(self):
        optional = Optional.of(1)
        for _ in range(3):
            assert optional.is_present() is True
            assert optional.is_empty() is False


class TestEmpty:
    """Empty variant never calls mappers or predicates."""

    def test_filter(self):
        predicate = Mock()
        optional = Optional.empty()
        assert optional.filter(predicate) is optional
        predicate.assert_not_called()

    def test_flat_map(self):
        mapper = Mock()
        assert Optional.empty().flat_map(mapper).is_empty()
        mapper.assert_not_called()

    def test_get_raises(self):
        with pytest.raises(NoSuchElementError):
            Optional.empty().get()

    def test_no_such_element_is_lookup_error(self):
        with pytest.raises(LookupError):
            Optional.empty().get()

    def test_if_present_is_noop(self):
        action = Mock()
        Optional.empty().if_present(action)
        action.assert_not_called()

    def test_if_present_or_else_runs_fallback(self):
        action, fallback = Mock(), Mock()
        Optional.empty().if_present_or_else(action, fallback)
        fallback.assert_called_once_with()
        action.assert_not_called()

    def test_map(self):
        mapper = Mock()
        assert Optional.empty().map(mapper).is_empty()
        mapper.assert_not_called()

    def test_or_returns_supplied_optional(self):
        expected = Optional.of(12)
        supplier = Mock(return_value=expected)
        assert Optional.empty().or_(supplier) is expected
        supplier.assert_called_once_with()

    def test_or_else(self):
        assert Optional.empty().or_else("else") == "else"

    def test_or_else_get(self):
        supplier = Mock(return_value=12)
        assert Optional.empty().or_else_get(supplier) == 12
        supplier.assert_called_once_with()

    def test_or_else_throw_default(self):
        with pytest.raises(NoSuchElementError):
            Optional.empty().or_else_throw()

    def test_or_else_throw_supplied(self):
        error = RuntimeError("Supplied Error")
        supplier = Mock(return_value=error)
        with pytest.raises(RuntimeError) as exc_info:
            Optional.empty().or_else_throw(supplier)
        assert exc_info.value is error
        supplier.assert_called_once_with()

    def test_presence_is_idempotent(self):
        optional = Optional.empty()
        for _ in range(3):
            assert optional.is_empty() is True
            assert optional.is_present() is False


def test_empties_compare_by_value() -> None:
    assert Optional.empty() == Optional.empty()
    assert Optional.empty() != Optional.of(None)


def test_repr() -> None:
    assert repr(Optional.of(1)) == "Optional.Present(1)"
    assert repr(Optional.empty()) == "Optional.Empty()"
