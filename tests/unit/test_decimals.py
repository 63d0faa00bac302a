"""
Тесты для модуля конверсии Decimal

Проверяет:
1. Конверсию поддерживаемых типов без потери точности
2. Отказ для bool, неподдерживаемых типов и нечисловых строк
3. Отказ для NaN / Infinity
"""

from decimal import Decimal

import pytest

from invoice_generator.core.domain import DECIMAL_ZERO, is_finite_decimal, to_decimal


# =============================================================================
# TO_DECIMAL TESTS
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_decimal_passthrough(self) -> None:
        value = Decimal("12.345")
        assert to_decimal(value) is value

    def test_int(self) -> None:
        assert to_decimal(3) == Decimal("3")

    def test_float_uses_shortest_repr(self) -> None:
        """9.99 -> Decimal("9.99"), без двоичного хвоста"""
        result = to_decimal(9.99)
        assert result == Decimal("9.99")
        assert str(result) == "9.99"
        assert result != Decimal(9.99)

    def test_float_sum_artifact_is_preserved_as_seen(self) -> None:
        # 0.1 + 0.2 == 0.30000000000000004 в float; конверсия не "чинит" значение
        assert to_decimal(0.1 + 0.2) == Decimal("0.30000000000000004")

    def test_string(self) -> None:
        assert to_decimal("0.125") == Decimal("0.125")

    def test_string_with_whitespace(self) -> None:
        assert to_decimal("  42.50 \n") == Decimal("42.50")

    def test_negative_values_allowed(self) -> None:
        """Знак не ограничивается"""
        assert to_decimal("-5.00") == Decimal("-5.00")
        assert to_decimal(-2) == Decimal("-2")

    def test_invalid_string(self) -> None:
        with pytest.raises(ValueError, match="Invalid decimal literal"):
            to_decimal("ten")

    def test_empty_string(self) -> None:
        with pytest.raises(ValueError):
            to_decimal("")

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_rejected(self, value: bool) -> None:
        with pytest.raises(TypeError, match="Boolean"):
            to_decimal(value)

    @pytest.mark.parametrize("value", [None, [1], {"a": 1}, object()])
    def test_unsupported_type(self, value: object) -> None:
        with pytest.raises(TypeError, match="Unsupported type"):
            to_decimal(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), "NaN", "Infinity", Decimal("sNaN")],
    )
    def test_non_finite_rejected(self, value: object) -> None:
        with pytest.raises(ValueError, match="finite"):
            to_decimal(value)  # type: ignore[arg-type]


# =============================================================================
# IS_FINITE_DECIMAL TESTS
# =============================================================================


class TestIsFiniteDecimal:
    """Тесты для is_finite_decimal"""

    @pytest.mark.parametrize("value", [Decimal("1.5"), 0, 2.5, "-3", DECIMAL_ZERO])
    def test_valid(self, value: object) -> None:
        assert is_finite_decimal(value) is True

    @pytest.mark.parametrize("value", [float("nan"), "abc", True, None])
    def test_invalid(self, value: object) -> None:
        assert is_finite_decimal(value) is False
