"""
Decimals — Централизованная конверсия денежных и количественных значений

Единственный допустимый способ превращения пользовательского ввода в Decimal
для полей price / quantity.

Правила:
- float конвертируется через кратчайший repr (9.99 -> Decimal("9.99")),
  а не через двоичное представление (Decimal(9.99) = 9.9900000000000002131...)
- bool не является числом в этом домене
- NaN / Infinity не являются денежными суммами
"""

from decimal import Decimal, InvalidOperation
from typing import Final, Union

DecimalInput = Union[Decimal, int, float, str]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Значение по умолчанию для числовых полей
DECIMAL_ZERO: Final[Decimal] = Decimal("0")


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value: DecimalInput) -> Decimal:
    """
    Конверсия значения в конечный Decimal.

    Args:
        value: Decimal, int, float или строка с десятичным литералом

    Returns:
        Decimal с тем же значением, что видит пользователь

    Raises:
        TypeError: Если тип не поддерживается (включая bool)
        ValueError: Если строка не парсится или значение не конечно
    """
    if isinstance(value, bool):
        raise TypeError(f"Boolean is not a decimal value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # repr даёт кратчайшую строку, которая восстанавливает тот же float
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid decimal literal: {value!r}") from None
    else:
        raise TypeError(f"Unsupported type for decimal value: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Decimal value must be finite: {value!r}")

    return result


def is_finite_decimal(value: object) -> bool:
    """
    Проверка, что значение конвертируется в конечный Decimal.

    Не выбрасывает исключений.
    """
    try:
        to_decimal(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False
    return True
