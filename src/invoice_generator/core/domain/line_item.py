"""
LineItem — Модель позиции счёта

Одна позиция счёта: наименование, цена за единицу и количество.

Mutable Pydantic модель: поля меняются присваиванием, каждое присваивание
проходит ту же конверсию, что и конструктор (validate_assignment=True).
Бизнес-правил (знак цены, точность, итоги) модель не содержит.
"""

import json
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, Field, field_serializer, field_validator

from invoice_generator.core.domain.decimals import DECIMAL_ZERO, to_decimal


# =============================================================================
# LINE ITEM MODEL
# =============================================================================


class LineItem(BaseModel):
    """
    Модель позиции счёта.

    Все поля опциональны: LineItem() даёт пустое имя и нулевые price/quantity.
    Два экземпляра с одинаковыми значениями равны, но независимы.
    """

    name: str = Field(default="", description="Наименование товара/услуги (может быть пустым)")
    price: Decimal = Field(default=DECIMAL_ZERO, description="Цена за единицу (fixed-point)")
    quantity: Decimal = Field(
        default=DECIMAL_ZERO, description="Количество единиц (дробное допустимо, например вес)"
    )

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @field_validator("price", "quantity", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Decimal:
        """
        Конверсия ввода в конечный Decimal.

        float идёт через repr, поэтому 9.99 хранится как Decimal("9.99").
        """
        try:
            return to_decimal(v)
        except TypeError as e:
            # Pydantic оборачивает в ValidationError только ValueError
            raise ValueError(str(e)) from e

    @field_serializer("price", "quantity", when_used="json")
    def serialize_decimal(self, v: Decimal) -> str:
        # Фиксированная нотация: "100", а не "1E+2"
        return format(v, "f")

    # -------------------------------------------------------------------------
    # Interchange surface: {name, price, quantity}
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Сериализация в dict с price/quantity в виде десятичных строк.

        Returns:
            {"name": str, "price": str, "quantity": str}
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        """
        Десериализация из dict.

        Args:
            data: dict с ключами name/price/quantity (числа или десятичные строки)

        Raises:
            ValidationError: Если значения не конвертируются или есть лишние ключи
        """
        return cls.model_validate(data)

    def to_json(self) -> str:
        """Сериализация в JSON текст."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: str) -> "LineItem":
        """
        Десериализация из JSON текста.

        Дробные JSON числа читаются сразу в Decimal, минуя float.

        Raises:
            json.JSONDecodeError: Если текст не является валидным JSON
            ValidationError: Если значения не конвертируются или есть лишние ключи
        """
        return cls.model_validate(json.loads(text, parse_float=Decimal))
