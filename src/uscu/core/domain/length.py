"""
Length: Модель длины в единицах USCU

Immutable Pydantic модель: целые дюймы + числитель в шестнадцатых дюйма.
Футы: производная единица отображения, отдельно не хранятся.

Инварианты:
- whole_inches >= 0, numerator16 в [0, 15]
- Оба поля: int (bool/float/str отвергаются)
- Любое промежуточное значение numerator16 >= 16 немедленно переносится
  в whole_inches (16 шестнадцатых = 1 дюйм)

Отрицательные длины не представимы: вычитание не поддерживается.
"""

from typing import Any, Mapping

from pydantic import BaseModel, Field, model_validator

from uscu.core.contracts import validate_length
from uscu.core.errors import InvalidLength
from uscu.core.math.sixteenths import (
    SIXTEENTHS_PER_INCH,
    carry_sixteenths,
    fraction_string,
    normalize_to_sixteenths,
    split_feet_inches,
    validate_non_negative_int,
)


class Length(BaseModel):
    """
    Длина в целых дюймах и шестнадцатых дюйма.

    Immutable модель (frozen=True): add() возвращает новый экземпляр.
    Прямой конструктор требует уже нормализованных полей; для произвольного
    числителя используйте create_from_minimal_fractional_inches().

    Инварианты проверяются на всех путях валидации (конструктор,
    model_validate, model_validate_json). model_copy(update=...) и
    model_construct() валидацию pydantic пропускают и инварианты не
    проверяют; новые значения создаются через of() или
    create_from_minimal_fractional_inches().
    """

    whole_inches: int = Field(
        ..., ge=0, strict=True, description="Полная длина в целых дюймах"
    )
    numerator16: int = Field(
        ..., ge=0, le=15, strict=True, description="Остаток в шестнадцатых дюйма"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def validate_normalized(cls, data: Any) -> Any:
        """Проверка инвариантов до валидации полей; нарушение → InvalidLength"""
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise InvalidLength(
                f"Length expects a mapping of whole_inches/numerator16, got {type(data).__name__}"
            )

        validate_non_negative_int(data.get("whole_inches"), "whole_inches")
        validate_non_negative_int(data.get("numerator16"), "numerator16")

        numerator16 = data["numerator16"]
        if numerator16 >= SIXTEENTHS_PER_INCH:
            raise InvalidLength(
                f"numerator16 must be in [0, 15], got {numerator16} "
                f"(use create_from_minimal_fractional_inches to carry)"
            )
        return data

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def of(cls, whole_inches: int, numerator16: int) -> "Length":
        """
        Прямое создание из уже нормализованных полей.

        Raises:
            InvalidLength: Если поля отрицательные, не int или numerator16 > 15
        """
        return cls(whole_inches=whole_inches, numerator16=numerator16)

    @classmethod
    def create_from_minimal_fractional_inches(
        cls, whole_inches: int, numerator16: int
    ) -> "Length":
        """
        Создание с переносом: numerator16 может быть >= 16.

        Единственный безопасный конструктор общего назначения: его должен
        использовать любой код, который не может гарантировать numerator16 <= 15.

        Args:
            whole_inches: Целые дюймы (>= 0)
            numerator16: Шестнадцатые (>= 0, любое значение)

        Returns:
            Length(whole_inches + numerator16 // 16, numerator16 % 16)

        Raises:
            InvalidLength: Если аргументы отрицательные или не int
        """
        whole, remainder = carry_sixteenths(whole_inches, numerator16)
        return cls(whole_inches=whole, numerator16=remainder)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Length":
        """
        Создание из dict, проверенного по контракту `length`.

        Raises:
            jsonschema.ValidationError: Если data не соответствует контракту
        """
        validate_length(dict(data))
        return cls(whole_inches=data["whole_inches"], numerator16=data["numerator16"])

    @staticmethod
    def normalize_to_sixteenths(numerator: int, denominator: int) -> int:
        """Квантование дроби к шестнадцатым (floor), результат в [0, 16]."""
        return normalize_to_sixteenths(numerator, denominator)

    # =========================================================================
    # DERIVED UNITS
    # =========================================================================

    @property
    def feet(self) -> int:
        return split_feet_inches(self.whole_inches)[0]

    @property
    def inches(self) -> int:
        """Дюймы сверх целых футов (0-11)"""
        return split_feet_inches(self.whole_inches)[1]

    @property
    def total_sixteenths(self) -> int:
        return self.whole_inches * SIXTEENTHS_PER_INCH + self.numerator16

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: "Length") -> "Length":
        """
        Сложение с переносом.

        Всегда безопасно: сумма числителей (до 30) проходит через
        create_from_minimal_fractional_inches.
        """
        return Length.create_from_minimal_fractional_inches(
            self.whole_inches + other.whole_inches,
            self.numerator16 + other.numerator16,
        )

    def __add__(self, other: object) -> "Length":
        if not isinstance(other, Length):
            return NotImplemented
        return self.add(other)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(self) -> str:
        """
        Каноническая строка USCU.

        Формы: F' I-N/D" | F' I" | F' N/D" | F' | I-N/D" | I" | N/D" | 0"
        """
        feet, inches = split_feet_inches(self.whole_inches)
        inch_part = "-".join(
            part for part in (str(inches) if inches else "", fraction_string(self.numerator16)) if part
        )

        if feet:
            if inch_part:
                # 1' 2-3/4"
                return f"{feet}' {inch_part}\""
            # 1'
            return f"{feet}'"

        if inch_part:
            # 2-3/4"
            return f"{inch_part}\""
        return '0"'

    def __str__(self) -> str:
        return self.render()
