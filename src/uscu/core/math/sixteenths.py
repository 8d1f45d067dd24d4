"""
Sixteenths: Арифметика долей дюйма

Чистые функции над парой (целые дюймы, числитель в шестнадцатых):
- Квантование произвольной дроби к шестнадцатым (floor, не округление)
- Перенос избытка шестнадцатых в целые дюймы
- Разложение дюймов на футы и дюймы
- Таблица сокращённых дробей для отображения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат переноса всегда имеет числитель в [0, 15]
2. Квантование: усечение вниз к корзине k/16, а не ближайшее значение
3. Все вычисления целочисленные и точные (без float)
"""

from typing import Final

from uscu.core.errors import InvalidLength


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# 16 шестнадцатых = 1 дюйм
SIXTEENTHS_PER_INCH: Final[int] = 16

# 12 дюймов = 1 фут
INCHES_PER_FOOT: Final[int] = 12

# Сокращённые дроби; 0 не имеет сегмента дроби
FRACTION_STRINGS: Final[dict[int, str]] = {
    1: "1/16",
    2: "1/8",
    3: "3/16",
    4: "1/4",
    5: "5/16",
    6: "3/8",
    7: "7/16",
    8: "1/2",
    9: "9/16",
    10: "5/8",
    11: "11/16",
    12: "3/4",
    13: "13/16",
    14: "7/8",
    15: "15/16",
}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: object, name: str) -> None:
    """
    Валидация неотрицательного int.

    bool отвергается, хотя и является подклассом int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidLength: Если value не int или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidLength(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise InvalidLength(f"{name} must be non-negative, got {value}")


# =============================================================================
# КВАНТОВАНИЕ И ПЕРЕНОС
# =============================================================================


def normalize_to_sixteenths(numerator: int, denominator: int) -> int:
    """
    Квантование дроби numerator/denominator к целому числу шестнадцатых.

    Результат: наибольшее k в [0, 16], такое что k/16 <= numerator/denominator.
    Значения p >= 1 дают 16; перенос выполняет вызывающий код
    (как правило, через carry_sixteenths).

    Args:
        numerator: Числитель (>= 0)
        denominator: Знаменатель (> 0)

    Returns:
        Число шестнадцатых в [0, 16]

    Raises:
        InvalidLength: Если аргументы отрицательные, не int или denominator == 0

    Examples:
        >>> normalize_to_sixteenths(7, 32)
        3
        >>> normalize_to_sixteenths(6, 8)
        12
        >>> normalize_to_sixteenths(17, 16)
        16
    """
    validate_non_negative_int(numerator, "numerator")
    validate_non_negative_int(denominator, "denominator")

    if denominator == 0:
        raise InvalidLength(f"denominator must be positive, got {denominator}")

    return min(numerator * SIXTEENTHS_PER_INCH // denominator, SIXTEENTHS_PER_INCH)


def carry_sixteenths(whole_inches: int, numerator16: int) -> tuple[int, int]:
    """
    Перенос избытка шестнадцатых в целые дюймы.

    Args:
        whole_inches: Целые дюймы (>= 0)
        numerator16: Шестнадцатые, любое неотрицательное число (может быть >= 16)

    Returns:
        (whole_inches + numerator16 // 16, numerator16 % 16)

    Raises:
        InvalidLength: Если аргументы отрицательные или не int
    """
    validate_non_negative_int(whole_inches, "whole_inches")
    validate_non_negative_int(numerator16, "numerator16")

    carry, remainder = divmod(numerator16, SIXTEENTHS_PER_INCH)
    return whole_inches + carry, remainder


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def split_feet_inches(whole_inches: int) -> tuple[int, int]:
    """Разложение целых дюймов на (футы, дюймы)."""
    return divmod(whole_inches, INCHES_PER_FOOT)


def fraction_string(numerator16: int) -> str:
    """
    Сокращённая дробь для числителя в шестнадцатых.

    Args:
        numerator16: Числитель в [0, 15]

    Returns:
        Строка дроби ("3/4") или "" для 0
    """
    return FRACTION_STRINGS.get(numerator16, "")
