"""
Scaled Arithmetic — Fixed-point операции над большими целыми

Модуль обеспечивает точные операции между token amounts (целые числа
произвольной величины, в т.ч. 256-битного диапазона) и десятичными ценами:
- Умножение int × decimal через масштабирование цены в целый числитель
- Деление int / int с десятичным результатом через масштабирование числителя
- Целочисленное деление с усечением к нулю (семантика big-integer библиотек)
- Парсинг amounts и цен из строкового представления (GraphQL payload)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточные вычисления только целочисленные (никакого float для amounts)
2. Округление цены: half-up к +inf, т.е. floor(b * scale + 0.5)
3. Деление усекается к нулю, а не к -inf (Python `//` НЕ подходит)
4. Точность результата ограничена 1/scale
5. scale > 0, фиксирован в пределах одного расчёта
"""

from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знаменатель fixed-point представления цены (4 знака после запятой)
DEFAULT_SCALE: Final[int] = 10000

_HALF: Final[Decimal] = Decimal("0.5")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_scale(scale: int) -> None:
    """
    Валидация scale factor.

    Args:
        scale: Знаменатель fixed-point представления

    Raises:
        ValueError: Если scale не положительное целое
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"scale must be an integer, got {scale!r}")

    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_amount(value: int | str, name: str = "amount") -> int:
    """
    Парсинг token amount в int.

    Принимает int или десятичную строку (как приходит из subgraph).
    float и bool отклоняются: float уже потерял точность.

    Args:
        value: Исходное значение
        name: Имя поля (для сообщения об ошибке)

    Returns:
        Значение как int произвольной точности

    Raises:
        ValueError: Если значение не является целым числом

    Examples:
        >>> parse_amount("1000000000000000000000")
        1000000000000000000000
        >>> parse_amount("-42")
        -42
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer amount, got {value!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        # int() допускает "1_000" и не-ASCII цифры ("١٢٣"); для amounts это невалидно
        if text and text.isascii() and "_" not in text:
            try:
                return int(text, 10)
            except ValueError:
                pass

    raise ValueError(f"{name} must be an integer amount, got {value!r}")


def parse_price(value: float | Decimal | str) -> Decimal:
    """
    Парсинг цены outcome token в Decimal.

    float конвертируется через str(), чтобы не тащить двоичный хвост
    (0.29 → Decimal("0.29"), а не 0.28999999999999998002...).

    Raises:
        ValueError: Если цена не является конечным десятичным числом
    """
    if isinstance(value, bool):
        raise ValueError(f"price must be a decimal number, got {value!r}")

    try:
        if isinstance(value, Decimal):
            price = value
        elif isinstance(value, (int, float)):
            price = Decimal(str(value))
        else:
            price = Decimal(value.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise ValueError(f"price must be a decimal number, got {value!r}") from exc

    if not price.is_finite():
        raise ValueError(f"price must be finite, got {value!r}")

    return price


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def truncating_divide(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к -inf: -7 // 2 == -4. Big-integer арифметика
    (и ожидаемый результат расчёта) усекает к нулю: -7 / 2 → -3.

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> truncating_divide(7, 2)
        3
        >>> truncating_divide(-7, 2)
        -3
        >>> truncating_divide(7, -2)
        -3
    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


def scale_decimal(b: float | Decimal | str, scale: int = DEFAULT_SCALE) -> int:
    """
    Перевод десятичного множителя в целый числитель: floor(b * scale + 0.5).

    Округление half-up к +inf (2.5 → 3, -2.5 → -2).
    """
    validate_scale(scale)
    scaled = parse_price(b) * scale
    return int((scaled + _HALF).to_integral_value(rounding=ROUND_FLOOR))


# =============================================================================
# SCALED MULTIPLY / DIVIDE
# =============================================================================


def scaled_multiply(
    a: int,
    b: float | Decimal | str,
    scale: int = DEFAULT_SCALE,
) -> int:
    """
    Умножение большого целого на десятичное число без float-потерь.

    Формула:
        a * round(b * scale) / scale

    Десятичный b переводится в целый числитель (округление b*scale),
    умножается на a, затем результат делится на scale с усечением к нулю.

    Args:
        a: Большое целое (token amount, может быть отрицательным)
        b: Десятичный множитель (цена outcome token)
        scale: Знаменатель fixed-point (default: DEFAULT_SCALE)

    Returns:
        a * b с точностью 1/scale

    Raises:
        ValueError: Если scale <= 0 или b не является конечным числом

    Examples:
        >>> scaled_multiply(1000000, 0.0001)
        100
        >>> scaled_multiply(10**24, "0.5")
        500000000000000000000000
    """
    numerator = scale_decimal(b, scale)
    return truncating_divide(a * numerator, scale)


def scaled_divide(a: int, b: int, scale: int = DEFAULT_SCALE) -> float:
    """
    Деление двух больших целых с десятичным результатом.

    Формула:
        trunc(a * scale / b) / scale

    Числитель масштабируется до деления, чтобы сохранить 1/scale точности
    в целочисленном частном. Только финальное деление на scale даёт float.

    Args:
        a: Числитель
        b: Знаменатель
        scale: Знаменатель fixed-point (default: DEFAULT_SCALE)

    Returns:
        a / b с точностью 1/scale

    Raises:
        ZeroDivisionError: Если b == 0
        ValueError: Если scale <= 0

    Examples:
        >>> scaled_divide(1, 3)
        0.3333
        >>> scaled_divide(-1, 3)
        -0.3333
    """
    validate_scale(scale)
    return truncating_divide(a * scale, b) / scale
