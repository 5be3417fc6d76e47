"""
Scalar Primitives — IEEE-совместимые вещественные примитивы

Модуль даёт тонкие обёртки над math для вещественных аргументов:
- sin/cos/exp/log/pow/sqrt с IEEE-поведением вместо исключений Python
- численно устойчивый hypot (без overflow/underflow при |a| >> |b|)
- деление с IEEE-семантикой для нулевого делителя
- epsilon-сравнения float для проверок точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает OverflowError/ValueError/ZeroDivisionError:
   результат — inf/NaN по правилам IEEE-754
2. Для конечных аргументов результат совпадает с math.* бит-в-бит
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float с IEEE-семантикой для нулевого знаменателя.

    Python бросает ZeroDivisionError при делении на 0.0, IEEE-754 даёт
    ±inf (или NaN для 0/0). Знак бесконечности учитывает знак нуля.

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# ТРИГОНОМЕТРИЯ И ЭКСПОНЕНТА
# =============================================================================


def sin(x: float) -> float:
    """Синус; sin(±inf) = NaN вместо ValueError."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def cos(x: float) -> float:
    """Косинус; cos(±inf) = NaN вместо ValueError."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def safe_exp(x: float) -> float:
    """
    Экспонента с переполнением в +inf.

    math.exp бросает OverflowError для x > ~709.78, IEEE даёт +inf.
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def safe_log(x: float) -> float:
    """
    Натуральный логарифм: log(0) = -inf, log(x < 0) = NaN.

    Examples:
        >>> safe_log(1.0)
        0.0
        >>> safe_log(0.0)
        -inf
    """
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return math.log(x)


def safe_sqrt(x: float) -> float:
    """Квадратный корень; sqrt(x < 0) = NaN, sqrt(-0.0) = -0.0."""
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def safe_pow(x: float, y: float) -> float:
    """
    Степень x**y с IEEE-поведением на границах.

    - переполнение → ±inf
    - 0 ** (y < 0) → inf (со знаком для нечётного целого y и x = -0.0)
    - (x < 0) ** (нецелое y) → NaN

    Examples:
        >>> safe_pow(2.0, 10.0)
        1024.0
        >>> safe_pow(0.0, -1.0)
        inf
    """
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0.0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0:
            if math.copysign(1.0, x) < 0.0 and _is_odd_integer(y):
                return -math.inf
            return math.inf
        return math.nan


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and math.fmod(y, 2.0) != 0.0


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ ПРИМИТИВЫ
# =============================================================================


def sqr(x: float) -> float:
    """Квадрат x * x."""
    return x * x


def hypot(x: float, y: float) -> float:
    """
    Евклидова норма sqrt(x² + y²) без промежуточного overflow/underflow.

    Наивная формула переполняется уже при |x| ~ 1e155, хотя результат
    представим. math.hypot масштабирует аргументы и корректно обрабатывает
    inf/NaN: hypot(inf, nan) = inf.

    Examples:
        >>> hypot(3.0, 4.0)
        5.0
        >>> hypot(3e300, 4e300) < math.inf
        True
    """
    return math.hypot(x, y)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
