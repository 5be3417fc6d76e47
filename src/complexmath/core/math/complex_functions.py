"""
Complex Functions — Элементарные функции комплексного аргумента

Модуль вычисляет элементарные функции на всей комплексной плоскости,
включая окрестности разрезов и области, где наивные формулы теряют точность:
- модуль и фаза (abs, arg)
- exp, log (главная ветвь, разрез по отрицательной вещественной оси)
- sqr, sqrt (ряд для sqrt(1 + x²) - 1 при |im| << |re|)
- sin, cos, tan и гиперболические sinh, cosh, tanh
- степени: z**p (вещественное p), x**z (вещественное x >= 0), z**n (целое n)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции чистые: аргументы не изменяются, результат — новый объект
2. 0, inf, NaN не отвергаются, а пропагируют по правилам IEEE
   (log(0) → re = -inf)
3. Только два исключения:
   - NonconvergenceError: ряд в sqrt не сошёлся за series_max членов
   - ComplexDomainViolation: отрицательное основание в real_pow_complex
4. arg(z) ∈ (-π, π]; arg(x > 0) == 0 точно

ФОРМУЛЫ:
    exp(z) = e^re · (cos(im) + i·sin(im))
    log(z) = ln|z| + i·arg(z)
    sin(z) = sin(re)·cosh(im) + i·cos(re)·sinh(im)
    cos(z) = cos(re)·cosh(im) - i·sin(re)·sinh(im)
    tan(z) = [sin(2re) + i·sinh(2im)] / [cos(2re) + cosh(2im)]
    sinh(z) = -i·sin(iz),  cosh(z) = cos(iz),  tanh(z) = -i·tan(iz)
"""

import logging
import math
from typing import Final, Union

from complexmath.core.domain.complex_value import ONE, ZERO, Complex
from complexmath.core.math.scalar_primitives import (
    cos,
    hypot,
    ieee_divide,
    safe_exp,
    safe_log,
    safe_pow,
    safe_sqrt,
    sin,
    sqr,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальное количество членов любого ряда в модуле
# При превышении → NonconvergenceError
SERIES_MAX: Final[int] = 250

# Порог переключения sqrt на ряд: |im| < SQRT_SERIES_RATIO * |re|
SQRT_SERIES_RATIO: Final[float] = 0.25

# Порог переключения tan на форму через tanh: |im| >= TAN_TANH_SWITCH
TAN_TANH_SWITCH: Final[float] = 4.0

# Максимальный показатель с явной цепочкой умножений в complex_pow_int
INT_POW_CHAIN_MAX: Final[int] = 10


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonconvergenceError(ArithmeticError):
    """
    Итерационный алгоритм не сошёлся за отведённое число шагов.

    Лимит — граница корректности, а не временное состояние: повтор
    вычисления с теми же аргументами даст тот же результат.
    """

    def __init__(self, message: str, terms: int, series_max: int):
        super().__init__(message)
        self.terms = terms
        self.series_max = series_max


class ComplexDomainViolation(ValueError):
    """Аргумент вне области определения функции."""

    def __init__(self, message: str, argument: str, value: float):
        super().__init__(message)
        self.argument = argument
        self.value = value


# =============================================================================
# МОДУЛЬ И ФАЗА
# =============================================================================


def complex_abs(z: Complex) -> float:
    """
    Модуль |z| = sqrt(re² + im²).

    Через hypot: без overflow при |re| ~ 1e200 и без underflow при ~ 1e-200.

    Examples:
        >>> complex_abs(Complex(3.0, 4.0))
        5.0
    """
    return hypot(z.re, z.im)


def complex_arg(z: Complex) -> float:
    """
    Фаза arg(z) = atan2(im, re).

    Returns:
        - (0, π] при im >= 0 (положительные вещественные → 0 точно)
        - (-π, 0] при im < 0

    Examples:
        >>> complex_arg(Complex(2.0, 0.0))
        0.0
        >>> complex_arg(Complex(-1.0, 0.0))
        3.141592653589793
    """
    return math.atan2(z.im, z.re)


# =============================================================================
# EXP / LOG
# =============================================================================


def complex_exp(z: Complex) -> Complex:
    """Экспонента e^z = e^re · (cos(im) + i·sin(im))."""
    m = safe_exp(z.re)
    return Complex(m * cos(z.im), m * sin(z.im))


def complex_log(z: Complex) -> Complex:
    """
    Натуральный логарифм (главная ветвь) ln|z| + i·arg(z).

    Разрез по отрицательной вещественной оси, полюс в нуле:
    complex_log(0) = (-inf, 0) без исключения.
    """
    return Complex(safe_log(complex_abs(z)), complex_arg(z))


# =============================================================================
# КВАДРАТ И КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def complex_sqr(z: Complex) -> Complex:
    """Квадрат z·z."""
    return z * z


def _sqrt_one_plus_x2_minus_one(x2: float, series_max: int) -> float:
    # s = sqrt(1 + x²) - 1 биномиальным рядом:
    # t_1 = x²/2,  t_k = t_{k-1} · (3/(2k) - 1) · x²
    t = x2 / 2.0
    s = t
    k = 2
    while True:
        if k > series_max:
            logger.error(
                f"sqrt series did not converge: x2={x2!r}, "
                f"terms={k - 1}, series_max={series_max}"
            )
            raise NonconvergenceError(
                f"Series for sqrt(1 + x^2) - 1 did not converge within "
                f"{series_max} terms (x^2={x2!r})",
                terms=k - 1,
                series_max=series_max,
            )
        s_old = s
        t *= (1.5 / k - 1.0) * x2
        s += t
        if s == s_old:
            return s
        k += 1


def complex_sqrt(z: Complex, series_max: int = SERIES_MAX) -> Complex:
    """
    Квадратный корень (главная ветвь, re(√z) >= 0).

    Из (x + iy)² = re + i·im:
        x = sqrt((|z| + re) / 2),  y = ±sqrt((|z| - re) / 2),  sign(y) = sign(im)

    При |im| < |re|/4 одна из величин |z| ± re вычисляется с катастрофической
    потерей точности (|z| ≈ |re|). В этом режиме малая величина считается как
    |re| · (sqrt(1 + (im/re)²) - 1) через биномиальный ряд.

    Args:
        z: Аргумент
        series_max: Лимит членов ряда (default: SERIES_MAX)

    Returns:
        √z; для im == 0 и re < 0 ровно (0, sqrt(-re))

    Raises:
        NonconvergenceError: если ряд не сошёлся за series_max членов

    Examples:
        >>> complex_sqrt(Complex(-4.0, 0.0))
        Complex(re=0.0, im=2.0)
        >>> complex_sqrt(Complex(3.0, 4.0))
        Complex(re=2.0, im=1.0)
    """
    if z.im == 0.0:
        # Вырожденный случай: дальше im != 0 гарантировано
        if z.re < 0.0:
            return Complex(0.0, safe_sqrt(-z.re))
        return Complex(safe_sqrt(z.re), 0.0)

    if abs(z.im) < SQRT_SERIES_RATIO * abs(z.re):
        x2 = sqr(z.im / z.re)
        s = _sqrt_one_plus_x2_minus_one(x2, series_max)
        # p/2 и q/2 без промежуточного 2·re (переполнение при |re| > ~9e307)
        if z.re < 0.0:
            p_half = -z.re * s * 0.5
            q_half = -z.re + p_half
        else:
            q_half = z.re * s * 0.5
            p_half = z.re + q_half
    else:
        m = complex_abs(z)
        p_half = 0.5 * m + 0.5 * z.re
        q_half = 0.5 * m - 0.5 * z.re

    x = safe_sqrt(p_half)
    y = safe_sqrt(q_half)
    if z.im < 0.0:
        y = -y
    return Complex(x, y)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def _sinh_cosh(y: float) -> tuple[float, float]:
    # Одна экспонента и её обратное значение вместо двух вызовов exp
    p = safe_exp(y)
    q = ieee_divide(1.0, p)
    return ((p - q) / 2.0, (p + q) / 2.0)


def complex_sin(z: Complex) -> Complex:
    """Синус sin(re)·cosh(im) + i·cos(re)·sinh(im)."""
    sinh, cosh = _sinh_cosh(z.im)
    return Complex(sin(z.re) * cosh, cos(z.re) * sinh)


def complex_cos(z: Complex) -> Complex:
    """Косинус cos(re)·cosh(im) - i·sin(re)·sinh(im)."""
    sinh, cosh = _sinh_cosh(z.im)
    return Complex(cos(z.re) * cosh, -sin(z.re) * sinh)


def complex_tan(z: Complex) -> Complex:
    """
    Тангенс по формуле двойного угла.

    tan(z) = [sin(2re) + i·sinh(2im)] / [cos(2re) + cosh(2im)]

    При |im| >= TAN_TANH_SWITCH sinh(2im) и cosh(2im) по отдельности
    переполняются (уже при |im| ~ 355), а их отношение ≈ ±1. Тогда делим
    числитель и знаменатель на cosh(2im):
        F = 1 + cos(2re) / cosh(2im)
        tan(z) = sin(2re) / cosh(2im) / F + i·tanh(2im) / F

    Examples:
        >>> complex_tan(Complex(0.0, 700.0))
        Complex(re=0.0, im=1.0)
    """
    x2 = 2.0 * z.re
    y2 = 2.0 * z.im
    sinh, cosh = _sinh_cosh(y2)
    if abs(z.im) < TAN_TANH_SWITCH:
        d = cos(x2) + cosh
        return Complex(ieee_divide(sin(x2), d), ieee_divide(sinh, d))
    else:
        f = 1.0 + cos(x2) / cosh
        return Complex(sin(x2) / cosh / f, math.tanh(y2) / f)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def complex_sinh(z: Complex) -> Complex:
    """Гиперболический синус sinh(z) = -i·sin(iz)."""
    s = complex_sin(Complex(-z.im, z.re))
    return Complex(s.im, -s.re)


def complex_cosh(z: Complex) -> Complex:
    """Гиперболический косинус cosh(z) = cos(iz)."""
    return complex_cos(Complex(-z.im, z.re))


def complex_tanh(z: Complex) -> Complex:
    """Гиперболический тангенс tanh(z) = -i·tan(iz)."""
    t = complex_tan(Complex(-z.im, z.re))
    return Complex(t.im, -t.re)


# =============================================================================
# СТЕПЕНИ
# =============================================================================


def complex_pow_real(z: Complex, p: float) -> Complex:
    """
    Вещественная степень z**p (главная ветвь).

    z**p = |z|**p · (cos(p·arg z) + i·sin(p·arg z))
    """
    m = safe_pow(complex_abs(z), p)
    t = complex_arg(z) * p
    return Complex(m * cos(t), m * sin(t))


def real_pow_complex(x: float, z: Complex) -> Complex:
    """
    Вещественное основание в комплексной степени x**z.

    x**z = x**re · (cos(ln x · im) + i·sin(ln x · im))

    Args:
        x: Основание, x >= 0
        z: Показатель

    Returns:
        ONE если z == 0 (включая 0**0), ZERO если x == 0

    Raises:
        ComplexDomainViolation: если x < 0 (результат многозначен)
    """
    if x < 0.0:
        logger.warning(f"real_pow_complex rejected negative base x={x!r}")
        raise ComplexDomainViolation(
            f"Base x must be non-negative for real_pow_complex, got x={x!r}",
            argument="x",
            value=x,
        )
    if z == ZERO:
        return ONE
    if x == 0.0:
        return ZERO

    m = safe_pow(x, z.re)
    t = safe_log(x) * z.im
    return Complex(m * cos(t), m * sin(t))


def complex_pow_int(z: Complex, n: int) -> Complex:
    """
    Целая степень z**n.

    - n < 0 → 1 / z**(-n)
    - 0 <= n <= INT_POW_CHAIN_MAX → минимальная цепочка умножений
    - n > INT_POW_CHAIN_MAX → complex_pow_real(z, float(n)); для n вне
      диапазона float показатель равен inf и результат пропагирует по IEEE

    Соглашение: z**0 == ONE для любого z, включая 0**0.

    Examples:
        >>> complex_pow_int(Complex(0.0, 1.0), 2)
        Complex(re=-1.0, im=0.0)
    """
    if n < 0:
        return 1.0 / complex_pow_int(z, -n)

    if n == 0:
        return ONE
    elif n == 1:
        return z
    elif n == 2:
        # 1 умножение
        return z * z
    elif n == 3:
        # 2 умножения
        return z * z * z
    elif n == 4:
        # 2 умножения
        z2 = z * z
        return z2 * z2
    elif n == 5:
        # 3 умножения
        z2 = z * z
        return z2 * z2 * z
    elif n == 6:
        # 3 умножения
        z2 = z * z
        return z2 * z2 * z2
    elif n == 7:
        # 4 умножения
        z3 = z * z * z
        return z3 * z3 * z
    elif n == 8:
        # 3 умножения
        z2 = z * z
        z4 = z2 * z2
        return z4 * z4
    elif n == 9:
        # 4 умножения
        z3 = z * z * z
        return z3 * z3 * z3
    elif n == 10:
        # 4 умножения
        z2 = z * z
        z4 = z2 * z2
        return z4 * z4 * z2
    else:
        return complex_pow_real(z, _int_to_float(n))


def _int_to_float(n: int) -> float:
    # int Python не ограничен, float(n) переполняется при |n| > ~1.8e308
    try:
        return float(n)
    except OverflowError:
        return math.copysign(math.inf, n)


def complex_pow(z: Complex, p: Union[int, float]) -> Complex:
    """
    Степень z**p с выбором алгоритма по типу показателя.

    int → complex_pow_int, float → complex_pow_real.

    Raises:
        TypeError: если p не int/float (bool не принимается)
    """
    if isinstance(p, bool):
        raise TypeError("Exponent must be int or float, got bool")
    if isinstance(p, int):
        return complex_pow_int(z, p)
    if isinstance(p, float):
        return complex_pow_real(z, p)
    raise TypeError(f"Exponent must be int or float, got {type(p).__name__}")
