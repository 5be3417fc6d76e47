"""
Complex — Модель комплексного числа

Immutable Pydantic модель пары (re, im) двойной точности IEEE-754.

Арифметика следует правилам IEEE: переполнение даёт inf, неопределённость
даёт NaN, исключения не бросаются (в том числе при делении на нулевое
комплексное число). Равенство — покомпонентное сравнение float без толерантности.
"""

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from complexmath.core.contracts import validate_complex_value
from complexmath.core.math.scalar_primitives import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    hypot,
    ieee_divide,
)

# Вещественные операнды, допустимые в смешанной арифметике
Real = Union[int, float]


def _is_real(value: Any) -> bool:
    # bool не считается вещественным операндом
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _divide(a_re: float, a_im: float, b_re: float, b_im: float) -> tuple[float, float]:
    """
    Деление (a_re + i a_im) / (b_re + i b_im) по алгоритму Smith.

    Делим на компоненту с большим модулем, чтобы |b|² не переполнялся.
    Для b = 0 получается (NaN, NaN).
    """
    if abs(b_im) < abs(b_re):
        e = b_im / b_re
        f = b_re + b_im * e
        return ((a_re + a_im * e) / f, (a_im - a_re * e) / f)
    else:
        e = ieee_divide(b_re, b_im)
        f = b_im + b_re * e
        return (ieee_divide(a_re * e + a_im, f), ieee_divide(a_im * e - a_re, f))


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число re + i·im.

    Immutable модель (frozen=True): каждая операция возвращает новый экземпляр.
    Поддерживает операнды Complex и вещественные (int/float) с обеих сторон.

    Examples:
        >>> Complex(1.0, 2.0) * Complex(3.0, -1.0)
        Complex(re=5.0, im=5.0)
        >>> 1.0 / Complex(0.0, 2.0)
        Complex(re=0.0, im=-0.5)
    """

    # strict: int и float принимаются, str и bool нет (как в контракте complex_value)
    re: float = Field(..., strict=True, description="Вещественная часть")
    im: float = Field(0.0, strict=True, description="Мнимая часть")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, re: Real = 0.0, im: Real = 0.0, **data: Any) -> None:
        super().__init__(re=re, im=im, **data)

    @field_validator("re", "im")
    @classmethod
    def coerce_to_float(cls, v: float) -> float:
        """Компоненты всегда хранятся как float (int → float)."""
        return float(v)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        """Конверсия из встроенного complex."""
        return cls(value.real, value.imag)

    def to_builtin(self) -> complex:
        """Конверсия во встроенный complex."""
        return complex(self.re, self.im)

    def __complex__(self) -> complex:
        return self.to_builtin()

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Complex":
        """
        Создание из payload {"re": ..., "im": ...}.

        Payload проверяется JSON-контрактом complex_value до построения модели.

        Raises:
            jsonschema.ValidationError: Если payload нарушает контракт
                (лишние поля, отсутствующие поля, нечисловые значения)
        """
        validate_complex_value(payload)
        return cls.model_validate(payload)

    def to_payload(self) -> dict[str, float]:
        """Payload для JSON-контракта complex_value."""
        return {"re": self.re, "im": self.im}

    # -------------------------------------------------------------------------
    # Базовые операции
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Complex":
        """Комплексно сопряжённое re - i·im."""
        return Complex(self.re, -self.im)

    def is_close(
        self,
        other: Union["Complex", Real],
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение с толерантностью по модулю разности.

        Алгоритм:
            |a - b| <= max(rel_tol * max(|a|, |b|), abs_tol)
        """
        other = _coerce(other)
        if self == other:
            return True
        diff = hypot(self.re - other.re, self.im - other.im)
        scale = max(hypot(self.re, self.im), hypot(other.re, other.im))
        return diff <= max(rel_tol * scale, abs_tol)

    # -------------------------------------------------------------------------
    # Равенство и хэширование
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.re == other.re and self.im == other.im
        if _is_real(other):
            return self.re == other and self.im == 0.0
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Согласовано с __eq__: Complex(x, 0) == x
        if self.im == 0.0:
            return hash(self.re)
        return hash((self.re, self.im))

    def __str__(self) -> str:
        return f"({self.re}, {self.im})"

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __pos__(self) -> "Complex":
        return self

    def __add__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return Complex(self.re + other.re, self.im + other.im)
        if _is_real(other):
            return Complex(self.re + other, self.im)
        return NotImplemented

    def __radd__(self, other: Real) -> "Complex":
        if _is_real(other):
            return Complex(other + self.re, self.im)
        return NotImplemented

    def __sub__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return Complex(self.re - other.re, self.im - other.im)
        if _is_real(other):
            return Complex(self.re - other, self.im)
        return NotImplemented

    def __rsub__(self, other: Real) -> "Complex":
        if _is_real(other):
            return Complex(other - self.re, -self.im)
        return NotImplemented

    def __mul__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return Complex(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )
        if _is_real(other):
            return Complex(self.re * other, self.im * other)
        return NotImplemented

    def __rmul__(self, other: Real) -> "Complex":
        if _is_real(other):
            return Complex(other * self.re, other * self.im)
        return NotImplemented

    def __truediv__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return Complex(*_divide(self.re, self.im, other.re, other.im))
        if _is_real(other):
            return Complex(ieee_divide(self.re, other), ieee_divide(self.im, other))
        return NotImplemented

    def __rtruediv__(self, other: Real) -> "Complex":
        # x / z через обратное значение, без промежуточного Complex(x, 0)
        if _is_real(other):
            return Complex(*_divide(float(other), 0.0, self.re, self.im))
        return NotImplemented


def _coerce(value: Union[Complex, Real]) -> Complex:
    if isinstance(value, Complex):
        return value
    if _is_real(value):
        return Complex(value, 0.0)
    raise TypeError(f"Expected Complex or real number, got {type(value).__name__}")


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Аддитивная единица (0, 0)
ZERO = Complex(0.0, 0.0)

# Мультипликативная единица (1, 0)
ONE = Complex(1.0, 0.0)

# Мнимая единица (0, 1)
I = Complex(0.0, 1.0)  # noqa: E741
