"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора complex_value:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Интеграция с Pydantic моделью Complex
"""

import json
import math
from pathlib import Path

import pytest
from jsonschema import ValidationError

from complexmath.core.contracts import (
    ComplexValueValidator,
    SchemaLoader,
    validate_complex_value,
)
from complexmath.core.domain import Complex
from complexmath.core.math import complex_sqrt


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_complex_value():
    """Валидный complex_value для тестирования."""
    return {"re": 1.5, "im": -0.25}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_complex_value_schema(self):
        """Схема загружается и проходит meta-validation."""
        schema = SchemaLoader().load_schema("complex_value")
        assert schema["title"] == "complex_value"
        assert set(schema["required"]) == {"re", "im"}

    def test_schema_is_cached(self):
        """Повторная загрузка возвращает тот же объект."""
        loader = SchemaLoader()
        assert loader.load_schema("complex_value") is loader.load_schema("complex_value")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(schema_dir=tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        """Невалидная JSON Schema → ValueError."""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")


# =============================================================================
# COMPLEX VALUE CONTRACT
# =============================================================================


class TestComplexValueContract:
    """Тесты контракта complex_value."""

    def test_valid_data(self, valid_complex_value):
        validate_complex_value(valid_complex_value)
        assert ComplexValueValidator().is_valid(valid_complex_value)

    def test_integers_are_numbers(self):
        validate_complex_value({"re": 1, "im": 0})

    @pytest.mark.parametrize("missing", ["re", "im"])
    def test_missing_required_field(self, valid_complex_value, missing):
        del valid_complex_value[missing]
        with pytest.raises(ValidationError):
            validate_complex_value(valid_complex_value)

    def test_wrong_type(self, valid_complex_value):
        valid_complex_value["re"] = "1.5"
        with pytest.raises(ValidationError):
            validate_complex_value(valid_complex_value)

    def test_bool_is_not_number(self, valid_complex_value):
        valid_complex_value["im"] = True
        assert not ComplexValueValidator().is_valid(valid_complex_value)

    def test_additional_property_rejected(self, valid_complex_value):
        valid_complex_value["phase"] = 0.0
        with pytest.raises(ValidationError):
            validate_complex_value(valid_complex_value)

    def test_iter_errors_reports_all_violations(self):
        errors = list(ComplexValueValidator().iter_errors({"re": "x", "extra": 1}))
        # "re" не число, "im" отсутствует, "extra" лишнее
        assert len(errors) == 3


# =============================================================================
# INTEGRATION WITH PYDANTIC MODEL
# =============================================================================


class TestComplexPayloadIntegration:
    """Payload модели Complex соответствует контракту."""

    def test_model_payload_is_valid(self):
        payload = complex_sqrt(Complex(-4.0, 3.0)).to_payload()
        validate_complex_value(payload)

    def test_json_roundtrip(self):
        z = Complex(0.1, -2.5)
        data = json.loads(json.dumps(z.to_payload()))
        validate_complex_value(data)
        assert Complex.from_payload(data) == z

    def test_from_payload_agrees_with_contract(self, valid_complex_value):
        """Payload, отвергнутый контрактом, не превращается в Complex."""
        valid_complex_value["re"] = "1.5"
        valid_complex_value["im"] = True
        assert not ComplexValueValidator().is_valid(valid_complex_value)
        with pytest.raises(ValidationError):
            Complex.from_payload(valid_complex_value)

    def test_special_values_pass_contract(self):
        """inf/NaN — числа с точки зрения контракта (IEEE пропагация)."""
        validate_complex_value(Complex(math.inf, math.nan).to_payload())
