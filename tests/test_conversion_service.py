"""Unit tests for the conversion service boundary layer."""

import pytest
from unittest.mock import patch

from unit_converter_mcp.config import ServerConfig
from unit_converter_mcp.engine import Category, LengthUnit, WeightUnit, TemperatureUnit
from unit_converter_mcp.exceptions import (
    ConverterError,
    InvalidCategoryError,
    InvalidUnitError,
    InvalidValueError,
)
from unit_converter_mcp.models import ConversionRequest
from unit_converter_mcp.services.conversion_service import (
    ConversionService,
    parse_value,
    resolve_category,
    resolve_unit,
    format_result,
)


@pytest.fixture
def config():
    """Create test configuration."""
    return ServerConfig(log_format="console")


@pytest.fixture
def service(config):
    """Create ConversionService with test config."""
    return ConversionService(config=config)


class TestParseValue:
    """Tests for raw value parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("12", 12.0),
        ("  -3.5 ", -3.5),
        ("1e3", 1000.0),
        ("0", 0.0),
        (".5", 0.5),
    ])
    def test_valid_text(self, text, expected):
        """Test numeric text parses to float."""
        assert parse_value(text) == expected

    def test_number_passthrough(self):
        """Test numbers are accepted directly."""
        assert parse_value(7) == 7.0
        assert parse_value(2.25) == 2.25

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty_text(self, text):
        """Test empty input is an explicit error."""
        with pytest.raises(InvalidValueError, match="no value entered"):
            parse_value(text)

    @pytest.mark.parametrize("text", ["abc", "12cm", "1,5", "--1"])
    def test_non_numeric_text(self, text):
        """Test non-numeric text is rejected."""
        with pytest.raises(InvalidValueError, match="not a number"):
            parse_value(text)

    @pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-Infinity"])
    def test_non_finite_text(self, text):
        """Test NaN and infinities are rejected."""
        with pytest.raises(InvalidValueError, match="finite"):
            parse_value(text)

    def test_boolean_rejected(self):
        with pytest.raises(InvalidValueError):
            parse_value(True)

    def test_none_rejected(self):
        with pytest.raises(InvalidValueError):
            parse_value(None)

    def test_int_too_large_for_float(self):
        """Test an integer beyond float range is rejected, not overflowed."""
        with pytest.raises(InvalidValueError, match="finite"):
            parse_value(10 ** 400)

    def test_text_beyond_float_range(self):
        """Test text that parses to infinity is rejected."""
        with pytest.raises(InvalidValueError, match="finite"):
            parse_value("1e400")


class TestResolveNames:
    """Tests for case-insensitive name lookup."""

    def test_category_case_insensitive(self):
        assert resolve_category("  temperature ") is Category.TEMPERATURE
        assert resolve_category("LENGTH") is Category.LENGTH

    def test_category_member_passthrough(self):
        assert resolve_category(Category.WEIGHT) is Category.WEIGHT

    def test_category_unknown(self):
        with pytest.raises(InvalidCategoryError) as exc_info:
            resolve_category("Volume")
        assert exc_info.value.error_type == "InvalidCategory"

    def test_category_not_a_string(self):
        with pytest.raises(InvalidCategoryError):
            resolve_category(42)

    def test_unit_case_insensitive(self):
        assert resolve_unit("length", "inches") is LengthUnit.INCHES
        assert resolve_unit(Category.WEIGHT, " KILOGRAMS") is WeightUnit.KILOGRAMS

    def test_unit_member_passthrough(self):
        assert resolve_unit(Category.TEMPERATURE, TemperatureUnit.KELVIN) is TemperatureUnit.KELVIN

    def test_unit_from_other_category(self):
        with pytest.raises(InvalidUnitError) as exc_info:
            resolve_unit("Length", "Grams")
        assert exc_info.value.context.valid_values == [
            "Inches", "Feet", "Yards", "Miles", "Centimeters"
        ]

    def test_unit_member_from_other_category(self):
        with pytest.raises(InvalidUnitError):
            resolve_unit(Category.WEIGHT, LengthUnit.FEET)


class TestFormatResult:
    """Tests for result rendering."""

    def test_shortest_form(self):
        assert format_result(2.54) == "2.54"
        assert format_result(1000.0) == "1000.0"
        assert format_result(-40.0) == "-40.0"

    def test_exponent_form_outside_positional_range(self):
        assert format_result(10000000.0) == "10000000.0"
        assert format_result(1e16) == "1e+16"
        assert format_result(0.00001) == "1e-05"

    def test_precision_rounds(self):
        assert format_result(12.000000000000002, 4) == "12"
        assert format_result(0.453592, 3) == "0.454"

    def test_precision_zero(self):
        assert format_result(2.54, 0) == "3"

    def test_negative_zero(self):
        assert format_result(-0.0001, 2) == "0"


class TestConversionService:
    """Tests for ConversionService."""

    def test_convert_text_input(self, service):
        """Test a full conversion from raw text."""
        result = service.convert("length", "inches", "centimeters", "1")
        assert result.category is Category.LENGTH
        assert result.source_unit == "Inches"
        assert result.destination_unit == "Centimeters"
        assert result.value == 1.0
        assert result.result == 2.54
        assert result.display == "2.54"

    def test_convert_temperature(self, service):
        result = service.convert("Temperature", "Celsius", "Fahrenheit", "-40")
        assert result.result == -40
        assert result.display == "-40.0"

    def test_convert_uses_configured_precision(self):
        service = ConversionService(config=ServerConfig(result_precision=2))
        result = service.convert("Length", "Feet", "Inches", 1)
        assert result.display == "12"

    def test_convert_invalid_unit(self, service):
        with pytest.raises(InvalidUnitError):
            service.convert("Length", "Gallons", "Inches", "1")

    def test_convert_empty_value(self, service):
        with pytest.raises(InvalidValueError):
            service.convert("Weight", "Pounds", "Grams", "")

    def test_errors_share_base_class(self, service):
        with pytest.raises(ConverterError):
            service.convert("Volume", "Liters", "Cups", "1")

    def test_convert_request(self, service):
        request = ConversionRequest(
            category="Weight",
            source_unit="Kilograms",
            destination_unit="Grams",
            value=1.0,
        )
        result = service.convert_request(request)
        assert result.result == 1000

    def test_convert_goes_through_request(self, service):
        """Test raw input is canonicalized into a ConversionRequest."""
        with patch.object(
            ConversionService, "convert_request", autospec=True,
            side_effect=ConversionService.convert_request,
        ) as spy:
            result = service.convert("  weight", "KILOGRAMS", "grams", " 2 ")

        request = spy.call_args[0][1]
        assert isinstance(request, ConversionRequest)
        assert request.category is Category.WEIGHT
        assert request.source_unit == "Kilograms"
        assert request.destination_unit == "Grams"
        assert request.value == 2.0
        assert result.result == 2000

    def test_convert_result_overflow(self, service):
        """Test a finite input whose result overflows is an error."""
        with pytest.raises(InvalidValueError, match="result out of range"):
            service.convert("Length", "Miles", "Inches", "1e308")

    def test_convert_huge_integer(self, service):
        """Test an integer beyond float range is an error."""
        with pytest.raises(InvalidValueError):
            service.convert("Length", "Feet", "Inches", 10 ** 400)

    def test_catalog(self, service):
        catalog = service.catalog()
        assert [info.category for info in catalog.categories] == list(Category)
        assert catalog.categories[2].units == ["Celsius", "Fahrenheit", "Kelvin"]

    def test_category_info(self, service):
        info = service.category_info("weight")
        assert info.category is Category.WEIGHT
        assert info.base_unit == "Kilograms"
        assert info.units[0] == "Pounds"

    def test_category_info_temperature_has_no_base(self, service):
        assert service.category_info("Temperature").base_unit is None

    def test_default_config_used(self):
        """Test service falls back to the global config."""
        from unit_converter_mcp.config import get_config, reset_config

        reset_config()
        try:
            assert ConversionService().config is get_config()
        finally:
            reset_config()
