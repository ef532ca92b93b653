"""Tests for dynarray configuration."""

import pytest

from dynarray.config import (
    ArrayConfig,
    BenchmarkConfig,
    DemoConfig,
    DynArrayConfig,
    LoggingConfig,
)


class TestArrayConfig:
    """Tests for ArrayConfig."""

    def test_defaults(self):
        config = ArrayConfig()
        assert config.default_capacity == 10
        assert config.growth_factor == 2

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError, match="default_capacity"):
            ArrayConfig(default_capacity=0)

    def test_rejects_growth_factor_one(self):
        with pytest.raises(ValueError, match="growth_factor"):
            ArrayConfig(growth_factor=1)


class TestSectionDefaults:
    """Tests for the smaller config sections."""

    def test_demo_defaults(self):
        assert DemoConfig().large_list_size == 1000

    def test_benchmark_defaults(self):
        config = BenchmarkConfig()
        assert config.size == 1000
        assert config.runs == 5
        assert config.seed == 42
        assert config.order == "descending"

    def test_benchmark_rejects_zero_runs(self):
        with pytest.raises(ValueError, match="runs"):
            BenchmarkConfig(runs=0)

    def test_logging_default(self):
        assert LoggingConfig().level == "warning"


class TestDynArrayConfig:
    """Tests for loading the full configuration."""

    def test_from_dict_partial(self):
        """Missing sections fall back to defaults."""
        config = DynArrayConfig.from_dict({"array": {"default_capacity": 4}})
        assert config.array.default_capacity == 4
        assert config.array.growth_factor == 2
        assert config.demo.large_list_size == 1000

    def test_from_dict_unknown_key(self):
        """Unknown keys in a section are rejected."""
        with pytest.raises(TypeError):
            DynArrayConfig.from_dict({"array": {"colour": "red"}})

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "array:\n"
            "  default_capacity: 3\n"
            "  growth_factor: 4\n"
            "logging:\n"
            "  level: debug\n"
        )
        config = DynArrayConfig.from_file(path)
        assert config.array.default_capacity == 3
        assert config.array.growth_factor == 4
        assert config.logging.level == "debug"

    def test_from_missing_file_uses_defaults(self, tmp_path):
        config = DynArrayConfig.from_file(tmp_path / "nope.yaml")
        assert config == DynArrayConfig()

    def test_from_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert DynArrayConfig.from_file(path) == DynArrayConfig()

    def test_from_env(self, tmp_path, monkeypatch):
        """DYNARRAY_CONFIG selects the file."""
        path = tmp_path / "env.yaml"
        path.write_text("demo:\n  large_list_size: 7\n")
        monkeypatch.setenv("DYNARRAY_CONFIG", str(path))
        assert DynArrayConfig.from_env().demo.large_list_size == 7

    def test_new_array_uses_config(self):
        config = DynArrayConfig(array=ArrayConfig(default_capacity=2, growth_factor=3))
        array = config.new_array()
        assert array.capacity == 2
        for i in range(3):
            array.append(i)
        assert array.capacity == 6

    def test_validate_ok(self):
        assert DynArrayConfig().validate() == []

    def test_validate_reports_errors(self):
        config = DynArrayConfig(
            benchmark=BenchmarkConfig(order="sideways"),
            logging=LoggingConfig(level="loud"),
        )
        errors = config.validate()
        assert len(errors) == 2
        assert any("logging.level" in e for e in errors)
        assert any("benchmark.order" in e for e in errors)


class TestTypeChecks:
    """Values from YAML must have the right type."""

    @pytest.mark.parametrize("field_name", ["default_capacity", "growth_factor"])
    @pytest.mark.parametrize("value", [2.5, "3", False])
    def test_array_config_rejects_non_integers(self, field_name, value):
        with pytest.raises(ValueError, match=f"{field_name} must be an integer"):
            ArrayConfig(**{field_name: value})

    def test_benchmark_rejects_float_size(self):
        with pytest.raises(ValueError, match="size must be an integer"):
            BenchmarkConfig(size=10.5)

    def test_demo_rejects_float_size(self):
        with pytest.raises(ValueError, match="large_list_size must be an integer"):
            DemoConfig(large_list_size=3.0)

    def test_float_growth_factor_in_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("array:\n  growth_factor: 2.5\n")
        with pytest.raises(ValueError, match="growth_factor must be an integer"):
            DynArrayConfig.from_file(path)

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="config must be a mapping"):
            DynArrayConfig.from_file(path)

    def test_section_must_be_mapping(self):
        with pytest.raises(ValueError, match="section 'array' must be a mapping"):
            DynArrayConfig.from_dict({"array": [1, 2]})

    def test_empty_section_uses_defaults(self):
        """A section key with no body falls back to defaults."""
        config = DynArrayConfig.from_dict({"array": None})
        assert config.array == ArrayConfig()

    def test_validate_numeric_log_level(self):
        config = DynArrayConfig(logging=LoggingConfig(level=10))
        errors = config.validate()
        assert errors == ["logging.level must be a string, got 10"]
