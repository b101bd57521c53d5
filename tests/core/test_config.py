"""Tests for stub configuration"""

import pytest
from pathlib import Path

from dtsstub.core.config import StubConfig, bundled_base_declarations, parse_line_ending


class TestStubConfig:
    """Test suite for StubConfig"""

    def test_defaults(self):
        config = StubConfig()
        assert config.module_prefix == "module:"
        assert config.line_ending == "\r\n"
        assert config.base_origin == ">lib.d.ts"
        assert config.base_path() == bundled_base_declarations()

    def test_bundled_base_exists(self):
        """Test the bundled base declarations ship with the package"""
        assert bundled_base_declarations().is_file()

    def test_load_from_yaml(self, tmp_path):
        """Test settings are read from the stubs section"""
        config_file = tmp_path / "dtsstub.yaml"
        config_file.write_text(
            "stubs:\n"
            "  module_prefix: 'mod:'\n"
            "  line_ending: lf\n"
            "  base: lib/base.yaml\n"
        )
        config = StubConfig.from_yaml(config_file)

        assert config.module_prefix == "mod:"
        assert config.line_ending == "\n"
        assert config.base_path() == tmp_path / "lib" / "base.yaml"

    def test_load_from_missing_file(self, tmp_path):
        """Test a missing config file keeps defaults"""
        config = StubConfig.from_yaml(tmp_path / "missing.yaml")
        assert config == StubConfig()

    def test_load_without_stubs_section(self, tmp_path):
        config_file = tmp_path / "other.yaml"
        config_file.write_text("conventions: {}\n")
        assert StubConfig.from_yaml(config_file) == StubConfig()

    def test_unknown_line_ending(self, tmp_path):
        """Test unknown line endings are rejected"""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("stubs:\n  line_ending: cr\n")
        with pytest.raises(ValueError):
            StubConfig.from_yaml(config_file)

    @pytest.mark.parametrize("text", [
        "- stubs\n- other\n",
        "just a string\n",
        "stubs: lf\n",
        "stubs: [module_prefix]\n",
    ])
    def test_config_not_a_mapping(self, tmp_path, text):
        """Test non-mapping config documents are rejected"""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(text)
        with pytest.raises(ValueError):
            StubConfig.from_yaml(config_file)

    def test_cli_overrides(self):
        """Test CLI values replace file settings, None keeps them"""
        config = StubConfig()
        config.apply_cli_overrides(module_prefix="m#", line_ending="LF", base=Path("/x.yaml"))
        assert config.module_prefix == "m#"
        assert config.line_ending == "\n"
        assert config.base_path() == Path("/x.yaml")

        config.apply_cli_overrides()
        assert config.module_prefix == "m#"

    def test_parse_line_ending(self):
        assert parse_line_ending("crlf") == "\r\n"
        assert parse_line_ending(" lf ") == "\n"
