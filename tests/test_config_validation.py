"""Tests for config validation."""

import pytest

from resume_forge.config import load_config


class TestConfigValidation:
    def test_valid_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config.build.wrap == 60

    def test_invalid_wrap(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("build:\n  wrap: 0\n")
        with pytest.raises(ValueError, match="wrap"):
            load_config(yaml)

    def test_invalid_pdf_engine(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("build:\n  pdf: wkhtmltopdf\n")
        with pytest.raises(ValueError, match="pdf"):
            load_config(yaml)

    def test_invalid_css_mode(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("build:\n  css: inline\n")
        with pytest.raises(ValueError, match="css"):
            load_config(yaml)

    def test_empty_default_destination(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("output:\n  default_destination: '  '\n")
        with pytest.raises(ValueError, match="default_destination"):
            load_config(yaml)

    def test_wrap_from_string(self, tmp_path):
        yaml = tmp_path / "cfg.yaml"
        yaml.write_text('build:\n  wrap: "80"\n')
        assert load_config(yaml).build.wrap == 80

    def test_wrap_not_a_number(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("build:\n  wrap: wide\n")
        with pytest.raises(ValueError, match="wrap"):
            load_config(yaml)

    def test_unknown_setting(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("build:\n  colour: blue\n")
        with pytest.raises(ValueError, match="build"):
            load_config(yaml)

    def test_section_not_a_mapping(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("output: out/resume.all\n")
        with pytest.raises(ValueError, match="output"):
            load_config(yaml)
