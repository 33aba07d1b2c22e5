"""Tests for untaint configuration YAML loader."""

from pathlib import Path

import pytest

from autountaint.core.config import get_settings
from autountaint.untaint import (
    DEFAULT_TYPE_MAP,
    UntaintConfigLoadError,
    auto_untaint,
    load_default_untaint_config,
    load_untaint_config,
)


def test_load_full_config(tmp_path: Path):
    """Test loading every supported key."""
    config_file = tmp_path / "untaint.yaml"
    config_file.write_text("""
strict: true
verbosity: 2
skip_columns: [secret_notes]
column_overrides:
  title: date
untaint_columns:
  printable: [name, director]
untaint_types:
  "enum('g','pg')": printable
match_types:
  - pattern: 'int$'
    category: integer
match_columns:
  - pattern: '^(first|last)_name$'
    category: printable
  - pattern: '^count_.+$'
    category: integer
""")

    config = load_untaint_config(config_file)

    assert config.strict is True
    assert config.verbosity == 2
    assert config.skip_columns == frozenset({"secret_notes"})
    assert config.column_overrides == {"title": "date"}
    assert config.column_override("director") == "printable"
    assert config.untaint_types == {"enum('g','pg')": "printable"}
    assert [rule.category for rule in config.match_types] == ["integer"]
    assert [rule.category for rule in config.match_columns] == ["printable", "integer"]
    assert config.type_map is DEFAULT_TYPE_MAP


def test_load_type_extensions(tmp_path: Path):
    """Test that 'types' extends a fresh copy of the standard table."""
    config_file = tmp_path / "untaint.yaml"
    config_file.write_text("""
types:
  enum: printable
  money: printable
""")

    config = load_untaint_config(config_file)

    assert config.type_map is not DEFAULT_TYPE_MAP
    assert config.type_map.lookup("enum('a')") == "printable"
    assert config.type_map.lookup("int(4)") == "integer"
    assert DEFAULT_TYPE_MAP.lookup("enum('a')") is None


def test_loaded_config_drives_resolution(tmp_path: Path, make_entity):
    config_file = tmp_path / "untaint.yaml"
    config_file.write_text("""
match_columns:
  - pattern: '_event$'
    category: date
""")
    entity = make_entity({"opening_event": "geometry", "title": "varchar(10)"})

    groups = auto_untaint(entity, load_untaint_config(config_file))

    assert groups == {"date": ["opening_event"], "printable": ["title"]}


def test_empty_file_gives_default_config(tmp_path: Path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    config = load_untaint_config(config_file)

    assert config.strict is False
    assert config.match_columns == []


def test_missing_file(tmp_path: Path):
    with pytest.raises(UntaintConfigLoadError, match="not found") as exc_info:
        load_untaint_config(tmp_path / "nope.yaml")

    assert exc_info.value.path == tmp_path / "nope.yaml"


def test_invalid_yaml(tmp_path: Path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("match_types: [unclosed\n")

    with pytest.raises(UntaintConfigLoadError, match="invalid YAML"):
        load_untaint_config(config_file)


def test_top_level_not_mapping(tmp_path: Path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- strict\n")

    with pytest.raises(UntaintConfigLoadError, match="mapping"):
        load_untaint_config(config_file)


def test_unknown_key(tmp_path: Path):
    config_file = tmp_path / "typo.yaml"
    config_file.write_text("skip_colums: [secret]\n")

    with pytest.raises(UntaintConfigLoadError, match="validation error"):
        load_untaint_config(config_file)


def test_bad_regex(tmp_path: Path):
    config_file = tmp_path / "regex.yaml"
    config_file.write_text("""
match_columns:
  - pattern: '(unclosed'
    category: printable
""")

    with pytest.raises(UntaintConfigLoadError, match="invalid regular expression"):
        load_untaint_config(config_file)


def test_types_not_mapping(tmp_path: Path):
    config_file = tmp_path / "types.yaml"
    config_file.write_text("types: [enum]\n")

    with pytest.raises(UntaintConfigLoadError, match="'types' must be a mapping"):
        load_untaint_config(config_file)


class TestDefaultConfig:
    @pytest.fixture(autouse=True)
    def _fresh_settings(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("AUTOUNTAINT_CONFIG_PATH", str(tmp_path))
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_missing_default_falls_back(self):
        config = load_default_untaint_config()

        assert config.match_columns == []
        assert config.strict is False

    def test_loads_default_file(self, tmp_path: Path):
        (tmp_path / "untaint").mkdir()
        (tmp_path / "untaint" / "default.yaml").write_text("strict: true\n")

        assert load_default_untaint_config().strict is True


def test_shipped_default_file_loads():
    shipped = Path(__file__).resolve().parents[2] / "config" / "untaint" / "default.yaml"

    config = load_untaint_config(shipped)

    assert config.strict is False
    assert config.verbosity == 0
    assert config.type_map is DEFAULT_TYPE_MAP
    assert [rule.category for rule in config.match_types] == ["integer"]
    assert [rule.category for rule in config.match_columns] == ["printable", "date", "integer"]
    assert config.match_columns[1].matches("opening_event")
