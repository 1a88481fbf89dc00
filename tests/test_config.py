"""
Tests for configuration loading, ignore patterns and logging setup.
"""

import logging

import pytest

from structdoc.configs import (
    DEFAULT_CONFIG_YAML,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_TITLE,
    create_default_config,
    get_config_path,
    get_logger,
    load_ignore_patterns,
    load_yaml_config,
    setup_logging,
)
from structdoc.configs.runtime import DEFAULT_CONFIG, build_options, get_full_config
from structdoc.exceptions import ConfigurationError


class TestYamlConfig:
    """Test .structdoc.yaml loading."""

    def test_no_config_file(self, temp_dir):
        assert get_config_path(str(temp_dir)) is None
        assert load_yaml_config(None) == {}

    def test_config_found_beside_sources(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("title: Models\n")
        path = get_config_path(str(temp_dir))
        assert path == temp_dir / ".structdoc.yaml"
        assert load_yaml_config(path) == {"title": "Models"}

    def test_config_found_for_single_file(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("title: Models\n")
        go_file = temp_dir / "a.go"
        go_file.write_text("package a\n")
        assert get_config_path(str(go_file)) == temp_dir / ".structdoc.yaml"

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_yaml_config(path) == {}

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("title: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_yaml_config(path)

    def test_non_mapping(self, temp_dir):
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_yaml_config(path)

    def test_missing_explicit_file(self, temp_dir):
        with pytest.raises(ConfigurationError):
            load_yaml_config(temp_dir / "nope.yaml")

    def test_create_default_config(self, temp_dir):
        path = create_default_config(str(temp_dir))
        assert path.read_text() == DEFAULT_CONFIG_YAML
        config = load_yaml_config(path)
        assert config["title"] == DEFAULT_TITLE
        assert config["show_exported"] is True

    def test_create_default_config_refuses_overwrite(self, temp_dir):
        create_default_config(str(temp_dir))
        with pytest.raises(ConfigurationError):
            create_default_config(str(temp_dir))


class TestFullConfig:
    """Test configuration precedence."""

    def test_defaults(self, temp_dir):
        config = get_full_config(str(temp_dir))
        assert config == DEFAULT_CONFIG

    def test_yaml_over_defaults(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text(
            "title: From YAML\nfield_tag: json\nignore:\n  - gen\n"
        )
        config = get_full_config(str(temp_dir))
        assert config["title"] == "From YAML"
        assert config["field_tag"] == "json"
        assert config["ignore"] == ["gen"]
        assert config["output"] == "docs.md"

    def test_env_over_yaml(self, temp_dir, monkeypatch):
        (temp_dir / ".structdoc.yaml").write_text("title: From YAML\n")
        monkeypatch.setenv("STRUCTDOC_TITLE", "From Env")
        config = get_full_config(str(temp_dir))
        assert config["title"] == "From Env"

    def test_overrides_win(self, temp_dir, monkeypatch):
        (temp_dir / ".structdoc.yaml").write_text("title: From YAML\nshow_exported: true\n")
        monkeypatch.setenv("STRUCTDOC_TITLE", "From Env")
        config = get_full_config(
            str(temp_dir),
            overrides={"title": "From CLI", "show_exported": False, "field_tag": None},
        )
        assert config["title"] == "From CLI"
        assert config["show_exported"] is False
        assert config["field_tag"] is None

    def test_explicit_config_path(self, temp_dir):
        other = temp_dir / "custom.yaml"
        other.write_text("output: out/api.md\n")
        config = get_full_config(str(temp_dir), config_path=str(other))
        assert config["output"] == "out/api.md"

    def test_unknown_keys_dropped(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("colour: blue\n")
        assert "colour" not in get_full_config(str(temp_dir))

    def test_single_ignore_pattern(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text('ignore: "*_mock.go"\n')
        assert get_full_config(str(temp_dir))["ignore"] == ["*_mock.go"]

    def test_empty_ignore(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("ignore:\n")
        assert get_full_config(str(temp_dir))["ignore"] == []

    def test_invalid_ignore(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("ignore:\n  - gen\n  - 42\n")
        with pytest.raises(ConfigurationError):
            get_full_config(str(temp_dir))

    def test_ignore_mapping_rejected(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("ignore:\n  gen: true\n")
        with pytest.raises(ConfigurationError):
            get_full_config(str(temp_dir))

    def test_invalid_output(self, temp_dir):
        (temp_dir / ".structdoc.yaml").write_text("output: 123\n")
        with pytest.raises(ConfigurationError) as exc_info:
            get_full_config(str(temp_dir))
        assert "output" in str(exc_info.value)


class TestBuildOptions:
    """Test DocOptions validation."""

    def test_defaults(self):
        options = build_options(dict(DEFAULT_CONFIG))
        assert options.field_name_tag is None
        assert options.title == DEFAULT_TITLE
        assert options.show_exported is True

    def test_field_tag(self):
        options = build_options({**DEFAULT_CONFIG, "field_tag": "label"})
        assert options.field_name_tag == "label"

    def test_empty_field_tag_means_none(self):
        assert build_options({**DEFAULT_CONFIG, "field_tag": ""}).field_name_tag is None

    def test_unsupported_field_tag(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options({**DEFAULT_CONFIG, "field_tag": "protobuf"})
        assert "protobuf" in str(exc_info.value)

    def test_show_exported_must_be_bool(self):
        with pytest.raises(ConfigurationError):
            build_options({**DEFAULT_CONFIG, "show_exported": "yes"})

    def test_options_are_frozen(self):
        options = build_options(dict(DEFAULT_CONFIG))
        with pytest.raises(AttributeError):
            options.title = "changed"


class TestIgnorePatterns:
    """Test ignore pattern loading."""

    def test_defaults_included(self, temp_dir):
        patterns = load_ignore_patterns(str(temp_dir))
        assert DEFAULT_IGNORE_PATTERNS <= patterns
        assert "vendor" in patterns

    def test_extra_patterns(self, temp_dir):
        patterns = load_ignore_patterns(str(temp_dir), ["*_mock.go"])
        assert "*_mock.go" in patterns

    def test_ignore_file(self, temp_dir):
        (temp_dir / ".structdocignore").write_text("# generated code\ngen/\n\n*.pb.go\n")
        patterns = load_ignore_patterns(str(temp_dir))
        assert "gen" in patterns
        assert "*.pb.go" in patterns
        assert "# generated code" not in patterns

    def test_unreadable_ignore_file(self, temp_dir):
        (temp_dir / ".structdocignore").write_bytes(b"gen\n\xff\xfe\n")
        with pytest.raises(ConfigurationError):
            load_ignore_patterns(str(temp_dir))


class TestLogging:
    """Test logging setup."""

    def teardown_method(self):
        logging.getLogger("structdoc").handlers.clear()

    def test_component_logger_name(self):
        assert get_logger("ast.parser").name == "structdoc.ast.parser"

    def test_default_level(self):
        logger = setup_logging(debug=False)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_debug_from_env(self, monkeypatch):
        monkeypatch.setenv("STRUCTDOC_DEBUG", "1")
        assert setup_logging().level == logging.DEBUG

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "structdoc.log"
        logger = setup_logging(debug=True, log_file=str(log_file))
        assert len(logger.handlers) == 2
        assert logger.handlers[0].level == logging.WARNING
        get_logger("test").debug("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text()
        logger.handlers[1].close()
