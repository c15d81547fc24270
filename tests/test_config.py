"""Tests for mermaidify.config — models and YAML loader."""

import pytest
from pydantic import ValidationError

from mermaidify.config.loader import (
    DEFAULT_CONFIG_TEMPLATE,
    PROJECT_CONFIG,
    USER_CONFIG,
    _expand_env_vars,
    config_search_paths,
    load_config,
)
from mermaidify.config.models import DiagramConfig, HooksConfig, MermaidifyConfig, SiteConfig


# ── MermaidifyConfig defaults ──────────────────────────────────────


class TestMermaidifyConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "info"

    def test_default_log_format(self, sample_config):
        assert sample_config.log_format == "text"

    def test_default_code_class(self, sample_config):
        assert sample_config.diagram.code_class == "language-mermaid"

    def test_default_container(self, sample_config):
        assert sample_config.diagram.container_tag == "div"
        assert sample_config.diagram.container_class == "mermaid"

    def test_default_match_mode(self, sample_config):
        assert sample_config.diagram.match == "token"

    def test_default_hooks(self, sample_config):
        assert sample_config.hooks.owners == ["posts", "pages"]
        assert sample_config.hooks.event == "post_render"
        assert sample_config.hooks.output_exts == [".html"]

    def test_default_site(self, sample_config):
        assert sample_config.site.include == ["**/*.html", "**/*.htm"]
        assert sample_config.site.exclude == []
        assert sample_config.site.encoding == "utf-8"


# ── Individual config model validations ─────────────────────────────


class TestModelValidation:
    def test_invalid_match_mode(self):
        with pytest.raises(ValidationError):
            DiagramConfig(match="fuzzy")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            MermaidifyConfig(log_level="verbose")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            MermaidifyConfig(log_format="xml")

    def test_nested_dicts_coerced(self):
        cfg = MermaidifyConfig(hooks={"owners": ["docs"]}, site={"exclude": ["vendor/**"]})
        assert isinstance(cfg.hooks, HooksConfig)
        assert cfg.hooks.owners == ["docs"]
        assert isinstance(cfg.site, SiteConfig)
        assert cfg.site.exclude == ["vendor/**"]


# ── _expand_env_vars ────────────────────────────────────────────────


class TestExpandEnvVars:
    def test_expands_string(self, monkeypatch):
        monkeypatch.setenv("MERMAID_CLASS", "diagram")
        assert _expand_env_vars("${MERMAID_CLASS}") == "diagram"

    def test_missing_var_becomes_empty(self, monkeypatch):
        monkeypatch.delenv("NOPE_NOT_SET", raising=False)
        assert _expand_env_vars("x${NOPE_NOT_SET}y") == "xy"

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("OWNER", "posts")
        assert _expand_env_vars({"a": ["${OWNER}", 1]}) == {"a": ["posts", 1]}

    def test_non_strings_pass_through(self):
        assert _expand_env_vars(42) == 42


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_returns_defaults_when_no_file_exists(self, isolated_config):
        config = load_config()
        assert config == MermaidifyConfig()

    def test_loads_valid_yaml(self, isolated_config):
        (isolated_config / "mermaidify.yaml").write_text(
            "diagram:\n  match: exact\n  container_class: diagram\nlog_level: debug\n"
        )
        config = load_config()
        assert config.diagram.match == "exact"
        assert config.diagram.container_class == "diagram"
        assert config.log_level == "debug"

    def test_empty_file_falls_through_to_defaults(self, isolated_config):
        (isolated_config / "mermaidify.yaml").write_text("")
        assert load_config() == MermaidifyConfig()

    def test_raises_on_invalid_yaml(self, isolated_config):
        (isolated_config / "mermaidify.yaml").write_text("  bad:\nyaml: [unterminated")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config()

    def test_raises_on_invalid_config_values(self, isolated_config):
        (isolated_config / "mermaidify.yaml").write_text("diagram:\n  match: fuzzy\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_cli_path_takes_priority(self, isolated_config):
        (isolated_config / "mermaidify.yaml").write_text("log_level: debug\n")
        cli_file = isolated_config / "custom.yaml"
        cli_file.write_text("log_level: error\n")
        assert load_config(cli_path=str(cli_file)).log_level == "error"

    def test_user_global_config_used_as_fallback(self, isolated_config):
        user_dir = isolated_config / "fakehome" / ".mermaidify"
        user_dir.mkdir(parents=True)
        (user_dir / "config.yaml").write_text("log_format: json\n")
        assert load_config().log_format == "json"

    def test_env_vars_expanded_in_loaded_config(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DIAGRAM_CLASS", "mermaid-live")
        (isolated_config / "mermaidify.yaml").write_text(
            "diagram:\n  container_class: ${DIAGRAM_CLASS}\n"
        )
        assert load_config().diagram.container_class == "mermaid-live"

    def test_default_template_is_loadable(self, isolated_config):
        (isolated_config / "mermaidify.yaml").write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config() == MermaidifyConfig()

    def test_directory_named_like_config_is_ignored(self, isolated_config):
        (isolated_config / "mermaidify.yaml").mkdir()
        assert load_config() == MermaidifyConfig()


class TestConfigSearchPaths:
    def test_without_cli_path(self, isolated_config):
        assert config_search_paths() == [PROJECT_CONFIG, isolated_config / "fakehome" / USER_CONFIG]

    def test_cli_path_first(self, isolated_config):
        paths = config_search_paths("custom.yaml")
        assert paths[0].name == "custom.yaml"
        assert paths[1:] == config_search_paths()
