"""Config file discovery and loading."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import MermaidifyConfig

PROJECT_CONFIG = Path("mermaidify.yaml")
USER_CONFIG = Path(".mermaidify") / "config.yaml"  # relative to the home directory

_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [PROJECT_CONFIG, Path.home() / USER_CONFIG]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> MermaidifyConfig:
    """Return the config from the first non-empty file found, or the defaults."""
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            return MermaidifyConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
    return MermaidifyConfig()


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Replace ${VAR} references in every string of a loaded YAML tree."""
    if isinstance(obj, str):
        return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


# Default YAML template for `mermaidify config init`
DEFAULT_CONFIG_TEMPLATE = """\
# mermaidify.yaml

# Diagram blocks
diagram:
  code_class: "language-mermaid"   # class the Markdown renderer puts on <code>
  match: "token"                   # token (class list contains it) | exact (attribute equals it)
  container_tag: "div"
  container_class: "mermaid"       # class the client-side library looks for

# Generator hooks
hooks:
  owners: [posts, pages]
  event: "post_render"
  output_exts: [".html"]

# Output directory processing
site:
  include: ["**/*.html", "**/*.htm"]
  # exclude: ["vendor/**"]
  encoding: "utf-8"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
