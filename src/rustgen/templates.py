"""Jinja2 environment for the file wrapper template."""

import os
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader

# Environment variable pointing at a directory of user templates
RUSTGEN_TEMPLATES_DIR_ENV = "RUSTGEN_TEMPLATES_DIR"

BUILTIN_TEMPLATES_PATH = Path(__file__).parent / "templates"

# Template wrapping the rendered scope in a complete source file
FILE_TEMPLATE = "file.rs.j2"


def user_templates_path(templates_dir: Path | str | None = None) -> Path | None:
    """Resolve the user templates directory from an argument or the environment."""
    if templates_dir:
        return Path(templates_dir)
    if RUSTGEN_TEMPLATES_DIR_ENV in os.environ:
        return Path(os.environ[RUSTGEN_TEMPLATES_DIR_ENV])
    return None


def get_env(templates_dir: Path | str | None = None) -> Environment:
    """Create a Jinja2 environment.

    Templates in the user directory override the builtin ones with the same
    name.
    """
    search_paths = [BUILTIN_TEMPLATES_PATH]
    user_path = user_templates_path(templates_dir)
    if user_path is not None:
        search_paths.insert(0, user_path)

    return Environment(
        loader=ChoiceLoader([FileSystemLoader(p) for p in search_paths]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
