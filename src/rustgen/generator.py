"""Code generation orchestration."""

from __future__ import annotations

import logging
import shutil
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from jinja2 import Environment

from .config import ScopeConfig
from .templates import FILE_TEMPLATE, get_env

YAML_SUFFIXES = (".yml", ".yaml")


class CodeGenerator:
    """Turns YAML scope descriptions into Rust source files.

    This class encapsulates the entire generation workflow:
    1. Parse and validate YAML input
    2. Build the scope and render it
    3. Wrap the code in the file template and write it
    4. Optionally pipe it through ``rustfmt``

    Example:
        >>> from rustgen.generator import CodeGenerator
        >>>
        >>> code_gen = CodeGenerator(Path("output"))
        >>> filename = code_gen.generate_from_file(Path("shapes.yml"))
    """

    def __init__(
        self,
        output_path: Path,
        templates_dir: Path | str | None = None,
        rustfmt: bool = False,
    ):
        """Initialize the code generator.

        Args:
            output_path: Path to the output directory.
            templates_dir: Optional directory with templates overriding the builtin ones.
            rustfmt: Pipe generated code through ``rustfmt`` before writing.
        """
        self.output_path = Path(output_path).resolve()
        self.templates_dir = templates_dir
        self.rustfmt = rustfmt
        self._env: Environment | None = None
        self._log = logging.getLogger("rustgen")

    @property
    def env(self) -> Environment:
        """Get or create the Jinja2 environment."""
        if self._env is None:
            self._env = get_env(self.templates_dir)
            self._env.globals["generated_on"] = datetime.now().strftime(
                "%Y-%m-%d %H:%M:%S"
            )
        return self._env

    def parse_yaml(self, input_path: Path) -> dict[str, Any]:
        """Load the top-level mapping of a ``.yml``/``.yaml`` scope description.

        A missing path, a directory or a non-YAML suffix raises
        ``FileNotFoundError``; unreadable YAML or a document that is not a
        mapping raises ``RuntimeError``.
        """
        input_path = Path(input_path).resolve()

        if not input_path.is_file():
            reason = "does not exist" if not input_path.exists() else "is not a file"
            raise FileNotFoundError(f"Input file {input_path} {reason}")
        if input_path.suffix not in YAML_SUFFIXES:
            raise FileNotFoundError(f"Input file {input_path} is not a YAML file")

        self._log.info(f"Loading scope from {input_path.as_posix()}")

        try:
            data = yaml.safe_load(input_path.read_text())
        except yaml.YAMLError as e:
            raise RuntimeError("Failed to load YAML file") from e

        if not isinstance(data, dict):
            raise RuntimeError(
                f"Expected a mapping at the top of {input_path.name}, "
                f"got {type(data).__name__}"
            )
        return data

    def validate(self, data: dict[str, Any]) -> ScopeConfig:
        """Validate YAML data against the scope schema.

        Raises:
            RuntimeError: If validation fails.
        """
        self._log.debug("Validating scope configuration")

        try:
            return ScopeConfig.model_validate(data)
        except Exception as e:
            self._log.error(f"Failed to validate scope configuration: {e}")
            raise RuntimeError("Failed to validate scope configuration") from e

    def ensure_output_dir(self) -> Path:
        """Create the output directory inside an existing parent and return it."""
        parent = self.output_path.parent
        if not parent.is_dir():
            raise FileNotFoundError(f"Output directory {parent} does not exist")
        if self.output_path.exists() and not self.output_path.is_dir():
            raise FileNotFoundError(f"Output path {self.output_path} is not a directory")

        if not self.output_path.exists():
            self._log.debug(f"Creating output directory {self.output_path}")
            self.output_path.mkdir()

        return self.output_path

    def format_code(self, code: str) -> str:
        """Run ``code`` through ``rustfmt`` and return the formatted text.

        Raises:
            RuntimeError: If ``rustfmt`` is missing or rejects the code.
        """
        rustfmt = shutil.which("rustfmt")
        if rustfmt is None:
            raise RuntimeError("rustfmt was requested but is not installed")

        self._log.debug("Formatting output with rustfmt")
        result = subprocess.run(
            [rustfmt, "--emit", "stdout", "--edition", "2021"],
            input=code,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise RuntimeError(f"rustfmt failed: {result.stderr.strip()}")

        return result.stdout

    def render(self, config: ScopeConfig) -> str:
        """Render a validated config to the complete file contents."""
        code = config.to_scope().render(indent=config.indent)

        template = self.env.get_template(FILE_TEMPLATE)
        content = template.render(
            name=config.name,
            header=config.header,
            code=code,
        )

        if self.rustfmt:
            content = self.format_code(content)

        return content

    def generate(self, config: ScopeConfig) -> str:
        """Write a validated config to ``<output_filename>.rs``.

        Returns:
            The generated filename.
        """
        self.ensure_output_dir()

        content = self.render(config)
        filename = f"{config.output_filename}.rs"

        self._log.debug(f"Writing output to '{filename}'")
        with open(self.output_path / filename, "w") as f:
            f.write(content)

        self._log.info(f"Wrote {filename} to {self.output_path.as_posix()}")
        return filename

    def generate_from_file(self, input_path: Path) -> str:
        """Parse a YAML file and generate its output file.

        This is the main entry point for file-based generation.
        """
        data = self.parse_yaml(input_path)
        config = self.validate(data)
        return self.generate(config)
