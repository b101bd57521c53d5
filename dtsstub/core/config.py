"""Configuration for stub generation.

Settings come from built-in defaults, an optional YAML config file, and
CLI overrides, applied in that order.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from dtsstub.core.declaration_table import DEFAULT_MODULE_PREFIX

LINE_ENDINGS = {
    'crlf': '\r\n',
    'lf': '\n',
}

DEFAULT_BASE_ORIGIN = ">lib.d.ts"


def bundled_base_declarations() -> Path:
    """Path of the base declarations shipped with dtsstub"""
    return Path(__file__).resolve().parent.parent / "data" / "lib.d.yaml"


@dataclass
class StubConfig:
    """Stub generation settings.

    Attributes:
        module_prefix: Name prefix marking module symbols in the environment
        line_ending: Terminator used to join output statements
        base_declarations: Base declarations file (None = bundled file)
        base_origin: Origin stamped on nodes read from the base declarations
    """
    module_prefix: str = DEFAULT_MODULE_PREFIX
    line_ending: str = LINE_ENDINGS['crlf']
    base_declarations: Optional[Path] = None
    base_origin: str = DEFAULT_BASE_ORIGIN

    def base_path(self) -> Path:
        """Resolve the base declarations file to read."""
        if self.base_declarations is not None:
            return self.base_declarations
        return bundled_base_declarations()

    def load_from_yaml(self, path: Path) -> None:
        """Load settings from YAML config file.

        Expected layout:
            stubs:
              module_prefix: "module:"
              line_ending: lf
              base: path/to/lib.d.yaml

        Relative base paths are resolved against the config file directory.

        Args:
            path: Path to YAML config file

        Raises:
            ValueError: If the file is not a mapping, 'stubs' is not a mapping,
                or line_ending names an unknown terminator
        """
        if not path.exists():
            return

        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        if not config:
            return
        if not isinstance(config, dict):
            raise ValueError(f"Config file {path} must be a mapping, got {type(config).__name__}")
        if 'stubs' not in config:
            return

        settings = config.get('stubs') or {}
        if not isinstance(settings, dict):
            raise ValueError(f"'stubs' in {path} must be a mapping, got {type(settings).__name__}")

        if 'module_prefix' in settings:
            self.module_prefix = str(settings['module_prefix'])
        if 'line_ending' in settings:
            self.line_ending = parse_line_ending(str(settings['line_ending']))
        if 'base' in settings:
            base = Path(settings['base'])
            if not base.is_absolute():
                base = path.parent / base
            self.base_declarations = base
        if 'base_origin' in settings:
            self.base_origin = str(settings['base_origin'])

    def apply_cli_overrides(self,
                            module_prefix: Optional[str] = None,
                            line_ending: Optional[str] = None,
                            base: Optional[Path] = None) -> None:
        """Override settings with values given on the command line."""
        if module_prefix is not None:
            self.module_prefix = module_prefix
        if line_ending is not None:
            self.line_ending = parse_line_ending(line_ending)
        if base is not None:
            self.base_declarations = base

    @classmethod
    def from_yaml(cls, path: Path) -> 'StubConfig':
        config = cls()
        config.load_from_yaml(path)
        return config


def parse_line_ending(name: str) -> str:
    """Map a line ending name (crlf, lf) to its terminator.

    Raises:
        ValueError: If name is not a known line ending
    """
    try:
        return LINE_ENDINGS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown line ending '{name}'. Expected one of: {', '.join(sorted(LINE_ENDINGS))}"
        )
