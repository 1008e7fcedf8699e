"""
Configuration loader — reads a component catalogue YAML into a registry.

The built-in catalogue covers the standard Termux setup. A YAML file
passed with ``--catalog`` replaces it entirely:

    scripts_dir: scripts
    components:
      - id: termux-prep
        name: Termux Preparation
        script: prepare-termux.sh
    execution_order: [termux-prep]

Registry integrity is checked while loading; every problem surfaces as
``ConfigError`` before any component can run.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from termux_devkit.core.errors import ConfigError
from termux_devkit.core.models.component import Component
from termux_devkit.core.services.component_install.registry import (
    ComponentRegistry,
    default_registry,
)

logger = logging.getLogger(__name__)

# Env var overriding where component scripts live
SCRIPTS_DIR_ENV = "TDK_SCRIPTS_DIR"
DEFAULT_SCRIPTS_DIR = "scripts"


class CatalogFile(BaseModel):
    """Schema of a catalogue YAML file."""

    scripts_dir: str = ""
    components: list[Component] = Field(default_factory=list)
    execution_order: list[str] | None = None


@dataclass(frozen=True)
class Catalog:
    """A validated registry plus where its scripts live."""

    registry: ComponentRegistry
    scripts_dir: Path
    source: Path | None = None


def resolve_scripts_dir(configured: str = "", base: Path | None = None) -> Path:
    """Resolve the scripts directory.

    Precedence: catalogue ``scripts_dir`` > ``TDK_SCRIPTS_DIR`` > ./scripts.
    Relative catalogue paths are resolved against ``base``.
    """
    if configured:
        path = Path(configured).expanduser()
        if not path.is_absolute() and base is not None:
            path = base / path
        return path.resolve()

    env = os.environ.get(SCRIPTS_DIR_ENV)
    if env:
        return Path(env).expanduser().resolve()

    return (Path.cwd() / DEFAULT_SCRIPTS_DIR).resolve()


def load_catalog(path: Path | None = None) -> Catalog:
    """Load the component catalogue.

    Args:
        path: Catalogue YAML. None = built-in catalogue.

    Returns:
        Catalog with a validated registry.

    Raises:
        ConfigError: The file is missing, unreadable, malformed, or
            describes an invalid registry.
    """
    if path is None:
        return Catalog(registry=default_registry(), scripts_dir=resolve_scripts_dir())

    if not path.is_file():
        raise ConfigError(f"Catalog file not found: {path}")

    logger.debug("Loading component catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        spec = CatalogFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog {path}: {e}") from e

    if not spec.components:
        raise ConfigError(f"Catalog {path} declares no components")

    # RegistryError is a ConfigError
    registry = ComponentRegistry(spec.components, spec.execution_order)

    logger.info("Loaded catalog '%s' with %d components", path.name, len(registry))
    return Catalog(
        registry=registry,
        scripts_dir=resolve_scripts_dir(spec.scripts_dir, base=path.parent.resolve()),
        source=path,
    )
