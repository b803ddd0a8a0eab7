"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable named by ``library.path_env`` (library location)
"""

from .schema import ConfigModel, ReaderSettings, load_config

__all__ = ["ConfigModel", "ReaderSettings", "load_config"]
