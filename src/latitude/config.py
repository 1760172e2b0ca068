"""Site configuration.

SiteConfig is a frozen dataclass: immutable after creation, built once at
process start and handed to the site by reference.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from latitude.assets.policy import AssetPolicy
from latitude.assets.routes import build_aliases, is_within
from latitude.errors import ConfigurationError

DEFAULT_PORT = 3000

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Static site configuration. Immutable after creation.

    Override what you need::

        config = SiteConfig(root="./public", port=8080)
    """

    # Content
    root: str | Path = "public"
    index_document: str = "index.html"
    admin_document: str = "admin.html"
    favicon_asset: str = "favicon.svg"

    # Server
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT

    # Upper bound for one file read, in seconds
    read_timeout: float = 10.0

    # Logging
    log_level: str = "info"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "SiteConfig":
        """Build a config from environment variables.

        ``PORT`` sets the port; ``LATITUDE_ROOT``, ``LATITUDE_HOST`` and
        ``LATITUDE_LOG_LEVEL`` set the matching fields.  Keyword overrides
        that are not None win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if port := env.get("PORT"):
            values["port"] = _parse_port(port)
        if root := env.get("LATITUDE_ROOT"):
            values["root"] = root
        if host := env.get("LATITUDE_HOST"):
            values["host"] = host
        if level := env.get("LATITUDE_LOG_LEVEL"):
            values["log_level"] = level

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def root_path(self) -> Path:
        """The public root as an absolute, symlink-resolved path."""
        return Path(self.root).resolve()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def with_overrides(self, **changes: Any) -> "SiteConfig":
        """Return a copy with the non-None *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def validate(self) -> None:
        """Check the config against the filesystem.

        Raises:
            ConfigurationError: Bad port, log level, timeout, missing root,
                or an alias pointing outside the root.
        """
        if not 0 < self.port < 65536:
            msg = f"port must be between 1 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"unknown log level {self.log_level!r}; expected one of {', '.join(_LOG_LEVELS)}"
            raise ConfigurationError(msg)
        if self.read_timeout <= 0:
            msg = f"read_timeout must be positive, got {self.read_timeout}"
            raise ConfigurationError(msg)

        root = self.root_path
        if not root.is_dir():
            msg = f"public root {str(root)!r} is not a directory"
            raise ConfigurationError(msg)

        for alias, target in self.policy().aliases.items():
            if not is_within(Path(os.path.normpath(root / target)), root):
                msg = f"alias {alias!r} points outside the public root: {target!r}"
                raise ConfigurationError(msg)

    def policy(self) -> AssetPolicy:
        """The immutable routing and header policy for this site."""
        return AssetPolicy(
            aliases=build_aliases(
                self.index_document,
                self.admin_document,
                self.favicon_asset,
            )
        )


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        msg = f"PORT must be an integer, got {value!r}"
        raise ConfigurationError(msg) from None
