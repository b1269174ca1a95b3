"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
server starts on port 3000 serving the bundled ``public`` directory
without any setup.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Bundled static content shipped inside the package.
DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent.parent.parent / "public"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Laundry Services Web Server")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Root directory for pages and assets.  Relative paths are resolved
    # against the current working directory.
    public_dir: str = os.getenv("PUBLIC_DIR", str(DEFAULT_PUBLIC_DIR))

    # Seconds an error or success message stays visible on the
    # services page before it is hidden again.
    message_timeout: float = float(os.getenv("MESSAGE_TIMEOUT", "5"))

    @property
    def public_path(self) -> Path:
        return Path(self.public_dir).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
