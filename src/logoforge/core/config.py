"""Configuration management for Logoforge.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the LOGOFORGE_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (LOGOFORGE_* prefix)
2. .env file in the project root
3. Default values defined in LogoforgeConfig

Example .env file:
    LOGOFORGE_API_KEY=sk-...
    LOGOFORGE_IMAGE_MODEL=gpt-image-1
    LOGOFORGE_IMAGE_SIZE=1024x1024
    LOGOFORGE_SERVER_PORT=7860

Credential Handling
-------------------
The API key is the only credential.  It is stored as a ``SecretStr`` so it
never appears in ``repr()`` output or log lines.  When ``LOGOFORGE_API_KEY``
is unset the OpenAI SDK falls back to its own ``OPENAI_API_KEY`` variable at
the time of the first generation call.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from logoforge.core.config import config

    print(config.image_model)
    print(config.image_size)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package-relative asset directories shipped alongside the code.
_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class LogoforgeConfig(BaseSettings):
    """Main configuration for Logoforge.

    Attributes
    ----------
    Image Generation:
        api_key : SecretStr | None
            Credential for the image-generation API
        image_model : str
            Model identifier sent with every generation call
        image_size : str
            Fixed output size descriptor (``WIDTHxHEIGHT``)

    Server:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1024-65535)
        log_level : Literal["debug", "info", "warning", "error"]
            Log level handed to uvicorn

    Paths:
        static_dir : Path
            Directory served at ``/static``
        templates_dir : Path
            Directory containing ``index.html``

    Examples
    --------
        >>> custom_config = LogoforgeConfig(image_size="1536x1024", _env_file=None)
        >>> custom_config.image_model
        'gpt-image-1'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOGOFORGE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Image generation settings
    api_key: SecretStr | None = Field(
        default=None,
        description="Image API key (falls back to OPENAI_API_KEY when unset)",
    )
    image_model: str = Field(
        default="gpt-image-1",
        description="Image generation model identifier",
    )
    image_size: str = Field(
        default="1024x1024",
        description="Output size descriptor sent with every request",
        pattern=r"^\d+x\d+$",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Log level for the uvicorn server",
    )

    # Paths
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory of static assets (CSS, JS)",
    )
    templates_dir: Path = Field(
        default=_PACKAGE_DIR / "templates",
        description="Directory containing the HTML page",
    )

    def api_key_value(self) -> str | None:
        """Return the plain credential, or ``None`` when it is not configured."""
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value() or None


# Global configuration instance
# Loads values from environment variables (LOGOFORGE_* prefix) and .env file.
config = LogoforgeConfig()
