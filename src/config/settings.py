"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use TEXDSL_ prefix (e.g., TEXDSL_VERBOSITY=2).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use TEXDSL_ prefix.

    Examples:
        TEXDSL_VERBOSITY=3
        TEXDSL_OUTPUT_ENCODING=latin-1
        TEXDSL_STRICT_MODE=false
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXDSL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging configuration
    verbosity: int = Field(
        default=0,
        description="Fallback LOG() verbosity when no document is connected to the logger",
    )

    # Output configuration
    output_encoding: str = Field(
        default="utf-8",
        description="Encoding applied to the serialized document before writing to a byte sink",
    )

    # Structure configuration
    strict_mode: bool = Field(
        default=True,
        description="Strict mode: a second document body on the root is an error, not a warning",
    )

    # Rendering configuration
    option_separator: str = Field(
        default=", ",
        description="Separator placed between option entries inside [...]",
    )

    option_assign: str = Field(
        default=" = ",
        description="Joiner placed between an option key and its value",
    )

    def option_make(self, key: str, value: str) -> str:
        """
        Format a single option entry.

        Args:
            key: Option name
            value: Option value (may be empty)

        Returns:
            Entry string (e.g., "a4paper = ")

        Example:
            >>> settings = AppSettings()
            >>> settings.option_make('fontsize', '12pt')
            'fontsize = 12pt'
        """
        return f"{key}{self.option_assign}{value}"


# Singleton instance - import this in your code
appsettings = AppSettings()
