"""
Configuration Management for symdeps.

Provides centralized, type-safe configuration loading using Pydantic Settings.
Supports environment variables, .env files, and sensible defaults for zero-config operation.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Any, Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class SymdepsSettings(BaseSettings):
    """
    Centralized configuration for decorator-metadata extraction.

    Configuration is loaded with the following priority (highest to lowest):
    1. System environment variables
    2. .env file in project root
    3. Hardcoded default values

    All parameters have defaults matching Angular-style metadata, so the
    extractor works without any configuration.

    Example:
        ```python
        from symdeps_core.config import settings

        print(settings.interceptor_tokens)  # ['HTTP_INTERCEPTORS']
        print(settings.decorator_names)     # ['NgModule', 'Component', ...]
        ```
    """

    # ========================================
    # EXTRACTION CONFIGURATION
    # ========================================

    interceptor_tokens: List[str] = Field(
        default_factory=lambda: ["HTTP_INTERCEPTORS"],
        description="Provider tokens that mark an interceptor registration",
    )

    decorator_names: List[str] = Field(
        default_factory=lambda: ["NgModule", "Component", "Directive", "Pipe", "Injectable"],
        description="Class decorators whose object-literal argument is treated as metadata",
    )

    metadata_properties: List[str] = Field(
        default_factory=lambda: [
            "declarations",
            "imports",
            "exports",
            "providers",
            "bootstrap",
            "entryComponents",
            "schemas",
            "viewProviders",
        ],
        description="Metadata properties resolved for every decorated class",
    )

    max_file_size_bytes: int = Field(
        default=1_048_576,
        ge=1,
        description="Largest source file scanned for decorated classes",
    )

    # ========================================
    # LOGGING CONFIGURATION
    # ========================================

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(default="json", description="Log format (json, console)")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is one of allowed values.

        Args:
            v: Log level string (case-insensitive)

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level not in allowed values
        """
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """
        Validate log format is one of allowed values.

        Args:
            v: Log format string (case-insensitive)

        Returns:
            Lowercase log format string

        Raises:
            ValueError: If log format not in allowed values
        """
        allowed = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got '{v}'")
        return v_lower

    @field_validator("interceptor_tokens", "decorator_names", "metadata_properties")
    @classmethod
    def validate_non_empty_names(cls, v: List[str]) -> List[str]:
        """Reject blank entries in name lists."""
        if any(not name.strip() for name in v):
            raise ValueError("name lists cannot contain blank entries")
        return v

    # ========================================
    # PYDANTIC CONFIGURATION
    # ========================================

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "validate_assignment": True,  # Validate on attribute assignment
        "extra": "forbid",  # Forbid extra fields (strict mode)
    }


# ============================================================
# HELPER FUNCTIONS
# ============================================================


def get_config_summary(settings: SymdepsSettings) -> Dict[str, Any]:
    """
    Get configuration summary for logging/debugging.

    Args:
        settings: SymdepsSettings instance

    Returns:
        Configuration summary grouped by category
    """
    return {
        "extraction": {
            "interceptor_tokens": list(settings.interceptor_tokens),
            "decorator_names": list(settings.decorator_names),
            "metadata_properties": list(settings.metadata_properties),
            "max_file_size_bytes": settings.max_file_size_bytes,
        },
        "logging": {
            "level": settings.log_level,
            "format": settings.log_format,
        },
    }


# Singleton instance - instantiated once at module import
settings = SymdepsSettings()
