"""Application configuration management."""

import os
from typing import Literal, Optional
from dotenv import load_dotenv

load_dotenv()

TRANSPORTS = ["stdio", "sse", "streamable-http"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config:
    """Application configuration with validation."""

    SERVER_NAME: str = "mcp-calculator"
    VERSION: str = "1.0.1"

    def __init__(self):
        self._parse_errors = []

        # Operator who started the server, required
        self.OPERATOR_NAME: str = os.getenv("OPERATOR_NAME", "").strip()

        # Server settings
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = self._int_env("PORT", 8000)

        # Transport configuration
        self.TRANSPORT: Literal["stdio", "sse", "streamable-http"] = os.getenv("TRANSPORT", "sse")

        # Optional cap on factorial input, unset means no cap
        self.FACTORIAL_LIMIT: Optional[int] = self._int_env("FACTORIAL_LIMIT", None)

        # Development settings
        self.DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def _int_env(self, name: str, default: Optional[int]) -> Optional[int]:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw)
        except ValueError:
            self._parse_errors.append(f"{name} must be an integer, got: {raw!r}")
            return default

    def validate(self) -> None:
        """Validate all configuration values."""
        errors = list(self._parse_errors)

        if not self.OPERATOR_NAME:
            errors.append("OPERATOR_NAME is required (name of the person starting the server)")

        if self.TRANSPORT not in TRANSPORTS:
            errors.append(f"Invalid transport: {self.TRANSPORT}")

        if not (1 <= self.PORT <= 65535):
            errors.append(f"Port must be between 1-65535, got: {self.PORT}")

        if self.FACTORIAL_LIMIT is not None and self.FACTORIAL_LIMIT < 0:
            errors.append(f"Factorial limit must not be negative, got: {self.FACTORIAL_LIMIT}")

        if self.LOG_LEVEL not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.LOG_LEVEL}")

        if errors:
            raise ValueError("Configuration errors: " + "; ".join(errors))

    def display_config(self) -> str:
        """Return a safe string representation of configuration."""
        return f"""
MCP Calculator Configuration:
  Operator: {self.OPERATOR_NAME}
  Host: {self.HOST}
  Port: {self.PORT}
  Transport: {self.TRANSPORT}
  Factorial limit: {"none" if self.FACTORIAL_LIMIT is None else self.FACTORIAL_LIMIT}
  Debug: {self.DEBUG}
  Log Level: {self.LOG_LEVEL}
"""


config = Config()
