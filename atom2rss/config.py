"""Configuration management for the Atom to RSS converter."""

import os
from dataclasses import dataclass

from .dates import resolve_timezone

DEFAULT_INDENT = "    "


@dataclass
class FetchConfig:
    """Configuration for retrieving the source feed."""

    timeout: int = 30
    proxy_template: str = ""
    user_agent: str = "atom2rss/1.0 (Atom to RSS 2.0 converter)"


@dataclass
class OutputConfig:
    """Configuration for the generated RSS document."""

    timezone: str = "UTC"
    indent: str = DEFAULT_INDENT
    xml_declaration: bool = False


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.fetch_timeout = os.getenv("FETCH_TIMEOUT", "30")
        self.fetch_proxy_template = os.getenv("FETCH_PROXY_TEMPLATE", "")
        self.output_timezone = os.getenv("OUTPUT_TIMEZONE", "UTC")
        self.output_indent = os.getenv("OUTPUT_INDENT", DEFAULT_INDENT)
        self.output_xml_declaration = os.getenv("OUTPUT_XML_DECLARATION", "false")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    def get_fetch_config(self) -> FetchConfig:
        """Get fetch configuration."""
        try:
            timeout = int(self.fetch_timeout)
        except ValueError as e:
            raise ValueError(f"Invalid FETCH_TIMEOUT: {self.fetch_timeout!r}") from e

        if timeout <= 0:
            raise ValueError(f"FETCH_TIMEOUT must be positive, got {timeout}")

        return FetchConfig(
            timeout=timeout,
            proxy_template=self.fetch_proxy_template.strip(),
        )

    def get_output_config(self) -> OutputConfig:
        """Get output configuration."""
        timezone = self.output_timezone.strip() or "UTC"
        resolve_timezone(timezone)

        # "2" means two spaces, anything else is used as the indent unit itself
        indent = self.output_indent
        if indent.isdigit():
            indent = " " * int(indent)

        return OutputConfig(
            timezone=timezone,
            indent=indent,
            xml_declaration=self.output_xml_declaration.strip().lower()
            in ("1", "true", "yes"),
        )
