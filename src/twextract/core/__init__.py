"""Configuration, errors and logging shared by the extraction engine and the CLI."""

from .config import ConfigurationError, ExtractorConfig, ExtractorConfigBuilder, load_config

__all__ = ["ConfigurationError", "ExtractorConfig", "ExtractorConfigBuilder", "load_config"]
