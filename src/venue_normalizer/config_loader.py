"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import NormalizerConfig
from .config_validator import get_optional_env, validate_log_level, validate_path


def load_config_from_env() -> NormalizerConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        resolver = create_seat_resolver(config)

    :return: Validated NormalizerConfig instance
    :raises: ConfigurationError if a configured path does not exist
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    config = NormalizerConfig(
        manifest_path=get_optional_env("VENUE_MANIFEST_PATH", check_placeholder=False),
        lookup_tables_path=get_optional_env("VENUE_LOOKUP_TABLES_PATH", check_placeholder=False),
        log_level=validate_log_level(get_optional_env("LOG_LEVEL", default="INFO")),
    )

    # Validate paths if they're set
    if config.manifest_path:
        validate_path(config.manifest_path, "VENUE_MANIFEST_PATH", must_exist=True)

    if config.lookup_tables_path:
        validate_path(
            config.lookup_tables_path,
            "VENUE_LOOKUP_TABLES_PATH",
            must_exist=True
        )

    return config
