# Common utilities
from .config_loader import StorefrontConfig, load_config, load_settings
from .log_config import setup_logging
