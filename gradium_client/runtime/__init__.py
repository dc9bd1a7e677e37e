from .logging import configure_logging
from .settings_loader import load_settings, ws_url_from_base

__all__ = ["configure_logging", "load_settings", "ws_url_from_base"]
