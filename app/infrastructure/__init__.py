"""Infrastructure modules for the translation engine.

Centralized infrastructure components:
- configuration: Settings management (settings, TranslatorSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation index and resolution engine (Translator)
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
]
