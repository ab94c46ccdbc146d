# invitation/logging_setup.py
# =================================================================================
# 📝 Logging con loguru
# - Streamlit re-ejecuta el script en cada interacción: la configuración se hace
#   una sola vez por proceso.
# - Sink a stderr con el nivel configurado; archivo rotativo opcional (LOG_FILE).
# =================================================================================

import os
import sys

from loguru import logger

from invitation.config import Settings

_configured = False


def setup_logging(settings: Settings) -> None:
    """Configura loguru según `settings`; llamadas repetidas no hacen nada."""
    global _configured
    if _configured:
        return

    logger.remove()                                              # Quita el sink por defecto de loguru.
    logger.add(sys.stderr, level=settings.log_level)

    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)                  # Asegura carpeta de logs.
        logger.add(settings.log_file, rotation="1 week", retention="4 weeks", level=settings.log_level)

    _configured = True
    logger.debug("[BOOT] logging listo | level={} | file={}", settings.log_level, settings.log_file or "-")
