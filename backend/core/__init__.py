# Core module exports
from core.config import settings, get_settings
from core.logging import (
    configure_logging,
    get_logger,
    engine_logger,
    lexicon_logger,
    progress_logger,
)
