from .logging_setup import get_logger, init_logger, set_level

__all__ = [
    "get_logger",
    "init_logger", # If users might need to re-init with different settings
    "set_level",
]
