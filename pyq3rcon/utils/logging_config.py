"""
Logging configuration for pyq3rcon with clear module prefixes
"""

import logging


class ModuleLogger:
    """Custom logger that adds module-specific prefixes"""

    # Module prefix mapping
    MODULE_PREFIXES = {
        'pyq3rcon.protocol': '[PROTO]',
        'pyq3rcon.client': '[QUERY]',
        'pyq3rcon.rc.rc_client': '[RCON]',
        'pyq3rcon.rc.rc_commands': '[RCON]',
        'pyq3rcon.rc.command_gate': '[GATE]',
        'pyq3rcon.rc.transcript': '[LOG]',
        'pyq3rcon.parsers': '[PARSE]',
        'pyq3rcon.config': '[CONFIG]',
        'pyq3rcon.session': '[SESSION]',
        'pyq3rcon.testing': '[MOCK]',
    }

    @classmethod
    def prefix_for(cls, name: str) -> str:
        for module_name, module_prefix in cls.MODULE_PREFIXES.items():
            if name.startswith(module_name):
                return module_prefix
        return '[UNKNOWN]'

    @classmethod
    def get_logger(cls, name: str, level: int = logging.DEBUG) -> logging.Logger:
        """Get a logger with appropriate prefix for the module"""
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Don't add handler if already configured
        if logger.handlers:
            return logger

        handler = logging.StreamHandler()
        handler.setFormatter(ModulePrefixFormatter(cls.prefix_for(name)))

        logger.addHandler(handler)
        logger.propagate = False  # Don't propagate to root logger

        return logger


class ModulePrefixFormatter(logging.Formatter):
    """Custom formatter that adds module prefix to log messages"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        # Include time, module prefix, level, and message
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def configure_logging(level: int = logging.INFO):
    """Configure logging for the entire pyq3rcon package"""
    # Set root logger level
    logging.getLogger().setLevel(level)

    # Configure specific module loggers
    for module_name in ModuleLogger.MODULE_PREFIXES:
        ModuleLogger.get_logger(module_name, level)
