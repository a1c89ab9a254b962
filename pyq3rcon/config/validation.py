"""
Configuration validation utilities
"""


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""
    pass


def validate_host(host: str) -> str:
    """Validate host address"""
    if not host or not isinstance(host, str):
        raise ConfigValidationError("Host must be a non-empty string")

    if len(host.strip()) == 0:
        raise ConfigValidationError("Host cannot be empty or whitespace")

    return host.strip()


def validate_port(port: int) -> int:
    """Validate port number"""
    if not isinstance(port, int) or isinstance(port, bool):
        raise ConfigValidationError("Port must be an integer")

    if port < 1 or port > 65535:
        raise ConfigValidationError("Port must be between 1 and 65535")

    return port


def validate_interval(name: str, interval: int) -> int:
    """Validate an interval in milliseconds"""
    if not isinstance(interval, int) or isinstance(interval, bool):
        raise ConfigValidationError(f"{name} must be an integer number of milliseconds")

    if interval < 0:
        raise ConfigValidationError(f"{name} cannot be negative")

    return interval


def parse_bool(value) -> bool:
    """Interpret a settings value; only "0"-like values mean False"""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in ("0", "false", "no", "off")
