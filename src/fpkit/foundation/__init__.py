"""Foundation: errors and configuration shared by every fpkit module."""

from .config import FpkitSettings, LoggingSettings, PipelineSettings, clear_settings_cache, get_settings
from .errors import ErrorCode, ErrorInfo, FpkitError, InvariantViolation

__all__ = [
    "ErrorCode", "ErrorInfo", "FpkitError", "InvariantViolation",
    "FpkitSettings", "LoggingSettings", "PipelineSettings", "clear_settings_cache", "get_settings",
]
