import logging
import os
import sys
from enum import Enum
from datetime import datetime
from PyQt5.QtCore import QObject, pyqtSignal

from storytray import config

# Set up logging format
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class InvalidConfiguration(ValueError):
    """Raised when a ring, tray or animator is configured with unusable values."""


# Define error severity levels
class ErrorSeverity(Enum):
    INFO = 0      # Informational message, not an error
    LOW = 1       # Cosmetic issue, tray still renders
    MEDIUM = 2    # Border or animation skipped for a frame
    HIGH = 3      # Tray cannot render at all
    CRITICAL = 4  # Application cannot continue


# Define error categories
class ErrorCategory(Enum):
    LAYOUT = "layout"         # Arc layout and ring geometry
    RENDER = "render"         # Painting and GIF output
    CONFIG = "config"         # Tray style and settings
    SYSTEM = "system"         # File system and OS errors
    UNKNOWN = "unknown"       # Unknown/unclassified errors


class ErrorResponse:
    """
    Standardized error response object.
    Logged as soon as it is created.
    """
    def __init__(self,
                 message,
                 category=ErrorCategory.UNKNOWN,
                 severity=ErrorSeverity.MEDIUM,
                 error=None,
                 details=None):
        self.message = message
        self.category = category
        self.severity = severity
        self.timestamp = datetime.now()
        self.error = error
        self.details = details or {}

        self._log_error()

    def _log_error(self):
        """Log the error using the appropriate severity level"""
        logger = logging.getLogger('storytray')

        error_msg = f"{self.category.value.upper()}: {self.message}"
        if self.error:
            error_msg += f" - {str(self.error)}"

        if self.severity == ErrorSeverity.INFO:
            logger.info(error_msg)
        elif self.severity == ErrorSeverity.LOW:
            logger.debug(error_msg)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning(error_msg)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error(error_msg)
        elif self.severity == ErrorSeverity.CRITICAL:
            logger.critical(error_msg)

    def to_dict(self):
        """Convert to dictionary for serialization"""
        return {
            'message': self.message,
            'category': self.category.value,
            'severity': self.severity.value,
            'timestamp': self.timestamp.isoformat(),
            'details': self.details
        }

    def __str__(self):
        return f"{self.category.value.upper()} ({self.severity.name}): {self.message}"


class ErrorManager(QObject):
    """
    Centralized error management for the tray widgets.

    Handles:
    - Logging setup (stdout and an optional daily file)
    - Broadcasting errors to interested widgets
    - Keeping recent errors and per-category counts
    """
    error_occurred = pyqtSignal(ErrorResponse)

    _instance = None

    def __new__(cls):
        """Singleton pattern to ensure only one error manager exists"""
        if cls._instance is None:
            cls._instance = super(ErrorManager, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        super().__init__()

        self._setup_logging()

        # Recent errors list (keep last 100 errors)
        self._recent_errors = []
        self._max_recent_errors = 100

        self._error_counts = {cat.value: 0 for cat in ErrorCategory}

        self._initialized = True

    def _setup_logging(self):
        """Set up the logging system"""
        handlers = [logging.StreamHandler(sys.stdout)]
        file_error = None

        if config.LOG_TO_FILE:
            try:
                if not os.path.exists(config.LOG_DIR):
                    os.makedirs(config.LOG_DIR)

                current_date = datetime.now().strftime('%Y-%m-%d')
                log_file = os.path.join(config.LOG_DIR, f'storytray_{current_date}.log')
                handlers.append(logging.FileHandler(log_file))
            except OSError as e:
                file_error = e

        # basicConfig is a no-op when the host already configured logging
        logging.basicConfig(
            level=getattr(logging, config.LOG_LEVEL, logging.INFO),
            format=LOG_FORMAT,
            handlers=handlers
        )

        self.logger = logging.getLogger('storytray')
        if file_error is not None:
            self.logger.warning(f"Logging to stdout only, cannot write to {config.LOG_DIR}: {file_error}")
        self.logger.info("Error manager initialized")

    def log_error(self, message, category=ErrorCategory.UNKNOWN, severity=ErrorSeverity.MEDIUM,
                  error=None, details=None):
        """
        Log an error and emit the error signal.

        Args:
            message: Human-readable error message
            category: ErrorCategory enum value
            severity: ErrorSeverity enum value
            error: Original exception object, if available
            details: Dictionary with additional error details

        Returns:
            ErrorResponse: The created error response object
        """
        error_response = ErrorResponse(message, category, severity, error, details)

        self._recent_errors.append(error_response)
        if len(self._recent_errors) > self._max_recent_errors:
            self._recent_errors.pop(0)

        self._error_counts[error_response.category.value] += 1

        self.error_occurred.emit(error_response)

        return error_response

    def get_recent_errors(self, limit=None, category=None, min_severity=None):
        """
        Get recent errors with optional filtering

        Args:
            limit: Maximum number of errors to return
            category: Filter by ErrorCategory
            min_severity: Only return errors with this severity or higher

        Returns:
            list: Filtered list of recent errors
        """
        filtered_errors = self._recent_errors

        if category:
            filtered_errors = [e for e in filtered_errors
                               if e.category == category]

        if min_severity:
            filtered_errors = [e for e in filtered_errors
                               if e.severity.value >= min_severity.value]

        if limit:
            filtered_errors = filtered_errors[-limit:]

        return filtered_errors

    def get_error_counts(self):
        """Return a copy of the per-category error counters"""
        return dict(self._error_counts)

    def clear(self):
        """Forget recent errors and reset counters"""
        self._recent_errors = []
        self._error_counts = {cat.value: 0 for cat in ErrorCategory}


def layout_error(message, severity=ErrorSeverity.MEDIUM, error=None, details=None):
    """Helper function for arc layout errors"""
    return ErrorManager().log_error(message, ErrorCategory.LAYOUT, severity, error, details)

def render_error(message, severity=ErrorSeverity.MEDIUM, error=None, details=None):
    """Helper function for painting errors"""
    return ErrorManager().log_error(message, ErrorCategory.RENDER, severity, error, details)

def config_error(message, severity=ErrorSeverity.MEDIUM, error=None, details=None):
    """Helper function for configuration errors"""
    return ErrorManager().log_error(message, ErrorCategory.CONFIG, severity, error, details)

def system_error(message, severity=ErrorSeverity.MEDIUM, error=None, details=None):
    """Helper function for system errors"""
    return ErrorManager().log_error(message, ErrorCategory.SYSTEM, severity, error, details)
