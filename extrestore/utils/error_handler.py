#!/usr/bin/env python3
"""
Unified error classification and reporting for extrestore

The identification core never lets these errors escape; it classifies them,
records them here and degrades to an empty result.
"""

import threading
import time
from collections import defaultdict, deque
from enum import Enum
from typing import Any

from .logger import get_logger

_logger = get_logger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels"""

    LOW = "low"  # Expected and harmless, e.g. a skipped record
    MEDIUM = "medium"  # Part of the work could not be done
    HIGH = "high"  # The requested operation produced no result
    CRITICAL = "critical"  # Nothing useful can be done


class ErrorCategory(Enum):
    """Error categories for classification"""

    FILE_ACCESS = "file_access"
    DATABASE = "database"
    INPUT_VALIDATION = "input_validation"
    RENAME = "rename"
    UNKNOWN = "unknown"


class ErrorInfo:
    """Information about an error"""

    def __init__(
        self,
        exception: Exception,
        severity: ErrorSeverity,
        category: ErrorCategory,
        context: dict[str, Any] | None = None,
        suggested_action: str | None = None,
    ):
        self.exception = exception
        self.severity = severity
        self.category = category
        self.context = context or {}
        self.suggested_action = suggested_action
        self.timestamp = time.time()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization"""
        return {
            "exception_type": type(self.exception).__name__,
            "exception_message": str(self.exception),
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context,
            "suggested_action": self.suggested_action,
            "timestamp": self.timestamp,
        }


class ErrorClassifier:
    """Classify exceptions into categories and severities"""

    EXCEPTION_MAPPING = {
        FileNotFoundError: (ErrorCategory.FILE_ACCESS, ErrorSeverity.HIGH),
        PermissionError: (ErrorCategory.FILE_ACCESS, ErrorSeverity.HIGH),
        IsADirectoryError: (ErrorCategory.FILE_ACCESS, ErrorSeverity.MEDIUM),
        FileExistsError: (ErrorCategory.RENAME, ErrorSeverity.MEDIUM),
        UnicodeDecodeError: (ErrorCategory.DATABASE, ErrorSeverity.HIGH),
        OSError: (ErrorCategory.FILE_ACCESS, ErrorSeverity.MEDIUM),
        ValueError: (ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
        TypeError: (ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
    }

    # Context "component" values that override the exception based category
    COMPONENT_CATEGORIES = {
        "database": ErrorCategory.DATABASE,
        "rename": ErrorCategory.RENAME,
    }

    @classmethod
    def classify(cls, exception: Exception, context: dict[str, Any] | None = None) -> ErrorInfo:
        """
        Classify an exception

        Args:
            exception: The exception to classify
            context: Additional context information

        Returns:
            ErrorInfo object with classification
        """
        context = context or {}

        exc_type = type(exception)
        if exc_type in cls.EXCEPTION_MAPPING:
            category, severity = cls.EXCEPTION_MAPPING[exc_type]
        else:
            category, severity = cls._classify_by_inheritance(exception)

        category, severity = cls._adjust_classification(category, severity, context)

        return ErrorInfo(
            exception=exception,
            severity=severity,
            category=category,
            context=context,
            suggested_action=cls._suggest_action(exception, category),
        )

    @classmethod
    def _classify_by_inheritance(cls, exception: Exception) -> tuple:
        """Classify by checking exception inheritance"""
        for exc_type, (category, severity) in cls.EXCEPTION_MAPPING.items():
            if isinstance(exception, exc_type):
                return category, severity
        return ErrorCategory.UNKNOWN, ErrorSeverity.LOW

    @classmethod
    def _adjust_classification(
        cls,
        category: ErrorCategory,
        severity: ErrorSeverity,
        context: dict[str, Any],
    ) -> tuple:
        """Adjust classification based on context"""

        component = context.get("component")
        if component in cls.COMPONENT_CATEGORIES:
            category = cls.COMPONENT_CATEGORIES[component]

        # Without a database nothing can be identified
        if category == ErrorCategory.DATABASE and severity == ErrorSeverity.MEDIUM:
            severity = ErrorSeverity.HIGH

        # Reading the target file is the whole point of an identification
        if component == "identify" and severity == ErrorSeverity.MEDIUM:
            severity = ErrorSeverity.HIGH

        return category, severity

    @classmethod
    def _suggest_action(cls, exception: Exception, category: ErrorCategory) -> str:
        """Suggest recovery action"""

        if category == ErrorCategory.FILE_ACCESS:
            if isinstance(exception, FileNotFoundError):
                return "Check the path and try again"
            elif isinstance(exception, PermissionError):
                return "Check file permissions or run with appropriate privileges"
            elif isinstance(exception, IsADirectoryError):
                return "Pass a regular file, not a directory"

        elif category == ErrorCategory.DATABASE:
            return "Check the signature database path and encoding"

        elif category == ErrorCategory.RENAME:
            return "Rename the file manually or remove the existing target"

        elif category == ErrorCategory.INPUT_VALIDATION:
            return "Validate input and retry with corrected parameters"

        return "Log error and continue"


class ErrorRegistry:
    """Keep counts of recently reported errors"""

    def __init__(self, maxlen: int = 100):
        self.error_counts: dict[ErrorCategory, int] = defaultdict(int)
        self.recent_errors: deque[ErrorInfo] = deque(maxlen=maxlen)
        self.lock = threading.Lock()

    def record(self, error_info: ErrorInfo) -> None:
        with self.lock:
            self.error_counts[error_info.category] += 1
            self.recent_errors.append(error_info)

    def get_error_stats(self) -> dict[str, Any]:
        """Get error statistics"""
        with self.lock:
            severity_counts: dict[str, int] = defaultdict(int)
            for error in self.recent_errors:
                severity_counts[error.severity.value] += 1

            return {
                "total_errors": sum(self.error_counts.values()),
                "recent_errors": len(self.recent_errors),
                "errors_by_category": {
                    category.value: count for category, count in self.error_counts.items()
                },
                "errors_by_severity": dict(severity_counts),
            }

    def reset(self) -> None:
        with self.lock:
            self.error_counts.clear()
            self.recent_errors.clear()


# Global error registry
global_error_registry = ErrorRegistry()


def log_error(
    exception: Exception,
    message: str,
    context: dict[str, Any] | None = None,
    *,
    logger: Any | None = None,
) -> ErrorInfo:
    """
    Classify, record and log an exception at a level matching its severity.

    Args:
        exception: The exception that was caught
        message: Human readable summary, prefixed to the exception text
        context: Additional context (``component`` overrides the category)
        logger: Diagnostic sink, defaults to this module's logger

    Returns:
        The ErrorInfo that was recorded
    """
    log = logger or _logger
    error_info = ErrorClassifier.classify(exception, context)
    global_error_registry.record(error_info)

    text = f"{message}: {exception}"
    if error_info.severity == ErrorSeverity.CRITICAL:
        log.critical(text)
    elif error_info.severity == ErrorSeverity.HIGH:
        log.error(text)
    elif error_info.severity == ErrorSeverity.MEDIUM:
        log.warning(text)
    else:
        log.debug(text)
    return error_info


def get_error_stats() -> dict[str, Any]:
    """Get global error statistics"""
    return global_error_registry.get_error_stats()


def reset_error_stats():
    """Reset error statistics"""
    global_error_registry.reset()
