"""
Monitoring module exports.
"""

from pagekit.monitoring.logger import (
    JSONFormatter,
    PageLogAdapter,
    get_logger,
    log_page_event,
    log_performance_metric,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_page_event",
    "log_performance_metric",
    "JSONFormatter",
    "PageLogAdapter",
]
