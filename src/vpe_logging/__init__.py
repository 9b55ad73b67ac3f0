"""
vpe_logging – leveled, multi-sink reporting for pipeline clients.

Import path convention::

    from vpe_logging.observability.logging import create_logger, Severity
    from vpe_logging.config.settings import ReportSettings
    from vpe_logging.adapters.kafka import KafkaReportProducer, ReportConsumer
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
