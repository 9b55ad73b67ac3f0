"""Kafka adapter – report producer, monitor consumer, record codec."""
from vpe_logging.adapters.kafka.serializer import ReportRecordCodec
from vpe_logging.adapters.kafka.producer import KafkaReportProducer
from vpe_logging.adapters.kafka.consumer import ReportConsumer

__all__ = ["KafkaReportProducer", "ReportConsumer", "ReportRecordCodec"]
