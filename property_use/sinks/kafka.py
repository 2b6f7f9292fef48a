"""Kafka sink for streaming audit events to Kafka topics."""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from property_use.config import KafkaConfig
from property_use.exceptions import SinkError
from property_use.models import Event
from property_use.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


@dataclass
class ProducerConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str
    acks: str = "all"  # "0", "1", "all"
    batch_size: int = 16384  # bytes
    linger_ms: int = 5  # ms to wait for batching
    compression: str = "snappy"  # none, gzip, snappy, lz4
    retries: int = 3

    @classmethod
    def from_kafka_config(cls, config: KafkaConfig) -> "ProducerConfig":
        """Build producer settings from the application config."""
        return cls(
            bootstrap_servers=config.bootstrap_servers,
            acks=config.acks,
            batch_size=config.batch_size,
            linger_ms=config.linger_ms,
            compression=config.compression,
            retries=config.retries,
        )


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0

    @property
    def throughput(self) -> float:
        """Calculate events per second achieved."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        duration = self.end_time - self.start_time
        return self.sent / duration if duration > 0 else 0.0


class KafkaSink:
    """Output audit events to Kafka topics.

    Events are JSON encoded and keyed by property id, so every event of a
    property lands on the same partition in the order it was recorded.
    """

    def __init__(self, config: ProducerConfig | str) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : ProducerConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = ProducerConfig(bootstrap_servers=config)

        self.config = config
        self.producer = self._create_producer()
        self.stats = ProducerStats()

    def _create_producer(self) -> Producer:
        """Create Kafka producer with configuration."""
        return Producer(
            {
                "bootstrap.servers": self.config.bootstrap_servers,
                "acks": self.config.acks,
                "retries": self.config.retries,
                "linger.ms": self.config.linger_ms,
                "batch.size": self.config.batch_size,
                "compression.type": self.config.compression,
                # Per-property ordering must survive retries
                "enable.idempotence": self.config.acks == "all",
            }
        )

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    @staticmethod
    def _get_key(record: Any) -> str | None:
        """Extract the property id used as message key."""
        if isinstance(record, Event):
            property_id = record.data.get("property_id")
        elif isinstance(record, dict):
            property_id = record.get("property_id")
        else:
            property_id = getattr(record, "property_id", None)
        return str(property_id) if property_id is not None else None

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single record to Kafka topic."""
        value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(record)

        try:
            self.producer.produce(
                topic=topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as exc:
            raise SinkError(f"Cannot produce to {topic}: {exc}") from exc
        self.stats.sent += 1
        self.producer.poll(0)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to a Kafka topic and wait for delivery."""
        logger.info("Writing batch to %s: %d records", topic, len(records))

        self.stats.start_time = self.stats.start_time or time.time()
        for record in records:
            self.send(topic, record)

        remaining = self.flush()
        self.stats.end_time = time.time()
        if remaining:
            raise SinkError(f"{remaining} messages to {topic} still undelivered after flush")

        logger.info("Batch complete: sent=%d, delivered=%d, failed=%d",
                    self.stats.sent, self.stats.delivered, self.stats.failed)

    def flush(self, timeout: float = 30.0) -> int:
        """Flush pending messages, returning how many are still queued."""
        return self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
