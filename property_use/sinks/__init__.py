"""Output sinks for publishing audit events."""

from typing import Any, Protocol

from property_use.config import PropertyUseConfig
from property_use.sinks.console import ConsoleSink
from property_use.sinks.json_file import JsonFileSink
from property_use.sinks.kafka import KafkaSink, ProducerConfig


class Sink(Protocol):
    """Interface shared by all sinks."""

    def write_batch(self, topic: str, records: list[Any]) -> None: ...

    def close(self) -> None: ...


def create_sink(config: PropertyUseConfig) -> Sink | None:
    """Build the sink selected by ``config.event_sink`` (None for ``"none"``)."""
    if config.event_sink == "console":
        return ConsoleSink(pretty=config.output.pretty_json)
    if config.event_sink == "json":
        return JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    if config.event_sink == "kafka":
        return KafkaSink(ProducerConfig.from_kafka_config(config.kafka))
    return None


__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink", "ProducerConfig", "Sink", "create_sink"]
