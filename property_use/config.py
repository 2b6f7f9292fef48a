"""Configuration management for property-use."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from property_use.exceptions import ConfigurationError

SINK_TYPES = ("none", "console", "json", "kafka")
LOG_FORMATS = ("standard", "json")


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration for file-based event sinks."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ScenarioConfig:
    """Configuration for a simulated temporary-use workload."""

    name: str
    num_properties: int = 10
    requests_per_property: int = 5
    vacancy_rate: float = 0.7
    approval_rate: float = 0.5
    intrusion_rate: float = 0.1
    start_height: int = 100
    blocks_per_request: int = 1


@dataclass
class PropertyUseConfig:
    """Main configuration for property-use."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    scenario: ScenarioConfig | None = None
    event_sink: str = "none"
    topic_prefix: str = "dev.property-use"
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.event_sink not in SINK_TYPES:
            raise ConfigurationError(
                f"Unknown event sink {self.event_sink!r}, expected one of {', '.join(SINK_TYPES)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {', '.join(LOG_FORMATS)}"
            )

    @property
    def use_requests_topic(self) -> str:
        """Topic that receives use-request audit events."""
        return f"{self.topic_prefix}.use-requests"

    @classmethod
    def from_env(cls) -> "PropertyUseConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        return cls(
            kafka=kafka,
            output=output,
            event_sink=os.getenv("EVENT_SINK", "none").lower(),
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.property-use"),
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )
