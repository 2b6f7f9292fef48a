"""Tests for sinks and serialization."""

import json
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from property_use.config import KafkaConfig, OutputConfig, PropertyUseConfig
from property_use.events import USE_REQUEST_CREATED, use_request_event
from property_use.exceptions import SinkError
from property_use.models import UseRequest, UseStatus
from property_use.sinks import ConsoleSink, JsonFileSink, create_sink
from property_use.sinks.serialization import serialize_value, to_dict


@pytest.fixture
def sample_request() -> UseRequest:
    return UseRequest(
        property_id=1,
        use_id=2,
        requester="ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
        purpose="Art exhibition",
        start_block=100,
        end_block=150,
    )


class TestSerialization:
    """Tests for serialization helpers."""

    def test_dataclass(self, sample_request: UseRequest) -> None:
        data = to_dict(sample_request)

        assert data["status"] == "pending"
        assert data["end_block"] == 150
        assert "duration" not in data

    def test_event(self, sample_request: UseRequest) -> None:
        event = use_request_event(USE_REQUEST_CREATED, sample_request, "ST1")
        data = to_dict(event)

        assert data["event_type"] == "use_request.created"
        assert data["data"]["status"] == "pending"
        assert data["data"]["previous_status"] is None
        assert isinstance(data["event_time"], str)

    def test_serialize_values(self) -> None:
        moment = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

        assert serialize_value(UseStatus.APPROVED) == "approved"
        assert serialize_value(moment) == "2024-01-15T10:00:00+00:00"
        assert serialize_value({"a": [UseStatus.PENDING]}) == {"a": ["pending"]}
        assert serialize_value((1, 2)) == [1, 2]

    def test_non_dataclass(self) -> None:
        assert to_dict(5) == {"value": "5"}


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.pretty is True
        assert sink.max_records is None

    def test_write_batch(self, capsys: pytest.CaptureFixture, sample_request: UseRequest) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_batch("use-requests", [sample_request])
        captured = capsys.readouterr()

        assert "use-requests (1 records)" in captured.out
        assert "Art exhibition" in captured.out
        assert sink._counts["use-requests"] == 1

    def test_max_records(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False, max_records=2)

        sink.write_batch("topic", [{"id": i} for i in range(5)])
        captured = capsys.readouterr()

        assert "... and 3 more records" in captured.out
        assert sink._counts["topic"] == 5

    def test_close(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write_batch("topic", [{"id": 1}])
        sink.close()

        assert "topic: 1 records" in capsys.readouterr().out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        output = tmp_path / "nested" / "out"
        JsonFileSink(output)

        assert output.is_dir()

    def test_write_batch_appends(self, tmp_path: Path, sample_request: UseRequest) -> None:
        sink = JsonFileSink(tmp_path)

        sink.write_batch("dev.use-requests", [sample_request])
        sink.write_batch("dev.use-requests", [sample_request.with_status(UseStatus.APPROVED)])

        path = tmp_path / "dev_use-requests.jsonl"
        assert sink.path_for("dev.use-requests") == path
        lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        assert [line["status"] for line in lines] == ["pending", "approved"]
        assert sink._counts["dev.use-requests"] == 2

    def test_pretty_stays_one_line(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path, pretty=True)

        sink.write_batch("topic", [{"b": 1, "a": 2}])

        content = (tmp_path / "topic.jsonl").read_text(encoding="utf-8")
        assert content == '{"a": 2, "b": 1}\n'

    def test_write_failure_raises_sink_error(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        sink.path_for("topic").mkdir()

        with pytest.raises(SinkError, match="Cannot write"):
            sink.write_batch("topic", [{"id": 1}])


class TestKafkaSinkMocked:
    """Tests for KafkaSink using mocks (no actual Kafka connection)."""

    def test_producer_config_from_kafka_config(self) -> None:
        from property_use.sinks.kafka import ProducerConfig

        config = ProducerConfig.from_kafka_config(KafkaConfig(bootstrap_servers="kafka:9092", acks="1"))

        assert config.bootstrap_servers == "kafka:9092"
        assert config.acks == "1"
        assert config.compression == "snappy"

    def test_producer_stats(self) -> None:
        from property_use.sinks.kafka import ProducerStats

        assert ProducerStats(sent=100, delivered=90, failed=10).success_rate == 0.9
        assert ProducerStats().success_rate == 0.0
        assert ProducerStats(sent=100, start_time=0.0, end_time=10.0).throughput == 10.0
        assert ProducerStats(sent=100).throughput == 0.0

    @patch("property_use.sinks.kafka.Producer")
    def test_init_with_string(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        sink = KafkaSink("localhost:9092")

        assert sink.config.bootstrap_servers == "localhost:9092"
        settings = mock_producer_class.call_args[0][0]
        assert settings["enable.idempotence"] is True

    @patch("property_use.sinks.kafka.Producer")
    def test_send_keys_by_property(
        self, mock_producer_class: MagicMock, sample_request: UseRequest
    ) -> None:
        from property_use.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        event = use_request_event(USE_REQUEST_CREATED, sample_request, "ST1")

        sink = KafkaSink("localhost:9092")
        sink.send("use-requests", event)

        call_kwargs = mock_producer.produce.call_args[1]
        assert call_kwargs["key"] == b"1"
        assert json.loads(call_kwargs["value"])["subject"] == "1-2"
        assert sink.stats.sent == 1

    @patch("property_use.sinks.kafka.Producer")
    def test_send_without_key(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer

        sink = KafkaSink("localhost:9092")
        sink.send("topic", {"id": 1})

        assert mock_producer.produce.call_args[1]["key"] is None

    @patch("property_use.sinks.kafka.Producer")
    def test_send_buffer_full(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer.produce.side_effect = BufferError("Local: Queue full")
        mock_producer_class.return_value = mock_producer

        sink = KafkaSink("localhost:9092")

        with pytest.raises(SinkError, match="Queue full"):
            sink.send("topic", {"id": 1})
        assert sink.stats.sent == 0

    @patch("property_use.sinks.kafka.Producer")
    def test_write_batch(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer.flush.return_value = 0
        mock_producer_class.return_value = mock_producer

        sink = KafkaSink("localhost:9092")
        sink.write_batch("topic", [{"property_id": i} for i in range(10)])

        assert mock_producer.produce.call_count == 10
        mock_producer.flush.assert_called_once()

    @patch("property_use.sinks.kafka.Producer")
    def test_write_batch_undelivered(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer.flush.return_value = 3
        mock_producer_class.return_value = mock_producer

        sink = KafkaSink("localhost:9092")

        with pytest.raises(SinkError, match="3 messages"):
            sink.write_batch("topic", [{"id": 1}])

    @patch("property_use.sinks.kafka.Producer")
    def test_delivery_callback(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        sink = KafkaSink("localhost:9092")
        mock_msg = MagicMock()
        mock_msg.topic.return_value = "topic"
        mock_msg.partition.return_value = 0
        mock_msg.offset.return_value = 1

        sink._delivery_callback(None, mock_msg)
        sink._delivery_callback("Connection error", None)

        assert sink.stats.delivered == 1
        assert sink.stats.failed == 1


class TestCreateSink:
    """Tests for create_sink."""

    def test_none(self) -> None:
        assert create_sink(PropertyUseConfig()) is None

    def test_console(self) -> None:
        assert isinstance(create_sink(PropertyUseConfig(event_sink="console")), ConsoleSink)

    def test_json(self, tmp_path: Path) -> None:
        config = PropertyUseConfig(event_sink="json", output=OutputConfig(json_output_dir=tmp_path))

        sink = create_sink(config)

        assert isinstance(sink, JsonFileSink)
        assert sink.output_dir == tmp_path

    @patch("property_use.sinks.kafka.Producer")
    def test_kafka(self, mock_producer_class: MagicMock) -> None:
        from property_use.sinks.kafka import KafkaSink

        config = PropertyUseConfig(event_sink="kafka", kafka=KafkaConfig(bootstrap_servers="kafka:9092"))

        sink = create_sink(config)

        assert isinstance(sink, KafkaSink)
        assert sink.config.bootstrap_servers == "kafka:9092"

    @patch("property_use.sinks.kafka.Producer")
    def test_kafka_producer_settings_from_config(self, mock_producer_class: MagicMock) -> None:
        config = PropertyUseConfig(
            event_sink="kafka",
            kafka=KafkaConfig(bootstrap_servers="kafka:9092", acks="1", linger_ms=20, compression="lz4"),
        )

        create_sink(config)

        settings = mock_producer_class.call_args[0][0]
        assert settings["bootstrap.servers"] == "kafka:9092"
        assert settings["acks"] == "1"
        assert settings["linger.ms"] == 20
        assert settings["compression.type"] == "lz4"
        assert settings["enable.idempotence"] is False
