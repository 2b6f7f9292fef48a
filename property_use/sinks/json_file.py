"""JSON Lines file sink for exporting audit events."""

import json
import logging
from pathlib import Path
from typing import Any

from property_use.exceptions import SinkError
from property_use.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Append records to one JSON Lines file per topic."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON Lines files.
        pretty : bool
            Indent each record (records stay one per line).
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def path_for(self, topic: str) -> Path:
        """Return the file a topic is written to (dots become underscores)."""
        return self.output_dir / (topic.replace(".", "_") + ".jsonl")

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Append a batch of records to the topic file."""
        file_path = self.path_for(topic)

        try:
            with open(file_path, "a", encoding="utf-8") as f:
                for record in records:
                    f.write(self._dumps(to_dict(record)) + "\n")
        except OSError as exc:
            raise SinkError(f"Cannot write {file_path}: {exc}") from exc

        self._counts[topic] = self._counts.get(topic, 0) + len(records)
        logger.debug("Appended %d records to %s", len(records), file_path)

    def _dumps(self, data: dict) -> str:
        # JSON Lines needs one record per line, so pretty output uses
        # separators rather than indentation
        if self.pretty:
            return json.dumps(data, ensure_ascii=False, default=str, separators=(", ", ": "), sort_keys=True)
        return json.dumps(data, ensure_ascii=False, default=str, separators=(",", ":"))

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON files written to: %s", self.output_dir)
        for topic, count in self._counts.items():
            logger.info("  %s: %d records", topic, count)
