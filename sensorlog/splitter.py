"""Split a space-separated sensor log into one file per sensor."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

SENSOR_ID_LIMIT = 49
VALUE_LIMIT = 9
OUTPUT_STEM_LIMIT = 45
INPUT_STEM_LIMIT = 20

_DIGITS = frozenset("0123456789")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FIELD_SEPARATORS = re.compile(r"[ \r\n]+")


class DataType(str, Enum):
    """Kind of value a sensor reports, named as in the output files."""

    INTEGER = "INTEIRO"
    REAL = "REAL"
    LITERAL = "LITERAL"
    LOGICAL = "LOGICO"


@dataclass(frozen=True)
class Measurement:
    """A single reading: when it was taken and its raw value."""

    timestamp: int
    value: str


@dataclass
class SensorSeries:
    """All measurements of one sensor."""

    sensor_id: str
    data_type: DataType
    measurements: list[Measurement] = field(default_factory=list)

    def sort_descending(self) -> None:
        """Order measurements from newest to oldest; ties keep their order."""
        self.measurements.sort(key=lambda m: m.timestamp, reverse=True)

    def render(self) -> str:
        """Return the contents of this sensor's output file."""
        lines = [
            f"TIPO DE DADOS DESSE SENSOR: {self.data_type.value}",
            "<TIMESTAMP><ID_SENSOR><VALOR>",
        ]
        lines.extend(
            f"{m.timestamp},{self.sensor_id},{m.value}" for m in self.measurements
        )
        return "\n".join(lines) + "\n"


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def infer_data_type(value: str) -> DataType:
    """Classify a raw value as logical, integer, real or literal."""
    if value in ("true", "false"):
        return DataType.LOGICAL
    seen_dot = False
    for index, char in enumerate(value):
        if char == ".":
            if seen_dot:
                return DataType.LITERAL
            seen_dot = True
        elif char not in _DIGITS and not (index == 0 and char == "-"):
            return DataType.LITERAL
    return DataType.REAL if seen_dot else DataType.INTEGER


def parse_readings(lines: Iterable[str]) -> list[tuple[str, Measurement]]:
    """Parse log lines into (sensor id, measurement) pairs.

    The first line is a header and is ignored. Each other line holds a
    timestamp, a sensor id and a value separated by spaces. Blank lines are
    skipped; a line with fewer than three fields raises ValueError.
    """
    iterator = iter(lines)
    next(iterator, None)
    readings: list[tuple[str, Measurement]] = []
    for number, line in enumerate(iterator, start=2):
        fields = [f for f in _FIELD_SEPARATORS.split(line) if f]
        if not fields:
            continue
        if len(fields) < 3:
            raise ValueError(
                f"line {number}: expected timestamp, sensor and value"
            )
        timestamp = _atoi(fields[0])
        sensor_id = fields[1][:SENSOR_ID_LIMIT]
        value = fields[2][:VALUE_LIMIT]
        readings.append((sensor_id, Measurement(timestamp, value)))
    return readings


def group_by_sensor(
    readings: Iterable[tuple[str, Measurement]],
) -> list[SensorSeries]:
    """Group readings per sensor in order of first appearance.

    A sensor's data type is inferred from its first value.
    """
    groups: dict[str, SensorSeries] = {}
    for sensor_id, measurement in readings:
        series = groups.get(sensor_id)
        if series is None:
            series = SensorSeries(sensor_id, infer_data_type(measurement.value))
            groups[sensor_id] = series
        series.measurements.append(measurement)
    return list(groups.values())


def write_sensor_files(
    series: Iterable[SensorSeries], directory: str | Path = "."
) -> list[Path]:
    """Write one ``<sensor>.txt`` file per series and return their paths."""
    directory = Path(directory)
    written = []
    for item in series:
        path = directory / f"{item.sensor_id[:OUTPUT_STEM_LIMIT]}.txt"
        path.write_text(item.render(), encoding="utf-8")
        written.append(path)
    return written


def split_file(path: str | Path, directory: str | Path = ".") -> list[SensorSeries]:
    """Read a log, sort each sensor's readings newest first and write them out."""
    with open(path, encoding="utf-8") as handle:
        readings = parse_readings(handle)
    series = group_by_sensor(readings)
    for item in series:
        item.sort_descending()
    write_sensor_files(series, directory)
    return series


def main(argv: list[str] | None = None) -> int:
    """Split ``<name>.txt`` in the current directory into per-sensor files."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("uso: sensorlog-split <nome_do_arquivo>", file=sys.stderr)
        return 2
    name = f"{args[0][:INPUT_STEM_LIMIT]}.txt"
    print(f"O nome do arquivo é: {name}")
    try:
        split_file(name, ".")
    except OSError as exc:
        print(f"Erro ao abrir o arquivo: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Erro no arquivo: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())