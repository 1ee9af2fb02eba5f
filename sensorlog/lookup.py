"""Find the reading of a sensor closest to a given date and time."""

from __future__ import annotations

import re
import sys
import time
from bisect import bisect_left
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

SENSOR_ID_LIMIT = 50

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PROMPT = "Digite a data e hora (dd mm aaaa hh mm ss): "


@dataclass(frozen=True)
class Reading:
    """One line of a generated sensor file."""

    timestamp: int
    sensor_id: str
    value: float


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_sensor_lines(lines: Iterable[str]) -> list[Reading]:
    """Parse comma-separated ``timestamp,sensor,value`` lines.

    The first line is a header and is ignored; blank lines are skipped.
    A line with fewer than three fields raises ValueError.
    """
    iterator = iter(lines)
    next(iterator, None)
    readings = []
    for number, line in enumerate(iterator, start=2):
        if not line.strip():
            continue
        fields = [f for f in line.split(",") if f]
        if len(fields) < 3:
            raise ValueError(
                f"line {number}: expected timestamp, sensor and value"
            )
        readings.append(
            Reading(
                timestamp=_atoi(fields[0]),
                sensor_id=fields[1][:SENSOR_ID_LIMIT],
                value=_atof(fields[2]),
            )
        )
    return readings


def read_sensor_file(path: str | Path) -> list[Reading]:
    """Read and parse a sensor file."""
    with open(path, encoding="utf-8") as handle:
        return parse_sensor_lines(handle)


def find_nearest(readings: Sequence[Reading], timestamp: int) -> int:
    """Return the index of the reading closest in time to ``timestamp``.

    Readings must be ordered from newest to oldest. An exact match wins;
    otherwise the closer neighbour is chosen, the newer one on a tie.
    """
    if not readings:
        raise ValueError("no readings to search")
    keys = [-r.timestamp for r in readings]
    position = bisect_left(keys, -timestamp)
    if position < len(keys) and keys[position] == -timestamp:
        return position
    candidates = [i for i in (position - 1, position) if 0 <= i < len(readings)]
    return min(candidates, key=lambda i: abs(readings[i].timestamp - timestamp))


def to_timestamp(
    day: int, month: int, year: int, hour: int, minute: int, second: int
) -> int:
    """Convert a local date and time to seconds since the epoch.

    Out-of-range fields are normalised; dates that cannot be represented
    raise ValueError.
    """
    try:
        return int(time.mktime((year, month, day, hour, minute, second, 0, 0, -1)))
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"invalid date: {exc}") from exc


def prompt_timestamp(
    read_line: Callable[[], str], write: Callable[[str], object]
) -> int:
    """Ask for ``dd mm aaaa hh mm ss`` until a valid date is given.

    ``read_line`` returns one line, or an empty string at end of input,
    in which case EOFError is raised.
    """
    while True:
        write(PROMPT)
        line = read_line()
        if not line:
            raise EOFError("no date given")
        parts = line.split()
        try:
            if len(parts) < 6:
                raise ValueError("too few fields")
            day, month, year, hour, minute, second = (int(p) for p in parts[:6])
        except ValueError:
            write("Entrada inválida. Tente novamente.\n")
            continue
        try:
            return to_timestamp(day, month, year, hour, minute, second)
        except ValueError:
            write("Data inválida. Tente novamente.\n")


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Ask for a sensor and a date and show the nearest reading."""
    _write("Informe o tipo do sensor que deseja consultar suas medicoes:")
    name = ""
    while not name:
        line = sys.stdin.readline()
        if not line:
            print("\nNenhum sensor informado.")
            return 1
        tokens = line.split()
        name = tokens[0] if tokens else ""
    try:
        timestamp = prompt_timestamp(sys.stdin.readline, _write)
    except EOFError:
        print("\nNenhuma data informada.")
        return 1
    try:
        readings = read_sensor_file(f"{name}.txt")
    except OSError:
        print(
            "Arquivo não encontrado. Certifique de ter digitado o tipo do "
            "sensor corretamente."
        )
        return 1
    try:
        index = find_nearest(readings, timestamp)
    except ValueError as exc:
        print(f"Erro: {exc}")
        return 1
    reading = readings[index]
    print("A medicao com a data mais próxima da informada é:")
    print(f"Sensor: {reading.sensor_id}")
    print(f"timestamp: {reading.timestamp}")
    print(f"valor: {reading.value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())