"""Generate random sensor readings for testing the other tools."""

from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from sensorlog.lookup import to_timestamp

SENSOR_ID_LIMIT = 49
KIND_LIMIT = 7
ARGS_PER_SENSOR = 14
READINGS_PER_SENSOR = 200
DEFAULT_OUTPUT = "dados_gerados.txt"
HEADER = "<TIMESTAMP><ID_SENSOR><VALOR>"

LITERAL_CHOICES = ("ALTA", "FIRME", "MEDIA", "FRACA", "BAIXA")
LOGICAL_CHOICES = ("false", "true")

# Whole-string integer in the way strtol accepts it: leading blanks and a sign.
_STRICT_INT = re.compile(r"\s*[+-]?\d+")

_FIELD_LABELS = (
    "Dia inicial inválido",
    "Mês inicial inválido",
    "Ano inicial inválido",
    "Hora inicial inválida",
    "Minuto inicial inválido",
    "Segundo inicial inválido",
    "Dia final inválido",
    "Mês final inválido",
    "Ano final inválido",
    "Hora final inválida",
    "Minuto final inválido",
    "Segundo final inválido",
)

USAGE = (
    "Ao aplicar o comando de execução deste programa, você deve juntamente "
    "informar os seguintes parâmetros:\n\n"
    "  - Data e Hora Inicial\n"
    "  - Data e Hora Final\n"
    "  - Nome do Sensor\n"
    "  - Tipo do Dado da Medição do Sensor\n\n"
    "OBSERVAÇÕES:\n"
    "  - O formato da Data e Hora deve ser: (dd mm aaaa hh mm ss)\n"
    "  - Tipos válidos de dados para o sensor:\n"
    "      - CONJ_Z   : Dados do tipo inteiro\n"
    "      - CONJ_Q   : Dados do tipo float\n"
    "      - TEXTO    : Dados do tipo string\n"
    "      - BINARIO  : Dados do tipo booleano\n"
    "IMPORTANTE!!\n"
    "  - Note que ao todo serão exigidos **ao menos 14 parâmetros**.\n"
    "  - Você pode incluir mais sensores adicionando outros 14 parâmetros "
    "para cada novo sensor.\n"
)


class ValueKind(str, Enum):
    """Kind of value a generated sensor reports."""

    INTEGER = "CONJ_Z"
    REAL = "CONJ_Q"
    TEXT = "TEXTO"
    BINARY = "BINARIO"


class SpecError(ValueError):
    """A sensor specification on the command line is invalid.

    ``fatal`` tells whether processing of further sensors must stop.
    """

    def __init__(self, message: str, *, fatal: bool = True) -> None:
        super().__init__(message)
        self.fatal = fatal


@dataclass(frozen=True)
class SensorSpec:
    """A sensor to simulate: its time window, name and value kind."""

    start: int
    end: int
    sensor_id: str
    kind: ValueKind


def _parse_int(text: str, label: str) -> int:
    if text == "":
        return 0
    if not _STRICT_INT.fullmatch(text):
        raise SpecError(f"Erro: {label}.")
    return int(text)


def _parse_spec(chunk: Sequence[str]) -> SensorSpec:
    numbers = [_parse_int(text, label) for text, label in zip(chunk, _FIELD_LABELS)]
    sensor_id = chunk[12][:SENSOR_ID_LIMIT]
    kind_text = chunk[13][:KIND_LIMIT]
    try:
        kind = ValueKind(kind_text)
    except ValueError:
        raise SpecError(
            "Erro: Tipo de dados informado para o sensor é inválido", fatal=False
        ) from None
    try:
        start = to_timestamp(*numbers[:6])
        end = to_timestamp(*numbers[6:])
    except ValueError:
        raise SpecError("Data inválida.", fatal=False) from None
    if end < start:
        raise SpecError("Data final anterior à data inicial.", fatal=False)
    return SensorSpec(start, end, sensor_id, kind)


def _chunks(args: Sequence[str]) -> Iterator[Sequence[str]]:
    for offset in range(0, len(args) - ARGS_PER_SENSOR + 1, ARGS_PER_SENSOR):
        yield args[offset : offset + ARGS_PER_SENSOR]


def parse_sensor_specs(args: Sequence[str]) -> list[SensorSpec]:
    """Parse groups of 14 arguments into sensor specifications.

    Each group is ``dd mm aaaa hh mm ss dd mm aaaa hh mm ss name kind``.
    Arguments left over after the last full group are ignored. Any invalid
    group raises SpecError.
    """
    return [_parse_spec(chunk) for chunk in _chunks(list(args))]


def random_timestamp(start: int, end: int, rng: random.Random) -> int:
    """Return a random timestamp between ``start`` and ``end`` inclusive."""
    if end < start:
        raise ValueError("end precedes start")
    return rng.randint(start, end)


def random_value(kind: ValueKind, rng: random.Random) -> str:
    """Return a random value of ``kind``, formatted as written to the file."""
    if kind is ValueKind.INTEGER:
        return str(rng.randrange(1000))
    if kind is ValueKind.REAL:
        return f"{rng.random() * 1000.0:.2f}"
    if kind is ValueKind.TEXT:
        return rng.choice(LITERAL_CHOICES)
    return rng.choice(LOGICAL_CHOICES)


def generate_lines(
    specs: Iterable[SensorSpec],
    rng: random.Random,
    count: int = READINGS_PER_SENSOR,
) -> Iterator[str]:
    """Yield ``count`` ``timestamp,sensor,value`` lines for each sensor."""
    for spec in specs:
        for _ in range(count):
            timestamp = random_timestamp(spec.start, spec.end, rng)
            yield f"{timestamp},{spec.sensor_id},{random_value(spec.kind, rng)}"


def write_generated(
    specs: Iterable[SensorSpec],
    path: str | Path = DEFAULT_OUTPUT,
    rng: random.Random | None = None,
) -> Path:
    """Write a header and random readings for every sensor to ``path``."""
    rng = rng if rng is not None else random.Random()
    path = Path(path)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(HEADER + "\n")
        for line in generate_lines(specs, rng):
            handle.write(line + "\n")
    return path


def main(argv: list[str] | None = None) -> int:
    """Generate ``dados_gerados.txt`` from sensor groups on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < ARGS_PER_SENSOR:
        print(USAGE)
        return 0
    specs = []
    for chunk in _chunks(args):
        try:
            specs.append(_parse_spec(chunk))
        except SpecError as exc:
            print(exc)
            if exc.fatal:
                break
    try:
        write_generated(specs, DEFAULT_OUTPUT)
    except OSError as exc:
        print(f"Erro ao abrir o arquivo: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())