import random

import pytest

from sensorlog.generator import (
    LITERAL_CHOICES,
    LOGICAL_CHOICES,
    SensorSpec,
    SpecError,
    ValueKind,
    generate_lines,
    main,
    parse_sensor_specs,
    random_timestamp,
    random_value,
    write_generated,
)
from sensorlog.lookup import parse_sensor_lines, to_timestamp

START = ["01", "02", "2024", "10", "00", "00"]
END = ["01", "02", "2024", "12", "00", "00"]


def spec_args(name="temp", kind="CONJ_Z", start=START, end=END):
    return [*start, *end, name, kind]


def test_parse_single_spec():
    (spec,) = parse_sensor_specs(spec_args())
    assert spec.sensor_id == "temp"
    assert spec.kind is ValueKind.INTEGER
    assert spec.start == to_timestamp(1, 2, 2024, 10, 0, 0)
    assert spec.end == to_timestamp(1, 2, 2024, 12, 0, 0)


def test_parse_multiple_specs_ignores_leftovers():
    args = spec_args("a", "TEXTO") + spec_args("b", "BINARIO") + ["extra"]
    specs = parse_sensor_specs(args)
    assert [s.sensor_id for s in specs] == ["a", "b"]
    assert [s.kind for s in specs] == [ValueKind.TEXT, ValueKind.BINARY]


def test_parse_truncates_sensor_id():
    (spec,) = parse_sensor_specs(spec_args(name="x" * 80))
    assert spec.sensor_id == "x" * 49


def test_parse_rejects_bad_number():
    args = spec_args()
    args[1] = "fev"
    with pytest.raises(SpecError, match="Mês inicial") as info:
        parse_sensor_specs(args)
    assert info.value.fatal


def test_parse_rejects_trailing_garbage():
    args = spec_args()
    args[8] = "2024x"
    with pytest.raises(SpecError, match="Ano final"):
        parse_sensor_specs(args)


def test_parse_rejects_unknown_kind():
    with pytest.raises(SpecError) as info:
        parse_sensor_specs(spec_args(kind="FLOAT"))
    assert not info.value.fatal


def test_parse_rejects_reversed_window():
    with pytest.raises(SpecError):
        parse_sensor_specs(spec_args(start=END, end=START))


def test_random_timestamp_within_bounds():
    rng = random.Random(1)
    values = [random_timestamp(100, 110, rng) for _ in range(200)]
    assert all(100 <= v <= 110 for v in values)
    assert random_timestamp(42, 42, rng) == 42


def test_random_timestamp_rejects_reversed():
    with pytest.raises(ValueError):
        random_timestamp(10, 5, random.Random(0))


@pytest.mark.parametrize("seed", range(5))
def test_random_value_kinds(seed):
    rng = random.Random(seed)
    integer = random_value(ValueKind.INTEGER, rng)
    assert 0 <= int(integer) <= 999
    real = random_value(ValueKind.REAL, rng)
    assert len(real.split(".")[1]) == 2
    assert 0.0 <= float(real) <= 1000.0
    assert random_value(ValueKind.TEXT, rng) in LITERAL_CHOICES
    assert random_value(ValueKind.BINARY, rng) in LOGICAL_CHOICES


def test_generate_lines_round_trip():
    specs = [
        SensorSpec(1000, 2000, "s1", ValueKind.INTEGER),
        SensorSpec(5000, 6000, "s2", ValueKind.REAL),
    ]
    lines = list(generate_lines(specs, random.Random(3), count=10))
    assert len(lines) == 20
    readings = parse_sensor_lines(["header"] + lines)
    assert [r.sensor_id for r in readings] == ["s1"] * 10 + ["s2"] * 10
    assert all(1000 <= r.timestamp <= 2000 for r in readings[:10])
    assert all(5000 <= r.timestamp <= 6000 for r in readings[10:])


def test_generate_lines_is_deterministic_for_seed():
    specs = [SensorSpec(0, 100, "s", ValueKind.TEXT)]
    first = list(generate_lines(specs, random.Random(9), count=5))
    second = list(generate_lines(specs, random.Random(9), count=5))
    assert first == second


def test_write_generated(tmp_path):
    specs = [SensorSpec(10, 20, "lux", ValueKind.BINARY)]
    path = write_generated(specs, tmp_path / "out.txt", random.Random(0))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "<TIMESTAMP><ID_SENSOR><VALOR>"
    assert len(lines) == 201
    assert all(line.split(",")[2] in LOGICAL_CHOICES for line in lines[1:])


def test_main_usage_with_too_few_args(capsys):
    assert main(["1", "2"]) == 0
    assert "CONJ_Z" in capsys.readouterr().out


def test_main_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(spec_args("umid", "CONJ_Q")) == 0
    lines = (tmp_path / "dados_gerados.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 201
    assert all(line.split(",")[1] == "umid" for line in lines[1:])


def test_main_stops_at_bad_number(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    bad = spec_args("b")
    bad[0] = "x"
    args = spec_args("a") + bad + spec_args("c")
    assert main(args) == 0
    assert "Dia inicial" in capsys.readouterr().out
    lines = (tmp_path / "dados_gerados.txt").read_text(encoding="utf-8").splitlines()
    assert {line.split(",")[1] for line in lines[1:]} == {"a"}


def test_main_skips_bad_kind(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    args = spec_args("a", "NADA") + spec_args("c", "TEXTO")
    assert main(args) == 0
    lines = (tmp_path / "dados_gerados.txt").read_text(encoding="utf-8").splitlines()
    assert {line.split(",")[1] for line in lines[1:]} == {"c"}