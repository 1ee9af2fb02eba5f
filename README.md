# sensorlog

Small command-line tools for timestamped sensor measurement logs:

1. `sensorlog-generate` writes random sample readings for one or more sensors.
2. `sensorlog-split` splits a space-separated log into one file per sensor. Each sensor's readings are sorted newest first, and the file records the data type of its values.
3. `sensorlog-lookup` finds the reading in a comma-separated sensor file that lies closest to a given date and time.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To install it with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Generating sample data

```
sensorlog-generate DD MM YYYY hh mm ss DD MM YYYY hh mm ss SENSOR_NAME KIND [...]
```

Each sensor takes a group of 14 arguments, in this order:

- the start date and time (`dd mm yyyy hh mm ss`)
- the end date and time (`dd mm yyyy hh mm ss`)
- the sensor name (cut to 49 characters)
- the kind of value

Add another group of 14 arguments for each further sensor. Arguments left over after the last full group are ignored.

Valid kinds:

| Kind      | Values                                                 |
|-----------|--------------------------------------------------------|
| `CONJ_Z`  | integers from 0 to 999                                 |
| `CONJ_Q`  | real numbers from 0 to 1000, two decimals              |
| `TEXTO`   | one of `ALTA`, `FIRME`, `MEDIA`, `FRACA`, `BAIXA`      |
| `BINARIO` | `true` or `false`                                      |

The command writes `dados_gerados.txt` in the current directory: the header line `<TIMESTAMP><ID_SENSOR><VALOR>` followed by 200 lines of the form `timestamp,sensor,value` for each sensor. Each timestamp is a random number of seconds since the epoch between the start and the end, inclusive; dates are read as local time.

Errors in the arguments are handled like this:

- With fewer than 14 arguments the command prints a usage summary and exits without writing anything.
- A date field that is not a whole number stops processing of that group and of all groups after it.
- An unknown kind, a date that cannot be represented, or an end before the start skips only that group.

The other sensors are still written.

## Splitting a log by sensor

```
sensorlog-split readings
```

The argument is the input file name without its `.txt` extension (cut to 20 characters). In the input file:

- the first line is a header and is skipped;
- blank lines are skipped;
- every other line holds at least three fields separated by spaces: `timestamp sensor value`; further fields are ignored, and a line with fewer fields is an error.

Sensor names are cut to 49 characters and values to 9. The output of `sensorlog-generate` is comma-separated and is not read by this command.

For every sensor, in the order they first appear, the command writes `<sensor>.txt` in the current directory (the name cut to 45 characters). That file contains:

- `TIPO DE DADOS DESSE SENSOR: <type>`, where the type is inferred from the sensor's first value: `LOGICO` for `true`/`false`, `INTEIRO` for digits with an optional leading `-`, `REAL` when there is also a single `.`, otherwise `LITERAL`;
- the header line `<TIMESTAMP><ID_SENSOR><VALOR>`;
- the sensor's readings as `timestamp,sensor,value`, sorted by timestamp in descending order, equal timestamps kept in input order.

## Finding the closest reading

```
sensorlog-lookup
```

The command asks for two things on standard input:

1. The sensor name. It reads `<sensor>.txt` from the current directory.
2. A date and time in the form `dd mm yyyy hh mm ss`, taken as local time. The command asks again until six whole numbers forming a representable date are given; out-of-range fields are normalised.

It then prints the sensor name, timestamp and value (two decimals) of the reading closest to that moment. An exact match wins; otherwise the nearer neighbour is chosen, the newer one on a tie.

The file must have exactly one header line. After it come lines `timestamp,sensor,value`, ordered newest to oldest. Values are read as numbers; a value that does not start with one counts as 0.

A file written by `sensorlog-split` starts with two heading lines. Remove its first line (`TIPO DE DADOS ...`) before looking it up, otherwise the command stops with an error.

## Using it as a library

- `sensorlog.splitter`:
  - `DataType`, `Measurement`, `SensorSeries` (`sort_descending`, `render`)
  - `infer_data_type`, `parse_readings`, `group_by_sensor`, `write_sensor_files`, `split_file`
- `sensorlog.lookup`:
  - `Reading`
  - `parse_sensor_lines`, `read_sensor_file`, `find_nearest`, `to_timestamp`, `prompt_timestamp`
- `sensorlog.generator`:
  - `ValueKind`, `SensorSpec`, `SpecError`
  - `parse_sensor_specs`, `random_timestamp`, `random_value`, `generate_lines`, `write_generated`

Parsing functions raise `ValueError` on malformed lines. `parse_sensor_specs` raises `SpecError` on any invalid group. The random functions take a `random.Random` instance, so their output can be reproduced with a seed.

```python
import random
from sensorlog.generator import parse_sensor_specs, generate_lines

specs = parse_sensor_specs(
    ["01", "01", "2024", "00", "00", "00",
     "02", "01", "2024", "00", "00", "00",
     "temp", "CONJ_Q"]
)
for line in generate_lines(specs, random.Random(1), count=3):
    print(line)
```