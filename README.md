# logdrift

logdrift is a library of small, composable stages for working with log
streams from several services at once. Lines from different services are
merged into one stream, passed through whichever stages you need, and
checked for *drift*: lines that have not been seen before.

## Installation

```
pip install logdrift
```

To run the test suite:

```
pip install "logdrift[test]"
pytest
```

## Core ideas

- `logdrift.stream.LogLine` is the record that flows through the stages:
  the `service` a line came from and its `text`. It is a frozen
  dataclass; stages that change a line return a new one.
- `logdrift.stream.merge(*sources)` combines several streams into one,
  yielding lines in arrival order; each source is read on its own thread.
  With no sources it raises `NoSourcesError`. `merge_two(a, b)` does the
  same for exactly two streams and raises `NoSourcesError` if either is
  `None`.
- `logdrift.stream.fork(source, n, buffer)` copies one stream to `n`
  independent iterators, each holding at most `buffer` (at least one)
  undelivered lines.
- Each stage takes an iterable of lines and returns an iterator of the
  transformed, filtered or grouped result, so stages chain by passing one
  stage's output to the next. Most are plain generators; the time-based
  stages (`batch`, `coalesce`, `aggregate`) read their input on a
  background thread so they can flush on a timer.

## Drift detection

`logdrift.differ` classifies lines as novel or already observed. Three
modes are available through `DiffMode`:

| mode    | meaning                                                          |
|---------|------------------------------------------------------------------|
| `none`  | detection off; no line is drift                                  |
| `uniq`  | exact match after trimming whitespace and lower-casing (default) |
| `fuzzy` | bigram Dice similarity against every line seen, with a threshold |

`Differ(mode, threshold)` answers `is_drift(line)` and remembers lines
with `record(line)`; a threshold of zero or less means `0.8`. Lines here
are `logdrift.differ.Line` values (service, text and a timestamp that
defaults to now). A `Pipeline` wraps a `Differ`, and its `run(lines)`
yields an `Event(line, drift)` for every input line, judging each line
before recording it.

```python
from logdrift.differ import similarity

similarity("hello", "hello")   # 1.0
similarity("", "hello")        # 0.0
```

`logdrift.display.Printer(out, color)` writes events one per line: an
RFC 3339 timestamp, the service name padded to 15 characters, the text,
and ` [DRIFT]` on drift events. Each service keeps a stable colour. When
`color` is not given, colour is used only if `out` is a terminal and
neither `NO_COLOR` is set nor `TERM` is `dumb`. `run(events)` prints a
whole stream.

## Example

```python
from logdrift.differ import Differ, DiffMode, Line, Pipeline
from logdrift.display import Printer
from logdrift.grep import Grep
from logdrift.stream import LogLine, merge

api = [LogLine("api", "INFO started"), LogLine("api", "ERROR disk full")]
worker = [LogLine("worker", "INFO started")]

lines = Grep(["started"]).apply(merge(api, worker))
events = Pipeline(Differ(DiffMode.UNIQ)).run(Line(l.service, l.text) for l in lines)
Printer().run(events)
```

The first `INFO started` is printed with `[DRIFT]`; the second is not.

## Configuration

`logdrift.config.load(path)` reads a YAML file into a `Config` and
validates it, raising `ConfigError` on problems:

```yaml
sources:
  - name: api
    file: /var/log/api.log
  - name: worker
    command: journalctl
    args: ["-fu", "worker"]
diff_mode: fuzzy        # none, uniq (default) or fuzzy
throttle:
  lines_per_sec: 0      # must not be negative
```

There must be at least one source, and every source needs a unique `name`
and either a `command` or a `file`.

## Available stages

Filtering and limiting:

- `logdrift.filter` – include/exclude regular expressions (`Filter`, `FilterConfig`, `apply`)
- `logdrift.grep` – pattern match, optionally inverted (`Grep`)
- `logdrift.levelfilter` – minimum severity: debug, info, warn, error (`LevelFilter`, `Level`, `detect_level`)
- `logdrift.gate` – drop lines until an open pattern matches, and again after a close pattern (`Gate`, `GateConfig`)
- `logdrift.head` / `logdrift.ceiling` – at most N lines per service (`HeadLimiter`, `Ceiling`)
- `logdrift.dedupe` – drop consecutive repeats per service (`Deduper`)
- `logdrift.debounce` – suppress identical bursts within a quiet window (`Debouncer`)

Transforming:

- `logdrift.bracket`, `logdrift.indent`, `logdrift.linenum` – wrap, prefix or number lines (`Bracketer`, `Indenter`, `LineNumberer`)
- `logdrift.label` – stamp a fixed service name on lines (`Labeler`, `ServiceStream`, `label_all`)
- `logdrift.lineformat` – `{service}`, `{text}` and `{time}` templates (`TemplateFormatter`)
- `logdrift.columns` – split on a delimiter and pad to fixed widths (`ColumnFormatter`)
- `logdrift.jsonformat` – pretty-print JSON lines, leave others untouched (`JsonFormatter`)
- `logdrift.fieldextract` – pull `key=value` or JSON fields to the front (`Extractor`)
- `logdrift.mask` – replace matches with a placeholder, `[MASKED]` by default (`Masker`)
- `logdrift.colorize` – ANSI colour per service (`Colorizer`)
- `logdrift.highlight` – ANSI colour per keyword (`Highlighter`, `apply_to_line`, `strip_ansi`)

Grouping and counting:

- `logdrift.batch` – batches by size or flush interval (`Batch`)
- `logdrift.join` – join consecutive lines of one service (`Joiner`)
- `logdrift.coalesce` – merge bursts per service after a quiet period, joined with ` | ` (`Coalescer`)
- `logdrift.aggregate` – per-service counts per time window (`Aggregator`, `Summary`, `InvalidWindowError`)
- `logdrift.linecount` – running per-service totals (`LineCounter`)
- `logdrift.buffer` – the most recent N lines per service, 100 by default (`LineBuffer`)
- `logdrift.alert` – named regular-expression rules producing alert events (`Alerter`, `apply`)

Persistence:

- `logdrift.checkpoint` – per-service offsets (`Checkpoint`, `Entry`)
  saved to a JSON file with `save(path)` and read back with `load(path)`;
  a missing file loads as an empty checkpoint.

## What logdrift does not do

logdrift is a library only. It has no command-line program, and nothing
in it starts the commands or tails the files that a configuration lists:
`load` reads and checks the sources, but producing lines from them is up
to you. Throttle settings are read and validated but no stage applies them.