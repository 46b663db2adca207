# farsa

Building blocks for a fast reduced-space algorithm for optimization problems
with group structure. The package provides:

- `farsa.vector.Vector`: a dense vector of floats that caches its maximum,
  minimum and norms until it is modified;
- `farsa.reporter`: a `Reporter` that sends printf-style messages to the
  file and stream reports that accept them;
- `farsa.exceptions`: a hierarchy of solver errors derived from `FaRSAError`;
- `farsa.enums`: status codes, report types and levels, and numeric limits;
- `farsa.problem.Problem` and `farsa.strategy`: abstract interfaces for
  problems and algorithmic strategies.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Vectors

```python
from farsa.vector import Vector

v = Vector(5, 1.0)            # five ones
w = v.make_new_copy()
w.scale(4.0)                  # five fours
x = v.make_new_linear_combination(2.0, 3.0, w)   # 2*v + 3*w

print(w.inner_product(x))
print(w.norm1(), w.norm2(), w.norm_inf(), w.max(), w.min())
print(len(x), x[0], list(x), x.values)
```

`Vector(n)` is a zero vector of length `n`; `Vector()` is empty until
`set_length` or `set_from_file` is called. Elements change through `set`,
`copy`, `copy_array`, `scale`, `add_scaled_vector` and
`linear_combination`. Operations on vectors of different lengths, indices out
of range, and `max`/`min` of an empty vector raise `VectorAssertException`.

A vector can be read from a text file that holds the length followed by the
values, separated by whitespace:

```python
b = Vector()
b.set_from_file("vector.txt")
```

A missing file, an unreadable length, or too few values raise
`VectorException`.

`v.print(reporter, "v")` writes one line per element through a `Reporter`.

## Reporting

A `Reporter` passes each message to every report that accepts its type and
level. Messages are formatted with Python's `%` operator.

```python
import sys
from farsa.enums import ReportLevel, ReportType
from farsa.reporter import Reporter, StreamReport

with Reporter() as reporter:
    screen = StreamReport("screen", ReportType.SOLVER, ReportLevel.BASIC)
    screen.set_stream(sys.stdout)
    reporter.add_report(screen)
    log = reporter.add_file_report("log", "solver.log",
                                   ReportType.SOLVER, ReportLevel.PER_ITERATION)

    reporter.printf(ReportType.SOLVER, ReportLevel.BASIC,
                    "Here are all again: %s, %d, %f, %e\n", "FaRSA", 1, 2.3, 4.56)
    reporter.report("log").set_type_and_level(ReportType.SOLVER,
                                              ReportLevel.PER_INNER_ITERATION)
# leaving the block closes and removes every report
```

A solver report accepts every level up to and including its own; a subsolver
report accepts only its own level. `FileReport.open` takes a file name, or
`"stdout"` / `"stderr"` for those streams, and raises `OSError` if the file
cannot be opened. `flush_buffer` flushes every report and `delete_reports`
closes and removes them; a `StreamReport` never closes the stream it was
given.

## Exceptions

Every solver condition is an exception derived from
`farsa.exceptions.FaRSAError`, for example `IterationLimitException`,
`LineSearchFailureException` or `VectorException`. Each records `message`,
`file_name` and `line_number` (the place it was raised unless given), and
`kind`, the name of its type. `error.print(reporter, report_type, level)`
describes it through a reporter.

`require(condition, error_type, message, condition_text)` raises
`error_type` with the message `"<condition_text> evaluated false: <message>"`
when the condition is false.

## Extending

- Subclass `farsa.problem.Problem` to describe an optimization problem. The
  constructor takes the number of variables and the variable groups; a
  subclass implements `initial_point`, `evaluate_objective`,
  `evaluate_gradient`, `evaluate_hessian_vector_product` and
  `finalize_solution`.
- Subclass `farsa.strategy.DirectionComputation` or
  `farsa.strategy.LineSearch` to add an algorithmic strategy. Each has a
  `status` attribute (`DCStatus` or `LSStatus`, starting at `UNSET`) that the
  strategy sets when it runs.

## What this package does not do

It contains no solver loop, no option registry, no iteration bookkeeping, no
concrete direction computation or line search, and no matrix type. The
`options`, `quantities` and `strategies` arguments of the strategy interfaces
are passed through untyped; supplying them, and driving an optimization, is
left to the code that uses these building blocks. There is no command-line
program.

## Running the tests

```
pytest
```