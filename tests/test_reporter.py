import io

import pytest

from farsa.enums import ReportLevel, ReportType
from farsa.reporter import FileReport, Reporter, StreamReport

SOLVER = ReportType.SOLVER
SUBSOLVER = ReportType.SUBSOLVER
BASIC = ReportLevel.BASIC
PER_ITERATION = ReportLevel.PER_ITERATION
PER_INNER_ITERATION = ReportLevel.PER_INNER_ITERATION


def _emit_common(r):
    for t in (SOLVER, SUBSOLVER):
        pass
    r.printf(SOLVER, BASIC, "This line should appear in all reports.\n")
    r.printf(SUBSOLVER, BASIC, "This line should appear in all reports.\n")
    r.printf(SOLVER, BASIC, "This is a string: %s\n", "FaRSA")
    r.printf(SUBSOLVER, BASIC, "This is a string: %s\n", "FaRSA")
    r.printf(SOLVER, BASIC, "This is an integer: %d\n", 1)
    r.printf(SUBSOLVER, BASIC, "This is an integer: %d\n", 1)
    r.printf(SOLVER, BASIC, "This is a float: %f\n", 2.3)
    r.printf(SUBSOLVER, BASIC, "This is a float: %f\n", 2.3)
    r.printf(SOLVER, BASIC, "This is scientific notation: %e\n", 4.56)
    r.printf(SUBSOLVER, BASIC, "This is scientific notation: %e\n", 4.56)
    r.printf(SOLVER, BASIC, "Here are all again: %s, %d, %f, %e\n", "FaRSA", 1, 2.3, 4.56)
    r.printf(SUBSOLVER, BASIC, "Here are all again: %s, %d, %f, %e\n", "FaRSA", 1, 2.3, 4.56)


COMMON_LINES = [
    "This line should appear in all reports.",
    "This is a string: FaRSA",
    "This is an integer: 1",
    "This is a float: 2.300000",
    "This is scientific notation: 4.560000e+00",
    "Here are all again: FaRSA, 1, 2.300000, 4.560000e+00",
]


def test_reporter_routes_to_reports(tmp_path):
    solver_path = tmp_path / "FaRSA_filereport_SOLVER.txt"
    subsolver_path = tmp_path / "FaRSA_filereport_SUBSOLVER.txt"
    buffer = io.StringIO()

    r = Reporter()
    rs = StreamReport("s", SOLVER, BASIC)
    rs.set_stream(buffer)
    r.add_report(rs)

    rf = FileReport("f", SOLVER, BASIC)
    rf.open(str(solver_path))
    r.add_report(rf)

    r.add_file_report("g", str(subsolver_path), SUBSOLVER, BASIC)
    rg = r.report("g")
    assert rg is not None
    assert rg.name == "g"

    _emit_common(r)

    rs.set_type_and_level(SOLVER, PER_ITERATION)
    rf.set_type_and_level(SOLVER, PER_INNER_ITERATION)
    rg.set_type_and_level(SUBSOLVER, PER_ITERATION)

    r.printf(SOLVER, BASIC, "SOLVER ALWAYS\n")
    r.printf(SOLVER, PER_ITERATION, "SOLVER PER ITERATION\n")
    r.printf(SOLVER, PER_INNER_ITERATION, "SOLVER PER INNER ITERATION\n")
    r.printf(SUBSOLVER, BASIC, "SUBSOLVER ALWAYS\n")
    r.printf(SUBSOLVER, PER_ITERATION, "SUBSOLVER PER ITERATION\n")
    r.printf(SUBSOLVER, PER_INNER_ITERATION, "SUBSOLVER PER INNER ITERATION\n")

    r.delete_reports()
    assert r.report("g") is None

    assert solver_path.read_text().splitlines() == COMMON_LINES + [
        "SOLVER ALWAYS",
        "SOLVER PER ITERATION",
        "SOLVER PER INNER ITERATION",
    ]
    assert subsolver_path.read_text().splitlines() == COMMON_LINES + [
        "SUBSOLVER PER ITERATION",
    ]
    assert buffer.getvalue().splitlines() == COMMON_LINES + [
        "SOLVER ALWAYS",
        "SOLVER PER ITERATION",
    ]


@pytest.mark.parametrize(
    "report_type, report_level, query_type, query_level, expected",
    [
        (SOLVER, PER_ITERATION, SOLVER, BASIC, True),
        (SOLVER, PER_ITERATION, SOLVER, PER_ITERATION, True),
        (SOLVER, PER_ITERATION, SOLVER, PER_INNER_ITERATION, False),
        (SOLVER, PER_ITERATION, SUBSOLVER, BASIC, False),
        (SUBSOLVER, PER_ITERATION, SUBSOLVER, BASIC, False),
        (SUBSOLVER, PER_ITERATION, SUBSOLVER, PER_ITERATION, True),
        (SUBSOLVER, PER_ITERATION, SUBSOLVER, PER_INNER_ITERATION, False),
        (SUBSOLVER, BASIC, SOLVER, BASIC, False),
    ],
)
def test_is_accepted(report_type, report_level, query_type, query_level, expected):
    report = StreamReport("s", report_type, report_level)
    assert report.is_accepted(query_type, query_level) is expected


def test_report_lookup_returns_first_match_or_none():
    r = Reporter()
    first = StreamReport("a", SOLVER, BASIC)
    second = StreamReport("a", SUBSOLVER, BASIC)
    r.add_report(first)
    r.add_report(second)
    assert r.report("a") is first
    assert r.report("missing") is None


def test_printf_handles_percent_escape_without_args():
    buffer = io.StringIO()
    r = Reporter()
    s = StreamReport("s", SOLVER, BASIC)
    s.set_stream(buffer)
    r.add_report(s)
    r.printf(SOLVER, BASIC, "100%% done\n")
    r.printf(SOLVER, BASIC, "%s[%6d]=%+23.16e\n", "x", 3, 1.0)
    assert buffer.getvalue() == "100% done\n" + "x[     3]=" + "+1.0000000000000000e+00".rjust(23) + "\n"


def test_stream_report_without_stream_writes_nothing():
    r = Reporter()
    s = StreamReport("s", SOLVER, BASIC)
    r.add_report(s)
    r.printf(SOLVER, BASIC, "ignored\n")
    buffer = io.StringIO()
    s.set_stream(buffer)
    r.printf(SOLVER, BASIC, "kept\n")
    r.flush_buffer()
    assert buffer.getvalue() == "kept\n"


def test_file_report_stdout(capsys):
    r = Reporter()
    r.add_file_report("out", "stdout", SOLVER, BASIC)
    r.printf(SOLVER, BASIC, "value %d\n", 7)
    r.delete_reports()
    assert capsys.readouterr().out == "value 7\n"


def test_file_report_stderr(capsys):
    report = FileReport("err", SOLVER, BASIC)
    report.open("stderr")
    report.write(SOLVER, BASIC, "problem\n")
    report.close()
    assert capsys.readouterr().err == "problem\n"


def test_add_file_report_bad_path_raises(tmp_path):
    r = Reporter()
    with pytest.raises(OSError):
        r.add_file_report("f", str(tmp_path / "missing" / "out.txt"), SOLVER, BASIC)
    assert r.report("f") is None


def test_file_report_reopen_overwrites(tmp_path):
    path = tmp_path / "log.txt"
    report = FileReport("f", SOLVER, BASIC)
    report.open(str(path))
    report.write(SOLVER, BASIC, "first\n")
    report.open(str(path))
    report.write(SOLVER, BASIC, "second\n")
    report.close()
    assert path.read_text() == "second\n"


def test_closed_file_report_ignores_writes(tmp_path):
    path = tmp_path / "log.txt"
    report = FileReport("f", SOLVER, BASIC)
    report.open(str(path))
    report.write(SOLVER, BASIC, "kept\n")
    report.close()
    report.write(SOLVER, BASIC, "dropped\n")
    report.flush_buffer()
    assert path.read_text() == "kept\n"


def test_reporter_context_manager_closes_files(tmp_path):
    path = tmp_path / "log.txt"
    with Reporter() as r:
        r.add_file_report("f", str(path), SOLVER, PER_ITERATION)
        r.printf(SOLVER, PER_ITERATION, "iter\n")
        r.printf(SOLVER, PER_INNER_ITERATION, "inner\n")
    assert r.report("f") is None
    assert path.read_text() == "iter\n"