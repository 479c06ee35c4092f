import io

from bufscan.scanner.buffered_scanner import BufferedScanner
from scripts.benchmark_scanner import time_scanner, write_numbers
from scripts.scan_stdin import format_matrix, main, scan_report


def test_scan_report_formats_demo_sequence():
    scanner = BufferedScanner(io.StringIO("2.5 hello 1 2 3 4\n5 6 7\n8 9 10\n"))
    assert scan_report(scanner) == [
        "float: 2.500000",
        "str: hello",
        "int[]: 1 2 3 4",
        "int[][]:",
        "5\t6\t7",
        "8\t9\t10",
    ]


def test_format_matrix_tab_separates_columns():
    assert format_matrix([[1, 2], [3, 4]]) == "1\t2\n3\t4"


def test_main_reads_input_file_with_delimiter(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("1.0,abc,1,2,3,4,1,2,3,4,5,6", encoding="utf-8")
    assert main(["--input", str(path), "--delimiter", ","]) == 0
    out = capsys.readouterr().out
    assert "str: abc" in out
    assert "4\t5\t6" in out


def test_main_rejects_bad_delimiter():
    assert main(["--delimiter", "ab"]) == 2


def test_main_reports_unreadable_input(tmp_path):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_benchmark_helpers_agree(tmp_path):
    path = tmp_path / "numbers.txt"
    expected = write_numbers(path, 25, seed=3)
    _secs, values = time_scanner(path, 25, buffer_size=16)
    assert values == expected
