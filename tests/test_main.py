"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from expr_tree.common.tree import Notation
from expr_tree.main import build_output_path, main, parse_args


@pytest.mark.parametrize(
    "input_path, expected",
    [
        ("resources/operations_short.7z", "resources/operations_short_7z_results.txt"),
        ("resources/operations.txt", "resources/operations_txt_results.txt"),
        ("ops.tar.xz", "ops_tar_xz_results.txt"),
    ],
)
def test_build_output_path(input_path: str, expected: str) -> None:
    """build_output_path keeps the folder and encodes the extensions in the name."""
    assert build_output_path(Path(input_path)) == Path(expected)


def test_parse_args(tmp_path: Path) -> None:
    """parse_args validates the input file and the notation."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1+1\n")

    args = parse_args([str(input_file), "--notation", "prefix"])
    assert args.file_path == input_file
    assert args.notation is Notation.PREFIX
    assert args.output is None


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """parse_args exits when the input file does not exist."""
    with pytest.raises(SystemExit):
        parse_args([str(tmp_path / "missing.txt")])


def test_parse_args_invalid_notation(tmp_path: Path) -> None:
    """parse_args exits on an unknown notation."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1+1\n")
    with pytest.raises(SystemExit):
        parse_args([str(input_file), "--notation", "polish"])


def test_main_writes_results(tmp_path: Path) -> None:
    """main evaluates the input file and writes the default results file."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("12+3\n(3+4)*2\n\n5/0\n")

    main([str(input_file)])

    output = (tmp_path / "ops_txt_results.txt").read_text().splitlines()
    assert output == ["12+3 = 15", "(3+4)*2 = 14", "5/0 -> ERROR: Division by zero: 5 / 0"]


def test_main_custom_output(tmp_path: Path) -> None:
    """main honours --output and --notation."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("8-3-2\n")
    output_file = tmp_path / "out.txt"

    main([str(input_file), "-o", str(output_file), "-n", "infix"])

    assert output_file.read_text() == "8-3-2 = 3 [infix: 8 - 3 - 2]\n"
