"""
Command-line entrypoint.

This script:
- Loads arithmetic expressions from a text file or an archive
- Builds and evaluates the expression tree of each line
- Writes one result line per expression to an output file

Example
-------
    expr-tree resources/operations.7z --notation prefix
"""

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from expr_tree.batch.loader import ExpressionLoader
from expr_tree.batch.runner import BatchRunner
from expr_tree.common.logger import logger
from expr_tree.common.tree import Notation


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the file containing arithmetic expressions.
    output : Path, optional
        Path of the results file, derived from file_path when omitted.
    notation : Notation, optional
        Notation in which each expression tree is also rendered.
    """

    file_path: FilePath
    output: Optional[Path] = Field(default=None)
    notation: Optional[Notation] = Field(default=None)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="expr-tree",
        description="Evaluate arithmetic expressions through binary expression trees",
    )

    parser.add_argument(
        "file_path",
        help="Path to the file containing arithmetic expressions (.txt, .zip, .tar.xz or .7z)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Path of the results file",
    )
    parser.add_argument(
        "-n",
        "--notation",
        choices=[notation.value for notation in Notation],
        default=None,
        help="Also render each expression tree in this notation",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, output=args.output, notation=args.notation)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the expr-tree console script.
    """
    cli_args = parse_args(argv)
    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)

    logger.info(f"📄 Loading expressions from {input_path}")
    expressions = ExpressionLoader().load(input_path)

    runner = BatchRunner(output_file=output_path, notation=cli_args.notation)
    runner.run(expressions)


if __name__ == "__main__":
    main()
