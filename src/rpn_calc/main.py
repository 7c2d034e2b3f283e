"""
Command-line entrypoint.

This script:
- Reads an expressions file (plain text or archive) given as argument
- Evaluates every line as an RPN expression
- Writes one result line per expression to an output file

Exit status is 0 when every expression produced a value and 1 otherwise.
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, FilePath, ValidationError

from rpn_calc.batch.runner import BatchRunner, BatchSummary
from rpn_calc.common.logger import logger


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the file containing RPN expressions.
    output : Path, optional
        Where to write the results; derived from file_path when omitted.
    """

    model_config = ConfigDict(frozen=True)

    file_path: FilePath
    output: Optional[Path] = None


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, sys.argv[1:] when None
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="rpn-calc",
        description="Evaluate a file of Reverse Polish Notation expressions",
    )

    parser.add_argument(
        "file_path",
        help="Path to the file containing RPN expressions, one per line",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Path of the results file (default: <input>_results.txt)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, output=args.output)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.tar.xz
    output: resources/operations_tar_xz_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffixes = "".join(input_path.suffixes)
    stem = input_path.name.removesuffix(suffixes)
    suffix_safe = suffixes.replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the batch evaluation and return the process exit status.
    """
    cli_args = parse_args(argv)
    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)

    try:
        summary: BatchSummary = BatchRunner().run(input_path, output_path)
    except ValueError as exc:
        logger.error(str(exc))
        return 1

    return 0 if summary.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
