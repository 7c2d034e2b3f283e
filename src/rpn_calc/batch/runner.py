"""Evaluate every expression of a file and write the results."""
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from rpn_calc.common.logger import logger
from rpn_calc.common.operations import OperationRequest, OperationResult
from rpn_calc.evaluator.calculator import ExpressionEvaluator


class BatchSummary(BaseModel):
    """Counts of a finished batch run."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0, description="Number of expressions evaluated")
    failed: int = Field(default=0, ge=0, description="Number of expressions with no result")

    @property
    def succeeded(self) -> int:
        return self.total - self.failed


def _extract_archive(archive_path: Path) -> str:
    """
    Extract the first .txt file found in a supported archive and return its content as a string.

    Supported formats:
    - .zip
    - .tar.xz
    - .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If no .txt file is found or format is unsupported
    """
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zf:
            members = [name for name in zf.namelist() if name.endswith(".txt")]
            if not members:
                raise ValueError("📄❌ No .txt file found in zip archive")
            return zf.read(members[0]).decode("utf-8")

    if archive_path.suffixes[-2:] == [".tar", ".xz"]:
        with tarfile.open(archive_path, "r:xz") as tf:
            members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
            if not members:
                raise ValueError("📄❌ No .txt file found in tar.xz archive")
            with tempfile.TemporaryDirectory() as tmpdir:
                tf.extract(members[0], path=tmpdir, filter="data")
                return (Path(tmpdir) / members[0].name).read_text(encoding="utf-8")

    if archive_path.suffix == ".7z":
        with py7zr.SevenZipFile(archive_path, mode="r") as archive:
            names = [name for name in archive.getnames() if name.endswith(".txt")]
            if not names:
                raise ValueError("📄❌ No .txt file found in 7z archive")
            with tempfile.TemporaryDirectory() as tmpdir:
                archive.extract(targets=[names[0]], path=tmpdir)
                return (Path(tmpdir) / names[0]).read_text(encoding="utf-8")

    raise ValueError(f"📄❌ Unsupported archive format: {archive_path.suffix}")


def load_expressions(path: Path) -> List[str]:
    """
    Read expressions from a text file or an archive, one per line.

    Blank lines are dropped; every other line is stripped of surrounding
    whitespace.

    :param Path path: Plain .txt file or a .zip / .tar.xz / .7z archive

    :return: Non-empty expression lines
    :rtype: List[str]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if path.suffix == ".txt":
        content: str = path.read_text(encoding="utf-8")
    else:
        content = _extract_archive(path)
    return [line.strip() for line in content.splitlines() if line.strip()]


def format_result(result: OperationResult) -> str:
    """Render one result as a line of the output file."""
    if result.succeeded:
        return f"{result.expression} = {result.result}"
    return f"{result.expression} -> ERROR: no result"


class BatchRunner(BaseModel):
    """
    Evaluate an expressions file line by line.

    Results are written as soon as each line is evaluated, so an interrupted
    run keeps everything computed so far. An evaluator that raises on a line
    fails that line only: the error is logged and written in place of the
    result, and the run goes on.
    """

    model_config = ConfigDict(frozen=True)

    evaluate: Callable[[OperationRequest], OperationResult] = Field(
        default=ExpressionEvaluator.evaluate,
        description="Function turning a request into a result",
    )

    def run(self, input_file: FilePath, output_file: Path) -> BatchSummary:
        """
        Evaluate every expression of input_file and write one line per expression to output_file.

        :param FilePath input_file: Path to the input file or archive
        :param Path output_file: Path where results will be written

        :return: Counts of evaluated and failed expressions
        :rtype: BatchSummary
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        logger.info(f"📂 Reading expressions from {input_file}")
        expressions: List[str] = load_expressions(input_file)

        failed: int = 0
        with output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expression in enumerate(expressions, start=1):
                try:
                    result: OperationResult = self.evaluate(OperationRequest(expression=expression))
                except Exception as exc:
                    failed += 1
                    logger.error(
                        f"🧮❌ Evaluation failed on line {line_number}: {exc}\n"
                        f"Could not evaluate: {expression!r}"
                    )
                    line = f"{expression} -> ERROR: {exc}"
                else:
                    if not result.succeeded:
                        failed += 1
                        logger.error(f"🧮❌ No result on line {line_number}: {expression!r}")
                    line = format_result(result)

                f_out.write(line + "\n")
                # Keep partial results on disk if the run is interrupted
                f_out.flush()

        summary = BatchSummary(total=len(expressions), failed=failed)
        logger.info(f"✅ {summary.succeeded}/{summary.total} expressions evaluated, results in {output_file}")
        return summary
