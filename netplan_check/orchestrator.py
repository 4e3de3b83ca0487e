import argparse
import sys
from typing import Callable, Iterable, Optional

from netplan_check.models import ValidationResult
from netplan_check.schema import CompiledSchema, build_schema
from netplan_check.utils import get_logger, load_file
from netplan_check.validate import validate

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def _check_file(schema: CompiledSchema, path: str) -> ValidationResult:
    text = load_file(path)
    return validate(schema, text)


def run_files(
    paths: Iterable[str],
    schema: Optional[CompiledSchema] = None,
    out: Callable[[str], None] = print,
) -> int:
    """Validate each file independently and report the outcome through ``out``.

    The schema is built once and shared by every file. Returns the process
    exit status.
    """
    paths = list(paths)
    if not paths:
        out("Try passing a bunch of netplan yamls as parameters")
        return EXIT_OK

    if schema is None:
        schema = build_schema()

    failed = 0
    for path in paths:
        out(f"Parsing {path}")
        try:
            result = _check_file(schema, path)
            error = result.error
        except (OSError, UnicodeDecodeError) as e:
            logger.error("read failed file=%s: %s", path, e)
            error = f"failed to read file: {e}"

        if error is None:
            out(f"File {path} is valid")
        else:
            failed += 1
            out(f"Validation failed for file {path}")
            out(f"Error: {error}")

    logger.info("files checked=%d failed=%d", len(paths), failed)
    return EXIT_INVALID if failed else EXIT_OK


def main(argv=None) -> int:
    """Main entry point for CLI usage."""
    parser = argparse.ArgumentParser(description="Validate Netplan YAML files against a structural schema.")
    parser.add_argument("files", nargs="*", help="Netplan YAML files to validate")
    args = parser.parse_args(argv)
    return run_files(args.files)


if __name__ == "__main__":
    sys.exit(main())
