# dhvani/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .braille import braille
from .export import default_base_name, save_braille_file
from .sources import OcrError, OcrSpaceClient, PdfError, extract_pdf_text

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dhvani",
        description="Convert text, PDFs or scanned images to Grade-1 Braille.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file; '-' or nothing reads text from stdin.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--pdf", action="store_true", help="Extract the PDF text layer.")
    source.add_argument("--ocr", action="store_true", help="Recognize text with OCR.Space.")
    parser.add_argument("--language", default="eng", help="OCR language (default: eng).")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Clean typographic quotes, invisible characters and ligatures first.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Save <name>-braille.txt into this directory instead of printing.",
    )
    parser.add_argument("--report", action="store_true", help="Print a JSON report on stderr.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.input == "-":
        if args.pdf or args.ocr:
            raise OSError("--pdf and --ocr need an input file, not stdin.")
        return sys.stdin.read()
    if args.pdf:
        return extract_pdf_text(args.input)
    if args.ocr:
        return OcrSpaceClient(language=args.language).extract_text(args.input)
    return Path(args.input).read_text(encoding="utf-8")


def main(argv: List[str] | None = None) -> int:
    """
    CLI entrypoint.

    Usage::

        dhvani < infile.txt > outfile.txt
        dhvani scan.jpg --ocr -o exports/

    :param argv: Optional argv (defaults to ``sys.argv[1:]``).
    :returns: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = _read_input(args)
    except (OcrError, PdfError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    except UnicodeDecodeError as exc:
        logger.error("%s is not UTF-8 text (%s); try --pdf or --ocr", args.input, exc.reason)
        return 1

    if not text.strip():
        logger.warning("No text found in %s", args.input)

    out, rep = braille(text, normalize=args.normalize, report=True)

    if args.output_dir is not None:
        try:
            save_braille_file(out, args.output_dir, default_base_name(args.input))
        except OSError as exc:
            logger.error("Could not save Braille file: %s", exc)
            return 1
    else:
        sys.stdout.write(out)

    if args.report:
        sys.stderr.write(rep.to_json() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
