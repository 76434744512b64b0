#!/usr/bin/env python3
"""
Matrix demo - render text into a pixel matrix and preview it in the terminal

Usage:
    matrix-demo "HELLO {heart}"
    matrix-demo "12:30" --color FF4500 --stripe odd
    matrix-demo "HI" --alpha 128 --json hi.json --no-log-file
"""
import argparse
import logging
import sys
from typing import List, Optional

from matrix_system import MatrixConfig, MatrixError, Pixel, PixelMatrix, stripe_to_bytes, to_json
from matrix_utils import HybridLogger
from writer_system import FONT_5X7, Writer

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrix-demo",
        description="Render text into an LED pixel matrix",
    )
    parser.add_argument("text", help="Text to render, {alias} tokens allowed")
    parser.add_argument("--rows", type=int, default=8, help="Matrix rows (default 8)")
    parser.add_argument("--color", type=Pixel.from_hex, default=Pixel(0xFFFFFF),
                        help="Text color as RRGGBB (default FFFFFF)")
    parser.add_argument("--background", type=Pixel.from_hex, default=Pixel(0),
                        help="Background color as RRGGBB (default 000000)")
    parser.add_argument("--alpha", type=int, default=None,
                        help="Blend text over the background with this alpha (0-255)")
    parser.add_argument("--stripe", choices=("even", "odd"), default=None,
                        help="Print the RGB bytes of this serpentine stripe")
    parser.add_argument("--json", dest="json_path", default=None,
                        help="Write the matrix as JSON to this path")
    parser.add_argument("--log-dir", default="logs", help="Log directory (default logs)")
    parser.add_argument("--no-log-file", action="store_true", help="Log to the console only")
    parser.add_argument("--log-level", choices=sorted(LOG_LEVELS), default="info")
    return parser


def render(matrix: PixelMatrix) -> str:
    """ASCII preview: '#' for lit pixels, '.' for black"""
    lines = []
    for y in range(matrix.rows):
        lines.append("".join(
            "#" if matrix.get_pixel(x, y) else "." for x in range(matrix.columns)
        ))
    return "\n".join(lines)


def run(args: argparse.Namespace, logger, matrix_logger) -> PixelMatrix:
    config = MatrixConfig(rows=args.rows, stripe_parity=args.stripe or "even")
    matrix = config.create_matrix(logger=matrix_logger)
    writer = Writer(matrix, logger=matrix_logger)

    if args.alpha is None:
        writer.write_text(args.text, FONT_5X7, args.color, args.background)
    else:
        # Paint the background first so the text has something to blend with
        Writer(matrix).spacer(FONT_5X7.text_width(args.text), args.background)
        writer.write_text_alpha(args.text, FONT_5X7, args.color, args.alpha)
    logger.info(f"Rendered {args.text!r} into {matrix.rows}x{matrix.columns} matrix")

    print(render(matrix))

    if args.stripe:
        payload = stripe_to_bytes(config.stripe(matrix))
        print(payload.hex())
        logger.info(f"{args.stripe} stripe: {len(payload)} bytes")

    if args.json_path:
        with open(args.json_path, "w", encoding="utf-8") as f:
            f.write(to_json(matrix))
        logger.info(f"Matrix written to {args.json_path}")

    return matrix


def runMain(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    hybrid_logger = HybridLogger("MatrixDemo", log_dir=args.log_dir,
                                 console_only=args.no_log_file)
    level = LOG_LEVELS[args.log_level]
    logger = hybrid_logger.get_main_logger(level)
    matrix_logger = hybrid_logger.get_class_logger("PixelMatrix", level)

    try:
        run(args, logger, matrix_logger)
        return 0
    except MatrixError as e:
        logger.error(f"Rendering failed: {e}", e)
        return 1
    except OSError as e:
        logger.error(f"Could not write output: {e}", e)
        return 1
    finally:
        hybrid_logger.cleanup()


if __name__ == "__main__":
    sys.exit(runMain())
