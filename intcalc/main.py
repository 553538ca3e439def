import logging
import sys
from typing import TextIO

import click

from intcalc.parse import evaluate

logger = logging.getLogger(__name__)


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--lenient", is_flag=True, help="Ignore trailing tokens.")
@click.option("-v", "--verbose", is_flag=True)
def main(filename: TextIO, output: TextIO, lenient: bool, verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    failed = 0
    for line in filename:
        expression = line.rstrip("\n")
        if not expression.strip():
            continue
        evaluation = evaluate(expression, strict=not lenient)
        if evaluation.ok:
            output.write(f"{evaluation.value}\n")
            continue
        failed += 1
        output.write(f"error: {evaluation.error.message}\n")
    if failed:
        logger.warning("%d expression(s) failed", failed)
        sys.exit(1)


if __name__ == "__main__":
    main()
