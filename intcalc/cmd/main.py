import logging

import typer

from intcalc.errors import CalcError
from intcalc.parse import evaluate
from intcalc.tokenize import tokenize

app = typer.Typer()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )


def print_tokens(expression: str) -> None:
    try:
        for token in tokenize(expression):
            typer.echo(repr(token))
    except CalcError as e:
        typer.echo(e.render(), err=True, nl=False)
        raise typer.Exit(1)


@app.command()
def main(
    expressions: list[str] = typer.Argument(..., help="Expressions to evaluate."),
    tokens: bool = typer.Option(
        False, "--tokens", help="Print the token stream instead."
    ),
    lenient: bool = typer.Option(False, "--lenient", help="Ignore trailing tokens."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    configure_logging(verbose)
    for expression in expressions:
        if tokens:
            print_tokens(expression)
            continue
        evaluation = evaluate(expression, strict=not lenient)
        if not evaluation.ok:
            typer.echo(evaluation.error.render(), err=True, nl=False)
            raise typer.Exit(1)
        typer.echo(evaluation.value)


if __name__ == "__main__":
    app()
