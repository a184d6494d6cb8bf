import logging

import typer

from questpal.palette import runner as palette

app = typer.Typer()
app.add_typer(palette.app, name='palette')


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', help='Show decoding traces'),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


if __name__ == "__main__":
    app()
