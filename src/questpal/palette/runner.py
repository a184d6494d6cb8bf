import logging
import os
from pathlib import Path
from typing import List, Optional

import typer

from questpal.graphics.image import record_colors, records_to_image
from questpal.kernel.settings import preset
from questpal.kernel.stream import StreamView
from questpal.palette import zpl
from questpal.palette.decode import decode_color_data
from questpal.palette.pages import page_data, used_pages
from questpal.palette.types import InvalidFormat, MiscData, PaletteStore, SectionLayout

app = typer.Typer()

logger = logging.getLogger('questpal')


def load_palette(
    filename: Path,
    version: Optional[int],
    build: int,
    offset: int,
) -> zpl.ZplPalette:
    cfg = preset(logger=logger)
    if version is None:
        return zpl.from_path(filename, cfg=cfg)

    store, misc = PaletteStore(), MiscData()
    with open(filename, 'rb') as stream:
        stream.seek(offset)
        view = StreamView(stream, os.path.getsize(filename) - offset)
        layout = decode_color_data(view, misc, store, version, build, cfg=cfg)
    return zpl.ZplPalette(store, misc, layout)


def parse_version(value: Optional[str]) -> Optional[int]:
    return int(value, 0) if value is not None else None


def describe(layout: SectionLayout) -> List[str]:
    names = 'reset' if layout.names is None else str(layout.names)
    return [
        f'header: {layout.header} (sub-version {layout.sub_version})',
        f'colors: {layout.colors.value}',
        f'names: {names}',
        f'cycles: {layout.cycles}',
    ]


@app.command('info')
def info(
    filename: Path = typer.Argument(..., help='Palette file or quest section dump'),
    version: Optional[str] = typer.Option(
        None, '--version', '-v', help='Format version of raw section (default: read as zpl)'
    ),
    build: int = typer.Option(0, '--build', '-b', help='Build number of raw section'),
    offset: int = typer.Option(0, '--offset', '-o', help='Section offset in file'),
    record: Optional[int] = typer.Option(None, '--record', '-r', help='Print colors of record'),
) -> None:
    try:
        palette = load_palette(filename, parse_version(version), build, offset)
    except InvalidFormat as exc:
        typer.echo(f'Failed decoding {filename.name}: {exc}', err=True)
        raise typer.Exit(code=1)

    typer.echo(f'Palette section: {filename.name}')
    for line in describe(palette.layout):
        typer.echo(f'    {line}')

    for level in range(len(palette.store.palnames)):
        name = palette.store.name(level)
        if name:
            typer.echo(f'level {level}: {name}')

    for index, cset in enumerate(palette.misc.cycles):
        if any(any(cycle) for cycle in cset):
            cycles = ' '.join(
                f'{cycle.first}+{cycle.count}@{cycle.speed}' for cycle in cset
            )
            typer.echo(f'cycle {index}: {cycles}')

    if record is not None:
        for color in record_colors(palette.store.record(record)):
            typer.echo(' '.join(f'{channel:3d}' for channel in color))


@app.command('export')
def export(
    filename: Path = typer.Argument(..., help='Palette file or quest section dump'),
    target_dir: str = typer.Option('out', '--target', '-t', help='Target directory'),
    version: Optional[str] = typer.Option(
        None, '--version', '-v', help='Format version of raw section (default: read as zpl)'
    ),
    build: int = typer.Option(0, '--build', '-b', help='Build number of raw section'),
    offset: int = typer.Option(0, '--offset', '-o', help='Section offset in file'),
) -> None:
    try:
        palette = load_palette(filename, parse_version(version), build, offset)
    except InvalidFormat as exc:
        typer.echo(f'Failed decoding {filename.name}: {exc}', err=True)
        raise typer.Exit(code=1)

    output_dir = os.path.join(target_dir, filename.stem)
    os.makedirs(output_dir, exist_ok=True)
    for page in used_pages(palette.store):
        im = records_to_image(page_data(palette.store, page))
        im.save(os.path.join(output_dir, f'{page.label}.png'))
        typer.echo(f'saved {page.label}.png')


if __name__ == '__main__':
    app()
