import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from pngchunk.kernel.chunk import Chunk
from pngchunk.kernel.chunk_type import ChunkType, ChunkTypeError
from pngchunk.png import container
from pngchunk.utils.fileio import read_file

from .preset import png

app = typer.Typer()


def parse_chunk_type(text: str) -> ChunkType:
    try:
        tag = ChunkType.from_str(text)
    except ChunkTypeError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not tag.is_valid():
        raise typer.BadParameter(f'{text} is not a valid chunk type')
    return tag


def fail(exc: Exception) -> NoReturn:
    offset = getattr(exc, 'offset', None)
    location = f' (chunk at offset {offset})' if offset is not None else ''
    typer.echo(f'Error{location}: {exc}', err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Show debug logs'),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@app.command()
def encode(
    filename: Path = typer.Argument(..., help='PNG file to read from'),
    chunk_type: str = typer.Argument(..., help='Chunk type to hold the message'),
    message: str = typer.Argument(..., help='Message to store'),
    output: Optional[Path] = typer.Option(
        None, '--output', '-o', help='Target file (default: overwrite input)'
    ),
) -> None:
    tag = parse_chunk_type(chunk_type)
    try:
        chunks = container.append_chunk(
            container.from_path(filename), Chunk(tag, message.encode('utf-8'))
        )
        container.to_path(output or filename, chunks)
    except (ValueError, OSError) as exc:
        fail(exc)
    typer.echo(f'Encoded message in {tag} chunk: {output or filename}')


@app.command()
def decode(
    filename: Path = typer.Argument(..., help='PNG file to read from'),
    chunk_type: str = typer.Argument(..., help='Chunk type holding the message'),
) -> None:
    tag = parse_chunk_type(chunk_type)
    try:
        chunk = container.find_chunk(container.from_path(filename), tag)
        if chunk is None:
            raise container.ChunkNotFoundError(tag)
        typer.echo(chunk.text())
    except (ValueError, LookupError, OSError) as exc:
        fail(exc)


@app.command()
def remove(
    filename: Path = typer.Argument(..., help='PNG file to modify'),
    chunk_type: str = typer.Argument(..., help='Chunk type to remove'),
) -> None:
    tag = parse_chunk_type(chunk_type)
    try:
        chunks, removed = container.remove_chunk(container.from_path(filename), tag)
        container.to_path(filename, chunks)
    except (ValueError, LookupError, OSError) as exc:
        fail(exc)
    typer.echo(f'Removed chunk: {removed!r}')


@app.command('print')
def print_chunks(
    filename: Path = typer.Argument(..., help='PNG file to read from'),
) -> None:
    try:
        for _ in png.print_chunks(container.read_chunks(read_file(filename))):
            pass
    except (ValueError, OSError) as exc:
        fail(exc)


if __name__ == '__main__':
    app()
