import typer

from pngchunk.png import runner as png

app = typer.Typer()
app.add_typer(png.app, name='png')

if __name__ == "__main__":
    app()
