import asyncio
from pathlib import Path

import click

from roaster.client import RoastClient
from roaster.collector import Handoff, TodoCollector
from roaster.config import ROASTER_SERVER_URL
from roaster.errors import EmptyBatch, MissingHandoff, RoastRequestFailed
from roaster.export import clipboard_text, export_filename, export_text, render_png, tweet_url
from roaster.logging_utils import setup_logging


@click.group()
def cli():
    """Submit your procrastination list. Get roasted. Get motivated."""
    setup_logging()


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int):
    """Run the roast API server"""
    import uvicorn

    uvicorn.run("roaster.main:app", host=host, port=port)


def collect(todos, paste: bool) -> TodoCollector:
    collector = TodoCollector()
    for todo in todos:
        collector.add(todo)

    if paste:
        click.echo("Paste multiple todos (one per line), then save and close the editor.")
        pasted = click.edit("")
        if pasted:
            collector.add_bulk(pasted)
    return collector


@cli.command()
@click.argument("todos", nargs=-1)
@click.option("--paste", is_flag=True, help="Open an editor to paste one todo per line.")
@click.option("--server", default=ROASTER_SERVER_URL, show_default=True, help="Roast API base URL.")
@click.option("--export-txt", "export_txt", is_flag=True, help="Save the roasts as a text file.")
@click.option("--screenshot", is_flag=True, help="Save the roasts as a PNG image.")
@click.option("--copy", "copy_all", is_flag=True, help="Print the roasts in copy-ready form.")
@click.option("--tweet", is_flag=True, help="Open a pre-filled tweet with the roasts.")
def roast(todos, paste, server, export_txt, screenshot, copy_all, tweet):
    """Roast TODOS (and any pasted ones)"""

    collector = collect(todos, paste)
    handoff = Handoff()
    try:
        collector.submit(handoff)
    except EmptyBatch as e:
        raise click.ClickException(str(e))

    click.secho(f"Your Todos ({len(collector)})", bold=True)
    for number, todo in collector.numbered():
        click.echo(f"{number}. {todo}  ... roasting")

    try:
        submitted = handoff.take()
        cards = asyncio.run(RoastClient(server).roast_cards(submitted))
    except (MissingHandoff, RoastRequestFailed):
        raise click.ClickException("Something went wrong while roasting your todos")

    click.echo()
    click.secho("Your Roasts 🔥", bold=True, fg="red")
    for card in cards:
        click.secho(f"{card.number}. {card.todo}", bold=True)
        click.echo(f'   "{card.roast}"\n')

    if export_txt:
        path = Path(export_filename("txt"))
        path.write_text(export_text(cards), encoding="utf-8")
        click.echo(f"✓ Exported {path}")

    if screenshot:
        path = render_png(cards, Path(export_filename("png")))
        click.echo(f"✓ Downloaded {path}")

    if copy_all:
        click.echo(clipboard_text(cards))

    if tweet:
        click.launch(tweet_url(cards))
        click.echo("✓ Tweeting!")


if __name__ == "__main__":
    cli()
