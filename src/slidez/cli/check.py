from pathlib import Path

from . import app


@app.command()
def check(deck: Path = Path(), /) -> None:
    """Validate DECK, read its slides and list them.

    Args:
        deck: Directory containing the slides.txt manifest

    """
    from rich import print as rich_print
    from rich.table import Table

    from ..components.deck_loader import DeckLoader

    slides = DeckLoader().load(deck)
    table = Table("#", "File", "Before", "After", title=str(deck))
    for number, slide in enumerate(slides, start=1):
        table.add_row(
            str(number),
            slide.filename,
            slide.before_transition or "",
            slide.after_transition or "",
        )
    rich_print(table)
