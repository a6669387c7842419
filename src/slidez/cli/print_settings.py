from pathlib import Path

from . import app


@app.command()
def print_settings(deck: Path = Path(), /) -> None:
    """Print the settings resolved for DECK.

    Args:
        deck: Directory containing the slides.txt manifest

    """
    from rich import print as rich_print

    from ..configuring.settings import PresenterSettings

    rich_print(PresenterSettings.from_yaml(deck))
