from pathlib import Path

from . import app


@app.command()
def present(
    deck: Path = Path(),
    /,
    *,
    header: bool | None = None,
    footer: bool | None = None,
    title: str | None = None,
    fps: int | None = None,
) -> None:
    """Present DECK full screen.

    Args:
        deck: Directory containing the slides.txt manifest
        header: Show the header bar
        footer: Show the footer bar with the slide number
        title: Title displayed in the header. Defaults to the deck directory name
        fps: Frames per second while a transition plays

    """
    from ..configuring.settings import PresenterSettings
    from ..presenting import present as present_deck

    settings = PresenterSettings.from_yaml(
        deck, show_header=header, show_footer=footer, title=title, fps=fps
    )
    present_deck(deck, settings)
