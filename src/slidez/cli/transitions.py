from . import app


@app.command()
def transitions() -> None:
    """List the available transition effects."""
    from rich import print as rich_print
    from rich.table import Table

    from ..models import TRANSITION_NAMES
    from ..transitions.registry import get_transition

    table = Table("Name", "Duration (ms)", "Ends")
    for name in TRANSITION_NAMES:
        transition = get_transition(name)
        table.add_row(
            name,
            str(transition.get_duration()),
            "hidden" if transition.hides else "visible",
        )
    rich_print(table)
