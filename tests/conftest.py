from pathlib import Path

from pytest import fixture

from slidez.models import Slide


def make_slide(
    name: str, before: str | None = None, after: str | None = None
) -> Slide:
    return Slide(
        filename=f"{name}.md",
        content=f"# {name}",
        before_transition=before,  # type: ignore[arg-type]
        after_transition=after,  # type: ignore[arg-type]
    )


@fixture
def plain_slides() -> list[Slide]:
    return [make_slide(f"slide{i}") for i in range(1, 6)]


@fixture
def transition_slides() -> list[Slide]:
    return [
        make_slide("a", before="tvon"),
        make_slide("b", before="diagonal"),
        make_slide("c", after="tvoff"),
    ]


def write_deck(deck_dir: Path, manifest: str, files: dict[str, str]) -> Path:
    deck_dir.mkdir(parents=True, exist_ok=True)
    (deck_dir / "slides.txt").write_text(manifest, encoding="utf8")
    for name, content in files.items():
        (deck_dir / name).write_text(content, encoding="utf8")
    return deck_dir
