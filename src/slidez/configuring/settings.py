"""Presenter settings, merged from yaml files.

Settings are looked up, from lowest to highest priority, in the user configuration \
directory then in the deck directory, both in a file named `slidez.yml`. Command line \
flags override them all.
"""

from functools import reduce
from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, ConfigDict, Field

from .. import app_name
from ..utils import load_all_yamls

SETTINGS_FILE_NAME = f"{app_name}.yml"

_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


class ThemeSettings(BaseModel):
    """Colors used to render slides. Defaults to a greenscreen look."""

    model_config = ConfigDict(extra="forbid")

    background: str = "#000000"
    foreground: str = "#6a9955"
    primary: str = "#00ff00"
    secondary: str = "#4a7035"


class PresenterSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    """Title shown in the header. Defaults to the deck directory name."""

    show_header: bool = True
    show_footer: bool = True
    fps: int = Field(default=30, ge=1, le=120)
    """Frames rendered per second while a transition plays."""

    theme: ThemeSettings = Field(default_factory=ThemeSettings)

    @property
    def background(self) -> str:
        """Color painted over the cells a transition hides."""
        return self.theme.background

    @classmethod
    def from_yaml(cls, deck_dir: Path, **overrides: Any) -> Self:
        """Load the settings that apply to `deck_dir`.

        Args:
            deck_dir: Directory of the deck to present.
            overrides: Values taking precedence over the files, typically coming \
                from the command line. `None` values are ignored.

        Returns:
            The merged settings.
        """
        content: dict[str, Any] = reduce(
            _merge,
            load_all_yamls(
                p / SETTINGS_FILE_NAME for p in settings_dirs(deck_dir.resolve())
            ),
            {},
        )
        content.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(content)


def settings_dirs(deck_dir: Path) -> list[Path]:
    return [_user_config_dir, deck_dir]


def _merge(a: dict[str, Any], b: dict[str, Any] | None) -> dict[str, Any]:
    if not b:
        return a
    merged = {**a, **b}
    if isinstance(a.get("theme"), dict) and isinstance(b.get("theme"), dict):
        merged["theme"] = {**a["theme"], **b["theme"]}
    return merged
