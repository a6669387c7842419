"""Render slides into screen buffers with rich."""

from rich.align import Align
from rich.console import Console, RenderableType
from rich.markdown import Markdown
from rich.padding import Padding
from rich.segment import Segment
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ..configuring.settings import ThemeSettings
from ..models import Slide
from .protocols import SlideRendererProtocol
from .screen import ScreenBuffer

HELP_ROWS = (
    ("n, space, right, down, page down", "Next slide"),
    ("p, left, up, page up", "Previous slide"),
    ("1-9", "Go to slide"),
    (": then digits", "Go to slide, past the ninth"),
    ("escape", "Skip the transition in progress"),
    ("h / f", "Toggle header / footer"),
    ("r", "Reload the deck"),
    ("?", "Toggle this help"),
    ("q", "Quit"),
)


def _rich_theme(theme: ThemeSettings) -> Theme:
    return Theme(
        {
            "markdown.h1": f"bold {theme.primary}",
            "markdown.h1.border": theme.primary,
            "markdown.h2": f"bold underline {theme.primary}",
            "markdown.h3": f"bold {theme.primary}",
            "markdown.h4": f"italic {theme.primary}",
            "markdown.code": f"bold {theme.primary}",
            "markdown.block_quote": theme.secondary,
            "markdown.hr": theme.secondary,
            "markdown.item.bullet": f"bold {theme.primary}",
            "markdown.item.number": f"bold {theme.primary}",
            "markdown.link": f"underline {theme.primary}",
            "markdown.link_url": theme.secondary,
            "markdown.table.border": theme.secondary,
            "markdown.table.header": f"bold {theme.primary}",
        }
    )


class SlideRenderer(SlideRendererProtocol):
    def __init__(
        self,
        theme: ThemeSettings,
        title: str | None,
        show_header: bool = True,
        show_footer: bool = True,
    ) -> None:
        self._theme = theme
        self._rich_theme = _rich_theme(theme)
        self._title = title
        self.show_header = show_header
        self.show_footer = show_footer

    @property
    def base_style(self) -> Style:
        return Style(color=self._theme.foreground, bgcolor=self._theme.background)

    @property
    def bar_style(self) -> Style:
        return Style(color=self._theme.background, bgcolor=self._theme.secondary)

    def render(
        self,
        slide: Slide,
        slide_number: int,
        total_slides: int,
        width: int,
        height: int,
    ) -> ScreenBuffer:
        """Render `slide` to a `width` x `height` buffer.

        Args:
            slide: Slide to render.
            slide_number: 1-based position of the slide, shown in the footer.
            total_slides: Number of slides in the deck, shown in the footer.
            width: Width of the screen, in cells.
            height: Height of the screen, in cells.

        Returns:
            The rendered screen.
        """
        body = Padding(Markdown(slide.content, code_theme="monokai"), (1, 2))
        return self._render_screen(body, slide_number, total_slides, width, height)

    def render_help(self, width: int, height: int) -> ScreenBuffer:
        table = Table(
            title="Keys",
            show_header=False,
            box=None,
            style=self.base_style,
            title_style=Style(color=self._theme.primary, bold=True),
        )
        table.add_column(style=Style(color=self._theme.primary, bold=True))
        table.add_column()
        for keys, description in HELP_ROWS:
            table.add_row(keys, description)
        return self._render_screen(
            Align.center(table, vertical="middle"), None, None, width, height
        )

    def _render_screen(
        self,
        body: RenderableType,
        slide_number: int | None,
        total_slides: int | None,
        width: int,
        height: int,
    ) -> ScreenBuffer:
        console = Console(
            width=width,
            height=height,
            theme=self._rich_theme,
            color_system="truecolor",
            force_terminal=True,
        )
        buffer = ScreenBuffer(width, height, self.base_style)
        top = 0
        bottom = height
        if self.show_header and height > 2:
            header = Text(self._title or "", style=self.bar_style, justify="center")
            buffer.paste(self._lines(console, header, width, 1, self.bar_style), 0)
            top = 1
        if self.show_footer and height - top > 2:
            footer_text = (
                f"{slide_number}/{total_slides}" if slide_number is not None else ""
            )
            footer = Text(footer_text, style=self.bar_style, justify="right")
            bottom = height - 1
            buffer.paste(
                self._lines(console, footer, width, 1, self.bar_style), bottom
            )
        buffer.paste(
            self._lines(console, body, width, bottom - top, self.base_style), top
        )
        return buffer

    @staticmethod
    def _lines(
        console: Console,
        renderable: RenderableType,
        width: int,
        height: int,
        style: Style,
    ) -> list[list[Segment]]:
        options = console.options.update(width=width, height=height)
        return console.render_lines(renderable, options, style=style, pad=True)
