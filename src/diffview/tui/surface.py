"""In-memory render surface that paints a bordered frame into rich Text.

Row 0 is the top border (title), row height-1 the bottom border (footer).
Content rows are 1..height-2 and clip to the inner width.
"""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from diffview.core.errors import SurfaceError
from diffview.core.view_position import ViewDimension

TAB_SIZE = 4

_BORDER_STYLE = Style(color="bright_black")
_TITLE_STYLE = Style(bold=True)
_ACTIVE_ROW_STYLE = Style(reverse=True)
_CURRENT_ROW_STYLE = Style(underline=True)

# [LAW:dataflow-not-control-flow] Prefix→style table; first match wins.
_LINE_STYLES: tuple[tuple[str, Style], ...] = (
    ("+++", Style(bold=True)),
    ("---", Style(bold=True)),
    ("diff --git", Style(bold=True)),
    ("commit ", Style(color="yellow", bold=True)),
    ("@@", Style(color="cyan")),
    ("+", Style(color="green")),
    ("-", Style(color="red")),
)


def line_style(line: str) -> Style:
    """Style for a raw diff line based on its prefix."""
    for prefix, style in _LINE_STYLES:
        if line.startswith(prefix):
            return style
    return Style.null()


def visible_slice(line: str, start_column: int, width: int) -> str:
    """The part of line visible from start_column, clipped to width cells."""
    expanded = line.expandtabs(TAB_SIZE)
    return expanded[start_column:start_column + max(0, width)]


class TextSurface:
    """A width x height frame collected in memory, then turned into Text."""

    def __init__(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._rows: dict[int, tuple[str, Style]] = {}
        self._selected: tuple[int, bool] | None = None
        self._border = False
        self.title = ""
        self.footer = ""

    @property
    def inner_width(self) -> int:
        return max(0, self._width - 2)

    def _check_content_row(self, row: int) -> None:
        if row < 1 or row > self._height - 2:
            raise SurfaceError(
                "Row {} is outside the content area (1..{})".format(row, self._height - 2)
            )

    # ─── RenderSurface ───────────────────────────────────────────────────

    def view_dimensions(self) -> ViewDimension:
        return ViewDimension(rows=self._height, cols=self._width)

    def set_row(self, row: int, start_column: int, text: str) -> None:
        self._check_content_row(row)
        if start_column < 0:
            raise SurfaceError("Negative start column {}".format(start_column))
        self._rows[row] = (visible_slice(text, start_column, self.inner_width), line_style(text))

    def set_selected_row(self, row: int, active: bool) -> None:
        self._check_content_row(row)
        self._selected = (row, active)

    def draw_border(self) -> None:
        self._border = True

    def set_title(self, text: str) -> None:
        self.title = text

    def set_footer(self, text: str) -> None:
        self.footer = text

    # ─── Output ──────────────────────────────────────────────────────────

    def row_text(self, row: int) -> str:
        """Plain text written to a content row ("" when untouched)."""
        return self._rows.get(row, ("", Style.null()))[0]

    @property
    def selected_row(self) -> tuple[int, bool] | None:
        return self._selected

    def _edge(self, left: str, right: str, label: str, align_right: bool) -> Text:
        if self._width < 2:
            return Text(" " * self._width)
        line = Text()
        fill = "─" if self._border else " "
        inner = self.inner_width
        label = " {} ".format(label) if label else ""
        label = label[:inner]
        pad = fill * (inner - len(label))
        line.append(left if self._border else " ", _BORDER_STYLE)
        if align_right:
            line.append(pad, _BORDER_STYLE)
            line.append(label, _TITLE_STYLE)
        else:
            line.append(label, _TITLE_STYLE)
            line.append(pad, _BORDER_STYLE)
        line.append(right if self._border else " ", _BORDER_STYLE)
        return line

    def _content(self, row: int) -> Text:
        text, style = self._rows.get(row, ("", Style.null()))
        line = Text()
        side = "│" if self._border else " "
        if self._width >= 2:
            line.append(side, _BORDER_STYLE)
        body = Text(text.ljust(self.inner_width), style=style)
        if self._selected is not None and self._selected[0] == row:
            body.stylize(_ACTIVE_ROW_STYLE if self._selected[1] else _CURRENT_ROW_STYLE)
        line.append_text(body)
        if self._width >= 2:
            line.append(side, _BORDER_STYLE)
        return line

    def to_text(self) -> Text:
        if self._height == 0:
            return Text()
        lines = [self._edge("┌", "┐", self.title, align_right=False)]
        for row in range(1, self._height - 1):
            lines.append(self._content(row))
        if self._height > 1:
            lines.append(self._edge("└", "┘", self.footer, align_right=True))
        return Text("\n").join(lines)
