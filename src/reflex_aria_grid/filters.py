"""Per-column filter text and the filter set emitted to the host."""

from collections.abc import Iterable, Sequence

from reflex_aria_grid.models import GridColumn


class FilterRegistry:
    """Raw filter text per column, keyed by column identity.

    Text is stored verbatim, blanks included.  Only :meth:`filter_set`
    decides what the host gets to see.
    """

    def __init__(self) -> None:
        self._text: dict[int, str] = {}

    def set_text(self, column_id: int, text: str) -> None:
        self._text[column_id] = text

    def text(self, column_id: int) -> str:
        return self._text.get(column_id, "")

    def filter_set(
        self,
        columns: Sequence[GridColumn],
        column_ids: Sequence[int],
    ) -> dict[int, str]:
        """Map column index to filter text for filterable columns with non-blank text.

        The text is emitted untrimmed; trimming only decides whether an
        entry counts as blank.
        """
        filters: dict[int, str] = {}
        for index, (column, column_id) in enumerate(zip(columns, column_ids)):
            if not column.filterable or column_id not in self._text:
                continue
            text = self._text[column_id]
            if text.strip() != "":
                filters[index] = text
        return filters

    def rebuild(self, column_ids: Iterable[int]) -> None:
        """Drop the text of columns that are no longer present."""
        self._text = {
            column_id: self._text[column_id] for column_id in column_ids if column_id in self._text
        }
