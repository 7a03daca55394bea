"""Logic for splitting delimited strings into top-level segments."""

from collections.abc import Iterable

from scope_splitter.delimiter import Delimiter, DelimiterKind
from scope_splitter.split_options import SplitOptions
from scope_splitter.split_result import SplitResult
from scope_splitter.split_type import SplitType

_SPLIT_TYPE_FOR_KIND = {
    DelimiterKind.ARRAY: SplitType.ARRAY,
    DelimiterKind.OBJECT: SplitType.OBJECT,
}


class Tokenizer:
    """Splits strings on the top-level separators of nested delimiter dialects.

    Array delimiters are tried before object delimiters, which are tried before
    non-parsable data delimiters. Within a dialect the first listed delimiter
    whose start character matches wins.
    """

    def __init__(
        self,
        array_delimiters: Iterable[Delimiter] | None = None,
        object_delimiters: Iterable[Delimiter] | None = None,
        non_parsable_data_delimiters: Iterable[Delimiter] | None = None,
        escape_characters: Iterable[str] | None = None,
    ) -> None:
        """Initialize the tokenizer with its dialects and escape characters."""
        self.array_delimiters = list(array_delimiters or [])
        self.object_delimiters = list(object_delimiters or [])
        self.non_parsable_data_delimiters = list(non_parsable_data_delimiters or [])
        self.escape_characters = list(escape_characters or [])

    def try_split(
        self, value: str, options: SplitOptions = SplitOptions.KEEP_EMPTY
    ) -> SplitResult:
        """Split a string into its trimmed top-level segments.

        Never raises on malformed input. Scopes still open at the end of the
        input turn the classification into SplitType.ERROR; segments recorded
        before that point are kept.
        """
        result = SplitResult()
        text = value.strip()
        if not text:
            return result

        active: list[Delimiter] = []
        is_escaped = False
        has_opened = False
        start_pos = 0
        for pos, c in enumerate(text):
            if is_escaped:
                is_escaped = False
            elif c in self.escape_characters:
                is_escaped = True
            elif not active:
                kind = self._open_scope(c, active, nested=False)
                if kind is None:
                    # Text outside any scope: the whole input is one opaque item
                    result.split_type = SplitType.NONE
                    result.items = [text]
                    break
                # Classified by the first top-level scope only
                if not has_opened:
                    result.split_type = _SPLIT_TYPE_FOR_KIND[kind]
                    has_opened = True
                start_pos = pos + 1
            else:
                top = active[-1]
                if c == top.end:
                    if len(active) == 1:
                        _record(result, text[start_pos:pos], options)
                    active.pop()
                elif c == top.separator:
                    if len(active) == 1:
                        _record(result, text[start_pos:pos], options)
                        start_pos = pos + 1
                else:
                    self._open_scope(c, active, nested=True)

        if active:
            result.split_type = SplitType.ERROR
        elif not has_opened and not result.items:
            # Only escapes and escaped characters were seen
            result.items = [text]
        return result

    def _open_scope(
        self,
        c: str,
        active: list[Delimiter],
        *,
        nested: bool,
    ) -> DelimiterKind | None:
        """Push the first delimiter starting with `c`, in dialect priority order."""
        dialects = [
            (DelimiterKind.ARRAY, self.array_delimiters),
            (DelimiterKind.OBJECT, self.object_delimiters),
        ]
        # Opaque spans only ever open inside another scope
        if nested:
            dialects.append(
                (DelimiterKind.NON_PARSABLE, self.non_parsable_data_delimiters)
            )

        for kind, delimiters in dialects:
            for delimiter in delimiters:
                if c == delimiter.start:
                    active.append(delimiter)
                    return kind
        return None


def _record(result: SplitResult, segment: str, options: SplitOptions) -> None:
    """Append a trimmed segment unless it is empty and empties are removed."""
    segment = segment.strip()
    if segment or options is SplitOptions.KEEP_EMPTY:
        result.items.append(segment)
