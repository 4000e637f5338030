"""Source files, locations and location ranges used for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Source:
    """A source file split into lines, each ending with a newline."""

    diagnostic_file_name: str
    lines: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Location:
    """A single position in a file; line 0 means unset. Columns start at 1."""

    line: int = 0
    column: int = 0

    def is_set(self) -> bool:
        return self.line != 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass
class LocationRange:
    """A range of a source file."""

    file: Source | None = None
    file_name: str = ""
    begin: Location = field(default_factory=Location)
    end: Location = field(default_factory=Location)

    def is_set(self) -> bool:
        return self.begin.is_set()

    def with_code(self) -> bool:
        """True if the range refers to actual code."""
        return self.begin.line != 0

    def __str__(self) -> str:
        if not self.is_set():
            return self.file_name
        prefix = ""
        if self.file is not None and self.file.diagnostic_file_name:
            prefix = self.file.diagnostic_file_name + ":"
        if self.begin.line == self.end.line:
            if self.begin.column == self.end.column:
                return f"{prefix}{self.begin}"
            return f"{prefix}{self.begin}-{self.end.column}"
        return f"{prefix}({self.begin})-({self.end})"


def location_before(a: Location, b: Location) -> bool:
    """Whether ``a`` is closer to the beginning of the file than ``b``."""
    if a.line != b.line:
        return a.line < b.line
    return a.column < b.column


def location_range_between(a: LocationRange, b: LocationRange) -> LocationRange:
    """A range spanning from the start of ``a`` to the end of ``b``."""
    if a.file is not b.file:
        raise ValueError("Cannot create a LocationRange between different files")
    return LocationRange(file=a.file, file_name=a.file_name, begin=a.begin, end=b.end)


def make_location_range_message(msg: str) -> LocationRange:
    """A pseudo-range carrying only a message and no position."""
    return LocationRange(file_name=msg)


def build_source(diagnostic_file_name: str, text: str) -> Source:
    """Split ``text`` into newline-terminated lines."""
    return Source(diagnostic_file_name, [part + "\n" for part in text.split("\n")])


def _trim_to_line(loc: LocationRange, line: int) -> LocationRange:
    if loc.begin.line > line or loc.end.line < line:
        raise ValueError(f"line {line} is outside of {loc}")
    assert loc.file is not None
    begin_column = loc.begin.column if loc.begin.line == line else 1
    end_column = (
        loc.end.column if loc.end.line == line else len(loc.file.lines[line - 1])
    )
    return LocationRange(
        file=loc.file,
        file_name=loc.file_name,
        begin=Location(line, begin_column),
        end=Location(line, end_column),
    )


def get_snippet(loc: LocationRange) -> str:
    """The code covered by ``loc``; the end column is exclusive."""
    if loc.begin.line == 0:
        return ""
    if loc.file is None:
        raise ValueError("location range has no source file")
    pieces = []
    for line in range(loc.begin.line, loc.end.line + 1):
        trimmed = _trim_to_line(loc, line)
        text = loc.file.lines[line - 1]
        pieces.append(text[trimmed.begin.column - 1 : trimmed.end.column - 1])
    return "\n".join(pieces)


def line_beginning(loc: LocationRange) -> LocationRange:
    """The part of the line directly before ``loc``."""
    return LocationRange(
        file=loc.file,
        file_name=loc.file_name,
        begin=Location(loc.begin.line, 1),
        end=loc.begin,
    )


def line_ending(loc: LocationRange) -> LocationRange:
    """The part of the line directly after ``loc``."""
    if loc.file is None:
        raise ValueError("location range has no source file")
    return LocationRange(
        file=loc.file,
        file_name=loc.file_name,
        begin=loc.end,
        end=Location(loc.end.line, len(loc.file.lines[loc.end.line - 1])),
    )