"""Fodder: whitespace and comments kept so source can be round tripped."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class FodderKind(enum.Enum):
    """The kinds of fodder element."""

    LINE_END = 0
    INTERSTITIAL = 1
    PARAGRAPH = 2


@dataclass
class FodderElement:
    """A single piece of fodder."""

    kind: FodderKind
    blanks: int = 0
    indent: int = 0
    comment: list[str] = field(default_factory=list)


def make_fodder_element(
    kind: FodderKind, blanks: int, indent: int, comment: list[str]
) -> FodderElement:
    """Build a fodder element, checking the constraints of its kind."""
    if kind is FodderKind.LINE_END and len(comment) > 1:
        raise ValueError(f"LINE_END but comment == {comment!r}.")
    if kind is FodderKind.INTERSTITIAL:
        if blanks > 0:
            raise ValueError(f"INTERSTITIAL but blanks == {blanks}")
        if indent > 0:
            raise ValueError(f"INTERSTITIAL but indent == {indent}")
        if len(comment) != 1:
            raise ValueError(f"INTERSTITIAL but comment == {comment!r}.")
    if kind is FodderKind.PARAGRAPH and not comment:
        raise ValueError("PARAGRAPH but comment was empty")
    return FodderElement(kind, blanks, indent, list(comment))


def has_clean_endline(fodder: list[FodderElement]) -> bool:
    """True if the fodder is non-empty and does not end with an interstitial."""
    return bool(fodder) and fodder[-1].kind is not FodderKind.INTERSTITIAL


def fodder_append(fodder: list[FodderElement], element: FodderElement) -> None:
    """Append ``element`` to ``fodder`` in place, preserving its constraints."""
    if has_clean_endline(fodder) and element.kind is FodderKind.LINE_END:
        if element.comment:
            fodder.append(
                make_fodder_element(
                    FodderKind.PARAGRAPH, element.blanks, element.indent, element.comment
                )
            )
        else:
            back = fodder[-1]
            fodder[-1] = replace(
                back, indent=element.indent, blanks=back.blanks + element.blanks
            )
        return
    if not has_clean_endline(fodder) and element.kind is FodderKind.PARAGRAPH:
        fodder.append(make_fodder_element(FodderKind.LINE_END, 0, element.indent, []))
    fodder.append(element)


def fodder_concat(
    a: list[FodderElement], b: list[FodderElement]
) -> list[FodderElement]:
    """Concatenate two fodders; a line end never follows a paragraph or line end."""
    if not a:
        return b
    if not b:
        return a
    result = list(a)
    fodder_append(result, b[0])
    result.extend(b[1:])
    return result


def fodder_move_front(a: list[FodderElement], b: list[FodderElement]) -> None:
    """Move the contents of ``b`` to the front of ``a``, leaving ``b`` empty."""
    a[:] = fodder_concat(b, a)
    b.clear()


def ensure_clean_newline(fodder: list[FodderElement]) -> None:
    """Add a line end to ``fodder`` if it has no clean end of line."""
    if not has_clean_endline(fodder):
        fodder_append(fodder, make_fodder_element(FodderKind.LINE_END, 0, 0, []))


def count_element_newlines(element: FodderElement) -> int:
    """Number of newline characters a fodder element stands for."""
    if element.kind is FodderKind.INTERSTITIAL:
        return 0
    if element.kind is FodderKind.LINE_END:
        return 1
    if element.kind is FodderKind.PARAGRAPH:
        return len(element.comment) + element.blanks
    raise ValueError(f"Unknown fodder element kind {element.kind!r}")


def count_newlines(fodder: list[FodderElement]) -> int:
    """Number of newline characters the fodder stands for."""
    return sum(count_element_newlines(element) for element in fodder)