"""Tests for block serialization and the lazy catalog renderer."""

from __future__ import annotations

from collections.abc import Iterator

from histocat.core.contracts.dataset import CategoryLabels
from histocat.core.contracts.date import DatePoint, DateRange
from histocat.core.contracts.event import Category, Continuation, EventRecord, Link, Note
from histocat.core.renderer import render, serialize_record
from histocat.core.rendering import MarkupLinks, PlainTextLinks, RenderingMode

LABELS = CategoryLabels(emoji="🗓", politics="Politique", history="Histoire", science="Sciences")
URL = "https://fr.wikipedia.org/wiki/Traité_de_Brétigny"

JEAN_II = EventRecord(
    title="Jean II « le Bon » roi de France",
    category=Category.POLITICS,
    date=DatePoint(day="22", month="AUG", year=1350),
    note=Note(
        primary="il est fait prisonnier à la bataille de Poitiers en 1356.",
        continuations=(
            Continuation(text="Le traité de Brétigny attribue aux Anglais le sud-ouest."),
            Continuation(link=Link(url=URL)),
        ),
    ),
)
FAMINE = EventRecord(
    title="Famine dans l’est de la France",
    category=Category.HISTORY,
    date=DateRange(start=DatePoint(year=1650), end=DatePoint(year=1652)),
)


def test_minimal_block() -> None:
    """A record without note is exactly three lines with no trailing newline."""
    record = EventRecord(
        title="Philippe VI de Valois roi de France",
        category=Category.POLITICS,
        date=DatePoint(day="1", month="FEB", year=1328),
    )
    assert serialize_record(record, LABELS, PlainTextLinks()) == (
        "1 EVEN Philippe VI de Valois roi de France\n2 TYPE 🗓 Politique\n2 DATE 1 FEB 1328"
    )


def test_range_block() -> None:
    block = serialize_record(FAMINE, LABELS, PlainTextLinks())
    assert block.splitlines()[2] == "2 DATE FROM 1650 TO 1652"


def test_note_and_link_continuations() -> None:
    plain = serialize_record(JEAN_II, LABELS, PlainTextLinks()).split("\n")
    assert plain[3] == "2 NOTE il est fait prisonnier à la bataille de Poitiers en 1356."
    assert plain[4] == "3 CONT Le traité de Brétigny attribue aux Anglais le sud-ouest."
    assert plain[5] == f"3 CONT {URL} "

    markup = serialize_record(JEAN_II, LABELS, MarkupLinks()).split("\n")
    assert markup[5] == f"3 CONT [Wikipédia…]({URL})"


def test_mode_only_changes_link_substring() -> None:
    plain = serialize_record(JEAN_II, LABELS, PlainTextLinks())
    markup = serialize_record(JEAN_II, LABELS, MarkupLinks())
    assert plain.replace(f" {URL} ", "<link>") == markup.replace(f" [Wikipédia…]({URL})", "<link>")


def test_text_and_link_on_same_continuation() -> None:
    record = FAMINE.model_copy(
        update={
            "note": Note(
                primary="1 300 000 morts.",
                continuations=(Continuation(text="Voir", link=Link(url="https://x.org/f")),),
            )
        }
    )
    assert serialize_record(record, LABELS, PlainTextLinks()).endswith(
        "3 CONT Voir https://x.org/f "
    )


def test_layout_quirks_preserved() -> None:
    """Leading note indent and trailing date spaces are emitted verbatim."""
    record = EventRecord(
        title="Louis XV « le Bien-Aimé » roi de France",
        category=Category.POLITICS,
        date=DatePoint(day="1", month="SEP", year=1715),
        note=Note(primary="en 1736, un édit royal."),
        note_indent=" ",
        date_trailer=" ",
    )
    block = serialize_record(record, LABELS, PlainTextLinks())
    assert "\n2 DATE 1 SEP 1715 \n 2 NOTE en 1736, un édit royal." in block


def test_render_is_lazy_ordered_and_non_mutating() -> None:
    records = (FAMINE, JEAN_II)
    before = [r.model_dump() for r in records]

    out = render(records, RenderingMode.MARKUP, labels=LABELS)
    assert isinstance(out, Iterator)
    blocks = list(out)

    assert len(blocks) == len(records)
    assert blocks[0].startswith("1 EVEN Famine")
    assert blocks[1].startswith("1 EVEN Jean II")
    assert blocks[1].endswith(f"[Wikipédia…]({URL})")
    assert [r.model_dump() for r in records] == before


def test_render_uses_dataset_link_label() -> None:
    (block,) = render([JEAN_II], RenderingMode.MARKUP, labels=LABELS, link_label="Wikipedia")
    assert block.endswith(f"3 CONT [Wikipedia]({URL})")


def test_render_empty_input() -> None:
    assert list(render([], RenderingMode.PLAIN_TEXT, labels=LABELS)) == []
