"""Tests for result and detail rendering."""

from rich.console import Console

from ng_explorer.formatter import Formatter
from ng_explorer.models import Documentation


def _plain(markup: str) -> str:
    console = Console(width=400, record=True, color_system=None)
    console.print(markup)
    return console.export_text()


def test_empty_results():
    assert "No results found." in _plain(Formatter().format_search_results([]))


def test_long_description_truncated():
    doc = Documentation.from_dict({"classes": [{"name": "Big", "rawdescription": "x" * 300}]})

    text = _plain(Formatter().format_search_results(doc.classes))

    assert "x" * 197 + "..." in text
    assert "x" * 198 not in text


def test_markup_in_names_is_escaped():
    doc = Documentation.from_dict({"directives": [{"name": "TooltipDirective", "selector": "[bold]"}]})

    text = _plain(Formatter().format_search_results(doc.directives))

    assert "Selector: [bold]" in text


def test_count_footer():
    formatter = Formatter()

    assert "Showing 2 of 5 result(s)" in formatter.format_count(2, 5)
    assert "Found 5 result(s)" in formatter.format_count(5, 5)
    assert "Found 3 result(s)" in formatter.format_count(3)


def test_constructor_without_dependencies():
    doc = Documentation.from_dict({"injectables": [{"name": "ClockService", "constructorObj": {"args": []}}]})

    text = _plain(Formatter().format_api_details(doc.injectables[0]))

    assert "Constructor Dependencies:" in text
    assert "No dependencies" in text


def test_deprecation_message():
    doc = Documentation.from_dict({
        "classes": [{"name": "Old", "deprecated": True, "deprecationMessage": "use New"}],
    })

    assert "Deprecated: use New" in _plain(Formatter().format_api_details(doc.classes[0]))
