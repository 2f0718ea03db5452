"""Rich rendering of search results, API details and statistics."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from rich.markup import escape
from rich.table import Table

from .globbing import clean_path
from .models import (
    AngularConstruct,
    Component,
    ConstructorInfo,
    Directive,
    Injectable,
    Member,
    Module,
    Pipe,
    Reference,
    selector_of,
)

TYPE_COLORS: Dict[str, str] = {
    "component": "blue",
    "injectable": "magenta",
    "directive": "cyan",
    "pipe": "yellow",
    "module": "green",
    "class": "white",
}

DESCRIPTION_MAX_CHARS = 200


def _type_tag(construct_type: str) -> str:
    color = TYPE_COLORS.get(construct_type, "white")
    return f"[{color}]\\[{construct_type}][/{color}]"


def _summarize(description: str) -> str:
    """First two non-blank lines, capped at 200 characters."""
    lines = [line.strip() for line in description.splitlines() if line.strip()]
    text = " ".join(lines[:2])
    if len(text) > DESCRIPTION_MAX_CHARS:
        return text[: DESCRIPTION_MAX_CHARS - 3] + "..."
    return text


def _deprecated_suffix(member: Member) -> str:
    return " [yellow](deprecated)[/yellow]" if member.deprecated else ""


def _member_description(member: Member) -> str:
    if not member.description.strip():
        return ""
    return f"\n    [bright_black]{escape(member.description.strip())}[/bright_black]"


class Formatter:
    """Produce rich markup for the CLI's list and detail views."""

    def format_search_results(self, results: Sequence[AngularConstruct]) -> str:
        if not results:
            return "[yellow]No results found.[/yellow]"

        lines: List[str] = []
        for result in results:
            if result.deprecated:
                name = f"[bold yellow]{escape(result.name)} (deprecated)[/bold yellow]"
            else:
                name = f"[bold white]{escape(result.name)}[/bold white]"
            lines.append(f"{_type_tag(result.type)} {name}")
            lines.append(f"[dim]  File: {escape(clean_path(result.file))}[/dim]")

            selector = selector_of(result)
            if selector:
                lines.append(f"[cyan]  Selector: {escape(selector)}[/cyan]")

            if result.description:
                lines.append(f"[bright_black]  {escape(_summarize(result.description))}[/bright_black]")
            lines.append("")

        return "\n".join(lines)

    def format_count(self, shown: int, total: Optional[int] = None) -> str:
        """Footer line; ``total`` is only known in listing mode."""
        if total is not None and shown < total:
            return f"\nShowing {shown} of {total} result(s). Use --limit to show more."
        return f"\nFound {shown} result(s)"

    def format_api_details(self, construct: AngularConstruct) -> str:
        sections: List[str] = [
            f"[bold green]{escape(construct.name)}[/bold green]",
            f"[bright_black]File: {escape(construct.file)}[/bright_black]",
            f"[bright_black]Type: {construct.type}[/bright_black]",
        ]

        if construct.deprecated:
            message = f": {escape(construct.deprecation_message)}" if construct.deprecation_message else ""
            sections.append(f"[yellow]⚠️  Deprecated{message}[/yellow]")

        if construct.description.strip():
            sections.append("")
            sections.append(f"[white]{escape(construct.description.strip())}[/white]")

        if isinstance(construct, (Component, Directive)):
            sections.extend(self._view_details(construct))
        elif isinstance(construct, Injectable):
            sections.extend(self._injectable_details(construct))
        elif isinstance(construct, Pipe):
            sections.extend(self._pipe_details(construct))
        elif isinstance(construct, Module):
            sections.extend(self._module_details(construct))

        return "\n".join(sections)

    def format_suggestions(self, name: str, similar: Sequence[AngularConstruct]) -> str:
        lines = [f"No construct found with name: {escape(name)}"]
        if similar:
            lines.append("\nDid you mean one of these?")
            lines.extend(f"  • {escape(s.name)} ({s.type})" for s in similar)
        return "\n".join(lines)

    def stats_table(self, stats: Dict[str, int]) -> Table:
        table = Table(title="Angular Codebase Statistics", title_style="bold cyan", show_header=False)
        table.add_column("Kind")
        table.add_column("Count", justify="right", style="green")
        labels = {
            "components": "component",
            "injectables": "injectable",
            "directives": "directive",
            "pipes": "pipe",
            "modules": "module",
            "classes": "class",
        }
        for key, kind in labels.items():
            color = TYPE_COLORS[kind]
            table.add_row(f"[{color}]{key.capitalize()}[/{color}]", str(stats.get(key, 0)))
        table.add_section()
        table.add_row("[bold]Total[/bold]", f"[bold]{stats.get('total', 0)}[/bold]")
        return table

    # ------------------------------------------------------------------
    # Kind-specific sections
    # ------------------------------------------------------------------

    def _view_details(self, construct: Component | Directive) -> List[str]:
        sections: List[str] = []
        if construct.selector:
            sections += ["", "[cyan]Selector:[/cyan]", f"  {escape(construct.selector)}"]

        standalone = "[green]Yes[/green]" if construct.standalone else "[bright_black]No[/bright_black]"
        sections += ["", f"[cyan]Standalone:[/cyan] {standalone}"]

        sections += self._members_section("Inputs:", construct.inputs)
        sections += self._members_section("Outputs:", construct.outputs)
        sections += self._members_section("Properties:", construct.properties)
        sections += self._members_section("Methods:", construct.methods, methods=True)
        if construct.constructor:
            sections += ["", "[cyan]Constructor:[/cyan]", self._format_constructor(construct.constructor)]
        return sections

    def _injectable_details(self, injectable: Injectable) -> List[str]:
        sections = self._members_section("Properties:", injectable.properties)
        sections += self._members_section("Methods:", injectable.methods, methods=True)
        if injectable.constructor:
            sections += [
                "",
                "[cyan]Constructor Dependencies:[/cyan]",
                self._format_constructor(injectable.constructor),
            ]
        return sections

    def _pipe_details(self, pipe: Pipe) -> List[str]:
        sections: List[str] = []
        if pipe.pipe_name:
            sections += ["", "[cyan]Pipe Name:[/cyan]", f"  {escape(pipe.pipe_name)}"]
        pure = "[green]Yes[/green]" if pipe.pure else "[bright_black]No[/bright_black]"
        sections += ["", f"[cyan]Pure:[/cyan] {pure}"]
        return sections

    def _module_details(self, module: Module) -> List[str]:
        sections: List[str] = []
        sections += self._references_section("Declarations:", module.declarations)
        sections += self._references_section("Imports:", module.imports)
        sections += self._references_section("Exports:", module.exports)
        return sections

    def _members_section(self, title: str, members: List[Member], methods: bool = False) -> List[str]:
        if not members:
            return []
        render = self._format_method if methods else self._format_member
        return ["", f"[cyan]{title}[/cyan]", "\n".join(render(m) for m in members)]

    @staticmethod
    def _references_section(title: str, references: List[Reference]) -> List[str]:
        if not references:
            return []
        return ["", f"[cyan]{title}[/cyan]", "\n".join(f"  • {escape(r.name)}" for r in references)]

    @staticmethod
    def _format_member(member: Member) -> str:
        default = f" = {escape(member.default_value)}" if member.default_value else ""
        return (
            f"  • [green]{escape(member.name)}[/green]: [bright_black]{escape(member.type)}[/bright_black]"
            f"{default}{_deprecated_suffix(member)}{_member_description(member)}"
        )

    @staticmethod
    def _format_method(method: Member) -> str:
        args = ", ".join(f"{arg.name}: {arg.type}" for arg in method.args)
        return_type = method.return_type or "void"
        return (
            f"  • [green]{escape(method.name)}[/green]({escape(args)}): "
            f"[bright_black]{escape(return_type)}[/bright_black]"
            f"{_deprecated_suffix(method)}{_member_description(method)}"
        )

    @staticmethod
    def _format_constructor(constructor: ConstructorInfo) -> str:
        if not constructor.args:
            return "[bright_black]  No dependencies[/bright_black]"
        return "\n".join(
            f"  • [green]{escape(arg.name)}[/green]: [bright_black]{escape(arg.type)}[/bright_black]"
            for arg in constructor.args
        )
