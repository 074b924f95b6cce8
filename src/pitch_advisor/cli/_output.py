from collections import Counter
from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.table import Table

from pitch_advisor.domain.historical import HistoricalPitch
from pitch_advisor.domain.recommendation import DataDrivenResult, DebugInfo, Recommendation
from pitch_advisor.domain.scores import ScoreMaps

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _print_insights(insights: Sequence[str]) -> None:
    for insight in insights:
        console.print(f"  • {insight}")


def print_recommendation(rec: Recommendation) -> None:
    console.print(f"[bold green]Next pitch:[/bold green] [bold]{rec.type}[/bold] / [bold]{rec.location}[/bold]")
    if rec.insights:
        console.print("[bold]Insights:[/bold]")
        _print_insights(rec.insights)
    if rec.pitcher_names:
        console.print(f"[bold]Pitchers:[/bold] {', '.join(rec.pitcher_names)}")
    if rec.debug_info is not None:
        print_debug_info(rec.debug_info)


def _score_table(title: str, columns: Mapping[str, ScoreMaps], attr: str) -> Table:
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("Key")
    for name in columns:
        table.add_column(name, justify="right")
    first = next(iter(columns.values()))
    for key in getattr(first, attr):
        table.add_row(str(key), *(f"{getattr(maps, attr)[key]:.2f}" for maps in columns.values()))
    return table


def print_debug_info(debug: DebugInfo) -> None:
    console.print()
    console.print(f"[bold]Historical records:[/bold] {debug.historical_record_count}")
    if debug.raw_type is not None:
        console.print(f"[bold]Raw selection:[/bold] {debug.raw_type} / {debug.raw_location}")
    for stage, seconds in debug.timings.items():
        console.print(f"  {stage}: {seconds * 1000:.2f} ms")
    columns = {"Rule": debug.rule_scores, "Data": debug.data_scores, "Merged": debug.merged_scores}
    console.print(_score_table("Pitch type scores", columns, "type_scores"))
    console.print(_score_table("Location scores", columns, "location_scores"))


def print_data_driven_result(result: DataDrivenResult) -> None:
    console.print(_score_table("Pitch type scores", {"Score": result.scores}, "type_scores"))
    console.print(_score_table("Location scores", {"Score": result.scores}, "location_scores"))
    console.print("[bold]Insights:[/bold]")
    _print_insights(result.insights)


def print_import_summary(records: Sequence[HistoricalPitch], source: str) -> None:
    console.print(f"[bold green]Loaded[/bold green] {len(records)} historical records from {source}")
    if not records:
        return
    by_type = Counter(str(r.type) for r in records)
    successes = Counter(str(r.type) for r in records if r.is_success)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Pitch Type")
    table.add_column("Records", justify="right")
    table.add_column("Success %", justify="right")
    for pitch_type, total in by_type.most_common():
        table.add_row(pitch_type, str(total), f"{successes[pitch_type] / total * 100:.0f}%")
    console.print(table)
