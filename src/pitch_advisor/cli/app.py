import json
import logging
import random
from pathlib import Path
from typing import Annotated, Any

import typer

from pitch_advisor.cli._logging import configure_logging
from pitch_advisor.cli._output import (
    print_data_driven_result,
    print_error,
    print_import_summary,
    print_recommendation,
)
from pitch_advisor.config import EngineSettings, create_config, load_engine_settings
from pitch_advisor.domain.historical import HistoricalPitch, PitchSituation
from pitch_advisor.domain.pitch import Count, Handedness, Pitch
from pitch_advisor.domain.result import Err, Ok
from pitch_advisor.ingest.historical_import import load_historical_file
from pitch_advisor.services import AtBatSession, PitchRecommender, analyze_historical_data

logger = logging.getLogger(__name__)

app = typer.Typer(name="pitch-advisor", help="Pitch Advisor: next-pitch recommendations")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Pitch Advisor: next-pitch recommendations."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_HistoricalOpt = Annotated[
    Path | None, typer.Option("--historical", help="Historical pitch dataset (.csv or .json)")
]
_ConfigOpt = Annotated[Path, typer.Option("--config", help="YAML config file")]


def _load_settings(config_path: Path, overrides: dict[str, Any]) -> EngineSettings:
    engine = {k: v for k, v in overrides.items() if v is not None}
    cfg = create_config(yaml_path=str(config_path), overrides={"engine": engine} if engine else None)
    return load_engine_settings(cfg)


def _load_historical(path: Path) -> list[HistoricalPitch]:
    match load_historical_file(path):
        case Ok(records):
            return records
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


def _load_pitches(path: Path) -> list[Pitch]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, ValueError) as e:
        print_error(f"Could not read pitch history {path}: {e}")
        raise typer.Exit(code=1) from e
    if not isinstance(raw, list):
        print_error("Pitch history must be an array of pitches")
        raise typer.Exit(code=1)
    if not all(isinstance(p, dict) for p in raw):
        print_error("Invalid pitch in history: every pitch must be an object")
        raise typer.Exit(code=1)
    try:
        return [Pitch.from_dict(p) for p in raw]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        print_error(f"Invalid pitch in history: {e}")
        raise typer.Exit(code=1) from e


def _replay_at_bat(pitches: list[Pitch]) -> list[Pitch]:
    """Rebuild counts from pitch results; returns the pitches of the at-bat still in progress."""
    session = AtBatSession()
    for pitch in pitches:
        session.record_pitch(
            pitch.type,
            pitch.location,
            pitch.result,
            pitch.batter_handedness or Handedness.RIGHT,
            pitch.pitcher_handedness or Handedness.RIGHT,
        )
    logger.debug("Replayed %d pitches, count now %s", len(pitches), session.count)
    return list(session.current_at_bat())


@app.command()
def recommend(
    history: Annotated[Path, typer.Argument(help="JSON array of pitches in the current at-bat")],
    historical: _HistoricalOpt = None,
    data_weight: Annotated[float | None, typer.Option("--data-weight", min=0.0, max=1.0)] = None,
    randomness: Annotated[float | None, typer.Option("--randomness", min=0.0)] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Seed the random source")] = None,
    no_insights: Annotated[bool, typer.Option("--no-insights", help="Omit insights")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show scores and stage timings")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the recommendation as JSON")] = False,
    replay: Annotated[
        bool, typer.Option("--replay", help="Derive counts and the current at-bat from pitch results")
    ] = False,
    config: _ConfigOpt = Path("pitch_advisor.yaml"),
) -> None:
    """Recommend the next pitch for an at-bat."""
    settings = _load_settings(config, {"data_weight": data_weight, "randomness": randomness})
    rng = random.Random(seed) if seed is not None else None
    recommender = PitchRecommender(settings=settings, rng=rng)
    if historical is not None:
        recommender.set_historical_data(_load_historical(historical))

    pitches = _load_pitches(history)
    if replay:
        pitches = _replay_at_bat(pitches)
    rec = recommender.recommend_next_pitch(
        pitches,
        include_insights=not no_insights,
        include_debug=debug,
    )
    if as_json:
        typer.echo(json.dumps(rec.to_dict(), indent=2))
    else:
        print_recommendation(rec)


@app.command()
def analyze(
    historical: Annotated[Path, typer.Argument(help="Historical pitch dataset (.csv or .json)")],
    balls: Annotated[int, typer.Option("--balls", min=0, max=4)] = 0,
    strikes: Annotated[int, typer.Option("--strikes", min=0, max=3)] = 0,
    batter: Annotated[Handedness, typer.Option("--batter")] = Handedness.RIGHT,
    pitcher: Annotated[Handedness, typer.Option("--pitcher")] = Handedness.RIGHT,
    config: _ConfigOpt = Path("pitch_advisor.yaml"),
) -> None:
    """Show data-driven scores for a count and matchup."""
    settings = _load_settings(config, {})
    situation = PitchSituation(count=Count(balls, strikes), batter_handedness=batter, pitcher_handedness=pitcher)
    print_data_driven_result(analyze_historical_data(situation, _load_historical(historical), settings))


@app.command(name="import")
def import_cmd(
    historical: Annotated[Path, typer.Argument(help="Historical pitch dataset (.csv or .json)")],
) -> None:
    """Validate a historical dataset and summarize it."""
    print_import_summary(_load_historical(historical), str(historical))
