import io

import pytest
from rich.console import Console

from pitch_advisor.cli import _output
from pitch_advisor.domain.pitch import PitchLocation, PitchType
from pitch_advisor.domain.recommendation import DataDrivenResult, Recommendation
from pitch_advisor.domain.scores import ScoreMaps
from tests.helpers import make_record


@pytest.fixture
def buf(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    out = io.StringIO()
    monkeypatch.setattr(_output, "console", Console(file=out, highlight=False, width=200))
    return out


class TestPrintRecommendation:
    def test_type_and_location(self, buf: io.StringIO) -> None:
        _output.print_recommendation(Recommendation(type=PitchType.SLIDER, location=PitchLocation.LOW_OUTSIDE))
        assert "Slider / Low Outside" in buf.getvalue()

    def test_insights_and_pitchers(self, buf: io.StringIO) -> None:
        rec = Recommendation(
            type=PitchType.SLIDER,
            location=PitchLocation.LOW_OUTSIDE,
            insights=("Slider has a 100% success rate in similar situations (5/5)",),
            pitcher_names=("Ace", "Bo"),
        )
        _output.print_recommendation(rec)
        output = buf.getvalue()
        assert "Slider has a 100% success rate in similar situations (5/5)" in output
        assert "Ace, Bo" in output


class TestPrintDataDrivenResult:
    def test_tables(self, buf: io.StringIO) -> None:
        scores = ScoreMaps.zeros()
        scores.type_scores[PitchType.SPLITTER] = 7
        _output.print_data_driven_result(DataDrivenResult(scores=scores, insights=("Analysis based on 2",)))
        output = buf.getvalue()
        assert "Pitch type scores" in output
        assert "7.00" in output
        assert "Way Low Outside" in output


class TestPrintImportSummary:
    def test_counts_by_type(self, buf: io.StringIO) -> None:
        records = [make_record(PitchType.SINKER), make_record(PitchType.SINKER, success=False)]
        _output.print_import_summary(records, "data.csv")
        output = buf.getvalue()
        assert "Loaded 2 historical records from data.csv" in output
        assert "50%" in output

    def test_empty(self, buf: io.StringIO) -> None:
        _output.print_import_summary([], "data.csv")
        assert "Loaded 0 historical records" in buf.getvalue()
