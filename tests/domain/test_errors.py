from pitch_advisor.domain.errors import IngestError, PitchAdvisorError


class TestIngestError:
    def test_construction(self) -> None:
        err = IngestError(message="bad header", source_type="csv", source_detail="pitches.csv")
        assert err.message == "bad header"
        assert err.source_type == "csv"
        assert err.source_detail == "pitches.csv"

    def test_inherits_base(self) -> None:
        assert isinstance(IngestError(message="x", source_type="json", source_detail="y"), PitchAdvisorError)

    def test_frozen(self) -> None:
        err = IngestError(message="x", source_type="json", source_detail="y")
        try:
            err.message = "z"  # type: ignore[misc]
            raise AssertionError("Expected FrozenInstanceError")
        except AttributeError:
            pass
