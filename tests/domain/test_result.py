from pitch_advisor.domain.result import Err, Ok, Result


class TestOk:
    def test_construction(self) -> None:
        ok: Ok[int] = Ok(42)
        assert ok.value == 42

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)


class TestErr:
    def test_construction(self) -> None:
        err: Err[str] = Err("bad")
        assert err.error == "bad"


class TestPatternMatching:
    def test_match(self) -> None:
        result: Result[int, str] = Ok(3)
        match result:
            case Ok(value):
                assert value == 3
            case Err(_):
                raise AssertionError("expected Ok")
