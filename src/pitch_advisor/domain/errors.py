from dataclasses import dataclass


@dataclass(frozen=True)
class PitchAdvisorError:
    message: str


@dataclass(frozen=True)
class IngestError(PitchAdvisorError):
    source_type: str
    source_detail: str
