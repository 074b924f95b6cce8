class PitchAdvisorException(Exception):
    """Base class for all pitch-advisor exceptions."""
