"""Rickshaw Watch - credibility scoring for citizen misconduct reports.

Scores anonymous auto-rickshaw misconduct reports for credibility and
content plausibility, and classifies them into risk tiers for the
admin review workflow and public vehicle lookup.
"""

__version__ = "0.2.0"

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "models":
        from rickshaw_watch import models
        return models
    if name == "scoring":
        from rickshaw_watch import scoring
        return scoring
    if name == "review":
        from rickshaw_watch import review
        return review
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
