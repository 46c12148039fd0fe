"""Term matching against deployment-specific allow-lists.

The content analyzer only asks "does this text mention a known term?".
Which terms are known (Mumbai neighborhoods, recognized issue
categories) is configuration, so a regional deployment can ship its own
lists as YAML without code changes.
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import AllowListConfigError

logger = structlog.get_logger(__name__)


# Non-exhaustive; the deployed application's list
DEFAULT_LOCATIONS: tuple[str, ...] = (
    "Bandra",
    "Andheri",
    "Dadar",
    "Colaba",
    "Powai",
    "Thane",
    "Navi Mumbai",
    "Borivali",
    "Malad",
    "Kandivali",
    "Vile Parle",
    "Santacruz",
    "Worli",
    "Parel",
    "Fort",
    "Marine Drive",
    "Juhu",
    "Versova",
    "Kala Ghoda",
    "Mahim",
)

DEFAULT_ISSUES: tuple[str, ...] = (
    "Overcharging",
    "Rash Driving",
    "Refusal to Use Meter",
    "Refusal to Meter",
    "Harassment",
    "Vehicle Condition",
    "Cleanliness",
    "Unsafe Behavior",
    "Refusal of Service",
    "Aggressive Behavior",
)


@runtime_checkable
class TermMatcher(Protocol):
    """Protocol for recognizing known terms in free text."""

    def matches(self, text: str) -> bool:
        """Return True if ``text`` mentions a recognized term."""
        ...


class AllowListMatcher:
    """Case-insensitive substring match against a fixed set of terms."""

    def __init__(self, terms: Iterable[str]):
        self._terms = tuple(t.lower() for t in terms if t)

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def matches(self, text: str) -> bool:
        haystack = (text or "").lower()
        return any(term in haystack for term in self._terms)

    def __repr__(self) -> str:
        return f"AllowListMatcher({len(self._terms)} terms)"


class AllowLists(BaseModel):
    """Location and issue allow-lists for one deployment."""

    model_config = ConfigDict(frozen=True)

    locations: tuple[str, ...] = Field(default=DEFAULT_LOCATIONS)
    issues: tuple[str, ...] = Field(default=DEFAULT_ISSUES)

    def location_matcher(self) -> AllowListMatcher:
        return AllowListMatcher(self.locations)

    def issue_matcher(self) -> AllowListMatcher:
        return AllowListMatcher(self.issues)


def load_allow_lists(path: Path | str) -> AllowLists:
    """Load allow-lists from a YAML file.

    Expected shape::

        locations: [Bandra, Andheri, ...]
        issues: [Overcharging, ...]

    Keys left out fall back to the built-in defaults.

    Raises:
        AllowListConfigError: If the file is missing, not YAML, or malformed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise AllowListConfigError(path, str(e)) from e
    except yaml.YAMLError as e:
        raise AllowListConfigError(path, f"not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise AllowListConfigError(path, "top level must be a mapping")

    try:
        lists = AllowLists(**{k: v for k, v in data.items() if k in ("locations", "issues")})
    except ValidationError as e:
        raise AllowListConfigError(path, str(e)) from e

    logger.info(
        "allow_lists_loaded",
        path=str(path),
        locations=len(lists.locations),
        issues=len(lists.issues),
    )
    return lists
