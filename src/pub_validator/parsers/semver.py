"""Version ranges for SDK and dependency constraints, built atop python-semver.

Supported expressions:
- ``any``
- exact versions (e.g., "1.2.3")
- caret ranges ^x.y.z → >=x.y.z,<next breaking version
- tilde ranges ~x.y.z → >=x.y.z,<x.y+1.0
- basic comparator sets split by spaces, e.g., ">=1.0.0 <2.0.0"

An exclusive upper bound on a stable version also excludes that version's
pre-releases: ``<2.0.0`` does not allow ``2.0.0-dev.1``, unless the lower bound
is itself a pre-release of 2.0.0.
"""

from __future__ import annotations

from dataclasses import dataclass

import semver


class Version(semver.Version):
    """A semantic version with pub's successor rules."""

    @property
    def is_pre_release(self) -> bool:
        return self.prerelease is not None

    @property
    def is_first_pre_release(self) -> bool:
        return self.prerelease == "0"

    @property
    def next_patch(self) -> Version:
        """The next patch release; a pre-release's next patch is its release."""
        if self.is_pre_release:
            return self.finalize_version()
        return self.bump_patch()

    @property
    def next_minor(self) -> Version:
        if self.is_pre_release and self.patch == 0:
            return self.finalize_version()
        return self.bump_minor()

    @property
    def next_major(self) -> Version:
        if self.is_pre_release and self.minor == 0 and self.patch == 0:
            return self.finalize_version()
        return self.bump_major()

    @property
    def next_breaking(self) -> Version:
        """The first version not API-compatible with this one.

        Before 1.0.0 a minor bump is breaking.
        """
        if self.major == 0:
            return self.next_minor
        return self.next_major

    @property
    def first_pre_release(self) -> Version:
        return type(self)(self.major, self.minor, self.patch, prerelease="0")


def _same_release(a: Version, b: Version) -> bool:
    return (a.major, a.minor, a.patch) == (b.major, b.minor, b.patch)


def _tighter_min(
    a: Version | None, a_inclusive: bool, b: Version | None, b_inclusive: bool
) -> tuple[Version | None, bool]:
    if a is None:
        return b, b_inclusive
    if b is None:
        return a, a_inclusive
    if a < b:
        return b, b_inclusive
    if b < a:
        return a, a_inclusive
    return a, a_inclusive and b_inclusive


def _tighter_max(
    a: Version | None, a_inclusive: bool, b: Version | None, b_inclusive: bool
) -> tuple[Version | None, bool]:
    if a is None:
        return b, b_inclusive
    if b is None:
        return a, a_inclusive
    if a < b:
        return a, a_inclusive
    if b < a:
        return b, b_inclusive
    return a, a_inclusive and b_inclusive


@dataclass(frozen=True)
class VersionRange:
    """An interval of versions. A ``None`` bound is unbounded."""

    min: Version | None = None
    max: Version | None = None
    include_min: bool = False
    include_max: bool = False

    def __post_init__(self) -> None:
        # Inclusivity is meaningless on an open end; keep equality structural.
        if self.min is None and self.include_min:
            object.__setattr__(self, "include_min", False)
        if self.max is None and self.include_max:
            object.__setattr__(self, "include_max", False)

        max_ = self.max
        if (
            max_ is not None
            and not self.include_max
            and not max_.is_pre_release
            and max_.build is None
            and (
                self.min is None
                or not self.min.is_pre_release
                or not _same_release(self.min, max_)
            )
        ):
            object.__setattr__(self, "max", max_.first_pre_release)

    @classmethod
    def any(cls) -> VersionRange:
        return cls()

    @classmethod
    def exactly(cls, version: Version) -> VersionRange:
        return cls(min=version, max=version, include_min=True, include_max=True)

    @classmethod
    def below(cls, version: Version) -> VersionRange:
        """All versions lower than ``version`` (and its pre-releases, if it is stable)."""
        return cls(max=version)

    @property
    def is_any(self) -> bool:
        return self.min is None and self.max is None

    @property
    def is_empty(self) -> bool:
        if self.min is None or self.max is None:
            return False
        if self.min < self.max:
            return False
        if self.min == self.max:
            return not (self.include_min and self.include_max)
        return True

    def allows(self, version: Version) -> bool:
        if self.min is not None:
            if version < self.min or (version == self.min and not self.include_min):
                return False
        if self.max is not None:
            if version > self.max or (version == self.max and not self.include_max):
                return False
        return True

    def intersect(self, other: VersionRange) -> VersionRange:
        low, include_low = _tighter_min(self.min, self.include_min, other.min, other.include_min)
        high, include_high = _tighter_max(
            self.max, self.include_max, other.max, other.include_max
        )
        return VersionRange(min=low, max=high, include_min=include_low, include_max=include_high)

    def __str__(self) -> str:
        if self.is_empty:
            return "<empty>"
        if self.is_any:
            return "any"
        if self.min is not None and self.min == self.max:
            return str(self.min)
        parts: list[str] = []
        if self.min is not None:
            parts.append((">=" if self.include_min else ">") + str(self.min))
        if self.max is not None:
            if self.include_max:
                parts.append(f"<={self.max}")
            elif self.max.is_first_pre_release:
                # "<x.y.z" already stops before x.y.z-0.
                parts.append(f"<{self.max.finalize_version()}")
            else:
                parts.append(f"<{self.max}")
        return " ".join(parts)

    def as_compatible_with_if_possible(self) -> str:
        """Render as ``^x.y.z`` when the range is exactly a caret range."""
        if (
            self.min is not None
            and self.max is not None
            and self.include_min
            and not self.include_max
            and self.max == self.min.next_breaking.first_pre_release
        ):
            return f"^{self.min}"
        return str(self)


def _parse_version(v: str) -> Version:
    return Version.parse(v)


def _caret(base: Version) -> VersionRange:
    return VersionRange(min=base, max=base.next_breaking, include_min=True)


def parse_constraint(expr: str) -> VersionRange:
    """Parse a constraint expression into a ``VersionRange``.

    Raises ValueError when the expression is malformed.
    """
    expr = expr.strip()
    if not expr:
        raise ValueError("Empty version constraint")

    if expr == "any":
        return VersionRange.any()

    # caret ^x.y.z
    if expr.startswith("^"):
        return _caret(_parse_version(expr[1:]))

    # tilde ~x.y.z
    if expr.startswith("~"):
        base = _parse_version(expr[1:])
        return VersionRange(min=base, max=base.next_minor, include_min=True)

    # composite comparators like ">=1.0.0 <2.0.0" (space separated). Bounds
    # are collected first so the pre-release rule sees both ends.
    low: Version | None = None
    high: Version | None = None
    include_low = include_high = False
    for t in expr.split():
        if t.startswith(">="):
            low, include_low = _tighter_min(low, include_low, _parse_version(t[2:]), True)
        elif t.startswith(">"):
            low, include_low = _tighter_min(low, include_low, _parse_version(t[1:]), False)
        elif t.startswith("<="):
            high, include_high = _tighter_max(high, include_high, _parse_version(t[2:]), True)
        elif t.startswith("<"):
            high, include_high = _tighter_max(high, include_high, _parse_version(t[1:]), False)
        else:
            # "==x", "=x" or a bare exact version
            version = _parse_version(t.lstrip("="))
            low, include_low = _tighter_min(low, include_low, version, True)
            high, include_high = _tighter_max(high, include_high, version, True)
    return VersionRange(min=low, max=high, include_min=include_low, include_max=include_high)
