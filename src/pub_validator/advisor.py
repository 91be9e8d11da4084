"""SDK constraint advice for features introduced in a given SDK release."""

from __future__ import annotations

from dataclasses import dataclass

from .parsers.semver import Version, VersionRange


@dataclass(frozen=True)
class SdkAdvice:
    """A tightened SDK constraint to recommend to the package author."""

    first_supported: Version
    allowed: VersionRange
    suggested: VersionRange

    def render(self, message: str) -> str:
        return (
            f"{message}\n"
            "Make sure your SDK constraint excludes old versions:\n"
            "\n"
            "environment:\n"
            f'  sdk: "{self.suggested.as_compatible_with_if_possible()}"'
        )


def is_same_pre_release(version1: Version, version2: Version) -> bool:
    """Whether both versions are pre-releases of the same release."""
    return (
        version1.is_pre_release
        and version2.is_pre_release
        and version1.major == version2.major
        and version1.minor == version2.minor
        and version1.patch == version2.patch
    )


def advise_sdk_constraint(
    declared: VersionRange,
    first_supported: Version,
    running_sdk: Version,
) -> SdkAdvice | None:
    """Return advice when ``declared`` still admits SDKs older than ``first_supported``.

    Returns None when the declared range already excludes every SDK before
    ``first_supported``.
    """
    if declared.intersect(VersionRange.below(first_supported)).is_empty:
        return None

    # Unless the user is on a pre-release SDK of the same release, don't
    # recommend a pre-release floor.
    if first_supported.is_pre_release and not is_same_pre_release(first_supported, running_sdk):
        first_supported = first_supported.next_patch

    allowed = VersionRange(
        min=first_supported,
        include_min=True,
        max=(
            first_supported.next_patch
            if first_supported.is_pre_release
            else first_supported.next_breaking
        ),
    )

    suggested = declared.intersect(allowed)
    if suggested.is_empty:
        suggested = allowed

    return SdkAdvice(first_supported=first_supported, allowed=allowed, suggested=suggested)
