from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

import deal

from .constants import (
    BUILD_EXTENDED_COLORS,
    BUILD_PALETTE_NAMES,
    FORMAT_THRESHOLD,
    NEW_PALNAMES,
    OLDMAXLEVELS,
    SUBVERSION_512_NAMES,
    SUBVERSION_NEWER_SPRITES,
)
from .types import ColorLayout, SectionLayout

T = TypeVar('T')


@dataclass(frozen=True)
class Rule(Generic[T]):
    min_version: int
    min_build: int
    min_subversion: int
    outcome: T


def matches(rule: Rule, version: int, build: int, sub_version: int) -> bool:
    return (version, build) >= (rule.min_version, rule.min_build) and (
        sub_version >= rule.min_subversion
    )


@deal.chain(
    deal.pre(lambda _: len(_.rules) > 0),
    deal.raises(LookupError),
    deal.has(),
)
def resolve(rules: Sequence[Rule[T]], version: int, build: int, sub_version: int) -> T:
    """Return outcome of the first rule matching given format numbers."""
    for rule in rules:
        if matches(rule, version, build, sub_version):
            return rule.outcome
    raise LookupError(f'no rule for version={version:#x} build={build} sub_version={sub_version}')


# header and color cycles exist strictly above the threshold version
SECTION_HEADER_RULES: Sequence[Rule[bool]] = (
    Rule(FORMAT_THRESHOLD + 1, 0, 0, True),
    Rule(0, 0, 0, False),
)

COLOR_RULES: Sequence[Rule[ColorLayout]] = (
    Rule(FORMAT_THRESHOLD, BUILD_EXTENDED_COLORS, SUBVERSION_NEWER_SPRITES, ColorLayout.NEWEST),
    Rule(FORMAT_THRESHOLD, BUILD_EXTENDED_COLORS, 0, ColorLayout.EXTENDED),
    Rule(0, 0, 0, ColorLayout.LEGACY),
)

# None resets the name table instead of reading it
NAME_RULES: Sequence[Rule[Optional[int]]] = (
    Rule(FORMAT_THRESHOLD, BUILD_PALETTE_NAMES, SUBVERSION_512_NAMES, NEW_PALNAMES),
    Rule(FORMAT_THRESHOLD, BUILD_PALETTE_NAMES, 0, OLDMAXLEVELS),
    Rule(0, 0, 0, None),
)


def has_section_header(version: int, build: int) -> bool:
    return resolve(SECTION_HEADER_RULES, version, build, 0)


def resolve_layout(version: int, build: int, sub_version: int = 0) -> SectionLayout:
    header = has_section_header(version, build)
    return SectionLayout(
        header=header,
        sub_version=sub_version,
        colors=resolve(COLOR_RULES, version, build, sub_version),
        names=resolve(NAME_RULES, version, build, sub_version),
        cycles=header,
    )
