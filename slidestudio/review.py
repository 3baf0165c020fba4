"""
Review view state for the gallery page.

The state is immutable: every transition returns a new ``ReviewState``.
A CEO pick is exclusive per slide number, so picking one variant replaces
any earlier pick among that slide's variants.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from slidestudio.slide_store import group_slide_files


@dataclass(frozen=True)
class SlideVariant:
    filename: str
    url: str
    number: int


@dataclass(frozen=True)
class ReviewState:
    slide_groups: Mapping[int, Tuple[SlideVariant, ...]] = field(default_factory=lambda: MappingProxyType({}))
    selected_variations: Mapping[int, int] = field(default_factory=lambda: MappingProxyType({}))
    ceo_picks: FrozenSet[str] = frozenset()


def _freeze(mapping: Dict) -> Mapping:
    return MappingProxyType(dict(mapping))


def build_review_state(files: List[str], base_path: str) -> ReviewState:
    """Group listed files into variants and select the first of each group."""
    groups = {
        number: tuple(SlideVariant(filename=name, url=f"{base_path}/{name}", number=number) for name in names)
        for number, names in group_slide_files(files).items()
    }
    return ReviewState(
        slide_groups=_freeze(groups),
        selected_variations=_freeze({number: 0 for number in groups}),
    )


def sorted_slide_numbers(state: ReviewState) -> List[int]:
    return sorted(state.slide_groups)


def current_variant(state: ReviewState, slide_number: int) -> Optional[SlideVariant]:
    group = state.slide_groups.get(slide_number, ())
    index = state.selected_variations.get(slide_number, 0)
    if 0 <= index < len(group):
        return group[index]
    return None


def _step_variation(state: ReviewState, slide_number: int, step: int) -> ReviewState:
    group = state.slide_groups.get(slide_number, ())
    if len(group) <= 1:
        return state

    index = (state.selected_variations.get(slide_number, 0) + step) % len(group)
    selections = dict(state.selected_variations)
    selections[slide_number] = index
    return replace(state, selected_variations=_freeze(selections))


def next_variation(state: ReviewState, slide_number: int) -> ReviewState:
    return _step_variation(state, slide_number, 1)


def prev_variation(state: ReviewState, slide_number: int) -> ReviewState:
    return _step_variation(state, slide_number, -1)


def _slide_number_of(state: ReviewState, filename: str) -> Optional[int]:
    for number, group in state.slide_groups.items():
        if any(variant.filename == filename for variant in group):
            return number
    return None


def toggle_pick(state: ReviewState, filename: str) -> ReviewState:
    """Flip the CEO pick on ``filename``.

    Picking drops any other pick of the same slide number. Files outside
    every group toggle on their own.
    """
    if filename in state.ceo_picks:
        return replace(state, ceo_picks=state.ceo_picks - {filename})

    picks = set(state.ceo_picks)
    number = _slide_number_of(state, filename)
    if number is not None:
        picks -= {variant.filename for variant in state.slide_groups[number]}
    picks.add(filename)
    return replace(state, ceo_picks=frozenset(picks))


def is_picked(state: ReviewState, filename: str) -> bool:
    return filename in state.ceo_picks
