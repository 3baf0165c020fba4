"""
Tests for the gallery review state transitions.
"""

from slidestudio.review import (
    build_review_state,
    current_variant,
    is_picked,
    next_variation,
    prev_variation,
    sorted_slide_numbers,
    toggle_pick,
)

FILES = ["slide-2-c-z.png", "slide-1-a-x.png", "slide-1-b-y.png", "slide-1-d-w.png", "cover.png"]
BASE = "/generated-slides/2026-01-06"


def test_build_groups_and_selects_first_variant():
    state = build_review_state(FILES, BASE)

    assert sorted_slide_numbers(state) == [1, 2]
    assert [v.filename for v in state.slide_groups[1]] == ["slide-1-a-x.png", "slide-1-b-y.png", "slide-1-d-w.png"]
    assert dict(state.selected_variations) == {2: 0, 1: 0}
    assert current_variant(state, 1).url == f"{BASE}/slide-1-a-x.png"
    assert state.ceo_picks == frozenset()


def test_next_and_prev_wrap_around():
    state = build_review_state(FILES, BASE)

    state = next_variation(state, 1)
    assert current_variant(state, 1).filename == "slide-1-b-y.png"
    state = next_variation(next_variation(state, 1), 1)
    assert current_variant(state, 1).filename == "slide-1-a-x.png"

    state = prev_variation(state, 1)
    assert current_variant(state, 1).filename == "slide-1-d-w.png"


def test_single_variant_group_does_not_move():
    state = build_review_state(FILES, BASE)
    assert next_variation(state, 2) is state
    assert prev_variation(state, 2) is state
    assert next_variation(state, 9) is state


def test_transitions_do_not_mutate_input():
    original = build_review_state(FILES, BASE)

    moved = next_variation(original, 1)
    picked = toggle_pick(moved, "slide-1-b-y.png")

    assert original.selected_variations[1] == 0
    assert moved.ceo_picks == frozenset()
    assert picked.selected_variations[1] == 1


def test_toggle_pick_on_and_off():
    state = build_review_state(FILES, BASE)

    state = toggle_pick(state, "slide-2-c-z.png")
    assert is_picked(state, "slide-2-c-z.png")

    state = toggle_pick(state, "slide-2-c-z.png")
    assert not is_picked(state, "slide-2-c-z.png")


def test_pick_is_exclusive_per_slide_number():
    state = build_review_state(FILES, BASE)

    state = toggle_pick(state, "slide-1-a-x.png")
    state = toggle_pick(state, "slide-2-c-z.png")
    state = toggle_pick(state, "slide-1-b-y.png")

    assert state.ceo_picks == frozenset({"slide-1-b-y.png", "slide-2-c-z.png"})


def test_ungrouped_file_toggles_independently():
    state = toggle_pick(build_review_state(FILES, BASE), "slide-1-a-x.png")
    state = toggle_pick(state, "cover.png")

    assert state.ceo_picks == frozenset({"slide-1-a-x.png", "cover.png"})
