"""
test_counter_feature.py
-----------------------
Counting and the upcoming-unlocks list.
"""

from idlefloor.features.counter_feature import CounterFeature
from idlefloor.features.feature_manager import create_features


def test_first_visit_posts_hint_and_starts_counting(state, messages, tick):
    counter = CounterFeature()

    tick(counter, state)

    assert state.count == 1
    assert len(messages) == 1
    assert messages.current().duration == 10.0


def test_increment_key_counts(state, messages, tick):
    counter = CounterFeature()
    state.count = 1

    for _ in range(4):
        tick(counter, state, "c")
    tick(counter, state, "x")

    assert state.count == 5
    assert len(messages) == 0


def test_unlocks_list_only_visible_locked_features(state):
    features = create_features()
    state.count = 5

    unlocks = CounterFeature.get_unlocks(state, features)

    assert "10 unlocks Fight" in unlocks
    assert "100 and more than 1 gold unlocks Inventory" in unlocks
    assert not any("Shop" in line for line in unlocks)


def test_unlocked_features_leave_the_list(state):
    features = create_features()
    state.count = 60

    unlocks = CounterFeature.get_unlocks(state, features)

    assert not any("Fight" in line for line in unlocks)
    assert "200 unlocks Shop" in unlocks


def test_render_shows_count(state):
    counter = CounterFeature()
    state.count = 7
    assert counter.render(state, [])[0] == "Count: 7"
