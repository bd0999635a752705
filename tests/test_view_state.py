"""Tests for the view state transitions."""

import pytest
from pydantic import ValidationError

from weather_widget.core import view_state as vs
from weather_widget.models.weather import ForecastTab, Location


def test_initial_state():
    state = vs.ViewState()
    assert state.status == vs.Status.IDLE
    assert state.current is None
    assert state.forecast == []
    assert state.active_tab == ForecastTab.WEEKLY
    assert not state.loading


def test_snapshots_are_immutable():
    state = vs.ViewState()
    with pytest.raises(ValidationError):
        state.loading = True


def test_begin_weather_keeps_displayed_data(report):
    loaded = vs.apply_weather(vs.ViewState(), report("Paris, France"))
    loaded = vs.fail_weather(loaded, "old error")

    loading = vs.begin_weather(loaded)

    assert loading.loading
    assert loading.status == vs.Status.LOADING
    assert loading.error is None
    assert loading.current == loaded.current
    assert loading.forecast == loaded.forecast


def test_apply_weather_replaces_everything(report):
    first = vs.apply_weather(vs.ViewState(), report("Paris, France"))
    failed = vs.fail_weather(vs.begin_weather(first), "nope")

    second = vs.apply_weather(failed, report("Rome, Italy", temperature=25.0))

    assert second.error is None
    assert not second.loading
    assert second.status == vs.Status.SUCCESS
    assert second.current.location == "Rome, Italy"
    assert second.current.temperature == 25.0
    # The earlier snapshot is untouched
    assert first.current.location == "Paris, France"


def test_fail_weather_leaves_weather_fields(report):
    loaded = vs.apply_weather(vs.ViewState(), report("Paris, France"))

    failed = vs.fail_weather(vs.begin_weather(loaded), "Failed")

    assert failed.error == "Failed"
    assert not failed.loading
    assert failed.status == vs.Status.ERROR
    assert failed.current == loaded.current
    assert failed.forecast == loaded.forecast
    assert failed.hourly == loaded.hourly


def test_suggestion_panel_opens_only_with_results():
    state = vs.begin_suggestions(vs.ViewState())
    assert state.fetching_suggestions

    empty = vs.apply_suggestions(state, [])
    assert not empty.show_suggestions
    assert not empty.fetching_suggestions

    found = vs.apply_suggestions(state, [Location(name="Paris", country="France")])
    assert found.show_suggestions
    assert found.suggestions[0].full_name == "Paris, France"

    assert not vs.close_suggestions(found).show_suggestions
    assert vs.close_suggestions(found).suggestions == found.suggestions


def test_clear_suggestions_empties_list():
    found = vs.apply_suggestions(vs.ViewState(), [Location(name="Paris", country="France")])

    cleared = vs.clear_suggestions(found)

    assert cleared.suggestions == []
    assert not cleared.show_suggestions


def test_reveal_and_tab():
    state = vs.reveal(vs.ViewState())
    assert state.revealed
    assert vs.select_tab(state, "hourly").active_tab == ForecastTab.HOURLY
