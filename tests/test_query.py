import pytest

from chproto.query import (
    Profile,
    Progress,
    Query,
    QueryEvents,
    QuerySettingsField,
    QuerySettingsFlag,
)


def test_text_and_default_query_id():
    query = Query("SELECT 1")
    assert query.text == "SELECT 1"
    assert query.query_id == Query.default_query_id


def test_explicit_query_id():
    query = Query("SELECT 1", "abc-1")
    assert query.query_id == "abc-1"


def test_flags_are_stored_on_query_settings():
    important = Query("SELECT 1").set_setting(
        "a", QuerySettingsField("1", QuerySettingsFlag.IMPORTANT)
    )
    assert important.query_settings["a"].flags == 0x01

    combined = Query("SELECT 1").set_setting(
        "b",
        QuerySettingsField("1", QuerySettingsFlag.IMPORTANT | QuerySettingsFlag.CUSTOM),
    )
    assert combined.query_settings["b"].flags == 0x03


def test_settings_field_default_flags():
    field = QuerySettingsField("1")
    assert field.value == "1"
    assert field.flags == 0


def test_set_setting_overwrites_and_chains():
    query = Query("SELECT 1")
    result = query.set_setting("join_use_nulls", QuerySettingsField("1"))
    assert result is query
    query.set_setting("join_use_nulls", QuerySettingsField("0"))
    assert query.query_settings["join_use_nulls"].value == "0"
    query.set_setting(
        "wrong_setting_name", QuerySettingsField("0", QuerySettingsFlag.IMPORTANT)
    )
    assert query.query_settings["wrong_setting_name"].flags == QuerySettingsFlag.IMPORTANT
    assert len(query.query_settings) == 2


def test_set_query_settings_replaces_all():
    query = Query("SELECT 1").set_setting("a", QuerySettingsField("1"))
    query.set_query_settings({"b": QuerySettingsField("2")})
    assert list(query.query_settings) == ["b"]


def test_tracing_context():
    query = Query("SELECT 1")
    assert query.tracing_context is None
    context = object()
    assert query.set_tracing_context(context) is query
    assert query.tracing_context is context


def test_data_callback_receives_block():
    received = []
    query = Query("SELECT 1").on_data(received.append)
    query.handle_data("block")
    assert received == ["block"]


def test_data_without_callback_is_ignored():
    query = Query("SELECT 1")
    query.handle_data("block")
    assert query.handle_data_cancelable("block") is True


def test_cancelable_callback_result_is_returned():
    query = Query("SELECT 1").on_data_cancelable(lambda block: False)
    assert query.handle_data_cancelable("block") is False


def test_exception_callback():
    errors = []
    query = Query("SELECT 1").on_exception(errors.append)
    err = RuntimeError("boom")
    query.handle_server_exception(err)
    assert errors == [err]


def test_progress_callback():
    seen = []
    query = Query("INSERT").on_progress(seen.append)
    progress = Progress(rows=2, bytes=10, total_rows=2, written_rows=2, written_bytes=10)
    query.handle_progress(progress)
    assert seen == [progress]


def test_server_log_and_profile_events_callbacks():
    logs, events = [], []
    query = (
        Query("SELECT 1")
        .on_server_log(lambda b: logs.append(b) or True)
        .on_profile_events(lambda b: events.append(b) or True)
    )
    query.handle_server_log("log")
    query.handle_profile_events("ev")
    assert logs == ["log"]
    assert events == ["ev"]


def test_profile_and_finish_do_not_touch_callbacks():
    seen = []
    query = Query("SELECT 1").on_data(seen.append).on_progress(seen.append)
    query.handle_profile(Profile(rows=1))
    query.handle_finish()
    assert seen == []


def test_defaults_of_profile_and_progress():
    assert Profile() == Profile(0, 0, 0, 0, False, False)
    assert Progress() == Progress(0, 0, 0, 0, 0)


def test_query_events_is_abstract():
    with pytest.raises(TypeError):
        QueryEvents()