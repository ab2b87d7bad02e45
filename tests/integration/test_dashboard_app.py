"""End-to-end tests of the Streamlit page with a faked backend."""

from pathlib import Path

import httpx
from streamlit.testing.v1 import AppTest

from config.config import CONNECTION_MESSAGE, FAILURE_GREETING, LOADING_LABEL, PANEL_TITLE
from dashboard.components.data_panel import PANEL_SESSION_KEY, REFRESH_BUTTON_KEY
from data_panel import DataPanel

APP_PATH = Path(__file__).resolve().parents[2] / "dashboard" / "app.py"


def _app_with_panel(panel: DataPanel) -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=15)
    at.session_state[PANEL_SESSION_KEY] = panel
    return at


def _markdown_values(at: AppTest) -> list[str]:
    return [m.value for m in at.markdown]


def test_startup_fetch_shows_greeting(panel_config, make_transport, recorded_requests):
    """Test the first page run fetches once and shows the greeting."""
    transport = make_transport(lambda request: httpx.Response(200, json={"greeting": "Hello from backend!"}))
    at = _app_with_panel(DataPanel(panel_config, transport=transport))

    at.run()

    assert not at.exception
    assert at.title[0].value == PANEL_TITLE
    rows = _markdown_values(at)
    assert f"**API URL:** {panel_config.api_url}" in rows
    assert "**Message:** Hello from backend!" in rows
    assert not any(row.startswith("**Backend Version:**") for row in rows)
    assert not any(row.startswith("**Last updated:**") for row in rows)
    assert len(recorded_requests) == 1

    button = at.button(key=REFRESH_BUTTON_KEY)
    assert button.label == "Refresh Data"
    assert not button.disabled


def test_full_payload_shows_all_rows(panel_config, make_transport, sample_payload):
    """Test a full payload shows every row and the debug dump."""
    transport = make_transport(lambda request: httpx.Response(200, json=sample_payload))
    at = _app_with_panel(DataPanel(panel_config, transport=transport))

    at.run()

    rows = _markdown_values(at)
    assert "**Backend Version:** 1.0.0" in rows
    timestamp_rows = [row for row in rows if row.startswith("**Last updated:**")]
    assert len(timestamp_rows) == 1
    assert "2023-01-01T00:00:00Z" not in timestamp_rows[0]
    assert '"region": "eu-north-1"' in at.code[0].value


def test_connection_failure_shows_error_banner(panel_config, make_transport):
    """Test a connection failure shows the error banner and sentinel greeting."""
    def handler(request):
        raise httpx.ConnectError("Network error", request=request)

    at = _app_with_panel(DataPanel(panel_config, transport=make_transport(handler)))

    at.run()

    assert not at.exception
    errors = [e.value for e in at.error]
    assert f"**Error:** {CONNECTION_MESSAGE}" in errors
    assert f"**Message:** {FAILURE_GREETING}" in _markdown_values(at)


def test_refresh_button_triggers_new_fetch(panel_config, make_transport, recorded_requests):
    """Test clicking refresh fetches and shows new data."""
    responses = iter([{"greeting": "Initial data"}, {"greeting": "Refreshed data"}])
    transport = make_transport(lambda request: httpx.Response(200, json=next(responses)))
    at = _app_with_panel(DataPanel(panel_config, transport=transport))

    at.run()
    assert "**Message:** Initial data" in _markdown_values(at)

    at.button(key=REFRESH_BUTTON_KEY).click().run()

    assert "**Message:** Refreshed data" in _markdown_values(at)
    assert len(recorded_requests) == 2


def test_rerun_without_click_does_not_refetch(panel_config, make_transport, recorded_requests):
    """Test a plain rerun reuses the fetched data."""
    transport = make_transport(lambda request: httpx.Response(200, json={"greeting": "once"}))
    at = _app_with_panel(DataPanel(panel_config, transport=transport))

    at.run()
    at.run()

    assert len(recorded_requests) == 1
    assert "**Message:** once" in _markdown_values(at)


def _draw_in_flight_panel():
    from dashboard.components.data_panel import _Slots, build_panel_view
    from data_panel import PanelState

    _Slots().draw(build_panel_view(PanelState(loading=True), "http://backend.test/api/message"))


def test_in_flight_view_renders_indicator_and_disabled_button():
    """Test the in-flight redraw puts the loading indicator and a disabled button on the page."""
    at = AppTest.from_function(_draw_in_flight_panel, default_timeout=15)

    at.run()

    assert not at.exception
    assert [i.value for i in at.info] == [f"⏳ {LOADING_LABEL}"]
    button = at.button(key=f"{REFRESH_BUTTON_KEY}_loading")
    assert button.label == LOADING_LABEL
    assert button.disabled
    assert not at.error
