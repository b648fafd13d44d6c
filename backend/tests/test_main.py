"""Application factory and entry point tests."""

from registration_api import main
from registration_api.config import Settings


def test_create_app_builds_independent_instances():
    first = main.create_app(Settings(_env_file=None))
    second = main.create_app(Settings(_env_file=None))
    assert first is not second


def test_create_app_registers_routes():
    app = main.create_app(Settings(_env_file=None))
    paths = {route.path for route in app.routes}
    assert {"/", "/hello/{name}", "/register", "/health"} <= paths


def test_run_passes_app_to_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(main.uvicorn, "run", fake_run)
    monkeypatch.setattr(
        main, "get_settings", lambda: Settings(_env_file=None, port=5555),
    )
    main.run()
    assert calls["port"] == 5555
    assert calls["host"] == "0.0.0.0"
    assert calls["app"].state.settings.port == 5555
