import uvicorn

from todo_api import __main__ as entrypoint


def test_main_runs_uvicorn_on_configured_address(monkeypatch):
    calls = []
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entrypoint.main()

    assert calls == [("todo_api.main:app", {"host": "127.0.0.1", "port": 8123, "log_level": "info"})]
