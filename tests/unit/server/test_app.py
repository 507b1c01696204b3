"""Unit tests for the Starlette application wiring."""

from unittest.mock import patch

from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Mount, Route
from starlette.testclient import TestClient

from netcounter.config.settings import Settings
from netcounter.server.app import RegistryProvider, create_app, run_server


def _settings(**server) -> Settings:
    settings = Settings(_env_file=None)
    for key, value in server.items():
        setattr(settings.server, key, value)
    return settings


class TestRegistryProvider:

    def test_connection_scope_gives_fresh_registries(self):
        provider = RegistryProvider("connection", initial_value=3)
        first, second = provider.for_session(), provider.for_session()

        assert first is not second
        first.dispatch_call("increment")
        assert first.counter.value == 4
        assert second.counter.value == 3

    def test_shared_scope_reuses_one_registry(self):
        provider = RegistryProvider("shared", initial_value=0)
        assert provider.for_session() is provider.for_session()


class TestCreateApp:

    def test_routes_follow_settings(self):
        app = create_app(_settings(sse_path="/events", messages_path="/rpc/"))

        assert isinstance(app, Starlette)
        routes = {type(route): route.path for route in app.routes}
        assert routes[Route] == "/events"
        assert routes[Mount] == "/rpc"

    def test_cors_middleware_installed(self):
        app = create_app(_settings(cors_allow_origins=["https://example.com"]))

        cors = [m for m in app.user_middleware if m.cls is CORSMiddleware]
        assert len(cors) == 1
        assert cors[0].kwargs["allow_origins"] == ["https://example.com"]

    def test_counter_scope_and_initial_value_applied(self):
        settings = _settings(counter_scope="shared")
        settings.counter.initial_value = 9

        app = create_app(settings)

        provider = app.state.registry_provider
        assert provider.scope == "shared"
        assert provider.for_session().counter.value == 9

    def test_preflight_is_answered(self):
        app = create_app(_settings())

        with TestClient(app) as client:
            response = client.options(
                "/messages/",
                headers={
                    "Origin": "https://example.com",
                    "Access-Control-Request-Method": "POST",
                },
            )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", "https://example.com")

    def test_post_without_session_is_rejected(self):
        app = create_app(_settings())

        with TestClient(app) as client:
            response = client.post("/messages/", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})

        assert response.status_code == 400


class TestRunServer:

    def test_runs_uvicorn_with_configured_address(self):
        settings = _settings(host="0.0.0.0", port=9000)
        settings.log_level = "DEBUG"

        with patch("netcounter.server.app.uvicorn") as mock_uvicorn:
            run_server(settings)

        config_kwargs = mock_uvicorn.Config.call_args.kwargs
        assert config_kwargs["host"] == "0.0.0.0"
        assert config_kwargs["port"] == 9000
        assert config_kwargs["log_level"] == "debug"
        mock_uvicorn.Server.return_value.run.assert_called_once()
