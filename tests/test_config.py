import importlib

from btxrpc.config import default


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("BTXRPC_URL", "http://node.internal:18443")
    monkeypatch.setenv("BTXRPC_USER", "rpcuser")
    monkeypatch.setenv("BTXRPC_TIMEOUT", "5")

    try:
        reloaded = importlib.reload(default)

        assert reloaded.BASE_URL == "http://node.internal:18443"
        assert reloaded.RPC_USER == "rpcuser"
        assert reloaded.TIMEOUT == 5.0
    finally:
        monkeypatch.undo()
        importlib.reload(default)


def test_empty_credentials_are_unset(monkeypatch):
    monkeypatch.setenv("BTXRPC_USER", "")
    monkeypatch.setenv("BTXRPC_PASSWORD", "")

    try:
        reloaded = importlib.reload(default)

        assert reloaded.RPC_USER is None
        assert reloaded.RPC_PASSWORD is None
    finally:
        monkeypatch.undo()
        importlib.reload(default)
