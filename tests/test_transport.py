import httpx
import pytest

from btxrpc.client.client import DEFAULT_HEADERS, JSONRPCTransport, response_from_http
from btxrpc.errors import MethodError, RPCError
from btxrpc.methods.wallets import GetBalance
from btxrpc.schemas import RPCRequest
from conftest import NODE_URL, FakeNode, make_transport


# ──────────────────────────────────────────────────────────────
# Status / body precedence
# ──────────────────────────────────────────────────────────────
def test_success_response():
    response = response_from_http(200, {"result": 7, "error": None, "id": "x"})

    assert response.ok
    assert response.result == 7


@pytest.mark.parametrize("status, reason", [
    (400, "http_bad_request"),
    (401, "http_unauthorized"),
    (403, "http_forbidden"),
    (405, "http_method_not_allowed"),
    (502, "http_bad_gateway"),
    (503, "http_service_unavailable"),
    (504, "http_gateway_timeout"),
])
def test_transport_statuses(status, reason):
    with pytest.raises(RPCError) as exc_info:
        response_from_http(status, "")

    assert exc_info.value.reason == reason
    assert exc_info.value.status == status


def test_not_found_wins_over_error_body():
    body = {"result": None, "error": {"code": -32601, "message": "Method not found"}, "id": "x"}

    with pytest.raises(RPCError) as exc_info:
        response_from_http(404, body)

    assert exc_info.value.reason == "http_not_found"
    assert exc_info.value.metadata["body"] == body


def test_server_error_with_error_body_is_a_method_error():
    body = {"result": None, "error": {"code": -18, "message": "Requested wallet does not exist"}, "id": "x"}

    with pytest.raises(MethodError) as exc_info:
        response_from_http(500, body)

    assert exc_info.value.code == -18
    assert exc_info.value.reason == "wallet_not_found"
    assert exc_info.value.id == "x"


def test_bare_server_error():
    with pytest.raises(RPCError) as exc_info:
        response_from_http(500, "Internal Server Error")

    assert exc_info.value.reason == "http_internal_server_error"


def test_error_object_without_code_is_not_a_method_error():
    with pytest.raises(RPCError) as exc_info:
        response_from_http(500, {"result": None, "error": {"message": "boom"}})

    assert exc_info.value.reason == "http_internal_server_error"


def test_unexpected_status():
    with pytest.raises(RPCError) as exc_info:
        response_from_http(418, "teapot")

    error = exc_info.value
    assert error.reason == "unknown_error"
    assert error.metadata == {"status": 418, "body": "teapot"}
    assert "teapot" in str(error)


def test_ok_status_with_error_object():
    body = {"result": None, "error": {"code": -6, "message": "Insufficient funds"}, "id": "x"}

    with pytest.raises(MethodError) as exc_info:
        response_from_http(200, body)

    assert exc_info.value.reason == "wallet_insufficient_funds"


def test_unknown_method_error_code():
    error = MethodError(-99999, "odd")

    assert error.reason == "unknown_error"
    assert error.to_dict() == {"code": -99999, "message": "odd"}


# ──────────────────────────────────────────────────────────────
# Envelope
# ──────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_envelope_and_wallet_path():
    node = FakeNode(results={"getbalance": 1.25})
    transport = make_transport(node)

    result = await transport.call(GetBalance.build_or_raise(wallet_name="alice", minconf=1))

    assert result == 1.25
    call = node.last
    assert call["path"] == "/wallet/alice"
    assert call["payload"]["jsonrpc"] == "1.0"
    assert call["payload"]["method"] == "getbalance"
    assert call["payload"]["params"] == ["*", 1, True, True]
    assert call["payload"]["id"].startswith("btxrpc-")


@pytest.mark.anyio
async def test_each_call_gets_a_fresh_id():
    node = FakeNode(results={"getblockcount": 1})
    transport = make_transport(node)

    await transport.call(RPCRequest(method="getblockcount"))
    await transport.call(RPCRequest(method="getblockcount"))

    first, second = (call["payload"]["id"] for call in node.calls)
    assert first != second


@pytest.mark.anyio
async def test_id_and_path_overrides():
    node = FakeNode(results={"getbalance": 0})
    transport = make_transport(node)

    await transport.call(GetBalance.build_or_raise(wallet_name="alice"), id="fixed-id", path="/wallet/bob")

    assert node.last["path"] == "/wallet/bob"
    assert node.last["payload"]["id"] == "fixed-id"


@pytest.mark.anyio
async def test_send_returns_response():
    transport = make_transport(FakeNode(results={"getblockcount": 820_000}))

    response = await transport.send(RPCRequest(method="getblockcount", id="abc"))

    assert response.result == 820_000
    assert response.id == "abc"


# ──────────────────────────────────────────────────────────────
# Failures over HTTP
# ──────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_method_error_from_node():
    node = FakeNode(errors={"getwalletinfo": (500, -18, "Requested wallet does not exist")})
    transport = make_transport(node)

    with pytest.raises(MethodError) as exc_info:
        await transport.call(RPCRequest(method="getwalletinfo", path="/wallet/ghost"))

    assert exc_info.value.reason == "wallet_not_found"
    assert exc_info.value.message == "Requested wallet does not exist"


@pytest.mark.anyio
async def test_unauthorized():
    transport = make_transport(lambda request: httpx.Response(401, text=""))

    with pytest.raises(RPCError) as exc_info:
        await transport.call(RPCRequest(method="getblockcount"))

    assert exc_info.value.reason == "http_unauthorized"
    assert "rpcpassword" in str(exc_info.value)


@pytest.mark.anyio
async def test_not_found():
    node = FakeNode(errors={"getfoo": (404, -32601, "Method not found")})
    transport = make_transport(node)

    with pytest.raises(RPCError) as exc_info:
        await transport.call(RPCRequest(method="getfoo"))

    assert exc_info.value.reason == "http_not_found"


@pytest.mark.anyio
async def test_non_json_body():
    transport = make_transport(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(RPCError) as exc_info:
        await transport.call(RPCRequest(method="getblockcount"))

    assert exc_info.value.reason == "http_bad_gateway"
    assert exc_info.value.metadata["body"] == "Bad Gateway"


@pytest.mark.anyio
async def test_network_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(refuse)

    with pytest.raises(RPCError) as exc_info:
        await transport.call(RPCRequest(method="getblockcount"))

    assert exc_info.value.reason == "network_error"
    assert exc_info.value.metadata["method"] == "getblockcount"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


# ──────────────────────────────────────────────────────────────
# Construction
# ──────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_default_client_setup():
    transport = JSONRPCTransport(NODE_URL + "/", username="rpcuser", password="secret", headers={"x-trace": "1"})

    assert transport.url == NODE_URL
    assert transport.client.headers["user-agent"] == DEFAULT_HEADERS["user-agent"]
    assert transport.client.headers["x-trace"] == "1"
    assert isinstance(transport.client.auth, httpx.BasicAuth)

    await transport.close()


@pytest.mark.anyio
async def test_no_auth_without_username():
    async with JSONRPCTransport(NODE_URL) as transport:
        assert transport.client.auth is None
