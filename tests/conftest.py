import copy
import json

import httpx
import pytest

from btxrpc.client.client import JSONRPCTransport
from btxrpc.client.rpc_client import RPCClient

BECH32_ADDRESS = "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
P2PKH_ADDRESS = "1QHK8pRYKK1J2mDtFmHVn2nqwC6QbJp8z9"
P2SH_ADDRESS = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"
TXID = "1234567890abcdef" * 4
BLOCKHASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
RAW_TX = "0200000001" + "ab" * 40 + "00000000"
WIF_UNCOMPRESSED = "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
WIF_COMPRESSED = "KwdMAjGmerYanjeui5SHS7JkmpZvVipYvB2LJGU1ZxJwYvP98617"

NODE_URL = "http://node.test:8332"


@pytest.fixture
def anyio_backend():
    return "asyncio"


# ──────────────────────────────────────────────────────────────
# Fake node
# ──────────────────────────────────────────────────────────────
class FakeNode:
    """
    Minimal Bitcoin Core stand-in behind ``httpx.MockTransport``.

    ``results`` maps method name → result payload; ``errors`` maps method
    name → (http status, code, message). Every request is recorded.
    """

    def __init__(self, results=None, errors=None):
        self.results = dict(results or {})
        self.errors = dict(errors or {})
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.calls.append({"path": request.url.path, "payload": payload, "headers": request.headers})
        method = payload["method"]

        if method in self.errors:
            status, code, message = self.errors[method]
            body = {"result": None, "error": {"code": code, "message": message}, "id": payload["id"]}
            return httpx.Response(status, json=body)

        body = {"result": self.results.get(method), "error": None, "id": payload["id"]}
        return httpx.Response(200, json=body)

    @property
    def last(self) -> dict:
        return self.calls[-1]


def make_transport(handler) -> JSONRPCTransport:
    client = httpx.AsyncClient(base_url=NODE_URL, transport=httpx.MockTransport(handler))
    return JSONRPCTransport(NODE_URL, client=client)


@pytest.fixture
def node():
    return FakeNode()


@pytest.fixture
def client(node):
    return RPCClient({"base_url": NODE_URL, "log_level": "WARNING"}, transport=make_transport(node))


# ──────────────────────────────────────────────────────────────
# Payloads
# ──────────────────────────────────────────────────────────────
_TRANSACTION = {
    "amount": 0.05,
    "fee": -0.00001,
    "confirmations": 6,
    "generated": False,
    "trusted": True,
    "blockhash": BLOCKHASH,
    "blockheight": 750_123,
    "blockindex": 2,
    "blocktime": 1_698_765_432,
    "txid": TXID,
    "time": 1_698_765_400,
    "timereceived": 1_698_765_405,
    "comment": "Payment for services",
    "bip125-replaceable": "no",
    "details": [
        {
            "involvesWatchonly": False,
            "address": BECH32_ADDRESS,
            "category": "receive",
            "amount": 0.05,
            "label": "Customer Payment",
            "vout": 0,
            "fee": None,
            "abandoned": False,
        }
    ],
    "hex": RAW_TX,
}

_DECODED_TX = {
    "txid": TXID,
    "hash": TXID,
    "version": 2,
    "size": 225,
    "vsize": 166,
    "weight": 661,
    "locktime": 0,
    "vin": [
        {
            "txid": "0123456789abcdef" * 4,
            "vout": 0,
            "scriptSig": {"asm": "", "hex": ""},
            "txinwitness": ["3044", "02ab"],
            "sequence": 4_294_967_295,
        }
    ],
    "vout": [
        {
            "value": 0.05,
            "n": 0,
            "scriptPubKey": {
                "asm": "0 751e76e8199196d454941c45d1b3a323f1433bd6",
                "hex": "0014751e76e8199196d454941c45d1b3a323f1433bd6",
                "address": BECH32_ADDRESS,
                "type": "witness_v0_keyhash",
            },
        },
        {
            "value": 0.001,
            "n": 1,
            "scriptPubKey": {
                "asm": "OP_DUP OP_HASH160 fedcba9876543210fedcba9876543210fedcba98 OP_EQUALVERIFY OP_CHECKSIG",
                "hex": "76a914fedcba9876543210fedcba9876543210fedcba9888ac",
                "reqSigs": 1,
                "addresses": [P2PKH_ADDRESS],
                "type": "pubkeyhash",
            },
        },
    ],
}

_BLOCK = {
    "hash": BLOCKHASH,
    "confirmations": 10,
    "size": 285,
    "strippedsize": 285,
    "weight": 1140,
    "height": 0,
    "version": 1,
    "versionHex": "00000001",
    "merkleroot": "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b",
    "tx": ["4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"],
    "time": 1_231_006_505,
    "mediantime": 1_231_006_505,
    "nonce": 2_083_236_893,
    "bits": "1d00ffff",
    "difficulty": 1,
    "chainwork": "0000000000000000000000000000000000000000000000000000000100010001",
    "nTx": 1,
    "nextblockhash": "00000000839a8e6886ab5951d76f411475428afc90947ee320161bbf18eb6048",
}


@pytest.fixture
def transaction_payload():
    return copy.deepcopy(_TRANSACTION)


@pytest.fixture
def decoded_tx_payload():
    return copy.deepcopy(_DECODED_TX)


@pytest.fixture
def block_payload():
    return copy.deepcopy(_BLOCK)
