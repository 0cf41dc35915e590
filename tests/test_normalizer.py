import pytest

from btxrpc.core.normalizer import FIELD_NAME_MAP, _check_table, normalize_attrs, normalize_key


@pytest.mark.parametrize("raw, canonical", sorted(FIELD_NAME_MAP.items()))
def test_known_keys_are_renamed(raw, canonical):
    assert normalize_attrs({raw: 1}) == {canonical: 1}


def test_table_covers_bitcoin_core_quirks():
    assert FIELD_NAME_MAP["bip125-replaceable"] == "bip125_replaceable"
    assert FIELD_NAME_MAP["fee reason"] == "fee_reason"
    assert FIELD_NAME_MAP["scriptPubKey"] == "script_pub_key"
    assert FIELD_NAME_MAP["reqSigs"] == "req_sigs"
    assert FIELD_NAME_MAP["nTx"] == "n_tx"
    assert len(FIELD_NAME_MAP) == 14


def test_unknown_keys_and_values_pass_through():
    attrs = {"txid": "abc", "confirmations": 3, "scriptPubKey": {"reqSigs": 1}}

    normalized = normalize_attrs(attrs)

    assert normalized == {"txid": "abc", "confirmations": 3, "script_pub_key": {"reqSigs": 1}}
    # input is left alone
    assert "scriptPubKey" in attrs


def test_normalization_is_idempotent():
    attrs = {key: index for index, key in enumerate(FIELD_NAME_MAP)}
    attrs.update({"already_snake": True, "hex": "00"})

    once = normalize_attrs(attrs)

    assert normalize_attrs(once) == once


def test_non_string_keys_are_kept():
    assert normalize_key(3) == 3
    assert normalize_key("versionHex") == "version_hex"
    assert normalize_key("version_hex") == "version_hex"


def test_table_check_rejects_non_idempotent_tables():
    with pytest.raises(RuntimeError, match="idempotent"):
        _check_table({"a": "b", "b": "c"})


def test_table_check_rejects_colliding_targets():
    with pytest.raises(RuntimeError, match="colliding"):
        _check_table({"fooBar": "foo_bar", "foo-bar": "foo_bar"})
