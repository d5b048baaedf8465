import base64

import pytest

import steamtotp
from steamtotp.confirmation import TAGS, generate_confirmation_key

HEX = "3132333435363738393031323334353637383930"
B64 = "MTIzNDU2Nzg5MDEyMzQ1Njc4OTA="
NOW = 1234567890


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("", "SgxoNFNBq9Giz94Ub9+akhYhpX0="),
        ("conf", "FE/z8GCX3Zgrr6Pwdqx2FF2/M4U="),
        ("allow", "LRhd5JE11D7wbol0Fgf1/sZXq5Q="),
    ],
)
def test_known_keys(tag: str, expected: str) -> None:
    assert generate_confirmation_key(HEX, NOW, tag) == expected
    assert steamtotp.get_confirmation_key(B64, NOW, tag) == expected


def test_missing_tag_appends_nothing() -> None:
    assert generate_confirmation_key(HEX, NOW, None) == generate_confirmation_key(HEX, NOW)
    assert generate_confirmation_key(HEX, NOW) == "SgxoNFNBq9Giz94Ub9+akhYhpX0="


def test_keys_differ_per_tag_and_time() -> None:
    keys = {generate_confirmation_key(HEX, NOW, tag) for tag in TAGS}
    keys.add(generate_confirmation_key(HEX, NOW))
    assert len(keys) == len(TAGS) + 1
    assert generate_confirmation_key(HEX, NOW + 1, "conf") != generate_confirmation_key(HEX, NOW, "conf")


def test_key_is_base64_sha1() -> None:
    key = generate_confirmation_key("not a secret!", NOW, "details")
    assert len(base64.b64decode(key)) == 20


def test_zero_tag_is_signed() -> None:
    assert generate_confirmation_key(HEX, NOW, "0") != generate_confirmation_key(HEX, NOW)


def test_public_alias() -> None:
    assert steamtotp.get_confirmation_key is generate_confirmation_key
