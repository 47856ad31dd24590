import pytest

from eoshd.crypto import keys as keys_module
from eoshd.crypto.keys import PrivateKey, PublicKey
from eoshd.crypto.signature import (
    decode_signature,
    encode_signature,
    is_canonical,
    parse_der_signature,
    recover_public_key,
    sign_digest,
    verify_signature,
)
from eoshd.exceptions import InvalidPrivateKey, InvalidWIF, ValidationError
from eoshd.utils.encoding import encode_base58_check, sha256


def test_private_key_wif_roundtrip():
    key = PrivateKey(sha256(b"seed"))
    wif = key.wif()
    assert wif.startswith("5")
    assert PrivateKey.from_wif(wif) == key


def test_known_key_pair(dev_wif, dev_address):
    key = PrivateKey.from_wif(dev_wif)
    assert key.wif() == dev_wif
    assert key.public_key().to_string() == dev_address


def test_compressed_wif_accepted():
    key = PrivateKey(sha256(b"compressed"))
    wif = encode_base58_check(b"\x80" + key.secret + b"\x01")
    assert PrivateKey.from_wif(wif) == key


@pytest.mark.parametrize("wif", [
    "",
    "notawif",
    encode_base58_check(b"\xef" + b"\x11" * 32),
    encode_base58_check(b"\x80" + b"\x11" * 32 + b"\x02"),
    encode_base58_check(b"\x80" + b"\x00" * 32),
])
def test_invalid_wif(wif):
    with pytest.raises(InvalidWIF):
        PrivateKey.from_wif(wif)


def test_wif_checksum_tampering(dev_wif):
    tampered = dev_wif[:-1] + ("1" if dev_wif[-1] != "1" else "2")
    with pytest.raises(InvalidWIF):
        PrivateKey.from_wif(tampered)


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_private_key_length_checked_before_curve(monkeypatch, length):
    def fail(*args, **kwargs):
        raise AssertionError("curve library must not be reached")

    monkeypatch.setattr(keys_module, "SecpPrivateKey", fail)
    with pytest.raises(InvalidPrivateKey):
        PrivateKey(b"\x01" * length)


def test_private_key_scalar_range():
    with pytest.raises(InvalidPrivateKey):
        PrivateKey(b"\x00" * 32)
    with pytest.raises(InvalidPrivateKey):
        PrivateKey(b"\xff" * 32)


def test_public_key_string_formats(dev_wif, dev_address):
    pub = PrivateKey.from_wif(dev_wif).public_key()
    assert PublicKey.from_string(dev_address) == pub
    k1 = pub.to_k1_string()
    assert k1.startswith("PUB_K1_")
    assert PublicKey.from_string(k1) == pub


def test_public_key_string_checksum(dev_address):
    broken = dev_address[:-1] + ("W" if dev_address[-1] != "W" else "X")
    with pytest.raises(ValidationError):
        PublicKey.from_string(broken)
    with pytest.raises(ValidationError):
        PublicKey.from_string("XYZ6MRyAjQq8ud7hVNYcfnVPJqcVpscN5So8BhtHuGYqET5GDW5CV")


def test_public_key_tweak_matches_private_addition():
    key = PrivateKey(sha256(b"tweak"))
    tweak = (5).to_bytes(32, "big")
    expected_int = int.from_bytes(key.secret, "big") + 5
    expected = PrivateKey(expected_int.to_bytes(32, "big")).public_key()
    assert key.public_key().add_tweak(tweak) == expected


def test_sign_digest_is_canonical_and_recoverable(dev_wif):
    key = PrivateKey.from_wif(dev_wif)
    for i in range(8):
        digest = sha256(f"message {i}".encode())
        sig = sign_digest(key, digest)
        assert sig.startswith("SIG_K1_")
        assert is_canonical(decode_signature(sig))
        assert recover_public_key(sig, digest) == key.public_key()
        assert verify_signature(sig, digest, key.public_key())


def test_sign_digest_is_deterministic():
    key = PrivateKey(sha256(b"deterministic"))
    digest = sha256(b"payload")
    assert sign_digest(key, digest) == sign_digest(key, digest)


def test_extra_entropy_changes_signature():
    key = PrivateKey(sha256(b"entropy"))
    digest = sha256(b"payload")
    plain = key.sign_digest(digest)
    varied = key.sign_digest(digest, extra_entropy=b"\x01" * 32)
    assert plain != varied
    assert key.public_key().verify(plain, digest)
    assert key.public_key().verify(varied, digest)


def test_signature_rejects_wrong_key_and_digest():
    key = PrivateKey(sha256(b"one"))
    other = PrivateKey(sha256(b"two"))
    digest = sha256(b"payload")
    sig = sign_digest(key, digest)
    assert not verify_signature(sig, digest, other.public_key())
    assert not verify_signature(sig, sha256(b"other payload"), key.public_key())
    assert not verify_signature("SIG_K1_garbage", digest, key.public_key())


def test_signature_string_roundtrip():
    compact = bytes([32]) + b"\x11" * 64
    assert decode_signature(encode_signature(compact)) == compact
    with pytest.raises(ValidationError):
        decode_signature("SIG_R1_abc")


def test_der_signature_parse():
    der = bytes.fromhex("3006020101020102")
    assert parse_der_signature(der) == (1, 2)
