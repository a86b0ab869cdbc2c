#!/usr/bin/env python3
"""
Hash factory tests.

Test Cases:
1. Every registered name builds a hash matching hashlib
2. CryptographyHash copy_state / fresh_instance / reset / finalize reset
3. Truncated(...) specs parse, nest and round-trip through .name
4. Unknown or malformed names raise AlgorithmNotFound
"""

import hashlib
import sys

from trunchash.crypto.hash import (
    AlgorithmNotFound,
    CryptographyHash,
    HashFunction,
    available_hashes,
    create_hash,
)
from trunchash.crypto.trunc_hash import InvalidConfiguration, TruncatedHash


HASHLIB_NAMES = {
    "SHA-1": "sha1",
    "SHA-224": "sha224",
    "SHA-256": "sha256",
    "SHA-384": "sha384",
    "SHA-512": "sha512",
    "SHA-3(224)": "sha3_224",
    "SHA-3(256)": "sha3_256",
    "SHA-3(384)": "sha3_384",
    "SHA-3(512)": "sha3_512",
    "BLAKE2b(512)": "blake2b",
    "BLAKE2s(256)": "blake2s",
    "MD5": "md5",
}


def test_registry_matches_hashlib():
    """Test 1: registered algorithms agree with hashlib."""
    print("\n" + "=" * 70)
    print("TEST 1: Registry Known Answers")
    print("=" * 70)

    names = available_hashes()
    for name, hashlib_name in HASHLIB_NAMES.items():
        assert name in names, f"{name} missing from registry"
        h = create_hash(name)
        assert isinstance(h, CryptographyHash)
        assert h.name == name
        reference = hashlib.new(hashlib_name, b"abc").digest()
        assert h.output_length() == len(reference), name
        assert h.process(b"abc") == reference, name
        print(f"  ✓ {name}")

    assert "SHA-512-256" in names
    assert create_hash("SHA-512-256").output_length() == 32
    assert create_hash("  SHA-256 ").name == "SHA-256"


def test_cryptography_hash_state():
    """Test 2: state handling of the cryptography-backed hash."""
    print("\n" + "=" * 70)
    print("TEST 2: CryptographyHash State")
    print("=" * 70)

    h = create_hash("SHA-256")
    h.update(b"ab")
    c = h.copy_state()
    c.update(b"c")
    h.update(b"x")
    assert c.finalize() == hashlib.sha256(b"abc").digest()
    assert h.finalize() == hashlib.sha256(b"abx").digest()
    print("  ✓ copy_state is independent")

    h.update(b"abc")
    assert h.fresh_instance().finalize() == hashlib.sha256(b"").digest()
    assert h.finalize_hex() == hashlib.sha256(b"abc").hexdigest()
    assert h.finalize() == hashlib.sha256(b"").digest()
    print("  ✓ finalize resets; fresh_instance is empty")

    h.update(b"junk")
    h.reset()
    assert h.finalize() == hashlib.sha256(b"").digest()
    print("  ✓ reset discards input")

    out = bytearray(32)
    h.update(b"abc")
    h.finalize_into(out)
    assert bytes(out) == hashlib.sha256(b"abc").digest()

    try:
        h.finalize_into(bytearray(31))
    except ValueError:
        print("  ✓ Wrong-size output buffer rejected")
    else:
        raise AssertionError("wrong-size buffer accepted")


def test_truncated_specs():
    """Test 3: Truncated(...) names."""
    print("\n" + "=" * 70)
    print("TEST 3: Truncated Specs")
    print("=" * 70)

    h = create_hash("Truncated(SHA-256,12)")
    assert isinstance(h, TruncatedHash)
    assert isinstance(h, HashFunction)
    assert h.name == "Truncated(SHA-256,12)"
    assert h.output_bits == 12
    assert h.process(b"abc") == b"\xba\x70"
    print("  ✓ Truncated(SHA-256,12)")

    h = create_hash("Truncated(SHA-3(512), 300)")
    assert h.name == "Truncated(SHA-3(512),300)"
    assert h.output_length() == 38

    nested = create_hash("Truncated(Truncated(SHA-512,200),123)")
    assert nested.name == "Truncated(Truncated(SHA-512,200),123)"
    again = create_hash(nested.name)
    assert again.name == nested.name
    assert again.process(b"abc") == nested.process(b"abc")
    print("  ✓ Nested specs round-trip through .name")

    try:
        create_hash("Truncated(SHA-256,0)")
    except InvalidConfiguration:
        print("  ✓ Out-of-range bit count raises InvalidConfiguration")
    else:
        raise AssertionError("Truncated(SHA-256,0) accepted")

    try:
        create_hash("Truncated(SHA-256,257)")
    except InvalidConfiguration:
        pass
    else:
        raise AssertionError("Truncated(SHA-256,257) accepted")


def test_unknown_names():
    """Test 4: unknown and malformed names."""
    print("\n" + "=" * 70)
    print("TEST 4: Unknown / Malformed Names")
    print("=" * 70)

    bad_specs = [
        "SHA-999",
        "",
        "sha256",
        "Truncated(SHA-256)",
        "Truncated(SHA-256,12,3)",
        "Truncated(SHA-256,twelve)",
        "Truncated(,12)",
        "Truncated(SHA-3(256,12)",
        "Truncated(NOPE,12)",
        "Truncated(SHA-256,1_2)",
        "Truncated(SHA-256,+12)",
        "Truncated(SHA-256,012)",
        "Truncated(SHA-256,-5)",
        "Truncated(SHA-256,١٢)",
    ]
    for spec in bad_specs:
        try:
            create_hash(spec)
        except AlgorithmNotFound as e:
            print(f"  ✓ {spec!r}: {e}")
        else:
            raise AssertionError(f"{spec!r} accepted")


def main():
    """Run all hash factory tests."""
    print("\n" + "=" * 70)
    print("TEST SUITE: Hash Factory")
    print("=" * 70)

    tests = [
        ("Registry Known Answers", test_registry_matches_hashlib),
        ("CryptographyHash State", test_cryptography_hash_state),
        ("Truncated Specs", test_truncated_specs),
        ("Unknown Names", test_unknown_names),
    ]

    results = {}
    for test_name, test_func in tests:
        try:
            test_func()
            results[test_name] = True
        except Exception as e:
            print(f"\n✗ Test '{test_name}' failed: {e}")
            import traceback
            traceback.print_exc()
            results[test_name] = False

    print("\n" + "=" * 70)
    print("TEST RESULTS SUMMARY")
    print("=" * 70)

    for test_name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {status}: {test_name}")

    passed_count = sum(1 for p in results.values() if p)
    print(f"\nTotal: {passed_count}/{len(results)} tests passed")
    return passed_count == len(results)


if __name__ == '__main__':
    sys.exit(0 if main() else 1)
