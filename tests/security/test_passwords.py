from easygestion.security.passwords import PasswordHasher


def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher(method="scrypt:1024:8:1")
    first = hasher.hash("Str0ng!Passw0rd#1")
    second = hasher.hash("Str0ng!Passw0rd#1")

    assert first != second
    assert first.startswith("scrypt:")
    assert hasher.verify("Str0ng!Passw0rd#1", first)
    assert not hasher.verify("wrong", first)


def test_malformed_hash_never_verifies():
    hasher = PasswordHasher(method="scrypt:1024:8:1")
    assert hasher.verify("anything", "CHANGE_ME") is False
    assert hasher.verify("anything", "") is False
