import pytest

from core.exceptions import DuplicateAccount
from core.models import UserAccount
from core.repositories.user_repository import UserRepository, normalize_email
from core.security import hash_password, verify_password


def test_normalize_email():
    assert normalize_email("  Jane.Doe@Example.COM ") == "jane.doe@example.com"


def test_create_user_hashes_password(sample_account):
    assert sample_account.password != "s3cret-pass"
    assert verify_password("s3cret-pass", sample_account.password)
    assert len(sample_account.id) == 24
    assert sample_account.money_earned == 0
    assert sample_account.money_spent == 0


def test_check_password(user_repo, sample_account):
    assert user_repo.check_password(sample_account, "s3cret-pass")
    assert not user_repo.check_password(sample_account, "s3cret-pas")


def test_get_by_email_ignores_case(user_repo, sample_account):
    found = user_repo.get_by_email("JANE@example.com")

    assert found is not None
    assert found.id == sample_account.id
    assert user_repo.email_exists("Jane@Example.com")
    assert not user_repo.email_exists("john@example.com")


def test_concurrent_duplicate_becomes_duplicate_account(test_db, sample_account):
    # A second session that skipped the existence check still hits the unique index.
    TestingSessionLocal, _ = test_db
    with TestingSessionLocal() as session:
        repo = UserRepository(session)
        with pytest.raises(DuplicateAccount):
            repo.create_user(
                email="jane@example.com",
                password="other",
                full_name="Impostor",
                user_type="client",
            )
        assert session.query(UserAccount).count() == 1


def test_update_profile_none_leaves_fields(user_repo, sample_account):
    user_repo.update_profile(sample_account, bio="Updated bio")

    assert sample_account.bio == "Updated bio"
    assert sample_account.full_name == "Jane Doe"
    assert sample_account.skills == ["python", "fastapi"]
    assert sample_account.profile_image is None


def test_long_password_truncated_to_bcrypt_limit():
    hashed = hash_password("x" * 100, rounds=4)

    assert verify_password("x" * 72, hashed)
    assert verify_password("x" * 80, hashed)


def test_verify_password_with_malformed_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False
