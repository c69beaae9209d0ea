"""User repository: account persistence and password checks."""

from sqlalchemy.exc import IntegrityError

from core.exceptions import DuplicateAccount, InvalidData
from core.logging import get_logger, mask_email
from core.models import UserAccount
from core.security import hash_password, verify_password

from .base import BaseRepository

logger = get_logger("repository.user")


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[UserAccount]):
    """Repository for UserAccount operations."""

    model = UserAccount

    def get_by_email(self, email: str) -> UserAccount | None:
        """Get user by email (case-insensitive)."""
        return (
            self.session.query(UserAccount)
            .filter(UserAccount.email == normalize_email(email))
            .first()
        )

    def email_exists(self, email: str) -> bool:
        return self.exists_where(email=normalize_email(email))

    def create_user(
        self,
        email: str,
        password: str,
        full_name: str,
        user_type: str,
        skills: list[str] | None = None,
        bio: str | None = None,
    ) -> UserAccount:
        """
        Create an account, hashing the password before it is stored.

        Raises:
            DuplicateAccount: The email is already taken, including when a
                concurrent registration wins the unique index first.
            InvalidData: The database rejected the record for another reason.
        """
        email = normalize_email(email)
        user = UserAccount(
            email=email,
            password=hash_password(password),
            full_name=full_name,
            user_type=user_type,
            skills=list(skills or []),
            bio=bio or "",
        )
        self.session.add(user)
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            if self.email_exists(email):
                logger.info("register_duplicate_race", email=mask_email(email))
                raise DuplicateAccount() from exc
            logger.warning("register_rejected_by_store", error=str(exc.orig))
            raise InvalidData() from exc
        return user

    def check_password(self, user: UserAccount, password: str) -> bool:
        """Compare a plaintext password against the stored hash."""
        return verify_password(password, user.password)

    def update_profile(
        self,
        user: UserAccount,
        full_name: str | None = None,
        skills: list[str] | None = None,
        bio: str | None = None,
        profile_image: str | None = None,
    ) -> UserAccount:
        """Overwrite the given profile fields; ``None`` leaves a field unchanged."""
        if full_name is not None:
            user.full_name = full_name
        if skills is not None:
            user.skills = list(skills)
        if bio is not None:
            user.bio = bio
        if profile_image is not None:
            user.profile_image = profile_image
        return self.save(user)
