"""Account aggregate root.

Accounts are created elsewhere (by an administrator or a client application)
and then invited. The invitation lets the owner prove the email address and
choose a first password.
"""

import hashlib
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from onboard.domain.value import AccountId, Email


def password_fingerprint(password_hash: str | None) -> str:
    """Fingerprint a stored password hash.

    Invitation tokens carry the fingerprint of the hash that was current when
    they were issued. Any password change alters it, which is what makes a
    token single-use without storing the token anywhere.
    """
    return hashlib.sha256((password_hash or "").encode("utf-8")).hexdigest()


class Account(BaseModel):
    """Account aggregate root, immutable; transitions go through the repository.

    Business rules:
    - email_verified only ever goes from False to True
    - A password set through an invitation happens at most once per token
    """

    model_config = ConfigDict(frozen=True)

    id: AccountId
    email: Email
    email_verified: bool = False
    password_hash: Optional[str] = None  # None until the invitee sets one
    password_changed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def password_fingerprint(self) -> str:
        """Fingerprint of the current password hash."""
        return password_fingerprint(self.password_hash)
