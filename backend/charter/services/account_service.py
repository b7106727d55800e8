"""
Company account registration and lookup.
"""

import logging

from sqlalchemy.exc import IntegrityError

from ..database.config import DatabaseConfig
from ..database.models import Account
from ..models.account import AccountCreate, AccountModel
from .errors import ValidationError
from .records import load_account, require_text

logger = logging.getLogger(__name__)


class AccountService:
    """Accounts own every plane, pilot and trip."""

    def __init__(self, db: DatabaseConfig):
        self.db = db

    def register(self, data: AccountCreate) -> AccountModel:
        """
        Register a company account.

        Raises:
            ValidationError: If the email is blank or already registered
        """
        require_text(email=data.email)
        email = data.email.strip().lower()

        try:
            with self.db.get_session_context() as session:
                account = Account(email=email, company_name=data.company_name)
                session.add(account)
                session.flush()
                result = AccountModel.model_validate(account)
        except IntegrityError:
            logger.info(f"Rejected duplicate account registration for {email}")
            raise ValidationError(f"Email already exists: {email}")

        logger.info(f"Registered account {result.account_id} ({email})")
        return result

    def get(self, account_id: int) -> AccountModel:
        """
        Raises:
            AccountNotFoundError: If no such account exists
        """
        with self.db.get_session_context() as session:
            return AccountModel.model_validate(load_account(session, account_id))
