import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from promptlab.core.encryption import KeyCipher, get_cipher
from promptlab.core.exceptions import NotFoundError
from promptlab.models.api_key import ApiKey
from promptlab.services.model_registry import ProviderName

logger = logging.getLogger(__name__)

KEY_COLUMNS = {
    ProviderName.OPENAI: "encrypted_openai_key",
    ProviderName.ANTHROPIC: "encrypted_anthropic_key",
    ProviderName.GOOGLE: "encrypted_google_key",
}


class CredentialStore:
    """Per-user provider API keys, encrypted at rest.

    Keys are decrypted only on the way to a vendor client and are never
    returned to API callers.
    """

    def __init__(self, db: AsyncSession, cipher: Optional[KeyCipher] = None):
        self.db = db
        self._cipher = cipher

    @property
    def cipher(self) -> KeyCipher:
        if self._cipher is None:
            self._cipher = get_cipher()
        return self._cipher

    async def get_key_row(self, user_id: str) -> Optional[ApiKey]:
        # Upserts bypass the identity map, so always refresh from the row
        result = await self.db.execute(
            select(ApiKey)
            .where(ApiKey.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_decrypted_key(self, user_id: str, provider: ProviderName) -> Optional[str]:
        """Plaintext key for the provider, or None when the user has not stored one.

        Raises DecryptionError if the stored ciphertext was tampered with.
        """
        row = await self.get_key_row(user_id)
        if row is None:
            return None

        encrypted = getattr(row, KEY_COLUMNS[ProviderName(provider)])
        if not encrypted:
            return None

        return self.cipher.decrypt(encrypted)

    async def save_key(self, user_id: str, provider: ProviderName, key: str):
        column = KEY_COLUMNS[ProviderName(provider)]
        encrypted = self.cipher.encrypt(key)

        # Insert-or-update on the unique user_id; concurrent writers: last one wins
        dialect = self.db.get_bind().dialect.name
        insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
        stmt = insert(ApiKey).values(user_id=user_id, **{column: encrypted})
        stmt = stmt.on_conflict_do_update(
            index_elements=[ApiKey.user_id],
            set_={column: encrypted},
        )

        await self.db.execute(stmt)
        await self.db.commit()
        logger.info(f"Stored {ProviderName(provider).value} key for user {user_id}")

    async def delete_key(self, user_id: str, provider: ProviderName):
        column = KEY_COLUMNS[ProviderName(provider)]
        result = await self.db.execute(
            update(ApiKey).where(ApiKey.user_id == user_id).values(**{column: None})
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError("No API keys stored for this user")

        await self.db.commit()
        logger.info(f"Removed {ProviderName(provider).value} key for user {user_id}")

    async def key_status(self, user_id: str) -> dict:
        row = await self.get_key_row(user_id)
        return {
            provider: bool(row is not None and getattr(row, column))
            for provider, column in KEY_COLUMNS.items()
        }
