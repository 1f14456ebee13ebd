"""Authenticated encryption for user API keys at rest."""

import base64
import binascii
import logging
import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from promptlab.core import config
from promptlab.core.exceptions import DecryptionError

logger = logging.getLogger(__name__)

NONCE_LENGTH = 12
TAG_LENGTH = 16


def derive_key(secret: str) -> bytes:
    """Turn the process secret into a 32-byte AES key.

    A 64-character hex secret is used as the raw key; anything else is
    stretched with PBKDF2.
    """
    if len(secret) == 64:
        try:
            return bytes.fromhex(secret)
        except ValueError:
            pass

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=b"promptlab-api-keys",
        iterations=100000,
    )
    return kdf.derive(secret.encode())


class KeyCipher:
    """AES-256-GCM with a random nonce per message.

    Ciphertext layout (base64): nonce (12) | tag (16) | encrypted payload.
    """

    def __init__(self, secret: Optional[str] = None):
        secret = secret or config.ENCRYPTION_SECRET
        if not secret:
            raise ValueError(
                "USER_API_KEY_ENCRYPTION_SECRET environment variable is required "
                "to store provider API keys."
            )
        self._aesgcm = AESGCM(derive_key(secret))

    def encrypt(self, plaintext: str) -> str:
        nonce = os.urandom(NONCE_LENGTH)
        # AESGCM appends the tag to the ciphertext
        sealed = self._aesgcm.encrypt(nonce, plaintext.encode("utf-8"), None)
        encrypted, tag = sealed[:-TAG_LENGTH], sealed[-TAG_LENGTH:]
        return base64.b64encode(nonce + tag + encrypted).decode("ascii")

    def decrypt(self, token: str) -> str:
        try:
            data = base64.b64decode(token.encode("ascii"), validate=True)
        except (binascii.Error, ValueError, UnicodeEncodeError) as e:
            logger.error(f"Decryption failed: malformed ciphertext ({e})")
            raise DecryptionError("Stored API key is not valid ciphertext") from e

        if len(data) < NONCE_LENGTH + TAG_LENGTH:
            logger.error("Decryption failed: ciphertext too short")
            raise DecryptionError("Stored API key is not valid ciphertext")

        nonce = data[:NONCE_LENGTH]
        tag = data[NONCE_LENGTH:NONCE_LENGTH + TAG_LENGTH]
        encrypted = data[NONCE_LENGTH + TAG_LENGTH:]

        try:
            plaintext = self._aesgcm.decrypt(nonce, encrypted + tag, None)
        except InvalidTag as e:
            logger.error("Decryption failed: authentication tag mismatch")
            raise DecryptionError("Stored API key failed authentication") from e

        return plaintext.decode("utf-8")


# Global cipher instance
_cipher_instance: Optional[KeyCipher] = None


def get_cipher() -> KeyCipher:
    """Get the process-wide cipher, built from the configured secret."""
    global _cipher_instance
    if _cipher_instance is None:
        _cipher_instance = KeyCipher()
    return _cipher_instance
