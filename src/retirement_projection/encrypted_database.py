"""
Encryption of persisted settings values.
Uses Fernet symmetric encryption from cryptography library.
"""

import base64
import logging
import os
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class EncryptionManager:
    """Manages encryption/decryption of stored setting values."""

    def __init__(self, key: Optional[bytes] = None, enabled: Optional[bool] = None):
        """
        Initialize with a Fernet key, or derive one from DB_ENCRYPTION_KEY.

        There is no built-in fallback password: without a key, encryption is
        switched off and values are stored as plaintext.
        """
        if enabled is None:
            enabled = os.getenv("DB_ENCRYPTION_ENABLED", "true").lower() == "true"

        if not key:
            env_key = os.getenv("DB_ENCRYPTION_KEY")
            if env_key:
                # Derive a proper encryption key from the password
                key = self._derive_key(env_key)
            elif enabled:
                logger.warning(
                    "DB_ENCRYPTION_KEY is not set: settings will be stored UNENCRYPTED. "
                    "Set DB_ENCRYPTION_KEY (or DB_ENCRYPTION_ENABLED=false to silence this)."
                )
                enabled = False

        self.key = key
        self.fernet = Fernet(key) if key else None
        self.enabled = enabled
    def _derive_key(self, password: str) -> bytes:
        """Derive a Fernet-compatible key from a password."""
        salt = b"retirement-projection-salt-v1"
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=100000,
        )
        return base64.urlsafe_b64encode(kdf.derive(password.encode()))

    def encrypt(self, data: str) -> str:
        """Encrypt a string and return base64-encoded encrypted data."""
        if not self.enabled:
            return data

        encrypted = self.fernet.encrypt(data.encode())
        return base64.urlsafe_b64encode(encrypted).decode("utf-8")

    def decrypt(self, encrypted_data: str) -> str:
        """Decrypt base64-encoded encrypted data and return original string."""
        if not self.enabled:
            return encrypted_data

        try:
            decoded = base64.urlsafe_b64decode(encrypted_data.encode("utf-8"))
            decrypted = self.fernet.decrypt(decoded)
            return decrypted.decode("utf-8")
        except (InvalidToken, ValueError) as e:
            # Might be plaintext written while encryption was disabled
            logger.warning("Decryption failed, returning as-is: %s", e)
            return encrypted_data


# Global encryption manager instance
_encryption_manager = None


def get_encryption_manager() -> EncryptionManager:
    """Get or create the global encryption manager."""
    global _encryption_manager
    if _encryption_manager is None:
        _encryption_manager = EncryptionManager()
    return _encryption_manager


def generate_new_key() -> str:
    """Generate a new Fernet encryption key."""
    return Fernet.generate_key().decode("utf-8")
