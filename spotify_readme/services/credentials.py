"""File storage for cached Spotify tokens"""
import logging
import os

from pydantic import ValidationError

from spotify_readme.models.credentials import CredentialRecord

logger = logging.getLogger(__name__)

class CredentialStore:
    """Reads and writes the token cache file"""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> CredentialRecord:
        """
        Load cached tokens.

        A missing or unreadable cache is not an error: it is logged and
        an empty record is returned, which triggers an authorization
        code exchange.
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                record = CredentialRecord.model_validate_json(f.read())
            logger.info(f"Loaded cached credentials from {self.path}")
            return record
        except FileNotFoundError:
            logger.warning(f"No credential cache at {self.path}, starting without cached tokens")
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Could not read credential cache {self.path}: {e}")
        return CredentialRecord()

    def save(self, record: CredentialRecord) -> None:
        """Overwrite the cache file with the given record"""
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(record.model_dump_json(by_alias=True, exclude_none=True))
        logger.info(f"Saved credentials to {self.path}")
