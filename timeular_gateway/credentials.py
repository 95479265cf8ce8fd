import logging
from typing import Tuple

from .config import Settings
from .errors import CredentialsError

logger = logging.getLogger(__name__)

def get_credentials(settings: Settings) -> Tuple[str, str]:
    """
    Resolve the Timeular API key/secret pair.
    Environment settings win when both are set; otherwise the first two lines
    of the secrets file are used (apiKey, then apiSecret).
    """
    if settings.API_KEY and settings.API_SECRET:
        return settings.API_KEY, settings.API_SECRET

    logger.info(f"API_KEY/API_SECRET not set, reading credentials from {settings.SECRETS_FILE}")
    try:
        with open(settings.SECRETS_FILE, "r") as f:
            lines = [line.rstrip("\r\n") for line in f.readlines()[:2]]
    except OSError as e:
        raise CredentialsError(f"Could not open secrets file {settings.SECRETS_FILE}: {e}") from e

    if len(lines) < 2 or not lines[0] or not lines[1]:
        raise CredentialsError("The first line needs to be the apiKey, the second line the apiSecret")
    return lines[0], lines[1]
