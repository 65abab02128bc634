import hashlib
import logging

# Create the library logger
logger = logging.getLogger("pagesource")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_term(term: str) -> str:
    """
    Redacts a search term for logging.
    Hashes the value to allow correlation without revealing user input.
    """
    return hashlib.sha256(term.encode("utf-8")).hexdigest()[:8]
