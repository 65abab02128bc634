from collections.abc import Generator
from contextlib import contextmanager


class PageSourceError(Exception):
    """Base exception for all pagesource errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(PageSourceError):
    """Raised when source options are out of range or cannot be parsed."""

    def __init__(
        self, message: str, option: str | None = None, original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)
        self.option = option


class ItemProviderError(PageSourceError):
    """Raised when the item provider fails to hand out its candidates."""

    def __init__(self, provider_name: str, original_error: Exception | None = None) -> None:
        msg = f"Item provider '{provider_name}' failed"
        if original_error is not None:
            msg += f": {original_error}"
        super().__init__(msg, original_error)
        self.provider_name = provider_name


@contextmanager
def handle_provider_errors(provider_name: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches failures raised by an item provider
    and re-raises them as ItemProviderError.

    Args:
        provider_name: Optional provider name for better error messages

    Usage:
        with handle_provider_errors(provider_name="StaticItemProvider"):
            items = provider.get_items()
    """
    try:
        yield
    except PageSourceError:
        raise
    except Exception as e:
        raise ItemProviderError(provider_name=provider_name or "unknown", original_error=e) from e
