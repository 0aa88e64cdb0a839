"""Error types shared by clients, pipelines and the API."""

from typing import Optional


class BlogsmithError(Exception):
    """Base class for all expected failures."""

    code = "error"


class ConfigurationError(BlogsmithError):
    """Required configuration (e.g. an API key) is missing."""

    code = "configuration_error"


class TransportError(BlogsmithError):
    """A remote service could not be reached (network failure or timeout)."""

    code = "transport_error"


class ProviderFailure(BlogsmithError):
    """A remote service responded but reported a failure."""

    code = "provider_error"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(ProviderFailure):
    """The provider is throttling requests."""

    code = "rate_limited"

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        status_code: Optional[int] = 429,
    ) -> None:
        super().__init__(message, status_code)


class PaymentRequiredError(ProviderFailure):
    """The provider account is out of quota or credits."""

    code = "payment_required"

    def __init__(
        self,
        message: str = "Payment required. Please add credits to your workspace.",
        status_code: Optional[int] = 402,
    ) -> None:
        super().__init__(message, status_code)


class EmptyResultError(BlogsmithError):
    """A remote call succeeded but produced nothing usable."""

    code = "empty_result"


class ArticleNotFoundError(BlogsmithError):
    """The referenced article does not exist."""

    code = "not_found"

    def __init__(self, article_id: str) -> None:
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class MissingFieldError(BlogsmithError):
    """A required input field was not supplied."""

    code = "validation_error"

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field
