"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownScenarioError(DomainException):
    """Scenario kind is not one of the supported what-if simulations"""

    pass


class LLMGatewayError(DomainException):
    """LLM gateway returned an error or is unavailable"""

    retryable = True

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LLMRateLimitError(LLMGatewayError):
    """Gateway rejected the request because of rate limiting (HTTP 429)"""

    pass


class LLMCreditsExhaustedError(LLMGatewayError):
    """Gateway usage credits are exhausted (HTTP 402)"""

    retryable = False
