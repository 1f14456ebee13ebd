"""Error taxonomy shared by the services and the HTTP layer."""


class AppError(Exception):
    """Base class for errors the API knows how to report."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: str = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class NotFoundError(AppError):
    status_code = 404
    public_message = "Not found"


class InvalidModelError(AppError):
    """Model identifier is not in the registry."""

    status_code = 400

    def __init__(self, model: str):
        super().__init__(f"Unknown model: {model}")
        self.model = model


class MissingCredentialError(AppError):
    """The user has no stored API key for the provider."""

    status_code = 400

    def __init__(self, provider: str):
        super().__init__(f"No API key configured for provider '{provider}'")
        self.provider = provider


class ProviderError(AppError):
    """A vendor call failed. Details are logged, never sent to the client."""

    status_code = 500
    public_message = "Failed to generate response"


class EmptyResponseError(ProviderError):
    pass


class DecryptionError(ProviderError):
    """Stored ciphertext failed authentication."""

    pass


class InvalidGenerationFormat(AppError):
    """Structured output did not match {messages: [{content}]}."""

    status_code = 500
    public_message = "Invalid response format from model"

    def __init__(self, raw_text: str):
        super().__init__()
        self.raw_text = raw_text
