"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidAttachmentError(Exception):
    """Raised when an uploaded file cannot be accepted as an attachment.

    ``too_large`` distinguishes size violations (HTTP 413) from
    unsupported file types (HTTP 400).
    """

    def __init__(self, message: str, *, too_large: bool = False):
        self.message = message
        self.too_large = too_large
        super().__init__(message)


class SelfDeletionError(Exception):
    """Raised when a user tries to delete their own account."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Cannot delete your own account")


class ChatProviderError(Exception):
    """Raised when a chat provider returns an error.

    Provider-agnostic — works for OpenRouter, Groq, OpenAI, etc.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")
