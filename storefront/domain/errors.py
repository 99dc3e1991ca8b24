# storefront/domain/errors.py


class NotFoundError(LookupError):
    """Unknown product, language or cart line."""


class ValidationError(ValueError):
    """Input rejected by a store, e.g. a quantity below 1."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def as_detail(self) -> list[dict]:
        # same shape as FastAPI's request validation errors
        return [{"loc": ["body", self.field], "msg": self.message, "type": "value_error"}]


class LockTimeoutError(RuntimeError):
    """Session lock could not be acquired in time."""
