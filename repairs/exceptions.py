class RepairsError(Exception):
    """Base error for the repairs API. Carries the HTTP status it maps to."""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class NotFound(RepairsError):
    status_code = 404
    default_message = 'Not found'


class ValidationFailure(RepairsError):
    status_code = 400
    default_message = 'Invalid data'


class Unauthorized(RepairsError):
    status_code = 401
    default_message = 'Unauthorized'


class TransactionFailure(RepairsError):
    """Raised after a multi-step write rolled back. The failing step's error is kept on ``cause``."""
    default_message = 'Transaction failed and was rolled back'

    def __init__(self, message=None, cause=None):
        self.cause = cause
        errors = cause.errors if isinstance(cause, RepairsError) else None
        # Only errors raised by this app are safe to show to clients
        if message is None and isinstance(cause, RepairsError):
            message = f"{self.default_message}: {cause}"
        super().__init__(message, errors=errors)

    @property
    def status_code(self):
        if isinstance(self.cause, RepairsError):
            return self.cause.status_code
        return 500
