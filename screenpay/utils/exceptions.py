class ServiceError(Exception):
    status = 400

    def __init__(self, code="SERVICE_ERROR", message="Service error", details=None, status=None):
        self.code = code
        self.message = message
        self.details = details or {}
        if status is not None:
            self.status = status
        super().__init__(message)


class InvalidInput(ServiceError):
    def __init__(self, message="Invalid input", details=None):
        super().__init__("INVALID_INPUT", message, details)


class CapacityExceeded(ServiceError):
    def __init__(self, message="max screenshots reached", details=None):
        super().__init__("CAPACITY_EXCEEDED", message, details)


class InsufficientBalance(ServiceError):
    def __init__(self, message="Insufficient balance", details=None):
        super().__init__("INSUFFICIENT_BALANCE", message, details)


class Forbidden(ServiceError):
    status = 403

    def __init__(self, message="forbidden", details=None):
        super().__init__("FORBIDDEN", message, details)


class NotFound(ServiceError):
    status = 404

    def __init__(self, message="Resource not found", details=None):
        super().__init__("NOT_FOUND", message, details)


class Internal(ServiceError):
    status = 500

    def __init__(self, message="server error", details=None):
        super().__init__("SERVER_ERROR", message, details)
