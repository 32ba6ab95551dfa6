class BookingServiceError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class SanityError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotificationError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CheckoutError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class WebhookSignatureError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class BookingNotFoundError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidSelectionError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
