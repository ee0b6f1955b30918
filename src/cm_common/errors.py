"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth
  2xxx: Fees
  3xxx: Discount codes
  4xxx: Listings
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Auth ---

class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Invalid or expired token", 401)


# --- 2xxx: Fees ---

class InvalidFeeRateError(AppError):
    def __init__(self, rate: float) -> None:
        super().__init__(2001, f"Fee rate must be between 0 and 1, got {rate}", 422)


class SellerProfileNotFoundError(AppError):
    def __init__(self, user_id: str) -> None:
        super().__init__(2002, f"Seller profile not found: {user_id}", 404)


# --- 3xxx: Discount codes ---

class DiscountCodeNotFoundError(AppError):
    def __init__(self, user_id: str) -> None:
        super().__init__(3001, f"No active discount code for user {user_id}", 404)


# --- 4xxx: Listings ---

class UnknownHomepageSectionError(AppError):
    def __init__(self, section: str) -> None:
        super().__init__(4001, f"Unknown homepage section: {section}", 404)


# --- 9xxx: System ---

class RateLimitError(AppError):
    def __init__(self) -> None:
        super().__init__(9001, "Rate limit exceeded", 429)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
