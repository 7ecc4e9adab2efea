"""Checked uint256 integer arithmetic"""
from .constants import UINT256_MAX
from .errors import InvalidAmountError, MathOverflowError

def require_amount(amount: int, name: str = "amount") -> int:
    """Reject anything that is not a non-negative integer"""
    # bool is an int subclass, but never a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError(f"{name} must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidAmountError(f"{name} must be non-negative, got {amount}")
    if amount > UINT256_MAX:
        raise InvalidAmountError(f"{name} exceeds uint256")
    return amount

def checked_mul(a: int, b: int) -> int:
    """Multiply with overflow checking"""
    result = a * b
    if result > UINT256_MAX:
        raise MathOverflowError("Arithmetic overflow in multiplication")
    return result

def checked_div(a: int, b: int) -> int:
    """Floor divide with zero checking"""
    if b == 0:
        raise MathOverflowError("Division by zero")
    return a // b

def checked_add(a: int, b: int) -> int:
    """Add with overflow checking"""
    result = a + b
    if result > UINT256_MAX:
        raise MathOverflowError("Arithmetic overflow in addition")
    return result

def checked_sub(a: int, b: int) -> int:
    """Subtract with underflow checking"""
    if b > a:
        raise MathOverflowError("Arithmetic underflow in subtraction")
    return a - b
