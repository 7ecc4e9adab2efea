"""Custom errors for the lending pool model"""

class ProtocolError(Exception):
    """Base error class for protocol errors"""
    pass

class MathOverflowError(ProtocolError):
    """Error for arithmetic overflow/underflow outside the uint256 range"""
    pass

class InvalidAmountError(ProtocolError):
    """Error for negative or non-integer token amounts"""
    pass

class InvalidConfigError(ProtocolError):
    """Error for inconsistent pool configuration"""
    pass

class InvalidPriceError(ProtocolError):
    """Error for invalid price data"""
    pass

class InvalidUtilizationError(ProtocolError):
    """Error for utilization outside [0, 100]"""
    pass

class AmountMismatchError(ProtocolError):
    """Declared deposit amount does not match the value actually transferred"""
    pass

class InsufficientBalanceError(ProtocolError):
    """Withdrawal or borrow attempted against insufficient collateral"""
    pass

class OutstandingDebtError(ProtocolError):
    """Withdrawal attempted while debt remains"""
    pass

class AmountTooHighError(ProtocolError):
    """Requested borrow exceeds the collateralization ratio ceiling"""
    pass

class HealthFactorTooLowError(ProtocolError):
    """A borrow left the position unhealthy"""
    pass

class HealthFactorIsOkError(ProtocolError):
    """Liquidation attempted against a healthy position"""
    pass

class InsufficientDebtTokensError(ProtocolError):
    """Liquidation would burn more debt than the target holds"""
    pass

class TransferFailedError(ProtocolError):
    """The asset transfer back to a user did not complete"""
    pass

class ReentrantCallError(ProtocolError):
    """A pool operation was entered while another one is in progress"""
    pass

class UnauthorizedError(ProtocolError):
    """Caller is not allowed to perform a restricted token operation"""
    pass
