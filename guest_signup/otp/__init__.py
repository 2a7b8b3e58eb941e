from .input import OTPCode, OTPDigitInput, empty_code, is_complete

__all__ = ["OTPCode", "OTPDigitInput", "empty_code", "is_complete"]
