"""Multi-step guest registration flow with OTP verification."""
