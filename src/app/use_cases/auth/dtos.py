"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the auth domain.
"""

from pydantic import BaseModel


class VerifyEmailResponse(BaseModel):
    """Response for email verification use case"""

    status: str
    message: str
    user_id: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    message: str
    token: str
    session_id: str


class LogoutResponse(BaseModel):
    """Response for user logout use case"""

    status: str
    message: str


class ForgetPasswordResponse(BaseModel):
    """Response for OTP request use case"""

    status: str
    message: str


class VerifyOtpResponse(BaseModel):
    """Response for OTP verification use case"""

    status: str
    message: str


class RequestResetCodeResponse(BaseModel):
    """Response for reset code request use case"""

    status: str
    message: str


class VerifyResetCodeResponse(BaseModel):
    """Response for reset code verification use case"""

    status: str
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str
