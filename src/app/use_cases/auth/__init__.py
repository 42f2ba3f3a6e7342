"""
Authentication Use Cases

Signup, email confirmation, login/logout and both password recovery flows.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import SignupCommand, SignupResponse
from .verify_email_use_case import VerifyEmailUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .forget_password_use_case import ForgetPasswordUseCase
from .verify_otp_use_case import VerifyOtpUseCase
from .request_reset_code_use_case import RequestResetCodeUseCase
from .verify_reset_code_use_case import VerifyResetCodeUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    VerifyEmailResponse,
    LoginResponse,
    LogoutResponse,
    ForgetPasswordResponse,
    VerifyOtpResponse,
    RequestResetCodeResponse,
    VerifyResetCodeResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "VerifyEmailUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "ForgetPasswordUseCase",
    "VerifyOtpUseCase",
    "RequestResetCodeUseCase",
    "VerifyResetCodeUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "VerifyEmailResponse",
    "LoginResponse",
    "LogoutResponse",
    "ForgetPasswordResponse",
    "VerifyOtpResponse",
    "RequestResetCodeResponse",
    "VerifyResetCodeResponse",
    "ResetPasswordResponse",
]
