"""
Use Cases

Organized into domain folders:
- auth/: Signup, email confirmation, login/logout, password recovery
- users/: Caller authentication and account self-service

Import from subdirectories.
"""
