# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Application initialization and default admin creation
- db: Database configuration and connection management
- exceptions: Content error taxonomy mapped to 4xx responses
- security: Authentication, authorization, and password hashing
"""
