# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Demo data seeding at application build time
- errors: Error taxonomy shared by every handler
- security: Password hashing and session token issuing/verification
"""
