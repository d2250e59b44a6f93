"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Domain error taxonomy with codes and HTTP statuses
- ownership: Owner-only mutation policy for posts and comments
- security: Password hashing and JWT token issuance/verification
"""
