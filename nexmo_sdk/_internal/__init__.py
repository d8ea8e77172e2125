"""Internal modules for Nexmo SDK.

WARNING: This package contains system-level modules used by the SDK's
resource namespaces. These are not intended for direct use in application
code.

Modules:
    dispatch - Request dispatch core (auth, encoding, response classification)
    http - Shared HTTP client configuration
"""
