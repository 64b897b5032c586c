"""
cert_verifier — event certificate verification service.

Looks up a certificate identifier plus the holder's email or name in a
published spreadsheet (CSV export) of issued certificates.

Built on the Railway-Oriented Programming (ROP) framework for
explicit, composable, functional error handling.
"""

__version__ = "0.1.0"
