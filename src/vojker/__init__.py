"""Guard-chain evaluation with canonical audit records and golden-fixture checks."""

__version__ = "1.0.0"
