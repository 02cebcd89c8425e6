"""ContractGuard — structural extraction for smart-contract risk analysis."""

__version__ = "1.0.0"
