"""Shared utilities for token data providers."""

# Wrapped SOL; prices are quoted against it.
SOL_MINT = "So11111111111111111111111111111111111111112"


def join_mints(mints: str | list[str]) -> str:
    """Normalize one or many mints to the comma-separated form the APIs expect."""
    if isinstance(mints, str):
        parts = mints.split(",")
    else:
        parts = mints
    return ",".join(m.strip() for m in parts if m.strip())
