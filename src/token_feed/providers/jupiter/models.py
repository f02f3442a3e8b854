"""Models for the Jupiter provider (API params and swap payload)."""
from typing import Any

from pydantic import BaseModel, Field

from token_feed.providers.core.utils import SOL_MINT


class JupiterPriceParams(BaseModel):
    """Params for /price/v2. ``ids`` is a comma-separated list of mints."""

    ids: str
    vs_token: str = Field(default=SOL_MINT, serialization_alias="vsToken")


class JupiterQuoteParams(BaseModel):
    """Params for /swap/v1/quote."""

    input_mint: str = Field(serialization_alias="inputMint")
    output_mint: str = Field(serialization_alias="outputMint")
    amount: str
    slippage_bps: int = Field(default=50, serialization_alias="slippageBps")


class PriorityLevelWithMaxLamports(BaseModel):
    max_lamports: int = Field(default=1_000_000, serialization_alias="maxLamports")
    priority_level: str = Field(default="veryHigh", serialization_alias="priorityLevel")


class PrioritizationFee(BaseModel):
    priority_level_with_max_lamports: PriorityLevelWithMaxLamports = Field(
        default_factory=PriorityLevelWithMaxLamports,
        serialization_alias="priorityLevelWithMaxLamports",
    )


class JupiterSwapPayload(BaseModel):
    """Body for /swap/v1/swap. Wraps the quote returned by /swap/v1/quote."""

    quote_response: dict[str, Any] = Field(serialization_alias="quoteResponse")
    user_public_key: str = Field(serialization_alias="userPublicKey")
    dynamic_compute_unit_limit: bool = Field(
        default=True, serialization_alias="dynamicComputeUnitLimit"
    )
    dynamic_slippage: bool = Field(default=True, serialization_alias="dynamicSlippage")
    prioritization_fee_lamports: PrioritizationFee = Field(
        default_factory=PrioritizationFee,
        serialization_alias="prioritizationFeeLamports",
    )
