"""Token data routes (Jupiter, Vybe). Upstream responses are returned as-is."""
from typing import Any

from fastapi import APIRouter

from token_feed.deps import TokenServiceDep
from token_feed.schemas import (SwapRequest, SwapResponse, TokenDataRequest,
                                TokenDetailsRequest, TokenHistoryRequest)

router = APIRouter(tags=["tokens"])


@router.post("/token-history")
async def token_history(payload: TokenHistoryRequest, service: TokenServiceDep) -> Any:
    """OHLCV history for a mint (Vybe)."""
    return await service.get_token_history(payload.mint_address, payload.resolution)


@router.post("/token-details")
async def token_details(payload: TokenDetailsRequest, service: TokenServiceDep) -> Any:
    """Prices for one or more mints, quoted in SOL (Jupiter)."""
    return await service.get_token_details(payload.token_mints)


@router.post("/token-data")
async def token_data(payload: TokenDataRequest, service: TokenServiceDep) -> Any:
    """Token metadata for a mint (Jupiter)."""
    return await service.get_token_data(payload.mint)


@router.post("/swap", response_model=SwapResponse)
async def swap(payload: SwapRequest, service: TokenServiceDep) -> SwapResponse:
    """Build an unsigned swap transaction. Failures are reported in the body with status 200."""
    return await service.build_swap(
        payload.input_mint,
        payload.output_mint,
        payload.amount,
        payload.user_public_key,
    )
