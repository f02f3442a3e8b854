"""Token feed: a social feed of token positions plus Jupiter/Vybe token data."""
