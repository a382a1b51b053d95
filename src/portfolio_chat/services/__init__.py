"""Services"""

from portfolio_chat.services.content_store import (
    fetch_all_identifiers,
    fetch_portfolio_item,
)
from portfolio_chat.services.sample_data import seed_sample_data
from portfolio_chat.services.tag_vocabulary import build_tag_vocabulary

__all__ = [
    "build_tag_vocabulary",
    "fetch_all_identifiers",
    "fetch_portfolio_item",
    "seed_sample_data",
]
