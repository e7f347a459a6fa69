"""Vote use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteUseCase,
    VoteStateResponse,
)
from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase
from .toggle_vote import ToggleVoteRequest, ToggleVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "VoteStateResponse",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
    "ToggleVoteRequest",
    "ToggleVoteUseCase",
]
