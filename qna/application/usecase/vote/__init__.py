"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase, VoteInfo
from .get_user_vote import GetUserVoteRequest, GetUserVoteResponse, GetUserVoteUseCase
from .get_vote_stats import (
    GetVoteStatsRequest,
    GetVoteStatsResponse,
    GetVoteStatsUseCase,
)
from .list_user_votes import (
    ListUserVotesRequest,
    ListUserVotesResponse,
    ListUserVotesUseCase,
)
from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetUserVoteRequest",
    "GetUserVoteResponse",
    "GetUserVoteUseCase",
    "GetVoteStatsRequest",
    "GetVoteStatsResponse",
    "GetVoteStatsUseCase",
    "ListUserVotesRequest",
    "ListUserVotesResponse",
    "ListUserVotesUseCase",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
    "VoteInfo",
]
