"""Reaction use cases."""

from .create_reaction import (
    CreateReactionRequest,
    CreateReactionResponse,
    CreateReactionUseCase,
)

__all__ = [
    "CreateReactionRequest",
    "CreateReactionResponse",
    "CreateReactionUseCase",
]
