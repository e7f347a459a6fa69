"""Answer use cases."""

from .create_answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .set_answer_accepted import (
    SetAnswerAcceptedRequest,
    SetAnswerAcceptedResponse,
    SetAnswerAcceptedUseCase,
)

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "SetAnswerAcceptedRequest",
    "SetAnswerAcceptedResponse",
    "SetAnswerAcceptedUseCase",
]
