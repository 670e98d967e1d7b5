"""
Models package for overlay answers and errors.
"""

from .answer import EMPTY_SELECTION_TEXT, AnswerResult, assemble_answer
from .errors import (
    EmptyAnswerError,
    EmptyArticleContentError,
    HttpStatusError,
    MissingCredentialError,
    NoSearchHitError,
    OverlayError,
    TransportFailureError,
    UnexpectedResponseShapeError,
)

__all__ = [
    "EMPTY_SELECTION_TEXT",
    "AnswerResult",
    "assemble_answer",
    "EmptyAnswerError",
    "EmptyArticleContentError",
    "HttpStatusError",
    "MissingCredentialError",
    "NoSearchHitError",
    "OverlayError",
    "TransportFailureError",
    "UnexpectedResponseShapeError",
]
