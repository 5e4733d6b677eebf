"""Stack use cases."""

from .stack_posts import (
    ClearStackResponse,
    ClearStackUseCase,
    GetStackRequest,
    GetStackResponse,
    GetStackUseCase,
    PopFromStackResponse,
    PopFromStackUseCase,
    PushToStackResponse,
    PushToStackUseCase,
    StackItem,
    StackRequest,
)

__all__ = [
    "ClearStackResponse",
    "ClearStackUseCase",
    "GetStackRequest",
    "GetStackResponse",
    "GetStackUseCase",
    "PopFromStackResponse",
    "PopFromStackUseCase",
    "PushToStackResponse",
    "PushToStackUseCase",
    "StackItem",
    "StackRequest",
]
