"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .generation_service import GenerationService, normalize_poll_options
from .jwt_service import JWTService
from .poll_service import PollResults, PollService
from .post_service import PostService
from .power_up_service import PowerUpService, PowerUpStatus
from .preferences_service import PreferencesService, normalize_topics
from .stack_service import StackService
from .thread import CommentNode, build_comment_tree

__all__ = [
    "CommentNode",
    "CommentService",
    "GenerationService",
    "JWTService",
    "PollResults",
    "PollService",
    "PostService",
    "PowerUpService",
    "PowerUpStatus",
    "PreferencesService",
    "Service",
    "StackService",
    "build_comment_tree",
    "normalize_poll_options",
    "normalize_topics",
]
