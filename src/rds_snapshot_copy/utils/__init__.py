from .config import ConfigManager
from .session import SessionManager
from .logger import setup_logger
from .exceptions import (
    AmbiguousChoiceError,
    EmptyCandidateSetError,
    MalformedRecordError,
    ResolutionError,
    SelectionCancelledError,
    ValidationRules,
)
from .prompt import TerminalPrompter, Prompter, ScriptedPrompter

__all__ = [
    "ConfigManager",
    "SessionManager",
    "setup_logger",
    "AmbiguousChoiceError",
    "EmptyCandidateSetError",
    "MalformedRecordError",
    "ResolutionError",
    "SelectionCancelledError",
    "ValidationRules",
    "TerminalPrompter",
    "Prompter",
    "ScriptedPrompter",
]
