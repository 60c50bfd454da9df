"""Operator prompts.

The resolver only needs two things from whoever answers its questions:
pick one label out of a list, and answer yes or no. ``TerminalPrompter`` asks
a person at the terminal; ``ScriptedPrompter`` replays prepared answers.
"""

from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import click
import questionary

from .exceptions import EmptyCandidateSetError, SelectionCancelledError


class Prompter(Protocol):
    """Capability the resolver uses to ask the operator."""

    def choose(self, prompt_text: str, choices: Sequence[str]) -> str:
        ...

    def confirm(self, prompt_text: str) -> bool:
        ...


class TerminalPrompter:
    """Arrow-key selection through questionary, yes/no through click."""

    def __init__(self, default_confirm: bool = False):
        self.default_confirm = default_confirm

    def choose(self, prompt_text: str, choices: Sequence[str]) -> str:
        if not choices:
            raise EmptyCandidateSetError("choices")

        # ask() returns None when the operator interrupts the prompt
        answer = questionary.select(prompt_text, choices=list(choices)).ask()
        if answer is None:
            raise SelectionCancelledError(f"Selection cancelled: {prompt_text}")
        return answer

    def confirm(self, prompt_text: str) -> bool:
        try:
            return click.confirm(prompt_text, default=self.default_confirm)
        except click.Abort as e:
            raise SelectionCancelledError(f"Confirmation cancelled: {prompt_text}") from e


class ScriptedPrompter:
    """Non-interactive prompter that answers from prepared scripts.

    ``choices`` is consumed by ``choose`` and ``confirmations`` by
    ``confirm``, each in order. Running out of answers behaves like an
    operator cancelling the prompt. Every question asked is kept in
    ``asked`` as ``(kind, prompt_text, options)``.
    """

    def __init__(
        self,
        choices: Optional[Iterable[str]] = None,
        confirmations: Optional[Iterable[bool]] = None,
    ):
        self._choices = list(choices or [])
        self._confirmations = list(confirmations or [])
        self.asked: List[Tuple[str, str, Tuple[str, ...]]] = []

    def choose(self, prompt_text: str, choices: Sequence[str]) -> str:
        self.asked.append(("choose", prompt_text, tuple(choices)))
        if not choices:
            raise EmptyCandidateSetError("choices")
        if not self._choices:
            raise SelectionCancelledError(f"Selection cancelled: {prompt_text}")

        answer = self._choices.pop(0)
        if answer not in choices:
            raise ValueError(f"Scripted answer '{answer}' is not one of {list(choices)}")
        return answer

    def confirm(self, prompt_text: str) -> bool:
        self.asked.append(("confirm", prompt_text, ()))
        if not self._confirmations:
            raise SelectionCancelledError(f"Confirmation cancelled: {prompt_text}")
        return self._confirmations.pop(0)
