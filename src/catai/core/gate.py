# src/catai/core/gate.py
"""
Size gate: decides, file by file and in order, whether files above the size
threshold go into the output.

The decision state is explicit (GateState) and threaded through each step.
AUTO_INCLUDE and STOPPED are sticky: once the operator answers "all" or
"skip all", no further questions are asked for the rest of the run.
"""
import enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from catai.core.concat import estimate_file_tokens
from catai.models import Candidate, GateState, Selection
from catai.utils.formatting import format_bytes, format_tokens

# Given a message, returns the operator's line of input (None on EOF)
Prompt = Callable[[str], Optional[str]]


class Verdict(enum.Enum):
    INCLUDE = "include"
    SKIP = "skip"


class Answer(enum.Enum):
    YES = "yes"
    NO = "no"
    ALL = "all"
    STOP = "stop"


_ANSWERS = {
    "y": Answer.YES,
    "yes": Answer.YES,
    "a": Answer.ALL,
    "all": Answer.ALL,
    "s": Answer.STOP,
    "skip": Answer.STOP,
}


def parse_answer(text: Optional[str]) -> Answer:
    """Anything unrecognised, including no answer at all, means 'no'."""
    return _ANSWERS.get((text or "").strip().lower(), Answer.NO)


def apply_answer(state: GateState, answer: Answer) -> Tuple[Verdict, GateState]:
    if answer is Answer.YES:
        return Verdict.INCLUDE, state
    if answer is Answer.ALL:
        return Verdict.INCLUDE, GateState.AUTO_INCLUDE
    if answer is Answer.STOP:
        return Verdict.SKIP, GateState.STOPPED
    return Verdict.SKIP, state


class SizeGate:
    def __init__(
        self,
        threshold: int,
        prompt: Prompt,
        auto_confirm: bool = False,
        name_for: Callable[[Path], str] = str,
        token_counter: Callable[[Path], int] = estimate_file_tokens,
    ):
        self.threshold = threshold
        self.prompt = prompt
        self.auto_confirm = auto_confirm
        self.name_for = name_for
        self.token_counter = token_counter

    def describe(self, candidate: Candidate) -> str:
        tokens = self.token_counter(candidate.path)
        return (
            f"\n⚠️  Large file: {self.name_for(candidate.path)}\n"
            f"   Size: {format_bytes(candidate.size)} (~{format_tokens(tokens)} tokens)\n"
            "   Include? [y]es / [n]o / [a]ll / [s]kip all: "
        )

    def step(self, candidate: Candidate, state: GateState) -> Tuple[Verdict, GateState]:
        if state is GateState.STOPPED:
            raise ValueError("size gate is stopped")

        if candidate.size <= self.threshold:
            return Verdict.INCLUDE, state

        if state is GateState.AUTO_INCLUDE or self.auto_confirm:
            return Verdict.INCLUDE, GateState.AUTO_INCLUDE

        answer = parse_answer(self.prompt(self.describe(candidate)))
        return apply_answer(state, answer)

    def run(self, candidates: Iterable[Candidate], selection: Optional[Selection] = None) -> Selection:
        selection = selection if selection is not None else Selection()
        pending = list(candidates)
        state = GateState.NORMAL

        for index, candidate in enumerate(pending):
            verdict, state = self.step(candidate, state)
            if verdict is Verdict.INCLUDE:
                selection.included.append(candidate.path)
            else:
                selection.skipped.append(self.name_for(candidate.path))

            if state is GateState.STOPPED:
                selection.unprocessed.extend(c.path for c in pending[index + 1:])
                break

        selection.state = state
        return selection
