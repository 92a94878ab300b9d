# tests/test_gate.py
"""Size gate state machine, driven with synthetic candidates and canned answers."""
import pytest
from pathlib import Path

from catai.core.gate import Answer, SizeGate, Verdict, apply_answer, parse_answer
from catai.models import Candidate, GateState

THRESHOLD = 100


class ScriptedPrompt:
    """Replays answers in order and records every question asked."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def __call__(self, message):
        self.asked.append(message)
        return self.answers.pop(0)


def _candidates(*sizes):
    return [Candidate(path=Path(f"/p/f{i}.txt"), size=size) for i, size in enumerate(sizes)]


def _gate(prompt, auto_confirm=False):
    return SizeGate(
        threshold=THRESHOLD,
        prompt=prompt,
        auto_confirm=auto_confirm,
        name_for=lambda p: p.name,
        token_counter=lambda p: 0,
    )


def _never_asked(message):
    raise AssertionError(f"unexpected prompt: {message}")


# --- Answer parsing ---

@pytest.mark.parametrize("text,expected", [
    ("y", Answer.YES),
    (" YES \n", Answer.YES),
    ("a", Answer.ALL),
    ("All", Answer.ALL),
    ("s", Answer.STOP),
    ("SKIP", Answer.STOP),
    ("n", Answer.NO),
    ("no", Answer.NO),
    ("", Answer.NO),
    (None, Answer.NO),
    ("maybe", Answer.NO),
])
def test_parse_answer(text, expected):
    assert parse_answer(text) is expected


def test_apply_answer_transitions():
    assert apply_answer(GateState.NORMAL, Answer.YES) == (Verdict.INCLUDE, GateState.NORMAL)
    assert apply_answer(GateState.NORMAL, Answer.NO) == (Verdict.SKIP, GateState.NORMAL)
    assert apply_answer(GateState.NORMAL, Answer.ALL) == (Verdict.INCLUDE, GateState.AUTO_INCLUDE)
    assert apply_answer(GateState.NORMAL, Answer.STOP) == (Verdict.SKIP, GateState.STOPPED)


# --- Gate runs ---

def test_small_files_never_prompt():
    selection = _gate(_never_asked).run(_candidates(0, 50, THRESHOLD))
    assert [p.name for p in selection.included] == ["f0.txt", "f1.txt", "f2.txt"]
    assert selection.state is GateState.NORMAL


def test_yes_and_no_only_affect_one_file():
    prompt = ScriptedPrompt("y", "n", "whatever")
    selection = _gate(prompt).run(_candidates(500, 10, 500, 500))

    assert [p.name for p in selection.included] == ["f0.txt", "f1.txt"]
    assert selection.skipped == ["f2.txt", "f3.txt"]
    assert len(prompt.asked) == 3
    assert selection.state is GateState.NORMAL


def test_all_is_sticky():
    prompt = ScriptedPrompt("n", "a")
    selection = _gate(prompt).run(_candidates(500, 500, 10, 500, 900))

    assert [p.name for p in selection.included] == ["f1.txt", "f2.txt", "f3.txt", "f4.txt"]
    assert selection.skipped == ["f0.txt"]
    assert len(prompt.asked) == 2
    assert selection.state is GateState.AUTO_INCLUDE


def test_skip_all_stops_evaluation():
    prompt = ScriptedPrompt("y", "s")
    selection = _gate(prompt).run(_candidates(500, 500, 10, 500))

    assert [p.name for p in selection.included] == ["f0.txt"]
    assert selection.skipped == ["f1.txt"]
    # Even the small file after the stop is left alone
    assert [p.name for p in selection.unprocessed] == ["f2.txt", "f3.txt"]
    assert len(prompt.asked) == 2
    assert selection.state is GateState.STOPPED


def test_auto_confirm_includes_everything_without_prompting():
    selection = _gate(_never_asked, auto_confirm=True).run(_candidates(10, 500, 5000))
    assert len(selection.included) == 3
    assert selection.state is GateState.AUTO_INCLUDE


def test_stopped_gate_refuses_to_step():
    with pytest.raises(ValueError):
        _gate(_never_asked).step(_candidates(10)[0], GateState.STOPPED)


def test_prompt_message_mentions_name_size_and_tokens():
    prompt = ScriptedPrompt("n")
    gate = SizeGate(
        threshold=THRESHOLD,
        prompt=prompt,
        name_for=lambda p: "src/huge.sql",
        token_counter=lambda p: 43_000,
    )
    gate.run([Candidate(path=Path("/p/huge.sql"), size=150 * 1024)])

    message = prompt.asked[0]
    assert "Large file: src/huge.sql" in message
    assert "Size: 150.0KB (~43.0k tokens)" in message
    assert "[y]es / [n]o / [a]ll / [s]kip all" in message
