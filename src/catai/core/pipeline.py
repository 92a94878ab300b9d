# src/catai/core/pipeline.py
from functools import partial
from pathlib import Path
from typing import List

from catai.core.classifier import is_text_file
from catai.core.gate import Prompt, SizeGate
from catai.core.patterns import compile_patterns, display_name, filter_paths
from catai.core.resolver import make_candidate, resolve_paths
from catai.models import Candidate, Configuration, Selection


def select_files(config: Configuration, prompt: Prompt, base: Path) -> Selection:
    """
    Runs resolution, classification, pattern filtering and the size gate,
    strictly in that order. Nothing is reordered along the way.
    """
    include = compile_patterns(config.include)
    exclude = compile_patterns(config.exclude)
    selection = Selection()

    text_files: List[Candidate] = []
    for path in resolve_paths(config.paths):
        try:
            candidate = make_candidate(path)
        except OSError:
            # Vanished or unreadable since the walk; same as a failed sample
            selection.binary.append(path)
            continue
        if is_text_file(candidate):
            text_files.append(candidate)
        else:
            selection.binary.append(path)

    kept = set(filter_paths(
        (c.path for c in text_files), include, exclude, base, rejected=selection.filtered,
    ))
    gate = SizeGate(
        threshold=config.max_size,
        prompt=prompt,
        auto_confirm=config.yes,
        name_for=partial(display_name, base=base),
    )
    return gate.run((c for c in text_files if c.path in kept), selection)
