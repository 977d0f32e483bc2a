from __future__ import annotations
from typing import Any, Dict, List, Sequence


def validate_phrases(sentence: str, phrases: Sequence[str]) -> Dict[str, Any]:
    """
    Performs sanity checks on a phrase list against the sentence it came from.

    The parser guarantees these properties itself; this check exists for
    output that passed through other hands (files, post-processing) before
    being used for typesetting. It looks for:
    -   Phrases that do not concatenate back to the sentence.
    -   Empty phrases.
    -   An empty phrase list for a non-empty sentence, or the reverse.

    Args:
        sentence: The original input text.
        phrases: The phrases to check.

    Returns:
        A dictionary summarizing the validation results, containing the total
        `issue_count` and a list of `issues`, where each issue is a
        dictionary detailing the problem.
    """
    issues: List[Dict[str, Any]] = []

    if sentence and not phrases:
        issues.append({
            "type": "empty_result_error",
            "message": f"No phrases returned for a sentence of length {len(sentence)}."
        })
    if not sentence and phrases:
        issues.append({
            "type": "unexpected_result_error",
            "message": f"{len(phrases)} phrase(s) returned for an empty sentence."
        })

    for i, phrase in enumerate(phrases):
        if not phrase:
            issues.append({
                "type": "empty_phrase_error",
                "idx": i,
                "message": f"Phrase at index {i} is empty."
            })

    joined = "".join(phrases)
    if phrases and joined != sentence:
        issues.append({
            "type": "reconstruction_error",
            "message": f"Phrases join to {joined!r}, expected {sentence!r}."
        })

    return {"issue_count": len(issues), "issues": issues}
