"""Utilities for loading a question bank from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    ID: unique identifier for the card
    DOMAIN: 1.0 | 2.0 | 3.0 | 4.0   (or the full label, or NPF/ACI/NXOS/UCS)
    Q: Prompt text (supports markdown). Additional lines until the next
       marker are treated as part of the prompt, '#' lines included.
    A: Correct answer text

Example:

    ID: npf-001
    DOMAIN: 1.0
    Q: Which HTTP status code signals that a resource was created?
    A: 201 Created

Lines starting with '#' between blocks are comments.

Only the correct answer is stored; wrong options are generated at play time
from the answers of the other cards.
"""

from __future__ import annotations

from pathlib import Path

from dcauto_quiz.constants.quiz_constants import DEFAULT_QUESTIONS_PATH
from dcauto_quiz.core.errors import QuestionImportError
from dcauto_quiz.core.models import Question, parse_domain
from dcauto_quiz.core.question_bank import QuestionBank

_MARKERS = ("ID:", "DOMAIN:", "Q:", "A:")


def load_question_bank(file_path: Path = DEFAULT_QUESTIONS_PATH) -> QuestionBank:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_questions(text)
    if not questions:
        raise QuestionImportError("Question file did not contain any questions.")
    try:
        return QuestionBank(questions)
    except ValueError as exc:
        raise QuestionImportError(str(exc)) from exc


def parse_questions(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        # Comments only between blocks; inside a prompt '#' is markdown or CLI text.
        if stripped.startswith("#") and not current_block:
            continue
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block, number) for number, block in enumerate(blocks, start=1) if block]


def _parse_block(block: str, number: int) -> Question:
    fields: dict[str, list[str]] = {}
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        upper = line.upper()
        marker = next((m for m in _MARKERS if upper.startswith(m)), None)
        if marker is not None:
            current_section = marker[:-1]
            if current_section in fields:
                raise QuestionImportError(f"Block {number}: duplicate {marker} line.")
            fields[current_section] = [line[len(marker):].strip()]
            continue

        if current_section in ("Q", "A"):
            fields[current_section].append(line)
        else:
            raise QuestionImportError(
                f"Block {number}: text outside of a known section: '{line}'."
            )

    values = {key: "\n".join(lines).strip() for key, lines in fields.items()}
    for key in ("ID", "DOMAIN", "Q", "A"):
        if not values.get(key):
            raise QuestionImportError(f"Block {number}: missing {key}: line.")

    try:
        domain = parse_domain(values["DOMAIN"])
    except ValueError as exc:
        raise QuestionImportError(f"Block {number}: {exc}") from exc

    return Question(
        id=values["ID"],
        domain=domain,
        prompt=values["Q"],
        correct_answer=values["A"],
    )
