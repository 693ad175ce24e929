from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.prompt import Confirm


def ask(questions: List[Dict[str, Any]], console: Optional[Console] = None) -> Dict[str, Any]:
    """
    Ask each question in turn and collect the answers by question name.

    Each question is a dict with "type", "name" and "message". Only
    "confirm" questions are supported; the answer is a bool (default yes).
    """
    answers = {}
    for question in questions:
        if question.get("type") != "confirm":
            raise ValueError(f"Unsupported question type: {question.get('type')}")
        answers[question["name"]] = Confirm.ask(
            question["message"],
            console=console,
            default=question.get("default", True),
        )
    return answers
