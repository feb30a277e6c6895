"""First-step suggestion pipeline.

- models: Task, FirstStepSuggestion, FocusSnapshot
- prompt: model instruction with a fixed JSON output contract
- extraction: raw model text -> candidate suggestion
- validators: ordered quality gates over the candidate
- service: FocusService, which ties the above to a state store and a model
"""

from focus_coach.focus.extraction import extract_suggestion
from focus_coach.focus.models import FirstStepSuggestion, FocusSnapshot, Task, format_focus
from focus_coach.focus.prompt import build_first_step_prompt
from focus_coach.focus.validators import VALIDATORS, Validator, validate_suggestion

__all__ = [
    "FirstStepSuggestion",
    "FocusSnapshot",
    "Task",
    "VALIDATORS",
    "Validator",
    "build_first_step_prompt",
    "extract_suggestion",
    "format_focus",
    "validate_suggestion",
]
