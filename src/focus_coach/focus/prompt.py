"""Model instruction for first-step generation.

The output contract (a single `{"suggestion": "..."}` object) is shared with
`focus_coach.focus.extraction`; keep the two in sync.
"""

from __future__ import annotations

from focus_coach.focus.models import Task

SUGGESTION_FIELD = "suggestion"

FIRST_STEP_PROMPT_TEMPLATE = """\
You are a productivity assistant. Your only goal is to defeat procrastination.
Give one concrete physical or digital action that a person can complete in five minutes or less to get started on their task.

RULES:
1. The action must be a single sentence.
2. The action must be a direct, imperative command that opens with a concrete verb (e.g. "Open...", "Write...", "List..."). Do not suggest mental actions like "Think about...".
3. Suggest only an action that starts this task and helps with it.
4. Do not assume tools, context or workflow that the task does not mention.
5. Your entire output must be ONLY a valid JSON object with exactly one string field, "{field}". Do not add explanations, other text, or markdown formatting such as ```json fences.

TASK: "{description}"

JSON OUTPUT:
{{"{field}": "The short, actionable command."}}
"""


def build_first_step_prompt(task: Task) -> str:
    """Render the first-step instruction for `task`."""
    return FIRST_STEP_PROMPT_TEMPLATE.format(
        field=SUGGESTION_FIELD,
        description=task.description.strip(),
    )
