"""Focus Coach.

Tracks one current task per user and an AI-generated first step for it:
- configuration loaded from `.env`
- structured logging
- a quality-gated suggestion pipeline behind a pluggable LLM provider
"""

__version__ = "0.1.0"

from focus_coach.core.config import FocusConfig
from focus_coach.focus.models import FirstStepSuggestion, Task
from focus_coach.focus.service import FocusService

__all__ = ["__version__", "FirstStepSuggestion", "FocusConfig", "FocusService", "Task"]
