"""UI Components for the German Vocabulary Trainer"""

from app.ui.flashcard import render_flashcard
from app.ui.session_stats import render_pool_counts, render_session_complete, render_session_stats

__all__ = [
    "render_flashcard",
    "render_pool_counts",
    "render_session_complete",
    "render_session_stats",
]
