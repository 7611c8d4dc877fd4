"""
Chat-driven quote intake — fills a ConversationContext from free text.
"""

from .engine import (
    QUESTIONS,
    apply_patch,
    enhanced_parse_message,
    get_completion_status,
    get_next_field,
    get_next_question,
    get_required_fields,
    is_complete,
    parse_data_dump,
)
from .simple_parser import PROVIDE_BREAKDOWN, parse_message
