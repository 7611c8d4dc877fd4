"""
Simple conversation parser — the first-generation chat extractor.

Same contract as enhanced_parse_message, with looser matching: a fuzzy
misspelling table for paint quality and project type, any 3–5 digit number
taken as square footage, and detection of "how did you get that?" style
follow-ups once a quote has been given.
"""

import logging
import re

from .engine import (
    RESET_QUESTION,
    SQFT_WITH_UNITS,
    _clean,
    _is_set,
    _sqft_in_range,
    _unset_only,
    apply_patch,
    build_response,
    get_next_field,
)

logger = logging.getLogger(__name__)

# Returned as next_question when the user asks how a quote was built
PROVIDE_BREAKDOWN = "PROVIDE_BREAKDOWN"

QUESTIONS = {
    "client_name": "What's the client's name?",
    "address": "Got it, {client_name}. What's the address?",
    "quote_type": "Would you like a Quick quote (basic estimate) or Advanced quote (detailed breakdown)?",
    "project_type": "Interior or exterior painting?",
    "sqft": "How many square feet?",
    "paint_quality": "Basic, premium, or luxury paint?",
    "timeline": "When do they need it done?",
}

# Misspellings and synonyms → canonical value
FUZZY_TERMS = {
    "paint_quality": {
        "lucury": "luxury",
        "luxery": "luxury",
        "premum": "premium",
        "premiem": "premium",
        "baisic": "basic",
        "basik": "basic",
        "economy": "basic",
        "standard": "premium",
        "high-end": "luxury",
        "high end": "luxury",
    },
    "project_type": {
        "intrior": "interior",
        "interor": "interior",
        "inside": "interior",
        "exteror": "exterior",
        "exterier": "exterior",
        "outside": "exterior",
        "both": "both",
        "inside and outside": "both",
        "interior and exterior": "both",
    },
}

VALID_TERMS = {
    "paint_quality": ["basic", "premium", "luxury"],
    "project_type": ["interior", "exterior", "both"],
}

BREAKDOWN_WORDS = ["detail", "breakdown", "labour", "labor", "material", "paint",
                   "how did you", "what is"]
RESET_BLOCKERS = ["detail", "breakdown", "how", "what", "view"]

NAME_ADDRESS = re.compile(r"^([^,@]+?)(?:\s+at\s+|\s*,\s*)(.+?)(?:\.|,|$)", re.I)
ANY_SQFT_NUMBER = re.compile(r"\b(\d{3,5})\b")


def fuzzy_match_term(text: str, category: str):
    """
    Map free text to a canonical paint quality or project type.
    Longer phrases are tried first so "inside and outside" beats "inside".
    """
    lower = text.lower()
    table = FUZZY_TERMS[category]
    for key in sorted(table, key=len, reverse=True):
        if key in lower:
            return table[key]

    for term in VALID_TERMS[category]:
        if term in lower:
            return term
    return None


def parse_message(message: str, context: dict) -> dict:
    """
    Extract context fields from one chat message.

    Returns the same shape as enhanced_parse_message. next_question is
    PROVIDE_BREAKDOWN when the user is asking how a finished quote was built.
    """
    context = dict(context or {})
    message = str(message or "").strip()
    lower = message.lower()

    if _is_set(context.get("client_name")) and _wants_new_quote(lower):
        logger.info("New quote requested — resetting conversation")
        return {
            "extracted_info": {},
            "next_question": RESET_QUESTION,
            "is_complete": False,
            "reset": True,
        }

    if (_is_set(context.get("client_name")) and _is_set(context.get("sqft"))
            and _is_set(context.get("paint_quality"))
            and any(word in lower for word in BREAKDOWN_WORDS)):
        return {
            "extracted_info": {},
            "next_question": PROVIDE_BREAKDOWN,
            "is_complete": False,
            "reset": False,
        }

    extracted = _extract_fields(message, context)
    logger.debug("Extracted %s from %r", extracted, message)
    return build_response(context, extracted, QUESTIONS)


def _extract_fields(message: str, context: dict) -> dict:
    lower = message.lower()
    solicited = get_next_field(context)
    extracted = {}

    # --- Name and address ---
    if not _is_set(context.get("client_name")) or not _is_set(context.get("address")):
        match = NAME_ADDRESS.match(message)
        if match:
            extracted.update(_unset_only({
                "client_name": _clean(match.group(1)),
                "address": _clean(match.group(2)),
            }, context))
        elif solicited == "client_name" and len(message.split()) >= 2:
            return {"client_name": _clean(message)}
        elif solicited == "address" and message:
            return {"address": _clean(message)}

    # --- Project type, paint quality ---
    for field in ("project_type", "paint_quality"):
        if not _is_set(context.get(field)):
            value = fuzzy_match_term(message, field)
            if value:
                extracted[field] = value

    # --- Square footage ---
    if not _is_set(context.get("sqft")):
        match = SQFT_WITH_UNITS.search(message)
        if match:
            sqft = _sqft_in_range(match.group(1))
        elif "address" not in extracted and ANY_SQFT_NUMBER.search(message):
            sqft = _sqft_in_range(ANY_SQFT_NUMBER.search(message).group(1))
        else:
            sqft = None
        if sqft:
            extracted["sqft"] = sqft

    # --- Timeline ---
    if not _is_set(context.get("timeline")):
        if "no rush" in lower or "flexible" in lower:
            extracted["timeline"] = "flexible"
        elif "rush" in lower or "asap" in lower or "urgent" in lower:
            extracted["timeline"] = "rush"
        elif "standard" in lower or "normal" in lower:
            extracted["timeline"] = "standard"

    # --- Quote type, once we know who and where ---
    merged = apply_patch(context, extracted)
    if (not _is_set(context.get("quote_type"))
            and _is_set(merged.get("client_name")) and _is_set(merged.get("address"))):
        if "quick" in lower or "basic estimate" in lower:
            extracted["quote_type"] = "quick"
        elif "advanced" in lower or "detailed" in lower:
            extracted["quote_type"] = "advanced"

    return extracted


def _wants_new_quote(lower: str) -> bool:
    if any(word in lower for word in RESET_BLOCKERS):
        return False
    return bool(re.search(r"\b(another|new)\b", lower))
