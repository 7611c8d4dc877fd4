"""
Conversation engine — fills a quote context from free-text chat messages.

The context is filled in a fixed order:

    client_name → address → quote_type → project_type → sqft → paint_quality
    → timeline (advanced quotes only)

Each message only ever fills fields that are still unset; a field that is
already in the context is never overwritten. Interpretation of ambiguous
answers (a bare "2", a bare "1800", "standard") depends on which field is
currently being asked for, so the same word can't land in two fields.

The engine is stateless: callers pass in the current context and merge the
returned patch themselves (see apply_patch).
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

FIELD_ORDER = [
    "client_name",
    "address",
    "quote_type",
    "project_type",
    "sqft",
    "paint_quality",
    "timeline",
]

REQUIRED_FIELDS = {
    "quick": FIELD_ORDER[:-1],
    "advanced": FIELD_ORDER,
}

QUESTIONS = {
    "client_name": "What's the client's name?",
    "address": "Got it! {client_name}. What's the property address?",
    "quote_type": "Would you like a Quick quote (basic estimate) or Advanced quote (detailed breakdown)?",
    "project_type": "What type of painting - interior, exterior, or both?",
    "sqft": "How many square feet are we looking at?",
    "paint_quality": "What paint quality would they like - basic, premium, or luxury?",
    "timeline": "What's the timeline - rush (2-3 days), standard (3-5 days), or flexible (5-7 days)?",
}

RESET_QUESTION = "What's the client's name and address?"

SQFT_MIN = 500
SQFT_MAX = 50000

# Fields filled in when a data dump gives name, address and sqft in one go
DATA_DUMP_DEFAULTS = {
    "quote_type": "quick",
    "project_type": "interior",
    "paint_quality": "premium",
}

# Answers to numbered options, keyed by the field being asked for
NUMBERED_OPTIONS = {
    "quote_type": {"1": "quick", "2": "advanced"},
    "project_type": {"1": "interior", "2": "exterior", "3": "both"},
    "paint_quality": {"1": "basic", "2": "premium", "3": "luxury"},
    "timeline": {"1": "rush", "2": "standard", "3": "flexible"},
}

# (value, pattern) pairs, first match wins. "strong" patterns are read from
# any message; "weak" ones only when their field is the one being asked for.
KEYWORDS = {
    "quote_type": {
        "strong": [
            ("quick", r"\b(quick|fast|simple|estimate|rough|ballpark)\b"),
            ("advanced", r"\b(advanced|detailed|full|breakdown|itemi[sz]ed|comprehensive)\b"),
        ],
        "weak": [
            ("quick", r"\bbasic\b"),
            ("advanced", r"\bcomplete\b"),
        ],
    },
    "project_type": {
        "strong": [
            ("both", r"\b(both|whole\s*house)\b"),
            ("both", r"\b(in|interior|inside)\s*(and|&|,)\s*(out|exterior|outside)\b"),
            ("both", r"\b(out|exterior|outside)\s*(and|&|,)\s*(in|interior|inside)\b"),
            ("interior", r"\b(interior|inside|indoors?)\b"),
            ("exterior", r"\b(exterior|outside|outdoors?)\b"),
        ],
        "weak": [
            ("both", r"\b(everything|all|complete)\b"),
            ("interior", r"\bin\b"),
            ("exterior", r"\bout\b"),
        ],
    },
    "paint_quality": {
        "strong": [
            ("luxury", r"\b(luxury|high[-\s]?end|finest|highest|deluxe|superior)\b"),
            ("premium", r"\bpremium\b"),
            ("basic", r"\b(economy|cheap|cheapest|budget|lowest|minimum)\b"),
        ],
        "weak": [
            ("basic", r"\b(basic|low|first|1st)\b"),
            ("premium", r"\b(standard|good|regular|normal|mid|middle|average|medium|second|2nd)\b"),
            ("luxury", r"\b(best|top|third|3rd)\b"),
        ],
    },
    "timeline": {
        "strong": [
            ("flexible", r"\b(flexible|no\s*rush|whenever|no\s*hurry|anytime|relaxed)\b"),
            ("flexible", r"\b5\s*(-|to)\s*7\s*days?\b"),
            ("rush", r"\b(rush|asap|urgent|immediately)\b"),
            ("rush", r"\b2\s*(-|to)\s*3\s*days?\b|\bcouple\s*(of\s*)?days\b"),
            ("standard", r"\b3\s*(-|to)\s*5\s*days?\b"),
        ],
        "weak": [
            ("rush", r"^\s*2\s*(-|to)\s*3\s*$|\b(quick|quickly|soon|fast)\b"),
            ("flexible", r"^\s*5\s*(-|to)\s*7\s*$|\b(week|7\s*days)\b"),
            ("standard", r"^\s*3\s*(-|to)\s*5\s*$|\b(standard|normal|regular|typical)\b"),
            ("standard", r"\b(several|few|some)\s*days\b"),
        ],
    },
    "prep_work": {
        "strong": [
            ("minimal", r"\b(minimal|light|little|no)\s+prep"),
            ("extensive", r"\b(extensive|heavy|major|lots\s+of)\s+prep|\b(peeling|flaking)\b"),
            ("standard", r"\b(standard|normal|regular)\s+prep"),
        ],
    },
}

RESET_PATTERN = re.compile(
    r"\banother\b"
    r"|\bnew\s+(?:\w+\s+)?(?:quote|estimate|job|client|customer|one|project)\b"
    r"|^\s*new\s*[.!]?\s*$"
)

STREET_WORDS = (r"street|st|avenue|ave|road|rd|drive|dr|lane|ln|way|boulevard|blvd|"
                r"court|ct|place|pl|circle|cir|terrace|ter|parkway|pkwy")
ADDRESS_HINT = re.compile(r"\d+.*\b(" + STREET_WORDS + r")\b", re.I)

NAME_AND_ADDRESS = re.compile(
    r"^(?:the\s+|client\s+)?name\s+is\s+([^,]+?)\s+and\s+(?:the\s+)?address\s+is\s+(.+)$", re.I)
X_AND_ADDRESS = re.compile(r"^([^,]+?)\s+and\s+(?:the\s+)?address\s+is\s+(.+)$", re.I)
NAME_AT_ADDRESS = re.compile(r"^(.+?)\s+at\s+(.+)$", re.I)
NAME_IS = re.compile(r"\b(?:the\s+|my\s+|client\s+)?name\s+is\s+(.+)$", re.I)
ADDRESS_IS = re.compile(r"\baddress\s+is\s+(.+)$", re.I)

SQFT_NUMBER = r"(\d{1,2},\d{3}|\d{3,5})"
SQFT_WITH_UNITS = re.compile(
    r"(?<![\d,])" + SQFT_NUMBER
    + r"\s*(?:sq\.?\s*(?:ft|feet|foot)|sqft|square\s*(?:feet|foot|ft)|sf|feet|foot|ft)\b", re.I)
SQFT_APPROX = re.compile(r"\b(?:about|around|approximately|approx\.?|roughly)\s*" + SQFT_NUMBER + r"\b", re.I)
SQFT_THOUSANDS = re.compile(r"(?<![\d.])(\d+(?:\.\d+)?)\s*k\b", re.I)
SQFT_BARE = re.compile(r"^\s*" + SQFT_NUMBER + r"\s*$")

# --- Data dump patterns ---

DUMP_NAME_PATTERNS = [
    re.compile(r"\b(?i:client|customer|name)(?:\s+is|\s*:|\s+of)?\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"),
    re.compile(r"\b(?i:for)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"),
    re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+(?i:at|needs|wants|has)\b"),
]
NOT_A_NAME = re.compile(r"\d|\b(street|st|ave|avenue|road|rd|drive|dr|sqft|sq|ft|doors?|paint)\b", re.I)

DUMP_ADDRESS_PATTERNS = [
    re.compile(r"\b(?:address|location|property|at)\s+(?:is\s+)?(.+?)"
               r"(?=\s+(?:has|needs|wants|with)\b|\s+\d[\d,]*\s*(?:sq|square)|\s*[,;]|\s*$)", re.I),
    re.compile(r"(\d+\s+[^,\d]+?\b(?:" + STREET_WORDS + r")\b\.?)", re.I),
]

DUMP_DOOR_PATTERNS = [
    re.compile(r"\b(\d+)\s*(?:interior\s+|exterior\s+)?doors?\b", re.I),
    re.compile(r"\bdoors?\s*:?\s*(\d+)\b", re.I),
]

DUMP_QUALITY_PATTERN = re.compile(
    r"\b(basic|standard|premium|luxury|high[-\s]?end|low[-\s]?end)\s*(?:paint|quality)\b", re.I)
DUMP_BRAND_PATTERN = re.compile(r"\b(sherwin[-\s]?williams|benjamin[-\s]?moore|behr|valspar)\b", re.I)

DUMP_PROJECT_PATTERNS = [
    ("both", re.compile(r"\b(both|everything|complete|whole\s*house)\b", re.I)),
    ("interior", re.compile(r"\b(interior|inside|indoor)\b", re.I)),
    ("exterior", re.compile(r"\b(exterior|outside|outdoor)\b", re.I)),
]

DUMP_TIMELINE_PATTERNS = [
    ("flexible", re.compile(r"\b(flexible|no\s*rush|whenever)\b", re.I)),
    ("rush", re.compile(r"\b(rush|urgent|asap|quickly?)\b", re.I)),
    ("standard", re.compile(r"\b(?:in|within)\s*\d+\s*(?:days?|weeks?)\b", re.I)),
]

DUMP_SURFACE_PATTERNS = [
    ("walls_sqft", re.compile(r"\b(\d+)\s*(?:sq\.?\s*ft\.?\s*)?(?:of\s*)?walls?\b", re.I)),
    ("ceilings_sqft", re.compile(r"\b(\d+)\s*(?:sq\.?\s*ft\.?\s*)?(?:of\s*)?ceilings?\b", re.I)),
    ("trim_sqft", re.compile(r"\b(\d+)\s*(?:linear\s*ft\.?\s*|lin\s*ft\.?\s*)?(?:of\s*)?trim\b", re.I)),
]

# Facts needed before a message is treated as a data dump
DATA_DUMP_MIN_ITEMS = 3


# =====================================================================
# Context bookkeeping
# =====================================================================

def get_required_fields(quote_type: Optional[str] = None) -> list[str]:
    """Fields that must be set before a quote can be priced. Unknown type → quick set."""
    return list(REQUIRED_FIELDS.get(quote_type, REQUIRED_FIELDS["quick"]))


def get_next_field(context: dict) -> Optional[str]:
    """The first unset required field in priority order, or None when complete."""
    context = context or {}
    for field in get_required_fields(context.get("quote_type")):
        if not _is_set(context.get(field)):
            return field
    return None


def get_next_question(context: dict, questions: dict = None) -> str:
    """Prompt for the next unset field. Empty string once the context is complete."""
    questions = questions or QUESTIONS
    field = get_next_field(context)
    if field is None:
        return ""
    return questions[field].format(client_name=(context or {}).get("client_name", ""))


def is_complete(context: dict) -> bool:
    """Are all required fields for the context's quote type set?"""
    return get_next_field(context) is None


def get_completion_status(context: dict) -> dict:
    """Return detailed completion status."""
    context = context or {}
    required = get_required_fields(context.get("quote_type"))
    answered_required = [f for f in required if _is_set(context.get(f))]
    missing_required = [f for f in required if not _is_set(context.get(f))]

    return {
        "is_complete": len(missing_required) == 0,
        "required_total": len(required),
        "required_answered": len(answered_required),
        "required_missing": missing_required,
        "next_field": missing_required[0] if missing_required else None,
        "completion_pct": round(
            len(answered_required) / max(len(required), 1) * 100, 1
        ),
    }


def apply_patch(context: dict, patch: dict) -> dict:
    """
    Merge an extracted patch into a context. Returns a new dict.
    Fields already set in the context are kept; empty patch values are ignored.
    """
    merged = dict(context or {})
    for key, value in (patch or {}).items():
        if _is_set(value) and not _is_set(merged.get(key)):
            merged[key] = value
    return merged


# =====================================================================
# Message parsing
# =====================================================================

def enhanced_parse_message(message: str, context: dict) -> dict:
    """
    Extract context fields from one chat message.

    Returns:
        {
            extracted_info: dict,   # patch of newly-found fields only
            next_question: str,     # '' when the context is complete
            is_complete: bool,
            reset: bool,            # user asked to start a new quote
        }
    """
    context = dict(context or {})
    message = str(message or "").strip()
    lower = message.lower()

    if _wants_new_quote(lower, context):
        logger.info("New quote requested — resetting conversation")
        return {
            "extracted_info": {},
            "next_question": RESET_QUESTION,
            "is_complete": False,
            "reset": True,
        }

    dump = parse_data_dump(message)
    if dump["found_multiple_items"]:
        logger.info("Data dump detected (%d items)", dump["items_found"])
        extracted = _unset_only(dump["extracted_info"], context)
        merged = apply_patch(context, extracted)
        if all(_is_set(merged.get(f)) for f in ("client_name", "address", "sqft")):
            for key, default in DATA_DUMP_DEFAULTS.items():
                if not _is_set(merged.get(key)):
                    extracted[key] = default
            if merged.get("quote_type") == "advanced" and not _is_set(merged.get("timeline")):
                extracted["timeline"] = "standard"
    else:
        extracted = _extract_fields(message, context)

    logger.debug("Extracted %s from %r", extracted, message)
    return build_response(context, extracted)


def build_response(context: dict, extracted: dict, questions: dict = None) -> dict:
    """Merge the patch and work out the next prompt."""
    merged = apply_patch(context, extracted)
    next_question = get_next_question(merged, questions)
    return {
        "extracted_info": extracted,
        "next_question": next_question,
        "is_complete": next_question == "",
        "reset": False,
    }


def parse_data_dump(message: str) -> dict:
    """
    Pull every recognisable fact out of a long free-form message, e.g.
    "John Smith at 123 Main St, 2000 sqft interior, 4 doors, premium paint".

    Returns:
        {
            found_multiple_items: bool,   # at least DATA_DUMP_MIN_ITEMS facts
            items_found: int,
            extracted_info: dict,
        }
    """
    message = str(message or "")
    info = {}

    for pattern in DUMP_NAME_PATTERNS:
        match = pattern.search(message)
        if match and not NOT_A_NAME.search(match.group(1)):
            info["client_name"] = match.group(1).strip()
            break

    for pattern in DUMP_ADDRESS_PATTERNS:
        match = pattern.search(message)
        if match and re.search(r"\d", match.group(1)):
            info["address"] = match.group(1).strip()
            break

    for match in SQFT_WITH_UNITS.finditer(message):
        sqft = _sqft_in_range(match.group(1))
        if sqft:
            info["sqft"] = sqft
            break

    for pattern in DUMP_DOOR_PATTERNS:
        match = pattern.search(message)
        if match and int(match.group(1)) > 0:
            info["doors"] = int(match.group(1))
            break

    quality = DUMP_QUALITY_PATTERN.search(message)
    if quality:
        word = quality.group(1).lower()
        if word.startswith(("basic", "low")):
            info["paint_quality"] = "basic"
        elif word.startswith(("luxury", "high")):
            info["paint_quality"] = "luxury"
        else:
            info["paint_quality"] = "premium"
    elif DUMP_BRAND_PATTERN.search(message):
        # Name-brand paint → premium tier
        info["paint_quality"] = "premium"

    for value, pattern in DUMP_PROJECT_PATTERNS:
        if pattern.search(message):
            info["project_type"] = value
            break

    for value, pattern in DUMP_TIMELINE_PATTERNS:
        if pattern.search(message):
            info["timeline"] = value
            break

    for key, pattern in DUMP_SURFACE_PATTERNS:
        match = pattern.search(message)
        if match:
            info[key] = int(match.group(1))

    return {
        "found_multiple_items": len(info) >= DATA_DUMP_MIN_ITEMS,
        "items_found": len(info),
        "extracted_info": info,
    }


def _extract_fields(message: str, context: dict) -> dict:
    """Single-answer path: one field per message, usually the one just asked for."""
    lower = message.lower()
    solicited = get_next_field(context)

    extracted, consumed = _extract_name_address(message, context, solicited)
    if consumed:
        return extracted

    # Quote type is only offered once we know who and where
    if (not _is_set(context.get("quote_type"))
            and _is_set(context.get("client_name")) and _is_set(context.get("address"))):
        quote_type = match_keywords("quote_type", lower, solicited)
        if quote_type:
            extracted["quote_type"] = quote_type

    for field in ("project_type", "paint_quality", "timeline", "prep_work"):
        if _is_set(context.get(field)):
            continue
        value = match_keywords(field, lower, solicited)
        if value:
            extracted[field] = value

    # Street numbers are not square footage
    if not _is_set(context.get("sqft")) and "address" not in extracted:
        sqft = extract_sqft(message, solicited)
        if sqft:
            extracted["sqft"] = sqft

    return extracted


def _extract_name_address(message: str, context: dict, solicited: Optional[str]) -> tuple:
    """
    Returns (patch, consumed). consumed is True when the whole message was
    taken as a name or address, in which case nothing else is read from it.
    """
    need_name = not _is_set(context.get("client_name"))
    need_address = not _is_set(context.get("address"))
    if not (need_name or need_address) or not message:
        return {}, False

    found = {}
    match = NAME_AND_ADDRESS.match(message) or X_AND_ADDRESS.match(message)
    if match and len(match.group(1)) <= 50 and not ADDRESS_HINT.search(match.group(1)):
        found = {"client_name": match.group(1), "address": match.group(2)}
    elif need_name and NAME_IS.search(message):
        found = {"client_name": NAME_IS.search(message).group(1)}
    elif need_name and NAME_AT_ADDRESS.match(message):
        match = NAME_AT_ADDRESS.match(message)
        found = {"client_name": match.group(1), "address": match.group(2)}
    elif need_name and "," in message:
        name, _, address = message.partition(",")
        found = {"client_name": name, "address": address}
    elif need_address and ADDRESS_IS.search(message):
        found = {"address": ADDRESS_IS.search(message).group(1)}

    patch = _unset_only({k: _clean(v) for k, v in found.items()}, context)
    if patch:
        return patch, False

    # Bare answer to the question just asked
    if solicited == "client_name" and re.search(r"[a-z]", message, re.I) and not ADDRESS_HINT.search(message):
        return {"client_name": _clean(message)}, True
    if solicited == "address":
        return {"address": _clean(message)}, True
    return {}, False


def match_keywords(field: str, lower: str, solicited: Optional[str]) -> Optional[str]:
    """
    Look a field's value up in the keyword table.
    Weak words and numbered answers only count when the field is being asked for.
    """
    table = KEYWORDS[field]
    for value, pattern in table["strong"]:
        if re.search(pattern, lower):
            return value

    if field != solicited:
        return None

    for value, pattern in table.get("weak", []):
        if re.search(pattern, lower):
            return value
    return NUMBERED_OPTIONS.get(field, {}).get(lower.strip().rstrip("."))


def extract_sqft(message: str, solicited: Optional[str]) -> Optional[int]:
    """
    Square footage needs a unit, an "about X" or an "Xk". A bare number only
    counts when square footage is the question being answered.
    """
    for pattern in (SQFT_WITH_UNITS, SQFT_APPROX):
        match = pattern.search(message)
        if match:
            return _sqft_in_range(match.group(1))

    match = SQFT_THOUSANDS.search(message)
    if match:
        return _sqft_in_range(round(float(match.group(1)) * 1000))

    if solicited == "sqft":
        match = SQFT_BARE.match(message)
        if match:
            return _sqft_in_range(match.group(1))
    return None


def _wants_new_quote(lower: str, context: dict) -> bool:
    return (_is_set(context.get("client_name"))
            and "view" not in lower
            and RESET_PATTERN.search(lower) is not None)


def _sqft_in_range(value) -> Optional[int]:
    number = int(str(value).replace(",", ""))
    if SQFT_MIN <= number <= SQFT_MAX:
        return number
    return None


def _unset_only(patch: dict, context: dict) -> dict:
    return {k: v for k, v in patch.items() if _is_set(v) and not _is_set(context.get(k))}


def _clean(text: str) -> str:
    return text.strip().rstrip(".!?").strip()


def _is_set(value) -> bool:
    return value is not None and value != "" and value != 0
