"""Named validation rules for path placeholders.

A route attaches rules per placeholder name, e.g. ``{"id": "numeric"}``.
Placeholders without a rule fall back to ``DEFAULT_RULE``.
"""

from signpost.errors import UnknownRuleError

# rule id -> regex character class (matched one-or-more times)
RULES: dict[str, str] = {
    "numeric": r"[0-9]",
    "letters": r"[a-zA-Z]",
    "alphanumeric": r"[a-zA-Z0-9]",
    "alphanumeric_underscore": r"[a-zA-Z0-9_]",
    "alphanumeric_full": r"[a-zA-Z0-9_\-]",
}

DEFAULT_RULE = "alphanumeric_underscore"


def resolve_rule(rule_id: str) -> str:
    """Return the character class for *rule_id*.

    Raises ``UnknownRuleError`` if *rule_id* is not a built-in rule.
    """
    try:
        return RULES[rule_id]
    except KeyError:
        raise UnknownRuleError(rule_id) from None
