"""Route template compilation.

Turns a template such as ``/news/{id}`` into an anchored, case-insensitive
regex with one named group per placeholder::

    compiled = compile_pattern("/news/{id}", {"id": "numeric"})
    compiled.match("/news/42")   # {"id": "42"}
    compiled.match("/news/abc")  # None
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from signpost.errors import ConfigurationError
from signpost.routing.rules import DEFAULT_RULE, resolve_rule

# {name} where name never spans a path separator or nests braces
PLACEHOLDER = re.compile(r"\{([^/{}]+)\}")

_FLAGS = re.IGNORECASE | re.ASCII


def normalize_path(path: str) -> str:
    """Trim trailing slashes, keeping ``"/"`` for the root."""
    return path.rstrip("/") or "/"


def placeholder_names(pattern: str) -> list[str]:
    """Return the placeholder names of *pattern* in order of appearance."""
    return PLACEHOLDER.findall(pattern)


def check_placeholder_name(name: str, pattern: str) -> None:
    """Raise ``ConfigurationError`` unless *name* is a valid identifier."""
    if not name.isidentifier():
        msg = f"Invalid placeholder {{{name}}} in {pattern!r}: names must be identifiers."
        raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled route template."""

    source: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]

    def match(self, path: str) -> dict[str, str] | None:
        """Match *path*, returning named captures or ``None``.

        The path is lower-cased first, so captured values come back
        lower-cased.
        """
        m = self.regex.fullmatch(normalize_path(path).lower())
        if m is None:
            return None
        return m.groupdict()


def compile_pattern(
    raw: str,
    rules: Mapping[str, str] | None = None,
    *,
    default_rule: str = DEFAULT_RULE,
) -> CompiledPattern:
    """Compile a route template with its per-placeholder *rules*.

    Raises ``UnknownRuleError`` if any placeholder resolves to an unknown
    rule id, and ``ConfigurationError`` if a placeholder name is not a valid
    identifier.
    """
    rule_items = tuple(sorted((rules or {}).items()))
    return _compile(raw, rule_items, default_rule)


@lru_cache(maxsize=1024)
def _compile(
    raw: str,
    rule_items: tuple[tuple[str, str], ...],
    default_rule: str,
) -> CompiledPattern:
    rules = dict(rule_items)
    template = normalize_path(raw)
    parts: list[str] = []
    names: list[str] = []
    pos = 0

    for m in PLACEHOLDER.finditer(template):
        parts.append(re.escape(template[pos : m.start()]))
        name = m.group(1)
        check_placeholder_name(name, raw)

        char_class = resolve_rule(rules.get(name, default_rule))
        if name in names:
            # Repeated name: same rule, only the first occurrence captures
            parts.append(f"(?:{char_class}+)")
        else:
            names.append(name)
            parts.append(f"(?P<{name}>{char_class}+)")
        pos = m.end()

    parts.append(re.escape(template[pos:]))
    regex = re.compile("^" + "".join(parts) + "$", _FLAGS)
    return CompiledPattern(source=raw, regex=regex, param_names=tuple(names))
