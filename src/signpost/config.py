"""Router configuration."""

from dataclasses import dataclass

from signpost.routing.rules import DEFAULT_RULE


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict_rules=True)
    """

    # Rule applied to placeholders that have no rule of their own
    default_rule: str = DEFAULT_RULE

    # Validate rule ids at registration instead of skipping the route at dispatch
    strict_rules: bool = False
