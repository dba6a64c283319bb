"""Routing — ordered, first-match-wins route table.

Routes are registered during setup, matched by regex in registration order,
and dispatched to handlers with captures reordered to the handler's
declared parameters.
"""
