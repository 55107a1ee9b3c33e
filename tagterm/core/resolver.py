#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Turn a key press into exactly one action for the current scope."""

from typing import Optional, Sequence

from ..config.actions import Action, Scope, scope_priority
from ..utils.debug import DebugManager


def resolve_action(candidates: Sequence[Action], scope: Scope, debugger: Optional[DebugManager] = None) -> Action:
    """Pick the action a key means in ``scope``.

    A single candidate is used as-is. With several, the scope's own actions
    are tried first, then the general ones; anything else resolves to
    ``Action.NONE``.
    """
    if not candidates:
        return Action.NONE
    if len(candidates) == 1:
        return candidates[0]

    for action in scope_priority(scope):
        if action in candidates:
            if debugger is not None:
                debugger.debug_log(
                    "ACTION_RESOLVED",
                    f"Resolved {action.value} from {len(candidates)} candidates",
                    {"scope": scope.value, "candidates": [a.value for a in candidates]},
                )
            return action
    return Action.NONE


class ActionResolver:
    """Binds the resolution policy to a live keymap."""

    def __init__(self, keymap, logs=None):
        self.keymap = keymap
        self.logs = logs

    def resolve(self, key: str, scope: Scope) -> Action:
        debugger = self.logs.debugger if self.logs is not None else None
        return resolve_action(self.keymap.actions_for(key), scope, debugger)
