"""Caller-owned selection state for comparison views."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionState:
    """Entities selected for the evolution view in one session.

    Attributes:
        selected: Entity keys currently selected.
        user_has_selected: True once the user changed the selection in this
            session, even if the change emptied it. A default suggestion is
            never applied after that.
    """

    selected: tuple[str, ...] = ()
    user_has_selected: bool = False

    def with_user_selection(self, keys) -> "SelectionState":
        """Return the state after an explicit user selection."""
        return SelectionState(selected=tuple(keys), user_has_selected=True)

    def with_default(self, keys) -> "SelectionState":
        """Return the state carrying a default suggestion."""
        return SelectionState(
            selected=tuple(keys),
            user_has_selected=self.user_has_selected,
        )

    def cleared_for_dimension_change(self) -> "SelectionState":
        """Return the state after switching dimension.

        Keys of one dimension mean nothing in another, so switching starts
        a fresh selection session where the default may apply again.
        """
        return SelectionState()


__all__ = ["SelectionState"]
