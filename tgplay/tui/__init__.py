"""Terminal navigator: pages, navigation state machine and frame rendering."""
from .pages import Page, PageKind
from .state import NavigationState, Selection, Signal, initial_state, transition

__all__ = ["NavigationState", "Page", "PageKind", "Selection", "Signal", "initial_state", "transition"]
