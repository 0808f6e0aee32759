"""Event type constants published on the EventBus."""


class EventTypes:
    """Event type string constants"""

    # undoable mutations
    ITEMS_ADDED = "items_added"
    ITEMS_RESET = "items_reset"
    ITEMS_DELETED = "items_deleted"

    # undo lifecycle
    MUTATION_UNDONE = "mutation_undone"
    MUTATION_DISMISSED = "mutation_dismissed"

    # catalog
    CATALOG_RELOADED = "catalog_reloaded"
