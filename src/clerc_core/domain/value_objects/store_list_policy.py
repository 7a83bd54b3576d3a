from enum import Enum


class StoreListPolicy(Enum):
    """How saving a store changes the owning vendor's store list.

    OVERWRITE replaces the list with the new store alone, so a vendor keeps
    a single store and concurrent saves are last-writer-wins. APPEND adds
    the new store to the existing list.
    """

    OVERWRITE = "overwrite"
    APPEND = "append"
