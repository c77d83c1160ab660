"""Routes presentation-layer intents into the list store."""

import logging

from .list_store import PaginatedListStore

logger = logging.getLogger("PagedList.Intents")


class ListIntentHandler:
    """Inbound API for the presentation layer.

    Surfaces are handed this object when they are built, so no surface ever
    has to look the store up through the widget tree.
    """

    def __init__(self, store: PaginatedListStore):
        self.store = store

    def on_appear_request_initial_load(self) -> bool:
        return self.store.initial_load()

    def on_near_end_of_list_request_more(self, row_index: int) -> bool:
        if not self.store.should_load_more(row_index):
            return False
        logger.debug(f"Row {row_index} is about to show, loading more")
        return self.store.load_more()

    def on_pull_to_refresh(self) -> bool:
        return self.store.reset()

    def on_user_tap_retry(self) -> bool:
        return self.store.retry()

    def on_user_tap_manual_refresh_from_empty_state(self) -> bool:
        return self.store.manual_refresh()
