"""
View Base

Headless screen controller shared by the dashboard views. A view is in
exactly one ViewState at a time and only applies results while mounted.
"""

import logging
from enum import Enum
from typing import Optional

from ..events import CampaignEventPublisher
from ..protocols import CampaignApiProtocol, EventBusProtocol

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    """Render state of a screen"""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    LOADED = "loaded"


class BaseView:
    """Common mount lifecycle and state handling"""

    def __init__(
        self,
        api: CampaignApiProtocol,
        event_bus: Optional[EventBusProtocol] = None,
    ):
        self.api = api
        self.event_bus = event_bus
        self.publisher = CampaignEventPublisher(event_bus)
        self.state = ViewState.LOADING
        self.error: Optional[str] = None
        self._mounted = False

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        """Attach the view and load its data"""
        self._mounted = True
        await self.load()

    def unmount(self) -> None:
        """Detach the view; in-flight results are discarded"""
        self._mounted = False

    async def load(self) -> None:
        raise NotImplementedError

    # ====================
    # State Transitions
    # ====================

    def _set_loading(self) -> None:
        self.state = ViewState.LOADING
        self.error = None

    def _set_error(self, message: str) -> None:
        self.state = ViewState.ERROR
        self.error = message

    def _set_loaded(self, empty: bool = False) -> None:
        self.state = ViewState.EMPTY if empty else ViewState.LOADED
        self.error = None


__all__ = ["ViewState", "BaseView"]
