"""
Tube Times helper.
Author: Oliver Ernster

This module is the boundary between the display layer and the TfL API.
Display requests arrive as named notifications; each request is answered
once, on its own Qt signal and on the generic notification channel.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

from version import get_version_string
from ..api.tfl_api_manager import TflAPIFactory, TflAPIManager
from .tube_config import TubeConfig, TubeConfigFactory

logger = logging.getLogger(__name__)

# Inbound notifications
GET_TUBE_STATUS = "GET-TUBE-STATUS"
GET_TUBE_LINE_STATUS = "GET-TUBE-LINE-STATUS"

# Outbound notifications
GOT_TUBE_TIMES = "GOT-TUBE-TIMES"
GOT_TUBE_LINE_STATUS = "GOT-TUBE-LINE-STATUS"


class TubeTimesHelper(QObject):
    """
    Request handler for the display frontend.

    Integrates with Qt signals for UI updates. All per-session state is
    held by this object's TflAPIManager.
    """

    # Qt Signals, one emission per request
    tube_times_received = Signal(object)  # {url, result}
    line_status_received = Signal(object)  # {url, status, statusDescription, messages}
    notification_sent = Signal(str, object)  # (GOT-* name, payload) for socket bridges

    def __init__(
        self,
        config: Optional[TubeConfig] = None,
        api_manager: Optional[TflAPIManager] = None,
    ):
        """
        Initialize the helper.

        Args:
            config: Tube configuration (defaults used if None)
            api_manager: API manager to use instead of one built from config
        """
        super().__init__()
        self._config = config or TubeConfigFactory.create_default_config()
        self._api_manager = api_manager or TflAPIFactory.create_manager(self._config)
        self._pending_tasks = set()

    @property
    def api_manager(self) -> TflAPIManager:
        """Get the API manager holding session state."""
        return self._api_manager

    @property
    def config(self) -> TubeConfig:
        """Get the current configuration."""
        return self._config

    def start(self) -> None:
        """Log helper start-up."""
        logger.info(f"{get_version_string()} helper started")

    async def get_tube_times(self, url: str) -> Dict[str, Any]:
        """
        Fetch arrivals and emit the result.

        Args:
            url: Arrivals URL

        Returns:
            The {url, result} payload that was emitted
        """
        result = await self._api_manager.fetch_arrivals(url)

        payload = {"url": url, "result": result}
        self._send(GOT_TUBE_TIMES, self.tube_times_received, payload)
        return payload

    async def get_tube_line_status(self, url: str) -> Dict[str, Any]:
        """
        Fetch line status and emit the summary.

        Args:
            url: Line status URL

        Returns:
            The {url, status, statusDescription, messages} payload that was emitted
        """
        summary = await self._api_manager.fetch_line_status(url)

        payload = {"url": url, **summary.to_dict()}
        self._send(GOT_TUBE_LINE_STATUS, self.line_status_received, payload)
        return payload

    def _send(self, notification: str, signal, payload: Dict[str, Any]) -> None:
        """Emit a response on its own signal and on the generic channel."""
        logger.debug(f"Sending {notification} for {payload.get('url')}")
        signal.emit(payload)
        self.notification_sent.emit(notification, payload)

    async def dispatch(self, notification: str, payload: Any) -> Optional[Dict[str, Any]]:
        """
        Route a notification to its request handler.

        Returns:
            The emitted payload, or None for notifications not handled here
        """
        if notification == GET_TUBE_STATUS:
            return await self.get_tube_times(payload)

        if notification == GET_TUBE_LINE_STATUS:
            return await self.get_tube_line_status(payload)

        logger.debug(f"Ignoring notification {notification}")
        return None

    def socket_notification_received(self, notification: str, payload: Any) -> None:
        """
        Fire-and-forget entry point for display notifications.

        Schedules the request on the running event loop, or runs it to
        completion when no loop is running.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self.dispatch(notification, payload))
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)
        else:
            asyncio.run(self._dispatch_and_close(notification, payload))

    async def _dispatch_and_close(self, notification: str, payload: Any) -> None:
        """Dispatch, then release the session bound to this short-lived loop."""
        try:
            await self.dispatch(notification, payload)
        finally:
            await self._api_manager.close()

    async def shutdown(self) -> None:
        """Wait for in-flight requests and close the HTTP session."""
        if self._pending_tasks:
            await asyncio.gather(*self._pending_tasks)
        await self._api_manager.close()
        logger.info("TubeTimesHelper shutdown complete")
