"""SSE event types and progress callback for real-time pipeline updates"""
from enum import Enum
from typing import AsyncIterator, Optional
from pydantic import BaseModel
import asyncio


class EventType(str, Enum):
    """Types of SSE events"""
    STATUS = "status"                 # Overall status message
    PHASE = "phase"                   # Phase transition
    AGENT_START = "agent_start"       # Stage started
    AGENT_COMPLETE = "agent_complete" # Stage finished
    CHUNK = "chunk"                   # Raw model output chunk
    COMPLETE = "complete"             # Final result
    ERROR = "error"                   # Error occurred
    KEEPALIVE = "keepalive"           # Keepalive to prevent timeout


TERMINAL_EVENTS = (EventType.COMPLETE, EventType.ERROR)


class ProgressEvent(BaseModel):
    """A single progress event"""
    event: EventType
    agent: Optional[str] = None
    message: str
    data: Optional[dict] = None

    def payload(self) -> dict:
        """Event body sent as the SSE data field"""
        event_data = {
            "agent": self.agent,
            "message": self.message,
        }
        if self.data:
            event_data["data"] = self.data
        return event_data


class ProgressCallback:
    """
    Callback handler for streaming pipeline progress to SSE.

    Usage:
        progress = ProgressCallback()

        # Emit events
        await progress.phase("design-analysis")
        await progress.agent_start("design-analysis")
        await progress.agent_complete("design-analysis", success=True)

        # Consume events
        async for event in progress.events():
            yield event.payload()
    """

    def __init__(self):
        self.queue: asyncio.Queue[ProgressEvent] = asyncio.Queue()
        self._closed = False

    async def emit(
        self,
        event: EventType,
        message: str,
        agent: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """Emit a progress event"""
        if not self._closed:
            await self.queue.put(ProgressEvent(
                event=event,
                agent=agent,
                message=message,
                data=data
            ))

    async def status(self, message: str):
        """Emit overall status message"""
        await self.emit(EventType.STATUS, message)

    async def phase(self, phase_name: str):
        """Emit phase transition"""
        await self.emit(EventType.PHASE, f"Starting {phase_name} phase", data={"phase": phase_name})

    async def agent_start(self, agent: str, message: Optional[str] = None):
        """Emit stage started event"""
        await self.emit(
            EventType.AGENT_START,
            message or f"Starting {agent}...",
            agent
        )

    async def agent_complete(
        self,
        agent: str,
        success: bool,
        message: Optional[str] = None
    ):
        """Emit stage completion event"""
        await self.emit(
            EventType.AGENT_COMPLETE,
            message or f"{agent} {'completed' if success else 'failed'}",
            agent,
            {"success": success}
        )

    async def chunk(self, text: str, agent: Optional[str] = None):
        """Emit a raw output chunk"""
        await self.emit(EventType.CHUNK, text, agent)

    async def keepalive(self, message: str = ""):
        """Emit keepalive to prevent connection timeout"""
        await self.emit(EventType.KEEPALIVE, message)

    async def complete(self, result: dict):
        """Emit completion event with final result"""
        await self.emit(EventType.COMPLETE, "Generation complete", data=result)
        self._closed = True

    async def error(self, message: str, agent: Optional[str] = None):
        """Emit error event"""
        await self.emit(EventType.ERROR, message, agent)
        self._closed = True

    async def events(self) -> AsyncIterator[ProgressEvent]:
        """Yield queued events until a complete or error event"""
        while True:
            event = await self.queue.get()
            yield event
            if event.event in TERMINAL_EVENTS:
                break

    def close(self):
        """Close the callback (no more events)"""
        self._closed = True

    @property
    def is_closed(self) -> bool:
        """Check if callback is closed"""
        return self._closed
