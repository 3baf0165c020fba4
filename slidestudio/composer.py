"""
Batch slide composer.

Parses a block of slide ideas and generates them strictly one at a time,
awaiting each provider round trip before starting the next. A failing slide
is logged and the batch moves on.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional

from slidestudio.config import settings
from slidestudio.exceptions import ComposerQueueFullError
from slidestudio.generation import generate_slide
from slidestudio.slide_parser import parse_slides

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[None]]


class SequentialTaskQueue:
    """Bounded FIFO of jobs drained by a single worker."""

    def __init__(self, maxsize: int):
        self.maxsize = maxsize
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)

    def put(self, job: Job) -> None:
        try:
            self._queue.put_nowait(job)
        except asyncio.QueueFull:
            raise ComposerQueueFullError(f"Composer queue is limited to {self.maxsize} slides")

    def __len__(self) -> int:
        return self._queue.qsize()

    async def drain(self) -> None:
        while not self._queue.empty():
            job = self._queue.get_nowait()
            try:
                await job()
            finally:
                self._queue.task_done()


@dataclass
class GenerationProgress:
    current: int = 0
    total: int = 0


@dataclass
class SlideFailure:
    index: int
    error: str


@dataclass
class ComposerRun:
    """Outcome of one batch."""
    total: int = 0
    urls: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)
    failures: List[SlideFailure] = field(default_factory=list)


def describe_idea(idea: str) -> str:
    return idea[:30].replace("\n", " ")


class SlideComposer:
    def __init__(self, generate_fn: Callable[[str, Any], str] = generate_slide, max_queue: Optional[int] = None):
        self.generate_fn = generate_fn
        self.max_queue = max_queue or settings.COMPOSER_MAX_QUEUE
        self.progress = GenerationProgress()
        self.logs: List[str] = []

    def add_log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    async def run(self, text: str, detail_level: Any = None) -> ComposerRun:
        ideas = parse_slides(text)
        run = ComposerRun(total=len(ideas))
        if not ideas:
            return run

        queue = SequentialTaskQueue(self.max_queue)
        for index, idea in enumerate(ideas, start=1):
            queue.put(self._make_job(run, index, idea, detail_level))

        self.logs = []
        self.progress = GenerationProgress(current=0, total=len(ideas))
        self.add_log(f"Found {len(ideas)} slide ideas.")

        await queue.drain()

        self.progress = GenerationProgress()
        self.add_log("Generation complete!")
        run.logs = list(self.logs)
        return run

    def _make_job(self, run: ComposerRun, index: int, idea: str, detail_level: Any) -> Job:
        async def job() -> None:
            total = self.progress.total
            self.progress = GenerationProgress(current=index, total=total)
            self.add_log(f'Generating slide {index}/{total}: "{describe_idea(idea)}..."')
            try:
                url = await asyncio.to_thread(self.generate_fn, idea, detail_level)
            except Exception as e:
                logger.error(f"Slide {index} failed: {e}")
                run.failures.append(SlideFailure(index=index, error=str(e)))
                self.add_log(f"Error generating slide {index}: {e}")
                return
            run.urls.append(url)
            self.add_log(f"Slide {index} generated successfully.")

        return job
