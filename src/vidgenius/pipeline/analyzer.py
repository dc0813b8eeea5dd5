"""Content analysis pipeline and the caller-owned result state."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from ..errors import (
    USER_FAILURE_MESSAGE,
    AnalysisError,
    AnalysisInProgressError,
    InputError,
)
from ..models.analysis import AnalysisResult
from ..models.inputs import InputSource
from .decoder import decode_result
from .normalizer import normalize
from .request_builder import build_request

if TYPE_CHECKING:
    from ..llm_client import StructuredGenerator

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Normalize → build → generate → decode, one invocation at a time.

    Holds no result between runs. The only state is the in-flight flag: a
    second ``run`` while one is pending is rejected with
    AnalysisInProgressError. Cancelling the task running ``run`` cancels the
    whole invocation.
    """

    def __init__(self, generator: StructuredGenerator):
        self.generator = generator
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(
        self, source: InputSource, engagement_context: Optional[str] = None
    ) -> AnalysisResult:
        if self._in_flight:
            raise AnalysisInProgressError("An analysis is already running.")
        self._in_flight = True
        try:
            request = normalize(source, engagement_context)
            generation_request = build_request(request)
            logger.info(
                "Analyzing %s content (%d chars)",
                request.content_kind.value,
                len(request.content),
            )
            raw = await self.generator.generate_structured(generation_request)
            return decode_result(raw)
        finally:
            self._in_flight = False


class AnalysisSession:
    """The single active result (or error) as seen by a front end.

    ``result`` is either a complete AnalysisResult or None. It is replaced
    wholesale on success and cleared on failure or reset.
    """

    def __init__(self, pipeline: AnalysisPipeline, timeout: Optional[float] = None):
        self.pipeline = pipeline
        self.timeout = timeout
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def submit(
        self, source: InputSource, engagement_context: Optional[str] = None
    ) -> Optional[AnalysisResult]:
        """Run one analysis and record its outcome.

        Returns the new result, or None when the submission failed (the
        message is then in ``error``).
        """
        if self._busy:
            raise AnalysisInProgressError("An analysis is already running.")
        self._busy = True
        self.error = None
        try:
            run = self.pipeline.run(source, engagement_context)
            if self.timeout is not None:
                result = await asyncio.wait_for(run, self.timeout)
            else:
                result = await run
        except InputError as e:
            logger.warning("Input rejected: %s", e)
            self.result = None
            self.error = str(e)
            return None
        except AnalysisError as e:
            logger.error("Analysis failed [%s]: %s", e.kind, e)
            self.result = None
            self.error = USER_FAILURE_MESSAGE
            return None
        except asyncio.TimeoutError:
            logger.error("Analysis failed [timeout]: no response after %ss", self.timeout)
            self.result = None
            self.error = USER_FAILURE_MESSAGE
            return None
        finally:
            self._busy = False

        self.result = result
        return result

    def reset(self) -> None:
        """Drop the held result and error."""
        self.result = None
        self.error = None
