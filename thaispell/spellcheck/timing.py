import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageTiming:
    stage: str
    word: str
    elapsed_s: float
    candidates: int


class TimingHook(Protocol):
    def on_stage(self, event: StageTiming) -> None:
        ...


class LoggingTimingHook:
    def __init__(self, level: int = logging.DEBUG) -> None:
        self.level = level

    def on_stage(self, event: StageTiming) -> None:
        logger.log(
            self.level,
            "spell stage=%s word=%s candidates=%s elapsed=%.6fs",
            event.stage,
            event.word,
            event.candidates,
            event.elapsed_s,
        )


class _StageResult:
    candidates = 0


@contextmanager
def timed_stage(hook: TimingHook | None, stage: str, word: str) -> Iterator[_StageResult]:
    result = _StageResult()
    if hook is None:
        yield result
        return

    started = time.perf_counter()
    yield result
    hook.on_stage(
        StageTiming(
            stage=stage,
            word=word,
            elapsed_s=time.perf_counter() - started,
            candidates=result.candidates,
        )
    )
