"""Let threads race for a singleton and report what they got."""
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, List

from patternbook.core.exceptions import RaceTimeoutError, ValidationError
from patternbook.infrastructure.logging.logger import get_logger


@dataclass
class RaceResult:
    """What each racing thread received from the accessor."""
    accessor: str
    instances: List[Any] = field(default_factory=list)

    @property
    def distinct_instances(self) -> int:
        return len({id(instance) for instance in self.instances})

    @property
    def is_singleton(self) -> bool:
        return self.distinct_instances == 1

    def __str__(self) -> str:
        verdict = "one instance" if self.is_singleton else f"{self.distinct_instances} instances"
        return f"{self.accessor}: {len(self.instances)} threads saw {verdict}"


def run_race(accessor: Callable[[], Any], workers: int = 2, timeout: float = 10.0) -> RaceResult:
    """
    Call ``accessor`` from ``workers`` threads released at the same moment.

    Args:
        accessor: Zero-argument callable, typically ``SomeClass.get_instance``
        workers: Number of racing threads, at least 2
        timeout: Seconds to wait for each thread

    Returns:
        RaceResult with the object every thread received

    Raises:
        RaceTimeoutError: If a thread is still running after its join timed out
    """
    if workers < 2:
        raise ValidationError("A race needs at least two workers", {"workers": workers})

    logger = get_logger(__name__)
    name = getattr(accessor, "__qualname__", repr(accessor))
    barrier = threading.Barrier(workers)
    lock = threading.Lock()
    result = RaceResult(accessor=name)
    errors: List[BaseException] = []

    def worker() -> None:
        barrier.wait()
        try:
            instance = accessor()
        except Exception as e:
            with lock:
                errors.append(e)
            return
        with lock:
            result.instances.append(instance)

    threads = [
        threading.Thread(target=worker, name=f"race-{index}", daemon=True) for index in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout)

    stalled = [thread.name for thread in threads if thread.is_alive()]
    if stalled:
        raise RaceTimeoutError(name, stalled, timeout)

    if errors:
        raise errors[0]

    logger.debug(f"Race on {name} finished with {result.distinct_instances} distinct instances")
    return result
