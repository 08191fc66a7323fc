import os
from typing import Any

from hypothesis import settings

# Deep-nesting tests build large trees; keep CI runs bounded.
settings.register_profile("ci", max_examples=50, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))

# Start coverage in subprocesses and skip the collector teardown crash under act/docker
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()

    import coverage.collector

    def safe_stop(self: Any) -> None:
        if self in getattr(self, "_collectors", []):
            self._collectors.remove(self)

    coverage.collector.Collector.stop = safe_stop
