
from ..runners.runner import SuiteResult
from ..run_logger import LogLevel, Verdict

_STATUS = {Verdict.SUCCESS: "PASS", Verdict.FAILURE: "FAIL", Verdict.SKIPPED: "SKIP"}

class ConsoleReporter:
    def __init__(self, min_level: LogLevel = LogLevel.INFO): self.min_level = min_level
    def emit(self, result: SuiteResult) -> None:
        print(f"Suite: {result.suite} ({result.endpoint})")
        for c in result.cases:
            print(f" - {c.id}: {_STATUS.get(c.verdict, 'PENDING')}")
            for line in c.logger.flush(self.min_level):
                print(f"     {line}")
