
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import urlsplit
import socket
from ..logging import get_logger
from ..run_logger import RunLogger, Verdict

DEFAULT_TIMEOUT_S = 5.0

@dataclass
class CaseResult:
    id: str
    logger: RunLogger = field(default_factory=RunLogger)
    @property
    def verdict(self) -> Optional[Verdict]: return self.logger.verdict

@dataclass
class SuiteResult:
    suite: str
    endpoint: str
    cases: List[CaseResult] = field(default_factory=list)
    def _count(self, verdict: Verdict) -> int: return sum(1 for c in self.cases if c.verdict is verdict)
    @property
    def passed(self) -> int: return self._count(Verdict.SUCCESS)
    @property
    def failed(self) -> int: return self._count(Verdict.FAILURE)
    @property
    def skipped(self) -> int: return self._count(Verdict.SKIPPED)

def split_address(address: str) -> Tuple[str, int]:
    """
    'localhost:3000/graphql' -> ('localhost', 3000)
    'https://example.com/graphql' -> ('example.com', 443)
    Raises ValueError when no host can be found or the port is not a number.
    """
    parts = urlsplit(address if "://" in address else f"//{address}")
    host = parts.hostname
    if not host:
        raise ValueError(f"No host in address {address!r}")
    port = parts.port  # raises ValueError on a bad port
    if port is None:
        port = 443 if parts.scheme == "https" else 80
    return host, port

def run_test_case(address: str, timeout: float = DEFAULT_TIMEOUT_S) -> RunLogger:
    """Try a TCP connect to the endpoint. Reachable cases are skipped until assertions exist."""
    logger = RunLogger()
    try:
        host, port = split_address(address)
        logger.debug(f"Connecting to {host}:{port}")
        sock = socket.create_connection((host, port), timeout=timeout)
    except (OSError, ValueError) as e:
        logger.error(f"Could not connect to server at {address}")
        logger.debug(f"Reason: {e}")
        logger.mark_fail()
        return logger
    try:
        logger.info(f"Connected to server at {address}")
    finally:
        sock.close()

    # TODO: run the case's GraphQL request and check the response once a test-case format exists
    logger.mark_skipped()
    return logger

class SuiteRunner:
    def __init__(self, endpoint: str, timeout: float = DEFAULT_TIMEOUT_S):
        self.endpoint = endpoint
        self.timeout = timeout
        self.log = get_logger()

    def run(self, path: str) -> SuiteResult:
        self.log.info(f"Running tests from {path} against {self.endpoint}")
        self.log.debug(f"Test discovery under {path} is not implemented; running the connectivity check only")
        result = SuiteResult(suite=str(path), endpoint=self.endpoint)
        result.cases.append(CaseResult(id="connect", logger=run_test_case(self.endpoint, self.timeout)))
        self.log.debug(f"Finished {len(result.cases)} case(s): {result.failed} failed")
        return result
