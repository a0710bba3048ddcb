"""Observability and telemetry for the calculator pipeline."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class RecordType(str, Enum):
    """Types of trace records."""
    GUARD = "guard"
    STAGE_ENTRY = "stage_entry"
    STAGE_EXIT = "stage_exit"


@dataclass
class TraceRecord:
    """Base class for trace records."""
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        record_type = getattr(self, 'record_type', None)
        return {
            "timestamp": self.timestamp.isoformat(),
            "type": record_type.value if record_type else "unknown",
            **{k: v for k, v in self.__dict__.items() if k not in ("timestamp", "record_type")}
        }


@dataclass
class GuardRecord(TraceRecord):
    """Record for an input guard decision."""
    expression: str
    passed: bool
    reason: Optional[str] = None
    record_type: RecordType = field(default=RecordType.GUARD, init=False)


@dataclass
class StageEntryRecord(TraceRecord):
    """Record for entering a pipeline stage."""
    stage_name: str
    expression: str
    record_type: RecordType = field(default=RecordType.STAGE_ENTRY, init=False)


@dataclass
class StageExitRecord(TraceRecord):
    """Record for leaving a pipeline stage."""
    stage_name: str
    duration_ms: float
    output: str = ""
    record_type: RecordType = field(default=RecordType.STAGE_EXIT, init=False)


# In-memory trace storage
_trace_log: List[TraceRecord] = []


def log_guard_result(expression: str, passed: bool, reason: Optional[str] = None):
    """Log the outcome of the input guards."""
    record = GuardRecord(
        timestamp=datetime.now(),
        expression=expression[:50],
        passed=passed,
        reason=reason
    )
    _trace_log.append(record)
    if passed:
        logger.debug(f"Guards passed for '{expression[:50]}'")
    else:
        logger.warning(f"Guards rejected '{expression[:50]}': {reason}")


def log_stage_entry(stage_name: str, state: Dict):
    """Log when entering a stage."""
    record = StageEntryRecord(
        timestamp=datetime.now(),
        stage_name=stage_name,
        expression=state.get("expression", "")[:50]
    )
    _trace_log.append(record)
    logger.debug(f"Entering stage: {stage_name}")


def log_stage_exit(stage_name: str, duration_ms: float, output: Any = ""):
    """Log when a stage finished, with its timing and a short view of its output."""
    record = StageExitRecord(
        timestamp=datetime.now(),
        stage_name=stage_name,
        duration_ms=duration_ms,
        output=str(output)[:100]
    )
    _trace_log.append(record)
    logger.info(f"Stage {stage_name} -> {record.output} ({duration_ms:.3f}ms)")


def get_trace() -> List[TraceRecord]:
    """Get the full trace log."""
    return _trace_log.copy()


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_stage_exits() -> List[StageExitRecord]:
    return [r for r in _trace_log if isinstance(r, StageExitRecord)]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["\n=== Calculation Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        if isinstance(record, GuardRecord):
            status = "passed" if record.passed else f"rejected ({record.reason})"
            lines.append(f"[{timestamp}] GUARD: {status}")
        elif isinstance(record, StageEntryRecord):
            lines.append(f"[{timestamp}] ENTER: {record.stage_name}")
        elif isinstance(record, StageExitRecord):
            lines.append(
                f"[{timestamp}] EXIT: {record.stage_name} -> {record.output} "
                f"({record.duration_ms:.3f}ms)")

    return "\n".join(lines)
