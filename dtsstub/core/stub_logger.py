"""Stub decision logger for dtsstub

Tracks which scopes received a stub, which were skipped and why, and
provides summary statistics.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from enum import Enum


class StubShape(Enum):
    """Runtime shape of an emitted stub"""
    OBJECT = "object"
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    DECLARATION = "declaration"


class SkipReason(Enum):
    """Why a scope received no stub"""
    REFERENCE = "reference"
    TOP_LEVEL = "top_level"
    FOREIGN_ORIGIN = "foreign_origin"
    CYCLE = "cycle"


@dataclass
class EmitRecord:
    """Record of a single emitted statement"""
    scope: str
    shape: StubShape
    depth: int = 0


@dataclass
class SkipRecord:
    """Record of a skipped scope"""
    scope: str
    reason: SkipReason
    detail: Optional[str] = None
    depth: int = 0


class StubLogger:
    """Logs stub emission decisions and provides summaries"""

    def __init__(self) -> None:
        self.emitted: List[EmitRecord] = []
        self.skipped: List[SkipRecord] = []
        self.warnings: List[str] = []

    def log_emit(self, scope: str, shape: StubShape, depth: int = 0) -> None:
        """Log an emitted stub

        Args:
            scope: Dotted scope path
            shape: Shape of the stub value
            depth: Recursion depth
        """
        self.emitted.append(EmitRecord(scope=scope, shape=shape, depth=depth))

    def log_skip(self,
                 scope: str,
                 reason: SkipReason,
                 detail: Optional[str] = None,
                 depth: int = 0) -> None:
        """Log a skipped scope

        Args:
            scope: Dotted scope path
            reason: Reason for skipping
            detail: Extra context (e.g. the foreign origin)
            depth: Recursion depth
        """
        self.skipped.append(SkipRecord(scope=scope, reason=reason, detail=detail, depth=depth))

    def log_warning(self, message: str) -> None:
        self.warnings.append(message)

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with emission statistics
        """
        emitted_by_shape: Dict[StubShape, int] = {}
        for record in self.emitted:
            emitted_by_shape[record.shape] = emitted_by_shape.get(record.shape, 0) + 1

        skipped_by_reason: Dict[SkipReason, int] = {}
        for skip in self.skipped:
            skipped_by_reason[skip.reason] = skipped_by_reason.get(skip.reason, 0) + 1

        return {
            "total_emitted": len(self.emitted),
            "emitted_by_shape": emitted_by_shape,
            "total_skipped": len(self.skipped),
            "skipped_by_reason": skipped_by_reason,
            "total_warnings": len(self.warnings),
        }

    def print_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = []

        lines.append("=== Stub Summary ===")
        lines.append(f"Total statements: {summary['total_emitted']}")
        lines.append("")

        if summary['emitted_by_shape']:
            lines.append("Statements by shape:")
            for shape, count in summary['emitted_by_shape'].items():
                lines.append(f"  {shape.value}: {count}")
            lines.append("")

        lines.append(f"Skipped scopes: {summary['total_skipped']}")

        if summary['skipped_by_reason']:
            lines.append("Skipped by reason:")
            for reason, count in summary['skipped_by_reason'].items():
                lines.append(f"  {reason.value}: {count}")
            lines.append("")

        if self.skipped:
            lines.append("Skipped details (top 10):")
            for skip in self.skipped[:10]:
                detail_part = f" ({skip.detail})" if skip.detail else ""
                lines.append(f"  {skip.reason.value} - '{skip.scope}'{detail_part}")
            lines.append("")

        lines.append(f"Warnings: {summary['total_warnings']}")

        if self.warnings:
            lines.append("Warning details:")
            for warning in self.warnings:
                lines.append(f"  {warning}")

        return "\n".join(lines)

    def get_emitted_scopes(self) -> List[str]:
        return [record.scope for record in self.emitted]

    def get_skipped_scopes(self) -> List[str]:
        return [skip.scope for skip in self.skipped]

    def clear(self) -> None:
        """Clear all logs"""
        self.emitted.clear()
        self.skipped.clear()
        self.warnings.clear()
