from __future__ import annotations

"""
Codec Domain Data Models.

Defines the result object passed from the codec engine to the interface
layer, plus the factories that build it for successful and failed runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CodecResult:
    """
    Outcome of a single encode or decode run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        mode: Operation executed ('encode', 'decode' or 'demo').
        input_text: Text handed to the codec.
        output_text: Codec output; empty on failure.
        tree_lines: Rendered tree or code table, when requested.
        summary: Execution metadata for reporting.
    """
    ok: bool
    error: str
    mode: str
    input_text: str
    output_text: str = ""
    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        mode: str,
        input_text: str,
        output_text: str,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CodecResult:
    """
    Create a successful codec result instance.

    Args:
        mode: Operation executed.
        input_text: Text handed to the codec.
        output_text: Codec output.
        tree_lines: Optional rendered tree lines.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CodecResult: An immutable success result object.
    """
    summary: Dict[str, Any] = {
        "input_length": len(input_text),
        "output_length": len(output_text),
    }
    summary.update(summary_extra or {})
    return CodecResult(
        ok=True,
        error="",
        mode=mode,
        input_text=input_text,
        output_text=output_text,
        tree_lines=tree_lines or [],
        summary=summary,
    )


def create_error_result(
        error: str,
        mode: str,
        input_text: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CodecResult:
    """
    Create a failed codec result instance. No partial output is carried.

    Args:
        error: Detailed error description.
        mode: Operation attempted.
        input_text: Text handed to the codec.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CodecResult: An immutable error result object.
    """
    return CodecResult(
        ok=False,
        error=error,
        mode=mode,
        input_text=input_text,
        summary=summary_extra or {},
    )
