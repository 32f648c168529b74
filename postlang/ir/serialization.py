"""
IR Serialization — JSON import/export for compile and analysis results.
"""

from pathlib import Path
from typing import Union

from postlang.ir.schema import AnalysisResult, CompileResult


def to_json(result: CompileResult, indent: int = 2) -> str:
    """Serialize a CompileResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> CompileResult:
    """Deserialize a CompileResult from JSON string."""
    return CompileResult.model_validate_json(json_str)


def analysis_to_json(result: AnalysisResult, indent: int = 2) -> str:
    """Serialize an AnalysisResult to JSON string."""
    return result.model_dump_json(indent=indent)


def save(result: CompileResult, path: Union[str, Path]) -> None:
    """Save a CompileResult to a JSON file."""
    path = Path(path)
    path.write_text(to_json(result), encoding="utf-8")


def load(path: Union[str, Path]) -> CompileResult:
    """Load a CompileResult from a JSON file."""
    path = Path(path)
    return from_json(path.read_text(encoding="utf-8"))
