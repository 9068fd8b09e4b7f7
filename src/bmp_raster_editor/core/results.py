"""
Result objects for core operations.

Provides a unified result structure that the CLI and scripts can use
to display operation outcomes consistently.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class OperationResult:
    """
    Unified result object for all core operations.

    Attributes:
        ok: Whether the operation completed successfully
        operation: Name of the operation (e.g., "edit_bmp", "inspect_bmp")
        input_path: Source BMP path
        output_path: Written BMP path, if any
        size: (width, height) of the image
        bit_count: Bits per pixel of the image
        points_drawn: Points visited by drawing operations
        warnings: Non-blocking issues encountered
        errors: Blocking errors that caused failure
        metadata: Additional operation-specific data
    """
    ok: bool
    operation: str
    input_path: str = ""
    output_path: str = ""
    size: tuple = (0, 0)
    bit_count: int = 0
    points_drawn: int = 0
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message and mark result as failed."""
        self.errors.append(message)
        self.ok = False

    def to_summary(self) -> str:
        """Generate a human-readable summary string."""
        status = "SUCCESS" if self.ok else "FAILED"
        lines = [f"[{status}] {self.operation}"]

        if self.input_path:
            lines.append(f"  Input: {self.input_path}")
        if self.output_path:
            lines.append(f"  Output: {self.output_path}")
        if self.bit_count:
            lines.append(f"  Image: {self.size[0]}x{self.size[1]} {self.bit_count}-bit")
        if self.points_drawn:
            lines.append(f"  Points drawn: {self.points_drawn:,}")

        if self.warnings:
            lines.append("  Warnings:")
            for warn in self.warnings:
                lines.append(f"    - {warn}")

        if self.errors:
            lines.append("  Errors:")
            for err in self.errors:
                lines.append(f"    - {err}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "ok": self.ok,
            "operation": self.operation,
            "input_path": self.input_path,
            "output_path": self.output_path,
            "size": list(self.size),
            "bit_count": self.bit_count,
            "points_drawn": self.points_drawn,
            "warnings": self.warnings,
            "errors": self.errors,
            "metadata": self.metadata,
        }

    @classmethod
    def success(cls, operation: str, **kwargs) -> "OperationResult":
        """Create a successful result."""
        return cls(ok=True, operation=operation, **kwargs)

    @classmethod
    def failure(cls, operation: str, error: str, **kwargs) -> "OperationResult":
        """Create a failed result."""
        result = cls(ok=False, operation=operation, **kwargs)
        result.errors.append(error)
        return result
