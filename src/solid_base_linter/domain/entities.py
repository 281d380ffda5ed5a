from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class ClassNode:
    """
    Declaration-time facts about one class.

    Recorded once by declaration extraction and never mutated afterwards.
    Amending a declaration means registering a new ClassNode under the same key.
    """
    key: str
    bases: tuple[str, ...] = ()
    marked_solid: bool = False
    has_slot_layout: bool = False
    is_root: bool = False
    is_structural: bool = False
    structural_kind: Optional[str] = None  # "Protocol" or "TypedDict"
    marker_name: Optional[str] = None
    location: Optional[str] = None

    @property
    def name(self) -> str:
        """Unqualified class name."""
        return self.key.rsplit(".", 1)[-1]


class InvalidReason(Enum):
    """Why a class has no valid solid base."""
    INCOMPATIBLE_BASES = "incompatible-bases"
    INVALID_BASE = "invalid-base"
    CYCLE = "cycle"


@dataclass(frozen=True)
class SolidBaseResult:
    """
    Outcome of solid base resolution for one class: Resolved(base) or Invalid.

    candidates holds the distinct candidate solid bases contributed by the
    direct bases, in first-occurrence order, for diagnostics.
    """
    class_key: str
    solid_base: Optional[str] = None
    reason: Optional[InvalidReason] = None
    candidates: tuple[str, ...] = ()
    invalid_base: Optional[str] = None

    @classmethod
    def resolved(cls, class_key: str, solid_base: str, candidates: tuple[str, ...] = ()) -> "SolidBaseResult":
        return cls(class_key=class_key, solid_base=solid_base, candidates=candidates)

    @classmethod
    def invalid(
        cls,
        class_key: str,
        reason: InvalidReason,
        candidates: tuple[str, ...] = (),
        invalid_base: Optional[str] = None,
    ) -> "SolidBaseResult":
        return cls(
            class_key=class_key,
            reason=reason,
            candidates=candidates,
            invalid_base=invalid_base,
        )

    @property
    def is_resolved(self) -> bool:
        return self.solid_base is not None

    @property
    def is_invalid(self) -> bool:
        return self.solid_base is None

    @property
    def is_cycle(self) -> bool:
        return self.reason is InvalidReason.CYCLE

    def to_dict(self) -> dict[str, Union[str, list[str], None]]:
        """Convert to dictionary for reporter."""
        return {
            "class": self.class_key,
            "solid_base": self.solid_base,
            "reason": self.reason.value if self.reason else None,
            "candidates": list(self.candidates),
            "invalid_base": self.invalid_base,
        }


class OverlapVerdict(Enum):
    """Three-valued answer to 'can A and B share an instance?'."""
    OVERLAP = "overlap"
    DISJOINT = "disjoint"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Diagnostic:
    """A class-level finding produced by the validator. Free of any AST type."""
    code: str
    symbol: str
    class_key: str
    message: str
    args: tuple[str, ...] = ()
    candidates: tuple[str, ...] = ()
    location: Optional[str] = None

    @property
    def is_internal_error(self) -> bool:
        """True for tooling bugs (cyclic hierarchy) rather than user errors."""
        return self.symbol == "solid-base-resolution-cycle"

    def to_dict(self) -> dict[str, Union[str, list[str], None]]:
        """Convert to dictionary for reporter."""
        return {
            "code": self.code,
            "symbol": self.symbol,
            "class": self.class_key,
            "message": self.message,
            "candidates": list(self.candidates),
            "location": self.location or "N/A",
        }


@dataclass(frozen=True)
class HierarchyReport:
    """Result of analyzing a source tree."""
    diagnostics: list[Diagnostic] = field(default_factory=list)
    classes_checked: int = 0
    files_checked: int = 0
    skipped_files: list[str] = field(default_factory=list)

    def has_diagnostics(self) -> bool:
        """Check if any diagnostic was produced."""
        return bool(self.diagnostics)

    def has_internal_errors(self) -> bool:
        return any(d.is_internal_error for d in self.diagnostics)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON output."""
        return {
            "files_checked": self.files_checked,
            "classes_checked": self.classes_checked,
            "skipped_files": list(self.skipped_files),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
