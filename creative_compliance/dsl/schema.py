"""Pydantic v2 models for canvas elements and compliance results.

This module defines the element descriptors the compliance engine reads and
rewrites. All measurements are canvas pixels with a top-left origin.
Elements are mutable because the engine corrects them in place; frames and
safe-zone profiles are frozen lookup values.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# Used when an element reports no measurable height
DEFAULT_ELEMENT_HEIGHT = 40.0


class ElementKind(str, Enum):
    """Supported canvas element kinds."""

    TEXT = "text"
    SHAPE = "shape"
    IMAGE = "image"


class IssueKind(str, Enum):
    """Kinds of compliance issues."""

    SAFE_ZONE_VIOLATION = "safe_zone_violation"
    CONTRAST_VIOLATION = "contrast_violation"
    STACK_OVERFLOW = "stack_overflow"
    PROHIBITED_COPY = "prohibited_copy"
    LOGO_PLACEMENT = "logo_placement"
    TEXT_LIMIT = "text_limit"


# ============================================================================
# Geometry Models
# ============================================================================


class BoundingBox(BaseModel):
    """Axis-aligned bounding box in canvas pixels."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    left: float = Field(description="Left edge in pixels")
    top: float = Field(description="Top edge in pixels")
    width: float = Field(ge=0, description="Width in pixels")
    height: float = Field(ge=0, description="Height in pixels")

    @property
    def right(self) -> float:
        """Right edge position."""
        return self.left + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge position."""
        return self.top + self.height

    @property
    def center_x(self) -> float:
        """Horizontal center."""
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        """Vertical center."""
        return self.top + self.height / 2

    def translated(self, dx: float, dy: float) -> "BoundingBox":
        """Return a copy moved by (dx, dy)."""
        return BoundingBox(left=self.left + dx, top=self.top + dy, width=self.width, height=self.height)

    def centered_at(self, center_x: float, center_y: float) -> "BoundingBox":
        """Return a copy of the same size whose center is (center_x, center_y)."""
        return BoundingBox(
            left=center_x - self.width / 2,
            top=center_y - self.height / 2,
            width=self.width,
            height=self.height,
        )


class CanvasFrame(BaseModel):
    """Size of the target artboard."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    width: float = Field(gt=0, description="Artboard width in pixels")
    height: float = Field(gt=0, description="Artboard height in pixels")


class SafeZoneProfile(BaseModel):
    """Platform margins measured inward from each canvas edge."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    format_id: str = Field(description="Platform/format id this profile belongs to")
    top: float = Field(default=0, ge=0)
    bottom: float = Field(default=0, ge=0)
    left: float = Field(default=0, ge=0)
    right: float = Field(default=0, ge=0)
    is_fallback: bool = Field(
        default=False,
        description="True when returned for an unrecognized format id",
    )

    def safe_rect(self, frame: CanvasFrame) -> tuple[float, float, float, float]:
        """Allowed rectangle as (left, top, right, bottom)."""
        return (self.left, self.top, frame.width - self.right, frame.height - self.bottom)


# ============================================================================
# Element Models
# ============================================================================


class MutableFlags(BaseModel):
    """End-user interaction flags on a canvas object."""

    model_config = ConfigDict(validate_assignment=True)

    selectable: bool = True
    movable: bool = True
    visible: bool = True


class _ElementBase(BaseModel):
    """Fields shared by every element kind."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str = Field(description="Unique element identifier")
    bounding_box: BoundingBox = Field(description="Occupied canvas region")
    mutable_flags: MutableFlags = Field(default_factory=MutableFlags)

    @property
    def is_text(self) -> bool:
        return False


class TextElement(_ElementBase):
    """Text placed on the canvas."""

    kind: Literal["text"] = "text"
    font_size: float = Field(default=16, gt=0, allow_inf_nan=False, description="Font size in pixels")
    font_family: str = Field(default="Inter")
    fill_color: str = Field(default="#000000", description="Text color (hex or rgb())")
    text_content: str = Field(default="")

    @property
    def is_text(self) -> bool:
        return True


class ShapeElement(_ElementBase):
    """Vector shape (rect, circle, polygon, path)."""

    kind: Literal["shape"] = "shape"
    fill_color: Optional[str] = None


class ImageElement(_ElementBase):
    """Raster image such as a packshot, logo or background."""

    kind: Literal["image"] = "image"
    src: Optional[str] = None


CanvasElement = Annotated[
    Union[TextElement, ShapeElement, ImageElement],
    Field(discriminator="kind"),
]

_ELEMENT_LIST_ADAPTER = TypeAdapter(list[CanvasElement])


def parse_elements(payload: list[dict[str, Any]]) -> list[Union[TextElement, ShapeElement, ImageElement]]:
    """Validate raw element dictionaries handed over by external collaborators.

    Args:
        payload: List of element dictionaries, each carrying a ``kind``.

    Returns:
        Typed element instances.

    Raises:
        pydantic.ValidationError: On unknown kinds, missing fields or
            non-finite geometry.
    """
    return _ELEMENT_LIST_ADAPTER.validate_python(payload)


# ============================================================================
# Compliance Models
# ============================================================================


class ComplianceIssue(BaseModel):
    """A single constraint violation on one element."""

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    severity: int = Field(ge=1, le=10, description="1-10, higher = more severe")
    target_element_id: str
    message: str


class CreativeFormat(BaseModel):
    """A named artboard format offered by the editor."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    platform: str

    @property
    def frame(self) -> CanvasFrame:
        """Canvas frame for this format."""
        return CanvasFrame(width=self.width, height=self.height)
