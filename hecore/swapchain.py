"""Swapchain surface-format and present-mode selection, and frame pacing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable

from hecore.config import RI_MAX_SWAPCHAIN_IMAGES


class SwapchainFormat(enum.Enum):
    """Colour encoding requested for a swapchain."""

    BT709_G10_16BIT = enum.auto()
    BT709_G22_8BIT = enum.auto()
    BT709_G22_10BIT = enum.auto()
    BT2020_G2084_10BIT = enum.auto()


class PixelFormat(enum.IntEnum):
    """Surface pixel formats, numbered as the graphics API numbers them."""

    UNDEFINED = 0
    R8G8B8A8_UNORM = 37
    R8G8B8A8_SRGB = 43
    B8G8R8A8_UNORM = 44
    B8G8R8A8_SRGB = 50
    A2B10G10R10_UNORM_PACK32 = 64
    R16G16B16A16_SFLOAT = 97


class ColorSpace(enum.IntEnum):
    """Surface colour spaces, numbered as the graphics API numbers them."""

    SRGB_NONLINEAR = 0
    EXTENDED_SRGB_LINEAR = 1000104002
    HDR10_ST2084 = 1000104008


class PresentMode(enum.IntEnum):
    """Presentation modes, numbered as the graphics API numbers them."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


@dataclass(frozen=True)
class SurfaceFormat:
    """A pixel format and colour space pair a surface supports."""

    format: PixelFormat
    color_space: ColorSpace


def _priority_bt709_g10_16bit(surface: SurfaceFormat) -> int:
    return (int(surface.format == PixelFormat.R16G16B16A16_SFLOAT) << 0) | (
        int(surface.color_space == ColorSpace.EXTENDED_SRGB_LINEAR) << 1
    )


def _priority_bt709_g22_8bit(surface: SurfaceFormat) -> int:
    # Every SRGB format has a UNORM twin, so only the UNORM ones are considered.
    unorm = surface.format in (PixelFormat.R8G8B8A8_UNORM, PixelFormat.B8G8R8A8_UNORM)
    return (int(unorm) << 0) | (int(surface.color_space == ColorSpace.SRGB_NONLINEAR) << 1)


def _priority_bt709_g22_10bit(surface: SurfaceFormat) -> int:
    return (int(surface.format == PixelFormat.A2B10G10R10_UNORM_PACK32) << 0) | (
        int(surface.color_space == ColorSpace.SRGB_NONLINEAR) << 1
    )


def _priority_bt2020_g2084_10bit(surface: SurfaceFormat) -> int:
    return (int(surface.format == PixelFormat.A2B10G10R10_UNORM_PACK32) << 0) | (
        int(surface.color_space == ColorSpace.HDR10_ST2084) << 1
    )


_PRIORITIES: dict[SwapchainFormat, Callable[[SurfaceFormat], int]] = {
    SwapchainFormat.BT709_G10_16BIT: _priority_bt709_g10_16bit,
    SwapchainFormat.BT709_G22_8BIT: _priority_bt709_g22_8bit,
    SwapchainFormat.BT709_G22_10BIT: _priority_bt709_g22_10bit,
    SwapchainFormat.BT2020_G2084_10BIT: _priority_bt2020_g2084_10bit,
}

# Tried in this order; FIFO is always supported, so it is also the fallback.
PREFERRED_PRESENT_MODES = (
    PresentMode.IMMEDIATE,
    PresentMode.FIFO_RELAXED,
    PresentMode.FIFO,
)


def surface_priority(swapchain_format: SwapchainFormat, surface: SurfaceFormat) -> int:
    """Score ``surface`` for ``swapchain_format``: bit 0 format match, bit 1 colour space match."""
    handler = _PRIORITIES.get(swapchain_format, _priority_bt709_g22_8bit)
    return handler(surface)


def select_surface_format(
    swapchain_format: SwapchainFormat, surfaces: Iterable[SurfaceFormat]
) -> SurfaceFormat:
    """Pick the highest-scoring surface; the earliest one wins a tie."""
    surfaces = list(surfaces)
    if not surfaces:
        raise ValueError("the surface reports no formats")
    selected = surfaces[0]
    best = surface_priority(swapchain_format, selected)
    for surface in surfaces[1:]:
        score = surface_priority(swapchain_format, surface)
        if score > best:
            selected, best = surface, score
    return selected


def select_present_mode(supported: Iterable[PresentMode]) -> PresentMode:
    """Pick the first preferred mode the surface supports, falling back to FIFO."""
    available = set(supported)
    return next(
        (mode for mode in PREFERRED_PRESENT_MODES if mode in available),
        PresentMode.FIFO,
    )


class FramePacer:
    """Tracks the present counter and the semaphore slot used by each frame."""

    def __init__(self, image_count: int) -> None:
        if not 0 < image_count <= RI_MAX_SWAPCHAIN_IMAGES:
            raise ValueError(
                f"image count must be between 1 and {RI_MAX_SWAPCHAIN_IMAGES}, got {image_count}"
            )
        self.image_count = image_count
        self.frame_index = 0
        self.present_id = 0

    def present(self) -> int:
        """Record a present; return the slot it used and advance to the next one."""
        slot = self.frame_index
        self.present_id += 1
        self.frame_index = (self.frame_index + 1) % RI_MAX_SWAPCHAIN_IMAGES
        return slot